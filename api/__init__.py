"""
Sideline Saga HTTP service
"""
