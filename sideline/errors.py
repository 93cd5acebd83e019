"""
Sideline Saga exception hierarchy.

Everything the engine raises on purpose derives from SidelineError so the
API layer can map failures onto HTTP status codes in one place.
"""

from __future__ import annotations

from typing import List, Optional


class SidelineError(Exception):
    """Base class for all engine errors."""


class PersistenceError(SidelineError):
    """Save store unavailable, corrupt, or written by a newer schema."""


class SaveNotFoundError(SidelineError, LookupError):
    def __init__(self, save_id: str):
        self.save_id = save_id
        super().__init__(f"Save '{save_id}' not found")


class TemplateTokenError(SidelineError):
    """A template referenced a token the renderer does not know."""

    def __init__(self, tokens: List[str], template: str = ""):
        self.tokens = list(tokens)
        self.template = template
        super().__init__(f"Unknown template token(s): {', '.join(self.tokens)}")


class RosterInvariantError(SidelineError):
    """Position counts out of bounds or duplicate player identity."""


class RecordInvariantError(SidelineError):
    """Season record disagrees with the number of games simulated."""


class ProviderError(SidelineError):
    """Narrative provider failure.  ``retryable`` marks failures worth another attempt."""

    def __init__(self, message: str, retryable: bool = False,
                 status_code: Optional[int] = None):
        self.retryable = retryable
        self.status_code = status_code
        super().__init__(message)
