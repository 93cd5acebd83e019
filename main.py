"""
Sideline Saga - Main Entry Point
Runs the FastAPI backend
"""

import subprocess
import sys
import os
import signal

from sideline.config import configure_logging, load_config


def main():
    os.chdir(os.path.dirname(os.path.abspath(__file__)))
    cfg = load_config()
    configure_logging(cfg.log_level)

    api_proc = subprocess.Popen([
        sys.executable, "-m", "uvicorn", "api.main:app",
        "--host=0.0.0.0", f"--port={cfg.port}",
        f"--log-level={cfg.log_level.lower()}",
    ])

    def shutdown(signum, frame):
        api_proc.terminate()
        sys.exit(0)

    signal.signal(signal.SIGTERM, shutdown)
    signal.signal(signal.SIGINT, shutdown)

    try:
        api_proc.wait()
    except KeyboardInterrupt:
        pass
    finally:
        api_proc.terminate()


if __name__ == "__main__":
    main()
