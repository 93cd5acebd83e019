"""
Sideline Saga runtime configuration.

All settings come from environment variables so the same build runs
locally, under tests, and behind the deployed API.

Usage:
    from sideline.config import load_config, configure_logging

    cfg = load_config()
    configure_logging(cfg.log_level)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

_DEFAULT_DB_PATH = Path(__file__).parent.parent / "data" / "sideline.db"

_logging_configured = False


@dataclass
class SidelineConfig:
    db_path: Path = _DEFAULT_DB_PATH
    provider_url: str = ""
    provider_key: str = ""
    provider_timeout: float = 30.0
    provider_retries: int = 3
    provider_backoff: float = 1.0
    cache_size: int = 50
    cache_ttl: float = 24 * 60 * 60
    log_level: str = "WARNING"
    port: int = 8000

    @property
    def provider_enabled(self) -> bool:
        return bool(self.provider_url)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    return int(raw)


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    return float(raw)


def load_config() -> SidelineConfig:
    """Build a SidelineConfig from the current environment."""
    db_path = os.environ.get("SIDELINE_DB_PATH")
    return SidelineConfig(
        db_path=Path(db_path) if db_path else _DEFAULT_DB_PATH,
        provider_url=os.environ.get("SIDELINE_PROVIDER_URL", ""),
        provider_key=os.environ.get("SIDELINE_PROVIDER_KEY", ""),
        provider_timeout=_env_float("SIDELINE_PROVIDER_TIMEOUT", 30.0),
        provider_retries=_env_int("SIDELINE_PROVIDER_RETRIES", 3),
        provider_backoff=_env_float("SIDELINE_PROVIDER_BACKOFF", 1.0),
        cache_size=_env_int("SIDELINE_CACHE_SIZE", 50),
        cache_ttl=_env_float("SIDELINE_CACHE_TTL", 24 * 60 * 60),
        log_level=os.environ.get("SIDELINE_LOG_LEVEL", "WARNING").upper(),
        port=_env_int("PORT", 8000),
    )


def configure_logging(level: str = "WARNING"):
    """Apply basicConfig once per process."""
    global _logging_configured
    if _logging_configured:
        logging.getLogger("sideline").setLevel(level)
        return
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _logging_configured = True
