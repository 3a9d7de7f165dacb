"""
Configuration helpers for the People API.

Routers, services and scripts read settings through `get_settings()` instead of
fetching os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    db_file: str
    host: str
    port: int
    strict_status: bool
    log_level: str
    log_format: str


def _int(value: str | None, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def _log_level(value: str | None) -> str:
    level = (value or "INFO").strip().upper()
    level = LOG_LEVEL_ALIASES.get(level, level)
    return level if level in LOG_LEVELS else "INFO"


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    port = _int(os.getenv("PEOPLE_PORT"), 8080)
    if port <= 0 or port > 65535:
        port = 8080
    log_format = (os.getenv("LOG_FORMAT") or "text").strip().lower()
    return Settings(
        db_file=os.getenv("PEOPLE_DB_FILE") or "db.json",
        host=os.getenv("PEOPLE_HOST") or "0.0.0.0",
        port=port,
        strict_status=_bool(os.getenv("PEOPLE_STRICT_STATUS"), False),
        log_level=_log_level(os.getenv("LOG_LEVEL")),
        log_format=log_format if log_format in {"json", "text"} else "text",
    )
