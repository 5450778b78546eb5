# expense_api/config.py
# Environment-driven settings for the expense API

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from .errors import StartupError

logger = logging.getLogger(__name__)

DATABASE_URL_ENV = "SUPABASE_DB_URL"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def load_environment() -> bool:
    """Load a .env file into the process environment if one can be found."""
    path = find_dotenv(usecwd=True)
    if not path:
        logger.info(".env file not found, using process environment only")
        return False
    load_dotenv(path, override=False)
    logger.debug("Loaded environment from %s", path)
    return True


def _int_setting(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise StartupError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    """Runtime configuration read once at startup."""

    database_url: str
    pool_size: int = 5
    max_overflow: int = 10
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ``, or from the process environment plus .env."""
        if environ is None:
            load_environment()
            environ = os.environ

        database_url = (environ.get(DATABASE_URL_ENV) or "").strip()
        if not database_url:
            raise StartupError(f"{DATABASE_URL_ENV} is not set")

        log_level = (environ.get("LOG_LEVEL") or "INFO").strip().upper()
        if log_level not in LOG_LEVELS:
            raise StartupError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

        origins = [
            origin.strip()
            for origin in (environ.get("CORS_ORIGINS") or "*").split(",")
            if origin.strip()
        ]

        return cls(
            database_url=database_url,
            pool_size=_int_setting(environ, "DB_POOL_SIZE", 5),
            max_overflow=_int_setting(environ, "DB_MAX_OVERFLOW", 10),
            host=(environ.get("HOST") or "0.0.0.0").strip(),
            port=_int_setting(environ, "PORT", 8080),
            log_level=log_level,
            cors_origins=tuple(origins) or ("*",),
        )
