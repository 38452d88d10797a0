"""
Application settings

Values come from environment variables so the same build can point at a local
or a hosted crop API.
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_URL = "http://localhost:8000/api"
DEFAULT_TIMEOUT = 20.0
DEFAULT_PAGE_SIZE = 10

_logging_configured = False


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the farm manager app."""

    api_url: str = DEFAULT_API_URL
    api_token: Optional[str] = None
    api_timeout: float = DEFAULT_TIMEOUT
    page_size: int = DEFAULT_PAGE_SIZE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from the environment.

        Recognised variables: FARM_API_URL, FARM_API_TOKEN, FARM_API_TIMEOUT,
        FARM_PAGE_SIZE, FARM_LOG_LEVEL. Unparseable numbers fall back to the
        defaults.
        """
        return cls(
            api_url=(os.environ.get("FARM_API_URL") or DEFAULT_API_URL).rstrip("/"),
            api_token=os.environ.get("FARM_API_TOKEN") or None,
            api_timeout=_env_float("FARM_API_TIMEOUT", DEFAULT_TIMEOUT),
            page_size=_env_int("FARM_PAGE_SIZE", DEFAULT_PAGE_SIZE),
            log_level=(os.environ.get("FARM_LOG_LEVEL") or "INFO").upper(),
        )


def configure_logging(settings: Settings) -> None:
    """Apply the configured level to the package logger once."""
    global _logging_configured
    if _logging_configured:
        return
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logging.getLogger("farm_manager").setLevel(level)
    _logging_configured = True


settings = Settings.from_env()
