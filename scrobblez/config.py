import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from . import __version__
from .lastfm.client import LASTFM_API_URL, LASTFM_AUTH_URL
from .lastfm.errors import ConfigError
from .lastfm.scrobble import DEFAULT_SPACING_SECONDS, MAX_BATCH_SIZE

PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")


def _str_to_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _str_to_float(val: str | None, default: float) -> float:
    try:
        return float(val) if val is not None else default
    except Exception:
        return default


def _str_to_int(val: str | None, default: int) -> int:
    try:
        return int(val) if val is not None else default
    except Exception:
        return default


@dataclass(frozen=True)
class Settings:
    """Application configuration loaded from environment variables."""

    lastfm_api_key: str = field(repr=False)
    lastfm_shared_secret: str = field(repr=False)
    api_url: str = LASTFM_API_URL
    auth_url: str = LASTFM_AUTH_URL
    batch_size: int = MAX_BATCH_SIZE
    timestamp_spacing: int = DEFAULT_SPACING_SECONDS
    request_timeout: float = 30.0
    open_browser: bool = True
    user_agent: str = f"scrobblez/{__version__}"
    log_level: str = "INFO"

    @staticmethod
    def from_env() -> "Settings":
        """Load settings from environment variables."""
        api_key = os.getenv("LASTFM_API_KEY", "").strip()
        shared_secret = os.getenv("LASTFM_SHARED_SECRET", "").strip()
        if not api_key or not shared_secret:
            raise ConfigError("LASTFM_API_KEY and LASTFM_SHARED_SECRET must be set in environment or .env")

        api_url = os.getenv("LASTFM_API_URL", LASTFM_API_URL).strip() or LASTFM_API_URL
        auth_url = os.getenv("LASTFM_AUTH_URL", LASTFM_AUTH_URL).strip() or LASTFM_AUTH_URL

        batch_size = _str_to_int(os.getenv("SCROBBLE_BATCH_SIZE"), MAX_BATCH_SIZE)
        batch_size = min(max(batch_size, 1), MAX_BATCH_SIZE)

        timestamp_spacing = _str_to_int(os.getenv("SCROBBLE_SPACING_SECONDS"), DEFAULT_SPACING_SECONDS)
        if timestamp_spacing <= 0:
            timestamp_spacing = DEFAULT_SPACING_SECONDS

        request_timeout = _str_to_float(os.getenv("REQUEST_TIMEOUT"), 30.0)
        if request_timeout <= 0:
            request_timeout = 30.0

        open_browser = _str_to_bool(os.getenv("OPEN_BROWSER"), True)
        user_agent = os.getenv("USER_AGENT", "").strip() or f"scrobblez/{__version__}"

        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if log_level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            log_level = "INFO"

        return Settings(
            lastfm_api_key=api_key,
            lastfm_shared_secret=shared_secret,
            api_url=api_url,
            auth_url=auth_url,
            batch_size=batch_size,
            timestamp_spacing=timestamp_spacing,
            request_timeout=request_timeout,
            open_browser=open_browser,
            user_agent=user_agent,
            log_level=log_level,
        )


def configure_logging(level: str) -> None:
    """Configure logging with the specified level."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(levelname)s: %(message)s",
    )
