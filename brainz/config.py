import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigError

PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

LISTENBRAINZ_API_URL = "https://api.listenbrainz.org/1"

# The listing endpoint refuses to return more than this per request.
MAX_PAGE_SIZE = 1000


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
    """Configuration for one brainz run.

    Connection details come from the environment (or .env), the search
    itself from the command line.
    """

    token: str
    user: str
    pattern: str = ".*"
    max_count: int = sys.maxsize
    cut_off: int = 0
    delete: bool = False
    api_url: str = LISTENBRAINZ_API_URL
    page_size: int = MAX_PAGE_SIZE
    request_timeout: float = 30.0
    log_level: str = "WARNING"

    @staticmethod
    def from_env(
        user: str,
        pattern: str = ".*",
        max_count: int = sys.maxsize,
        cut_off: int = 0,
        delete: bool = False,
        verbose: bool = False,
    ) -> "Settings":
        """Load settings from environment variables."""
        token = os.getenv("LISTENBRAINZ_TOKEN", "").strip()
        if not token:
            raise ConfigError("please define LISTENBRAINZ_TOKEN in the environment or .env")

        user = (user or "").strip()
        if not user:
            raise ConfigError("username is missing")
        if max_count < 1:
            raise ConfigError(f"limit must be at least 1, got {max_count}")

        api_url = os.getenv("LISTENBRAINZ_API_URL", LISTENBRAINZ_API_URL).strip().rstrip("/")
        if not api_url:
            api_url = LISTENBRAINZ_API_URL

        page_size = _str_to_int(os.getenv("LISTENBRAINZ_PAGE_SIZE"), MAX_PAGE_SIZE)
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            page_size = MAX_PAGE_SIZE

        request_timeout = _str_to_float(os.getenv("REQUEST_TIMEOUT"), 30.0)
        if request_timeout <= 0:
            request_timeout = 30.0

        if verbose:
            log_level = "DEBUG"
        else:
            log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
            if log_level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
                log_level = "WARNING"

        return Settings(
            token=token,
            user=user,
            pattern=pattern,
            max_count=max_count,
            cut_off=cut_off,
            delete=delete,
            api_url=api_url,
            page_size=page_size,
            request_timeout=request_timeout,
            log_level=log_level,
        )


def configure_logging(level: str) -> None:
    """Configure logging with the specified level."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s: %(message)s",
    )
