# ABOUTME: Environment-backed settings and fixed constants for the time CLI.
# ABOUTME: Loads .env via python-dotenv and exposes the API base override and log level.

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

VERSION = "0.1.0"
USER_AGENT = f"time-cli/{VERSION}"

API_BASE_ENV = "TIME_CLI_API_BASE"
LOG_LEVEL_ENV = "TIME_CLI_LOG_LEVEL"

REQUEST_TIMEOUT_SECONDS = 10.0
CACHE_TTL_SECONDS = 24 * 60 * 60
MIN_TERMINAL_WIDTH = 40

# Any leap year works; it makes Feb 29 valid no matter what year it is today.
REFERENCE_LEAP_YEAR = 2000

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"


def api_base_url(language: str) -> str:
    """Return the API host for a language, honouring the environment override."""
    override = os.environ.get(API_BASE_ENV)
    if override:
        return override.rstrip("/")
    return f"https://{language}.wikipedia.org"


def log_level() -> int:
    """Default log level for the CLI, read from the environment.

    Unknown level names fall back to WARNING instead of breaking every command.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning("Unknown %s value %r, using WARNING", LOG_LEVEL_ENV, name)
        return logging.WARNING
    return level
