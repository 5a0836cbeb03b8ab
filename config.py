"""Application configuration -- environment variables and derived constants.

Loads ``BOT_TOKEN``, ``API_URL``, ``REQUEST_TIMEOUT``, ``LOG_LEVEL`` and
``LOG_FILE`` from the environment via ``python-dotenv``. All values are
resolved at import time so other modules can ``from config import …``
without repeated lookups.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from core.logger import TelebindLogger

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

_DEFAULT_API_URL = "https://api.telegram.org"
_DEFAULT_TIMEOUT = 10.0


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_timeout(raw: str | None) -> tuple[float, bool]:
    """Parse ``REQUEST_TIMEOUT`` in seconds.

    Returns the timeout and whether *raw* was usable. Missing, non-numeric
    and non-positive values fall back to the default.
    """
    if not raw:
        return _DEFAULT_TIMEOUT, True
    try:
        value = float(raw)
    except ValueError:
        return _DEFAULT_TIMEOUT, False
    if value <= 0:
        return _DEFAULT_TIMEOUT, False
    return value, True


def _parse_log_level(raw: str | None) -> int:
    level = logging.getLevelName((raw or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


# ── Public constants ─────────────────────────────────────────────────────────

BOT_TOKEN: str | None = os.environ.get("BOT_TOKEN")
API_URL: str = (os.environ.get("API_URL") or _DEFAULT_API_URL).rstrip("/")
REQUEST_TIMEOUT, _timeout_ok = _parse_timeout(os.environ.get("REQUEST_TIMEOUT"))
LOG_LEVEL: int = _parse_log_level(os.environ.get("LOG_LEVEL"))
LOG_FILE: str | None = os.environ.get("LOG_FILE") or None

# ── Logger (used for startup diagnostics at the bottom of this module) ───────
logger = TelebindLogger.get_logger(LOG_LEVEL, LOG_FILE)


# ── Startup diagnostics ─────────────────────────────────────────────────────

if BOT_TOKEN:
    logger.info("Config loaded — BOT_TOKEN is set", extra={"api_url": API_URL})
else:
    logger.warning("Config loaded — BOT_TOKEN is NOT set")

if not _timeout_ok:
    logger.warning(
        "Invalid REQUEST_TIMEOUT, using default",
        extra={"raw_value": os.environ.get("REQUEST_TIMEOUT"), "timeout": REQUEST_TIMEOUT},
    )
