"""
Logging setup for the portal process.
Portal modules log under the `portal` logger; HTTP client chatter is capped at WARNING.
Streamlit re-executes the app script on every rerun, so configuration is applied once per process.
"""

from __future__ import annotations

import logging
from typing import Final

from src.common.settings import get_settings

PORTAL_LOGGER: Final[str] = "portal"
LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
QUIET_LOGGERS: Final[tuple[str, ...]] = ("urllib3", "requests")

_configured = False


def resolve_level(level_name: str) -> int:
    """Map a level name to its numeric value; unknown names fall back to INFO."""

    level = getattr(logging, level_name.strip().upper(), logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str | None = None) -> logging.Logger:
    """Configure root logging from settings once and return the portal logger."""

    global _configured
    portal_logger = logging.getLogger(PORTAL_LOGGER)
    if _configured:
        return portal_logger

    settings = get_settings()
    numeric_level = resolve_level(level or settings.LOG_LEVEL)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    portal_logger.setLevel(numeric_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    portal_logger.info(
        "logging configured project=%s env=%s level=%s",
        settings.PROJECT_NAME,
        settings.ENV,
        logging.getLevelName(numeric_level),
    )
    _configured = True
    return portal_logger
