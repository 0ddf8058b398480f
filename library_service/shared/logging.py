"""
Logging configuration for the service.

One stdout handler, one line format for every module logger.
Logging must not change program behavior and never carries review
bodies or notification payloads.
"""

import logging
import sys
from typing import Optional

from library_service.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_QUIET_LOGGERS = ("httpx", "httpcore")


def _resolve_level(level: str) -> Optional[int]:
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else None


def configure_logging(level: Optional[str] = None) -> None:
    """Configure logging for the service.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR). Defaults to
            ``settings.log_level``. Unknown names fall back to INFO.
    """
    requested = level or settings.log_level
    resolved = _resolve_level(requested)

    logging.basicConfig(
        level=resolved if resolved is not None else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # HTTP client request lines drown out lending events at INFO
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if resolved is None:
        logging.getLogger(__name__).warning(
            "Unknown log level %r, using INFO", requested
        )
