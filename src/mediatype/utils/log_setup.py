"""Logging setup for applications embedding mediatype.

The library itself only emits DEBUG records through module loggers.
Applications that want those records on stdout can call
:func:`setup_logging` once at startup.
"""

import logging
import sys
from typing import Optional

from ..config import get_settings
from ..exceptions import InvalidArgumentError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Global flag to track if logging has been set up
_LOGGING_CONFIGURED = False


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once.

    Installs a single stdout handler using the configured format.
    Later calls are ignored so handlers are never duplicated.

    :param level: Logging level name; defaults to ``Settings.log_level``
    :type level: Optional[str]
    :return: None
    :rtype: None
    :raises InvalidArgumentError: If level is not a known level name
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        logging.getLogger(__name__).debug(
            "Logging already configured, skipping duplicate setup"
        )
        return

    settings = get_settings()
    level_name = (level or settings.log_level).strip().upper()
    if level_name not in LOG_LEVELS:
        raise InvalidArgumentError(
            f"Unknown logging level: {level}", argument="level"
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(settings.log_format))

    logging.basicConfig(
        level=getattr(logging, level_name),
        handlers=[handler],
        force=True,  # Override any existing configuration
    )

    _LOGGING_CONFIGURED = True
    logging.getLogger(__name__).debug("Logging configured at %s", level_name)
