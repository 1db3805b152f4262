"""
Logging utility for memberfinder.

memberfinder is a library, so its loguru output is disabled by default and
only switched on when the host asks for it, either explicitly through
enable_logging() or by setting MEMBERFINDER_DEBUG / DEBUG to "true".
"""

import os

from loguru import logger as loguru_logger

PACKAGE_NAME = "memberfinder"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    for var in ("MEMBERFINDER_DEBUG", "DEBUG"):
        if os.environ.get(var, "").lower() == "true":
            return True
    return False


def enable_logging() -> None:
    """Route memberfinder log records to the configured loguru sinks."""
    loguru_logger.enable(PACKAGE_NAME)


def disable_logging() -> None:
    """Silence memberfinder log records."""
    loguru_logger.disable(PACKAGE_NAME)


if is_debug_enabled():
    enable_logging()
else:
    disable_logging()

# Export loguru logger for direct use
logger = loguru_logger
