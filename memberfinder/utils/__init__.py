"""
memberfinder utility modules.

- Logging (loguru, disabled unless requested)
- Small helpers shared by the finders
"""

from .helpers import describe_target, enum_value, make_list
from .logger import disable_logging, enable_logging, is_debug_enabled, logger

__all__ = [
    "describe_target",
    "disable_logging",
    "enable_logging",
    "enum_value",
    "is_debug_enabled",
    "logger",
    "make_list",
]
