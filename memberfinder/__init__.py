"""
memberfinder - Member resolution for aspect weaving.

Given a set of types or live objects and a set of member-name criteria,
memberfinder resolves exactly which declared members of each target match,
subject to visibility, class/instance/singleton scope and optional
suppression of ancestor members.

Usage:
    from memberfinder import MethodFinder, ALL

    result = MethodFinder().find(types=Widget, methods=re.compile(r"^re"))
    result.matched   # {Widget: ("render", "resize")}
"""

from .finders import (
    FinderResult,
    MatchEntry,
    MethodFinder,
    find,
    find_all_by,
    is_recognized_option,
)
from .patterns import ALL
from .types import Flag, InvalidOptionsError, ProbeId

__version__ = "0.1.0"

__all__ = [
    "ALL",
    "FinderResult",
    "Flag",
    "InvalidOptionsError",
    "MatchEntry",
    "MethodFinder",
    "ProbeId",
    "find",
    "find_all_by",
    "is_recognized_option",
]
