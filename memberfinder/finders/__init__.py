"""Member finders.

Components:
- MethodFinder: the resolution engine (find / find_all_by)
- FinderResult, MatchEntry: immutable per-target outcomes
- ScopeResolver, resolve_probes: option flags -> reflective probes
- suppress_inherited: drops members that ancestors also provide
"""

from .ancestors import suppress_inherited
from .method_finder import MethodFinder, find, find_all_by
from .result import FinderResult, MatchEntry, TargetMap
from .scope import (
    ScopeResolver,
    is_recognized_option,
    resolve_probes,
    validate_flags,
    validate_specification,
)

__all__ = [
    "FinderResult",
    "MatchEntry",
    "MethodFinder",
    "ScopeResolver",
    "TargetMap",
    "find",
    "find_all_by",
    "is_recognized_option",
    "resolve_probes",
    "suppress_inherited",
    "validate_flags",
    "validate_specification",
]
