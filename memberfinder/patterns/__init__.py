"""Member name matching.

Components:
- ALL: Sentinel criterion matching every member name
- NameMatcher: Abstract base class for matchers
- LiteralNameMatcher, RegexNameMatcher, CallableNameMatcher, AllNamesMatcher
- compile_criterion / compile_criteria: criterion -> matcher
- normalize_criteria: flatten and drop blank criteria

Usage:
    from memberfinder.patterns import compile_criterion

    matcher = compile_criterion("run")
    matcher("run")       # True
    matcher("run_fast")  # False
"""

from .matcher import (
    ALL,
    AllNamesMatcher,
    CallableNameMatcher,
    LiteralNameMatcher,
    NameMatcher,
    NamePredicate,
    RegexNameMatcher,
    compile_criteria,
    compile_criterion,
    is_blank,
    normalize_criteria,
)

__all__ = [
    "ALL",
    "AllNamesMatcher",
    "CallableNameMatcher",
    "LiteralNameMatcher",
    "NameMatcher",
    "NamePredicate",
    "RegexNameMatcher",
    "compile_criteria",
    "compile_criterion",
    "is_blank",
    "normalize_criteria",
]
