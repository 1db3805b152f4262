"""Member name matchers.

A criterion supplied by a caller (a literal name, a compiled regular
expression, a predicate callable or the ALL sentinel) is compiled into a
NameMatcher, which decides whether a single member name satisfies it.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Iterator

from memberfinder.types import ValidationError
from memberfinder.utils.helpers import make_list

NamePredicate = Callable[[str], bool]


class _MatchAll:
    """Sentinel criterion meaning "every member name"."""

    _instance: _MatchAll | None = None

    def __new__(cls) -> _MatchAll:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ALL"

    def __reduce__(self) -> str:
        return "ALL"


ALL = _MatchAll()


class NameMatcher(ABC):
    """Abstract base class for member name matchers.

    Implementations must provide:
    - matches(): Decide whether one name satisfies the criterion
    """

    criterion: Any

    @abstractmethod
    def matches(self, name: str) -> bool:
        """Check whether a member name satisfies this matcher.

        Args:
            name: Member name to test.

        Returns:
            True if the name matches.
        """
        pass

    def __call__(self, name: str) -> bool:
        return self.matches(name)

    def filter(self, names: Iterable[str]) -> Iterator[str]:
        """Yield the names that satisfy this matcher, preserving order."""
        for name in names:
            if self.matches(name):
                yield name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.criterion!r})"


class LiteralNameMatcher(NameMatcher):
    """Exact, full-string match of a literal name.

    The literal is escaped and anchored, so ``"run"`` matches neither
    ``"run_fast"`` nor ``"prerun"`` and ``"a.b"`` only matches ``"a.b"``.
    """

    def __init__(self, literal: str) -> None:
        self.criterion = literal
        self._regex = re.compile(re.escape(literal))

    def matches(self, name: str) -> bool:
        return self._regex.fullmatch(name) is not None


class RegexNameMatcher(NameMatcher):
    """Regular expression used as-is, with search semantics."""

    def __init__(self, pattern: re.Pattern[str]) -> None:
        self.criterion = pattern

    def matches(self, name: str) -> bool:
        return self.criterion.search(name) is not None


class CallableNameMatcher(NameMatcher):
    """Arbitrary predicate over member names."""

    def __init__(self, predicate: NamePredicate) -> None:
        self.criterion = predicate

    def matches(self, name: str) -> bool:
        return bool(self.criterion(name))


class AllNamesMatcher(NameMatcher):
    """Matches any non-empty name."""

    criterion = ALL

    def matches(self, name: str) -> bool:
        return bool(name)


def is_blank(criterion: Any) -> bool:
    """Blank criteria (None, empty or whitespace-only strings) never match."""
    if criterion is None:
        return True
    return isinstance(criterion, str) and not criterion.strip()


def normalize_criteria(*values: Any) -> list[Any]:
    """Flatten criteria into one list and drop the blank ones."""
    return [c for c in make_list(*values) if not is_blank(c)]


def compile_criterion(criterion: Any) -> NameMatcher:
    """Compile one criterion into a NameMatcher.

    Names, compiled regexes, predicates and ALL compile to their own
    matchers. Any other value is matched literally by its string form, so
    ``methods=42`` looks for a member named ``42``.

    Raises:
        ValidationError: If the criterion, or its string form, is blank.
    """
    if isinstance(criterion, NameMatcher):
        return criterion
    if criterion is ALL:
        return AllNamesMatcher()
    if isinstance(criterion, re.Pattern):
        return RegexNameMatcher(criterion)
    if callable(criterion):
        return CallableNameMatcher(criterion)
    text = str(criterion)
    if is_blank(text):
        raise ValidationError(f"Blank member name criterion: {criterion!r}")
    return LiteralNameMatcher(text)


def compile_criteria(criteria: Iterable[Any]) -> list[NameMatcher]:
    """Compile non-blank criteria. ALL anywhere collapses the list to one matcher."""
    kept = [c for c in criteria if not is_blank(c)]
    if any(c is ALL for c in kept):
        return [AllNamesMatcher()]
    return [compile_criterion(c) for c in kept]
