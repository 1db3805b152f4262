"""Finder result types.

A FinderResult records, for every target that was searched, either the
sorted member names that matched or the criteria that failed to match.
Results are immutable; the set operators return new results.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from memberfinder.utils.helpers import describe_target, make_list


def target_key(target: Any) -> Any:
    """Dictionary key for a target: itself when hashable, else its identity."""
    try:
        hash(target)
    except TypeError:
        return ("__unhashable__", id(target))
    return target


@dataclass(frozen=True)
class MatchEntry:
    """Outcome for one target.

    A matched entry has a non-empty ``names`` tuple. A not-matched entry has
    empty ``names`` and keeps the caller's original ``criteria`` unchanged;
    an empty list there means no criteria were given at all.
    """

    target: Any
    names: tuple[str, ...] = ()
    criteria: Any = None

    @classmethod
    def found(cls, target: Any, names: Iterable[str]) -> MatchEntry:
        return cls(target=target, names=tuple(sorted(set(names))))

    @classmethod
    def not_found(cls, target: Any, criteria: Any) -> MatchEntry:
        return cls(target=target, names=(), criteria=criteria)

    @property
    def matched(self) -> bool:
        return bool(self.names)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: dict[str, Any] = {"target": describe_target(self.target), "matched": self.matched}
        if self.matched:
            data["names"] = list(self.names)
        else:
            data["criteria"] = [repr(c) for c in make_list(self.criteria)]
        return data


class TargetMap(Mapping):
    """Read-only mapping keyed by targets, including unhashable objects."""

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[Any, tuple[Any, Any]]) -> None:
        self._items = dict(items)

    def __getitem__(self, target: Any) -> Any:
        return self._items[target_key(target)][1]

    def __iter__(self) -> Iterator[Any]:
        return (target for target, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, target: object) -> bool:
        return target_key(target) in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TargetMap):
            return {k: v for k, (_, v) in self._items.items()} == {
                k: v for k, (_, v) in other._items.items()
            }
        if isinstance(other, Mapping):
            if len(other) != len(self):
                return False
            return all(t in self and self[t] == v for t, v in other.items())
        return NotImplemented

    def __repr__(self) -> str:
        body = ", ".join(f"{describe_target(t)}: {v!r}" for t, v in self._items.values())
        return "{" + body + "}"


def _merge_criteria(left: Any, right: Any) -> Any:
    if left == right:
        return left
    merged: list[Any] = []
    for criterion in make_list(left, right):
        if criterion not in merged:
            merged.append(criterion)
    return merged


class FinderResult:
    """Immutable per-target outcome of a member search.

    Attributes:
        matched: target -> sorted tuple of matched member names.
        not_matched: target -> the criteria that matched nothing.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[MatchEntry] = ()) -> None:
        merged: dict[Any, MatchEntry] = {}
        for entry in entries:
            key = target_key(entry.target)
            if key in merged:
                entry = _combine(merged[key], entry)
            merged[key] = entry
        self._entries = merged

    @classmethod
    def from_mappings(
        cls,
        matched: Mapping[Any, Iterable[str]] | None = None,
        not_matched: Mapping[Any, Any] | None = None,
    ) -> FinderResult:
        """Build a result from plain ``{target: names}`` / ``{target: criteria}`` dicts."""
        entries = [MatchEntry.found(t, names) for t, names in (matched or {}).items()]
        entries += [MatchEntry.not_found(t, c) for t, c in (not_matched or {}).items()]
        return cls(entries)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def matched(self) -> TargetMap:
        return TargetMap({k: (e.target, e.names) for k, e in self._entries.items() if e.matched})

    @property
    def not_matched(self) -> TargetMap:
        return TargetMap(
            {k: (e.target, e.criteria) for k, e in self._entries.items() if not e.matched}
        )

    def matched_keys(self) -> list[Any]:
        return [e.target for e in self._entries.values() if e.matched]

    def not_matched_keys(self) -> list[Any]:
        return [e.target for e in self._entries.values() if not e.matched]

    def entries(self) -> list[MatchEntry]:
        return list(self._entries.values())

    def get(self, target: Any) -> MatchEntry | None:
        return self._entries.get(target_key(target))

    def is_empty(self) -> bool:
        """True when no target matched anything."""
        return not any(e.matched for e in self._entries.values())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "matched": [e.to_dict() for e in self._entries.values() if e.matched],
            "not_matched": [e.to_dict() for e in self._entries.values() if not e.matched],
        }

    # ------------------------------------------------------------------
    # Set algebra
    # ------------------------------------------------------------------

    def __or__(self, other: FinderResult) -> FinderResult:
        if not isinstance(other, FinderResult):
            return NotImplemented
        return FinderResult([*self._entries.values(), *other._entries.values()])

    def __and__(self, other: FinderResult) -> FinderResult:
        if not isinstance(other, FinderResult):
            return NotImplemented
        entries = []
        for key, mine in self._entries.items():
            theirs = other._entries.get(key)
            if theirs is None or mine.matched != theirs.matched:
                continue
            if mine.matched:
                common = set(mine.names) & set(theirs.names)
                if common:
                    entries.append(MatchEntry.found(mine.target, common))
            else:
                entries.append(
                    MatchEntry.not_found(mine.target, _merge_criteria(mine.criteria, theirs.criteria))
                )
        return FinderResult(entries)

    def __sub__(self, other: FinderResult) -> FinderResult:
        if not isinstance(other, FinderResult):
            return NotImplemented
        entries = []
        for key, mine in self._entries.items():
            theirs = other._entries.get(key)
            if mine.matched:
                left = set(mine.names) - set(theirs.names if theirs else ())
                if left:
                    entries.append(MatchEntry.found(mine.target, left))
            elif theirs is None or theirs.matched:
                entries.append(mine)
        return FinderResult(entries)

    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> Iterator[MatchEntry]:
        return iter(list(self._entries.values()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FinderResult):
            return NotImplemented
        return self.matched == other.matched and self.not_matched == other.not_matched

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FinderResult(matched={self.matched!r}, not_matched={self.not_matched!r})"


def _combine(left: MatchEntry, right: MatchEntry) -> MatchEntry:
    """Merge two outcomes for the same target; any match wins over no match."""
    if left.matched or right.matched:
        return MatchEntry.found(left.target, set(left.names) | set(right.names))
    return MatchEntry.not_found(left.target, _merge_criteria(left.criteria, right.criteria))
