"""Small, dependency-free helper functions used across the codebase."""

from __future__ import annotations

from typing import Any


def enum_value(x: object) -> str:
    """Extract .value from enum-like objects, or str() for plain values."""
    return x.value if hasattr(x, "value") else str(x)


def make_list(*values: Any) -> list[Any]:
    """Flatten one or more scalars, lists, tuples or sets into a flat list.

    None values are dropped. Strings, bytes and other non-collection values
    are treated as single items. Sets are ordered by repr so the output is
    deterministic.
    """
    result: list[Any] = []
    for value in values:
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            result.extend(make_list(*value))
        elif isinstance(value, (set, frozenset)):
            result.extend(make_list(*sorted(value, key=repr)))
        else:
            result.append(value)
    return result


def describe_target(target: object) -> str:
    """Short human-readable label for a target, used in logs and errors."""
    if isinstance(target, type):
        return f"{target.__module__}.{target.__qualname__}"
    if isinstance(target, str):
        return target
    return f"<{type(target).__qualname__} object at {id(target):#x}>"
