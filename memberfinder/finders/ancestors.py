"""Ancestor member suppression."""

from __future__ import annotations

from typing import Any, Iterable

from memberfinder.finders.scope import ScopeResolver
from memberfinder.reflection import ReflectionAdapter
from memberfinder.types import ProbeId
from memberfinder.utils.helpers import describe_target
from memberfinder.utils.logger import logger


def list_members_safely(adapter: ReflectionAdapter, target: Any, probe: ProbeId) -> list[str]:
    """List a probe's members, treating adapter lookup failures as no members."""
    try:
        return list(adapter.list_members(target, probe))
    except (AttributeError, TypeError, LookupError) as e:
        logger.debug("Probe {} failed on {}: {}", probe.name, describe_target(target), e)
        return []


def suppress_inherited(
    adapter: ReflectionAdapter,
    target: Any,
    resolver: ScopeResolver,
    names: Iterable[str],
) -> set[str]:
    """Remove names that any ancestor of the target's type also yields.

    An object is reduced to its runtime class, and the probes are recomputed
    for a type because object probes do not apply to the class. Each
    ancestor's listing includes what it inherits itself, so overrides of
    ancestor members are removed as well. Only members first introduced by
    the type survive. An ancestor whose listing fails removes nothing.
    """
    remaining = set(names)
    if adapter.is_type(target):
        type_ = adapter.resolve_type(target)
    else:
        type_ = adapter.class_of(target)
    if type_ is None:
        return remaining

    ancestors = [a for a in adapter.ancestors_of(type_) if a is not type_]
    if not ancestors:
        return remaining

    probes = resolver.probes_for(True)
    before = len(remaining)
    for ancestor in ancestors:
        for probe in probes:
            remaining.difference_update(list_members_safely(adapter, ancestor, probe))
    logger.debug(
        "Ancestor suppression on {} removed {} of {} names",
        describe_target(target),
        before - len(remaining),
        before,
    )
    return remaining
