"""Specification validation and scope resolution.

Turns the flat option set of a find specification into the ordered list of
reflective probes to run against each target.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from memberfinder.constants import (
    ALLOWED_SPEC_KEYS,
    RECOGNIZED_OPTION_NAMES,
    SINGLETON_CONFLICTS,
    TOP_LEVEL_FLAG_KEYS,
)
from memberfinder.types import (
    SCOPE_FLAGS,
    VISIBILITY_FLAGS,
    ErrorContext,
    Flag,
    InvalidOptionsError,
    ProbeId,
    Visibility,
)
from memberfinder.utils.helpers import enum_value, make_list
from memberfinder.utils.logger import logger


def is_recognized_option(name: Flag | str) -> bool:
    """Check whether a name is one of the scope options a caller may pass.

    ``singleton`` is not part of this set even though it is a legal nested
    option in find(); callers relying on this check never see it.
    """
    return enum_value(name).strip().lstrip(":") in RECOGNIZED_OPTION_NAMES


def _parse_flags(values: Iterable[Any]) -> tuple[set[Flag], list[str]]:
    flags: set[Flag] = set()
    bad: list[str] = []
    for value in values:
        try:
            flags.add(Flag.parse(value))
        except ValueError:
            bad.append(str(value))
    return flags, bad


def _raise_invalid(message: str, invalid: list[str], operation: str) -> None:
    logger.debug("{}: {}", message, invalid)
    raise InvalidOptionsError(
        f"{message}: {invalid!r}",
        invalid_options=invalid,
        context=ErrorContext(operation=operation, component="scope"),
    )


def _check_singleton(flags: set[Flag], operation: str) -> None:
    if Flag.SINGLETON not in flags:
        return
    conflicts = [name for name in SINGLETON_CONFLICTS if Flag(name) in flags]
    if conflicts:
        _raise_invalid(
            "The class, public, protected and private flags can't be used with the singleton flag",
            [Flag.SINGLETON.value, *conflicts],
            operation,
        )


def validate_flags(*values: Any, operation: str = "find_all_by") -> frozenset[Flag]:
    """Validate a flat list of option flags.

    Raises:
        InvalidOptionsError: Listing every unrecognized flag, or the
            conflicting flags when singleton is combined with a visibility
            or class flag.
    """
    flags, bad = _parse_flags(make_list(*values))
    if bad:
        _raise_invalid("Unrecognized option(s)", bad, operation)
    _check_singleton(flags, operation)
    return frozenset(flags)


def validate_specification(spec: Mapping[str, Any]) -> frozenset[Flag]:
    """Validate a find() specification and return its effective flags.

    Top-level flag keys (``public=True`` and so on) are merged into the
    nested ``options`` flags when truthy.

    Raises:
        InvalidOptionsError: Listing every unrecognized key and nested
            option, or the flags that conflict with singleton.
    """
    bad = [str(key) for key in spec if key not in ALLOWED_SPEC_KEYS]
    flags, bad_nested = _parse_flags(make_list(spec.get("options")))
    bad.extend(bad_nested)
    if bad:
        _raise_invalid("Unrecognized option(s)", bad, "find")
    for key in TOP_LEVEL_FLAG_KEYS:
        if spec.get(key):
            flags.add(Flag(key))
    _check_singleton(flags, "find")
    return frozenset(flags)


def resolve_probes(flags: Iterable[Flag], target_is_type: bool) -> tuple[ProbeId, ...]:
    """Map option flags onto the ordered, deduplicated probes to query.

    Visibility defaults to public and scope to instance. Probes come out
    visibility-major (public, protected, private) and scope-minor
    (instance, class, singleton). ``class`` yields nothing for objects, and
    ``instance`` on an object queries the object's own callable surface.
    """
    flags = frozenset(flags)
    visibilities = [Visibility(f.value) for f in VISIBILITY_FLAGS if f in flags]
    scopes = [f for f in SCOPE_FLAGS if f in flags]
    probes: list[ProbeId] = []
    for visibility in visibilities or [Visibility.PUBLIC]:
        for scope in scopes or [Flag.INSTANCE]:
            if scope is Flag.SINGLETON:
                probe = ProbeId.singleton()
            elif scope is Flag.INSTANCE:
                probe = ProbeId.instance(visibility) if target_is_type else ProbeId.receiver(visibility)
            elif target_is_type:
                probe = ProbeId.receiver(visibility)
            else:
                continue
            if probe not in probes:
                probes.append(probe)
    return tuple(probes)


class ScopeResolver:
    """Probe lists for one specification, computed once per target kind."""

    def __init__(self, flags: Iterable[Flag]) -> None:
        self.flags = frozenset(flags)
        self._cache: dict[bool, tuple[ProbeId, ...]] = {}

    def probes_for(self, target_is_type: bool) -> tuple[ProbeId, ...]:
        if target_is_type not in self._cache:
            probes = resolve_probes(self.flags, target_is_type)
            logger.debug(
                "Resolved probes for {} targets: {}",
                "type" if target_is_type else "object",
                [p.name for p in probes],
            )
            self._cache[target_is_type] = probes
        return self._cache[target_is_type]

    @property
    def suppress_ancestors(self) -> bool:
        return Flag.SUPPRESS_ANCESTOR_METHODS in self.flags
