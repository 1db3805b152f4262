"""Table-backed reflection adapter.

For hosts without usable runtime reflection: the application declares, per
type name, which member names each probe yields and which types it inherits
from or mixes in. Live objects are represented by TableObject values that
name their type and may carry their own singleton members.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from memberfinder.types import ProbeId, Scope, Visibility
from memberfinder.utils.logger import logger


@dataclass(frozen=True)
class TypeTable:
    """Declared members of one type, keyed by probe."""

    name: str
    ancestors: tuple[str, ...] = ()
    members: Mapping[ProbeId, tuple[str, ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class TableObject:
    """An object instance known only by its type name."""

    type_name: str
    label: str = ""
    singleton_members: tuple[str, ...] = ()


def _probe_key(probe: ProbeId | str) -> ProbeId:
    return probe if isinstance(probe, ProbeId) else ProbeId.from_name(probe)


class RegistryReflectionAdapter:
    """ReflectionAdapter over explicitly declared member tables.

    Usage:
        adapter = RegistryReflectionAdapter()
        adapter.declare("Base", public_instance_methods=["to_string"])
        adapter.declare(
            "Widget",
            ancestors=["Base"],
            public_instance_methods=["render", "resize", "to_string"],
        )
    """

    def __init__(self) -> None:
        self._tables: dict[str, TypeTable] = {}
        self._lock = threading.Lock()

    def declare(
        self,
        name: str,
        ancestors: Iterable[str] = (),
        members: Mapping[ProbeId | str, Iterable[str]] | None = None,
        **probe_members: Iterable[str],
    ) -> TypeTable:
        """Declare or replace the member table for a type name.

        Members may be given as a ``{probe: names}`` mapping, as keyword
        arguments named after probes (``public_instance_methods=[...]``),
        or both.
        """
        merged: dict[ProbeId, tuple[str, ...]] = {}
        for probe, names in {**(members or {}), **probe_members}.items():
            key = _probe_key(probe)
            merged[key] = tuple(sorted(set(merged.get(key, ())) | set(names)))
        table = TypeTable(name=name, ancestors=tuple(ancestors), members=merged)
        with self._lock:
            self._tables[name] = table
        return table

    def instance(self, type_name: str, label: str = "", singleton_members: Iterable[str] = ()) -> TableObject:
        """Create an object handle of a declared type."""
        return TableObject(type_name, label, tuple(sorted(set(singleton_members))))

    # ------------------------------------------------------------------
    # ReflectionAdapter protocol
    # ------------------------------------------------------------------

    def is_type(self, target: Any) -> bool:
        return isinstance(target, str)

    def resolve_type(self, descriptor: Any) -> str | None:
        if not isinstance(descriptor, str):
            return None
        with self._lock:
            known = descriptor in self._tables
        if not known:
            logger.debug("Type name {!r} is not declared", descriptor)
            return None
        return descriptor

    def class_of(self, obj: Any) -> str | None:
        return obj.type_name if isinstance(obj, TableObject) else None

    def ancestors_of(self, type_: Any) -> list[str]:
        """Transitive ancestors in declaration order, without duplicates."""
        table = self._table(type_)
        if table is None:
            return []
        result: list[str] = []
        pending = list(table.ancestors)
        while pending:
            name = pending.pop(0)
            if name == type_ or name in result:
                continue
            result.append(name)
            table = self._table(name)
            if table is not None:
                pending.extend(table.ancestors)
        return result

    def list_members(self, target: Any, probe: ProbeId) -> list[str]:
        if isinstance(target, TableObject):
            return self._object_members(target, probe)
        table = self._table(target) if isinstance(target, str) else None
        if table is None:
            return []
        return list(table.members.get(probe, ()))

    # ------------------------------------------------------------------

    def _table(self, name: Any) -> TypeTable | None:
        with self._lock:
            return self._tables.get(name)

    def _object_members(self, obj: TableObject, probe: ProbeId) -> list[str]:
        if probe.is_singleton:
            return list(obj.singleton_members)
        table = self._table(obj.type_name)
        if table is None:
            return []
        if probe.scope is Scope.INSTANCE:
            return list(table.members.get(probe, ()))
        names = set(table.members.get(ProbeId.instance(probe.visibility), ()))
        names.update(table.members.get(probe, ()))
        if probe.visibility is Visibility.PUBLIC:
            names.update(obj.singleton_members)
        return sorted(names)
