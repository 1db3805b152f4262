"""Reflection adapter protocol.

Defines the ReflectionAdapter Protocol that every source of member
information must satisfy. The finders only ever talk to this interface, so
native Python introspection and static member tables are interchangeable.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from memberfinder.types import ProbeId


@runtime_checkable
class ReflectionAdapter(Protocol):
    """Read-only view of type and object structure.

    Implementations must never mutate the targets they inspect, and must
    degrade to empty results rather than raise for targets they cannot
    resolve or probes a target does not support.
    """

    def is_type(self, target: Any) -> bool:
        """True if the target denotes a type (or a type name)."""
        ...

    def resolve_type(self, descriptor: Any) -> Any | None:
        """Resolve a type or type name to a type handle, or None."""
        ...

    def list_members(self, target: Any, probe: ProbeId) -> Sequence[str]:
        """Member names of ``target`` under ``probe``, empty if unsupported."""
        ...

    def ancestors_of(self, type_: Any) -> Sequence[Any]:
        """Proper ancestors and mixed-in types of ``type_``, excluding itself."""
        ...

    def class_of(self, obj: Any) -> Any:
        """Runtime type of a live object."""
        ...
