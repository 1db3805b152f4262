"""Native Python reflection adapter.

Python has no enforced member visibility, so visibility follows naming
conventions:

- public: no leading underscore, or a dunder such as ``__init__``
- protected: a single leading underscore
- private: a name-mangled ``_Owner__name`` for some class in the MRO

Scope follows how a member is bound:

- instance members of a type are the routines found along its MRO that are
  not classmethods or staticmethods
- receiver members of a type are its classmethods and staticmethods
- singleton members are what the target itself holds in its own
  ``__dict__``: class-side routines for a type, callables for an object
"""

from __future__ import annotations

import inspect
import types
from functools import cached_property, partialmethod, singledispatchmethod
from typing import Any

from memberfinder.reflection.registry import TypeRegistry, default_registry
from memberfinder.types import ProbeId, Scope, Visibility
from memberfinder.utils.helpers import describe_target
from memberfinder.utils.logger import logger

_CLASS_SIDE_TYPES = (classmethod, staticmethod, types.ClassMethodDescriptorType)
_EXTRA_INSTANCE_ROUTINES = (partialmethod, singledispatchmethod)
_PROPERTY_TYPES = (property, cached_property)


def is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def _is_class_side(name: str, attr: Any) -> bool:
    # __new__ is an implicit staticmethod even when defined as a plain function.
    return isinstance(attr, _CLASS_SIDE_TYPES) or name == "__new__"


def visibility_of(name: str, mro: tuple[type, ...]) -> Visibility:
    """Classify a member name by Python naming conventions."""
    if is_dunder(name) or not name.startswith("_"):
        return Visibility.PUBLIC
    for klass in mro:
        prefix = "_" + klass.__name__.lstrip("_") + "__"
        if name.startswith(prefix) and len(name) > len(prefix):
            return Visibility.PRIVATE
    return Visibility.PROTECTED


class PythonReflectionAdapter:
    """ReflectionAdapter backed by Python's own introspection.

    Attributes are read statically from class ``__dict__`` entries, so
    properties and descriptors are never invoked and targets are never
    mutated.
    """

    def __init__(
        self,
        registry: TypeRegistry | None = None,
        include_dunder: bool = True,
        include_properties: bool = False,
    ) -> None:
        self.registry = registry if registry is not None else default_registry
        self.include_dunder = include_dunder
        self.include_properties = include_properties

    # ------------------------------------------------------------------
    # ReflectionAdapter protocol
    # ------------------------------------------------------------------

    def is_type(self, target: Any) -> bool:
        return isinstance(target, (type, str))

    def resolve_type(self, descriptor: Any) -> type | None:
        if isinstance(descriptor, type):
            return descriptor
        if isinstance(descriptor, str):
            resolved = self.registry.resolve(descriptor)
            if resolved is None:
                logger.debug("Type name {!r} is not registered", descriptor)
            return resolved
        return None

    def class_of(self, obj: Any) -> type:
        return type(obj)

    def ancestors_of(self, type_: Any) -> list[type]:
        cls = self.resolve_type(type_)
        if cls is None:
            return []
        return list(cls.__mro__[1:])

    def list_members(self, target: Any, probe: ProbeId) -> list[str]:
        if isinstance(target, str):
            resolved = self.resolve_type(target)
            if resolved is None:
                return []
            target = resolved
        if isinstance(target, type):
            names = self._type_members(target, probe)
        else:
            names = self._object_members(target, probe)
        return sorted(n for n in names if self._keep_name(n))

    # ------------------------------------------------------------------
    # Type probes
    # ------------------------------------------------------------------

    def _type_members(self, cls: type, probe: ProbeId) -> set[str]:
        mro = cls.__mro__
        if probe.is_singleton:
            return {
                name
                for name, attr in vars(cls).items()
                if _is_class_side(name, attr)
            }
        wanted_class_side = probe.scope is None
        found: set[str] = set()
        for name, attr in self._mro_attributes(mro).items():
            if visibility_of(name, mro) is not probe.visibility:
                continue
            if wanted_class_side and _is_class_side(name, attr):
                found.add(name)
            elif probe.scope is Scope.INSTANCE and self._is_instance_member(name, attr):
                found.add(name)
        return found

    def _mro_attributes(self, mro: tuple[type, ...]) -> dict[str, Any]:
        """Effective attribute per name, the nearest definition in the MRO winning."""
        attributes: dict[str, Any] = {}
        for klass in reversed(mro):
            attributes.update(vars(klass))
        return attributes

    def _is_instance_member(self, name: str, attr: Any) -> bool:
        if _is_class_side(name, attr) or isinstance(attr, type):
            return False
        if inspect.isroutine(attr) or isinstance(attr, _EXTRA_INSTANCE_ROUTINES):
            return True
        return self.include_properties and isinstance(attr, _PROPERTY_TYPES)

    # ------------------------------------------------------------------
    # Object probes
    # ------------------------------------------------------------------

    def _object_members(self, obj: Any, probe: ProbeId) -> set[str]:
        cls = type(obj)
        own = self._own_callables(obj)
        if probe.is_singleton:
            return own
        if probe.scope is Scope.INSTANCE:
            # Instance members of an object are those of its class.
            return self._type_members(cls, probe)
        mro = cls.__mro__
        found = self._type_members(cls, ProbeId.instance(probe.visibility))
        found |= self._type_members(cls, probe)
        found |= {n for n in own if visibility_of(n, mro) is probe.visibility}
        return found

    def _own_callables(self, obj: Any) -> set[str]:
        try:
            namespace = object.__getattribute__(obj, "__dict__")
        except (AttributeError, TypeError):
            return set()
        if not isinstance(namespace, dict):
            logger.debug("Ignoring non-dict __dict__ on {}", describe_target(obj))
            return set()
        return {
            name
            for name, value in namespace.items()
            if isinstance(name, str) and callable(value) and not isinstance(value, type)
        }

    def _keep_name(self, name: str) -> bool:
        return bool(name) and (self.include_dunder or not is_dunder(name))
