"""
Type registry.

Maps type names to type objects so that targets may be given by name
without evaluating arbitrary code. Names are registered explicitly, either
one class at a time or for every class defined in a module.
"""

from __future__ import annotations

import inspect
import threading
from types import ModuleType
from typing import Iterator

from memberfinder.utils.logger import logger


class TypeRegistry:
    """Thread-safe name -> type lookup table."""

    def __init__(self) -> None:
        self._types: dict[str, type] = {}
        self._lock = threading.Lock()

    def register(self, cls: type, name: str | None = None) -> type:
        """Register a class under its qualified names.

        The class is reachable by ``__qualname__``, by
        ``module.__qualname__`` and, when given, by ``name``. Returns the
        class so the method can be used as a decorator.
        """
        if not isinstance(cls, type):
            raise TypeError(f"Only types can be registered, got {cls!r}")
        keys = [cls.__qualname__, f"{cls.__module__}.{cls.__qualname__}"]
        if name:
            keys.append(name)
        with self._lock:
            for key in keys:
                self._types[key] = cls
        logger.debug("Registered type {} as {}", cls.__qualname__, keys)
        return cls

    def register_module(self, module: ModuleType) -> int:
        """Register every class defined (not merely imported) in a module.

        Returns:
            Number of classes registered.
        """
        count = 0
        for _, member in inspect.getmembers(module, inspect.isclass):
            if member.__module__ == module.__name__:
                self.register(member)
                count += 1
        return count

    def unregister(self, name: str) -> None:
        with self._lock:
            self._types.pop(name, None)

    def resolve(self, name: str) -> type | None:
        """Look up a registered type; None when the name is unknown."""
        key = name.strip().lstrip(":")
        with self._lock:
            return self._types.get(key)

    def clear(self) -> None:
        with self._lock:
            self._types.clear()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.resolve(name) is not None

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(sorted(self._types))

    def __len__(self) -> int:
        with self._lock:
            return len(self._types)


# Process-wide default registry used when no registry is configured.
default_registry = TypeRegistry()


def register_type(cls: type | None = None, *, name: str | None = None):
    """Register a class in the default registry; usable as a decorator.

    Usage:
        @register_type
        class Widget: ...

        @register_type(name="widgets.Widget")
        class Widget: ...
    """
    if cls is None:
        return lambda c: default_registry.register(c, name=name)
    return default_registry.register(cls, name=name)
