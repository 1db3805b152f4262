"""Reflection adapters.

The finders query targets only through the ReflectionAdapter protocol.

- PythonReflectionAdapter: native introspection of Python types and objects
- RegistryReflectionAdapter: static member tables declared by the host
- TypeRegistry: explicit name -> type lookup used to resolve type names
"""

from .protocols import ReflectionAdapter
from .python_adapter import PythonReflectionAdapter, is_dunder, visibility_of
from .registry import TypeRegistry, default_registry, register_type
from .table_adapter import RegistryReflectionAdapter, TableObject, TypeTable

__all__ = [
    "PythonReflectionAdapter",
    "ReflectionAdapter",
    "RegistryReflectionAdapter",
    "TableObject",
    "TypeRegistry",
    "TypeTable",
    "default_registry",
    "is_dunder",
    "register_type",
    "visibility_of",
]
