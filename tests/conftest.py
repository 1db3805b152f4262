"""
Pytest configuration and shared fixtures for memberfinder tests.
"""

import pytest

from memberfinder import MethodFinder
from memberfinder.config import FinderConfig
from memberfinder.reflection import RegistryReflectionAdapter, TypeRegistry

from tests import sample_types


@pytest.fixture
def registry() -> TypeRegistry:
    """A registry holding every sample type."""
    reg = TypeRegistry()
    reg.register_module(sample_types)
    return reg


@pytest.fixture
def finder(registry: TypeRegistry) -> MethodFinder:
    """Finder over native Python reflection, resolving names via the sample registry."""
    return MethodFinder(config=FinderConfig(registry=registry))


@pytest.fixture
def widget():
    """A fresh Widget instance."""
    return sample_types.Widget()


@pytest.fixture
def table_adapter() -> RegistryReflectionAdapter:
    """Static member tables for a Base / Widget hierarchy."""
    adapter = RegistryReflectionAdapter()
    adapter.declare("Base", public_instance_methods=["toString", "hash"])
    adapter.declare(
        "Widget",
        ancestors=["Base"],
        public_instance_methods=["hash", "render", "resize", "toString"],
        private_instance_methods=["layout"],
        public_methods=["create"],
    )
    return adapter
