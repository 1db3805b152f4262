"""
Finder configuration.

Settings that shape how the native Python adapter reads members. Defaults
suit most hosts; FinderConfig.from_env() lets deployments override them
through MEMBERFINDER_* environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from memberfinder.reflection.registry import TypeRegistry, default_registry
from memberfinder.types import ConfigurationError, ErrorContext, RecoveryAction

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _parse_bool(env: Mapping[str, str], var: str, default: bool) -> bool:
    raw = env.get(var)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"{var}={raw!r} is not a boolean",
        user_message=f"Environment variable {var} must be true or false.",
        context=ErrorContext(operation="load_config", component="config"),
        recovery_actions=[RecoveryAction(description=f"Set {var} to true or false")],
    )


@dataclass(frozen=True)
class FinderConfig:
    """Configuration for MethodFinder and PythonReflectionAdapter."""

    include_dunder: bool = True  # dunder names count as public members
    include_properties: bool = False  # list properties and cached properties
    registry: TypeRegistry = field(default=default_registry, compare=False)

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        registry: TypeRegistry | None = None,
    ) -> "FinderConfig":
        """Build a config from MEMBERFINDER_* variables.

        Raises:
            ConfigurationError: If a variable holds a non-boolean value.
        """
        env = os.environ if env is None else env
        return cls(
            include_dunder=_parse_bool(env, "MEMBERFINDER_INCLUDE_DUNDER", True),
            include_properties=_parse_bool(env, "MEMBERFINDER_INCLUDE_PROPERTIES", False),
            registry=registry if registry is not None else default_registry,
        )
