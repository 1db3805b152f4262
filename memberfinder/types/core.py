"""
Core types for member resolution.

Flags are the closed set of options a caller may pass; a ProbeId is the
derived identifier of one reflective query built from those flags.
"""

from dataclasses import dataclass
from enum import Enum

from memberfinder.constants import PROBE_ROOT_NAME


class Flag(str, Enum):
    """Recognized member search options."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    INSTANCE = "instance"
    CLASS = "class"
    SINGLETON = "singleton"
    SUPPRESS_ANCESTOR_METHODS = "suppress_ancestor_methods"

    @classmethod
    def parse(cls, value: "Flag | str") -> "Flag":
        """Convert a flag or flag name into a Flag.

        Raises:
            ValueError: If the value names no known flag.
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lstrip(":"))

    @property
    def is_visibility(self) -> bool:
        return self in VISIBILITY_FLAGS

    @property
    def is_scope(self) -> bool:
        return self in SCOPE_FLAGS


class Visibility(str, Enum):
    """Member visibility, in canonical probe order."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


class Scope(str, Enum):
    """Which side of a target a probe inspects."""

    INSTANCE = "instance"
    SINGLETON = "singleton"


VISIBILITY_FLAGS: tuple[Flag, ...] = (Flag.PUBLIC, Flag.PROTECTED, Flag.PRIVATE)
SCOPE_FLAGS: tuple[Flag, ...] = (Flag.INSTANCE, Flag.CLASS, Flag.SINGLETON)


@dataclass(frozen=True)
class ProbeId:
    """Identifier for one reflective member query.

    ``visibility`` is None only for singleton probes. ``scope`` is None for
    "receiver" probes: the members callable on the target itself, which is
    the class-side surface of a type or the whole callable surface of an
    object.
    """

    visibility: Visibility | None
    scope: Scope | None

    def __post_init__(self) -> None:
        if self.scope is Scope.SINGLETON and self.visibility is not None:
            raise ValueError("singleton probes carry no visibility")
        if self.scope is not Scope.SINGLETON and self.visibility is None:
            raise ValueError("non-singleton probes require a visibility")

    @property
    def name(self) -> str:
        """Conventional probe name, e.g. ``public_instance_methods``."""
        parts = [p.value for p in (self.visibility, self.scope) if p is not None]
        parts.append(PROBE_ROOT_NAME)
        return "_".join(parts)

    @property
    def is_singleton(self) -> bool:
        return self.scope is Scope.SINGLETON

    @property
    def is_receiver(self) -> bool:
        return self.scope is None

    @classmethod
    def singleton(cls) -> "ProbeId":
        return cls(visibility=None, scope=Scope.SINGLETON)

    @classmethod
    def instance(cls, visibility: Visibility) -> "ProbeId":
        return cls(visibility=visibility, scope=Scope.INSTANCE)

    @classmethod
    def receiver(cls, visibility: Visibility) -> "ProbeId":
        return cls(visibility=visibility, scope=None)

    @classmethod
    def from_name(cls, name: str) -> "ProbeId":
        """Parse a conventional probe name back into a ProbeId.

        Raises:
            ValueError: If the name does not follow the probe convention.
        """
        suffix = "_" + PROBE_ROOT_NAME
        if not name.endswith(suffix):
            raise ValueError(f"Not a probe name: {name!r}")
        head = name[: -len(suffix)]
        if head == Scope.SINGLETON.value:
            return cls.singleton()
        visibility_name, _, scope_name = head.partition("_")
        try:
            visibility = Visibility(visibility_name)
        except ValueError:
            raise ValueError(f"Not a probe name: {name!r}") from None
        if not scope_name:
            return cls.receiver(visibility)
        if scope_name == Scope.INSTANCE.value:
            return cls.instance(visibility)
        raise ValueError(f"Not a probe name: {name!r}")

    def __str__(self) -> str:
        return self.name
