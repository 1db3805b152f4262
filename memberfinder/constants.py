"""Shared constants for memberfinder.

Centralizes the recognized specification keys and option names so that
validation, the scope resolver and ``is_recognized_option`` agree on them.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


# Keys that carry targets or criteria in a find() specification.
TARGET_KEYS: tuple[str, ...] = ("types", "type", "objects", "object")
METHOD_KEYS: tuple[str, ...] = ("methods", "method")

# Flags that may also appear directly as top-level specification keys.
TOP_LEVEL_FLAG_KEYS: frozenset[str] = frozenset(
    {"class", "instance", "public", "private", "protected", "suppress_ancestor_methods"}
)

# Every key find() accepts.
ALLOWED_SPEC_KEYS: frozenset[str] = (
    frozenset(TARGET_KEYS) | frozenset(METHOD_KEYS) | {"options"} | TOP_LEVEL_FLAG_KEYS
)

# Names accepted by is_recognized_option(). singleton is intentionally absent.
RECOGNIZED_OPTION_NAMES: frozenset[str] = frozenset(
    {"public", "private", "protected", "instance", "class", "suppress_ancestor_methods"}
)

# Flags that cannot be combined with singleton.
SINGLETON_CONFLICTS: tuple[str, ...] = ("class", "public", "protected", "private")

# Suffix shared by every probe name, e.g. "public_instance_methods".
PROBE_ROOT_NAME = "methods"
