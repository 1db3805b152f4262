"""
memberfinder type definitions.

This module exports the option flags, probe identifiers and error types
shared across the package.
"""

# Core types
from .core import SCOPE_FLAGS, VISIBILITY_FLAGS, Flag, ProbeId, Scope, Visibility

# Error types
from .errors import (
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    InvalidOptionsError,
    MemberFinderError,
    RecoveryAction,
    ValidationError,
)

__all__ = [
    # Core types
    "Flag",
    "ProbeId",
    "Scope",
    "Visibility",
    "SCOPE_FLAGS",
    "VISIBILITY_FLAGS",
    # Error types
    "ErrorCode",
    "ErrorSeverity",
    "RecoveryAction",
    "ErrorContext",
    "MemberFinderError",
    "ConfigurationError",
    "ValidationError",
    "InvalidOptionsError",
]
