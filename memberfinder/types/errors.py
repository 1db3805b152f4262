"""
Structured error handling for memberfinder.

Every error raised by the package derives from MemberFinderError, which
carries a machine-readable code, a severity, a user-facing message, context
about where the failure happened and optional recovery suggestions.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Iterable

from memberfinder.constants import utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # Configuration Errors (4000-4999)
    INVALID_CONFIG = 4001

    # User Input Errors (6000-6999)
    VALIDATION_FAILED = 6003
    INVALID_OPTIONS = 6004


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class RecoveryAction:
    """Suggested action to recover from an error."""

    description: str
    command: str | None = None
    automated: bool = False


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    component: str | None = None
    target: str | None = None
    timestamp: datetime = field(default_factory=utcnow)
    additional_info: dict[str, Any] = field(default_factory=dict)


class MemberFinderError(Exception):
    """Base error class for memberfinder."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.recovery_actions = recovery_actions or []
        self.original_error = original_error

        self.context.timestamp = utcnow()

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [
            f"[Error] {self.user_message}",
            f"   Code: {self.code.value}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.component:
            parts.append(f"   Component: {self.context.component}")
        if self.context.target:
            parts.append(f"   Target: {self.context.target}")

        if self.recovery_actions:
            parts.append("")
            parts.append("Suggested actions:")
            for i, action in enumerate(self.recovery_actions, 1):
                parts.append(f"   {i}. {action.description}")
                if action.command:
                    parts.append(f"      Run: {action.command}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "user_message": self.user_message,
            "severity": self.severity,
            "context": {
                "operation": self.context.operation,
                "component": self.context.component,
                "target": self.context.target,
                "timestamp": self.context.timestamp.isoformat(),
                "additional_info": self.context.additional_info,
            },
            "recovery_actions": [
                {"description": a.description, "command": a.command, "automated": a.automated}
                for a in self.recovery_actions
            ],
            "original_error": str(self.original_error) if self.original_error else None,
        }


class ConfigurationError(MemberFinderError):
    """Error related to configuration issues."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            user_message=user_message or "Configuration error occurred.",
            severity=ErrorSeverity.HIGH,
            context=context,
            recovery_actions=recovery_actions,
            original_error=original_error,
        )


class ValidationError(MemberFinderError):
    """Error related to input validation failures."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
        code: ErrorCode = ErrorCode.VALIDATION_FAILED,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message=user_message or "Validation failed.",
            severity=ErrorSeverity.MEDIUM,
            context=context,
            recovery_actions=recovery_actions,
            original_error=original_error,
        )


class InvalidOptionsError(ValidationError):
    """A find specification contained unknown or conflicting options.

    ``invalid_options`` always lists every offending key or flag, in the
    order they were found, so one round-trip reveals all problems.
    """

    def __init__(
        self,
        message: str,
        invalid_options: Iterable[str],
        context: ErrorContext | None = None,
    ) -> None:
        self.invalid_options: tuple[str, ...] = tuple(invalid_options)
        super().__init__(
            message=message,
            user_message="Invalid member search options: " + ", ".join(self.invalid_options),
            context=context,
            recovery_actions=[
                RecoveryAction(
                    description="Remove or correct the listed options; see is_recognized_option()",
                ),
            ],
            code=ErrorCode.INVALID_OPTIONS,
        )

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["invalid_options"] = list(self.invalid_options)
        return data
