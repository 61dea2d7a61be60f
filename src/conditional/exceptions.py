"""Exception hierarchy for conditional.

Every error carries a stable code, a category and structured context so
it can be logged or serialised without string parsing.

Codes:
    COND-0xxx  configuration
    PRED-1xxx  predicate lookup and evaluation
    KERN-2xxx  comparison kernels
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ConditionalError",
    "ConfigFileNotFoundError",
    "ConfigValidationError",
    "ConfigurationError",
    "EnvironmentVariableError",
    "KernelError",
    "PredicateError",
    "PredicateEvaluationError",
    "PredicateNotFoundError",
]

_MAX_VALUE_LENGTH = 100


def _truncate(value: Any) -> str:
    text = value if isinstance(value, str) else repr(value)
    return text[:_MAX_VALUE_LENGTH]


class ConditionalError(Exception):
    """Base class for all conditional errors."""

    code = "COND-0000"
    category = "general"

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc)
        super().__init__(str(self))

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        if self.context:
            details = ", ".join(f"{k}={v}" for k, v in self.context.items())
            text = f"{text} ({details})"
        return text

    def to_dict(self) -> dict[str, Any]:
        """Serialise the error for structured logging."""
        return {
            "error_code": self.code,
            "error_category": self.category,
            "message": self.message,
            "context": dict(self.context),
            "timestamp": self.timestamp.isoformat(),
            "cause": str(self.cause) if self.cause is not None else None,
        }


# ============================================================================
# Configuration errors
# ============================================================================


class ConfigurationError(ConditionalError):
    """Invalid or unreadable configuration."""

    code = "COND-0001"
    category = "configuration"


class ConfigFileNotFoundError(ConfigurationError, FileNotFoundError):
    """Configuration file does not exist."""

    code = "COND-0002"

    def __init__(self, file_path: str, **kwargs: Any) -> None:
        super().__init__(
            f"Configuration file not found: {file_path}",
            context={"file_path": file_path},
            **kwargs,
        )


class ConfigValidationError(ConfigurationError, ValueError):
    """Configuration failed validation."""

    code = "COND-0003"

    def __init__(
        self,
        message: str,
        *,
        errors: list[str] | None = None,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        context: dict[str, Any] = {"errors": list(errors or [])}
        if field is not None:
            context["field"] = field
        super().__init__(message, context=context, **kwargs)


class EnvironmentVariableError(ConfigurationError, ValueError):
    """A required environment variable is missing."""

    code = "COND-0004"

    def __init__(self, variable: str, **kwargs: Any) -> None:
        super().__init__(
            f"Required environment variable not set: {variable}",
            context={"variable": variable},
            **kwargs,
        )


# ============================================================================
# Predicate errors
# ============================================================================


class PredicateError(ConditionalError):
    """Base class for predicate errors."""

    code = "PRED-1000"
    category = "predicate"


class PredicateNotFoundError(PredicateError, LookupError):
    """No predicate is registered under the requested name."""

    code = "PRED-1001"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Unknown predicate: {name}", context={"predicate": name}, **kwargs
        )


class PredicateEvaluationError(PredicateError):
    """A predicate could not compare its operands.

    Predicates never raise this: it is built to describe a failure that was
    turned into a ``False`` result and logged.
    """

    code = "PRED-1002"

    def __init__(
        self,
        predicate_name: str,
        message: str,
        *,
        staged_value: Any = None,
        arguments: tuple[Any, ...] = (),
        **kwargs: Any,
    ) -> None:
        context = {
            "predicate": predicate_name,
            "value": _truncate(staged_value),
            "arguments": _truncate(arguments),
        }
        super().__init__(f"@{predicate_name}: {message}", context=context, **kwargs)


# ============================================================================
# Kernel errors
# ============================================================================


class KernelError(ConditionalError, ValueError):
    """A comparison kernel could not be created."""

    code = "KERN-2000"
    category = "kernel"
