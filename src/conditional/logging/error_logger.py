"""Structured error logging.

Errors are logged with their details attached to the record as
``structured_data`` so JSON handlers can emit them as fields.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from conditional.exceptions import ConditionalError, PredicateEvaluationError

__all__ = ["log_error", "log_predicate_error"]

logger = logging.getLogger("conditional.errors")

_MAX_VALUE_LENGTH = 100


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _clip(value: Any) -> str:
    text = value if isinstance(value, str) else repr(value)
    return text[:_MAX_VALUE_LENGTH]


def log_error(
    error: BaseException,
    *,
    log: logging.Logger | None = None,
    level: int = logging.ERROR,
    **context: Any,
) -> None:
    """Log any exception, with full context for ConditionalError."""
    log = log or logger
    if isinstance(error, ConditionalError):
        data = error.to_dict()
        data.update(context)
        message = str(error)
    else:
        data = {
            "error_type": type(error).__name__,
            "message": str(error),
            "timestamp": _now(),
            **context,
        }
        message = f"{type(error).__name__}: {error}"
    log.log(level, message, extra={"structured_data": data})


def log_predicate_error(
    predicate_name: str,
    error: BaseException,
    staged_value: Any,
    arguments: tuple[Any, ...] = (),
    *,
    kernel: str | None = None,
) -> PredicateEvaluationError:
    """Log a comparison failure that a predicate turned into ``False``."""
    wrapped = PredicateEvaluationError(
        predicate_name,
        f"{type(error).__name__}: {error}",
        staged_value=staged_value,
        arguments=arguments,
        cause=error,
    )
    data: dict[str, Any] = {
        "predicate": predicate_name,
        "exception": type(error).__name__,
        "value": _clip(staged_value),
        "arguments": _clip(arguments),
        "timestamp": _now(),
    }
    if kernel is not None:
        data["kernel"] = kernel
    logger.warning(str(wrapped), extra={"structured_data": data})
    return wrapped
