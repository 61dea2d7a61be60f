"""Logging helpers for conditional."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from conditional.logging.error_logger import log_error, log_predicate_error
from conditional.logging.formatters import CompactJSONFormatter, JSONFormatter

if TYPE_CHECKING:
    from conditional.config.models import LoggingConfig

__all__ = [
    "CompactJSONFormatter",
    "JSONFormatter",
    "configure_logging",
    "log_error",
    "log_predicate_error",
]

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(
    config: LoggingConfig | None = None,
    handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Attach a handler to the ``conditional`` logger.

    Calling it again replaces the handler installed by the previous call
    instead of stacking a second one.
    """
    from conditional.config.models import LoggingConfig

    config = config or LoggingConfig()
    root = logging.getLogger("conditional")
    for existing in list(root.handlers):
        if getattr(existing, "_conditional_handler", False):
            root.removeHandler(existing)

    handler = handler or logging.StreamHandler()
    if config.format == "json":
        handler.setFormatter(JSONFormatter())
    elif config.format == "compact":
        handler.setFormatter(CompactJSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    handler._conditional_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(config.level.upper())
    return root
