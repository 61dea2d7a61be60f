"""Log formatters producing one JSON object per record."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

__all__ = ["CompactJSONFormatter", "JSONFormatter"]

# Attributes every LogRecord carries; anything else was passed via ``extra``.
_RESERVED = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Format log records as JSON, keeping custom record attributes."""

    def __init__(self, indent: int | None = None) -> None:
        super().__init__()
        self.indent = indent

    def build(self, record: logging.LogRecord) -> dict[str, Any]:
        data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED and not key.startswith("_"):
                data[key] = value
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return data

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self.build(record), indent=self.indent, default=repr)


class CompactJSONFormatter(JSONFormatter):
    """JSON formatter without whitespace, for high-volume logs."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self.build(record), separators=(",", ":"), default=repr)
