"""JSON log formatting for strext.

Records are rendered as one JSON object per line. Only the context fields
the CLI attaches through ``extra=`` are copied into the entry.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Fields the CLI passes via extra=; anything else on a record is ignored
CONTEXT_FIELDS: tuple[str, ...] = ("command", "operation", "argument")


class JSONFormatter(logging.Formatter):
    """Format log records as JSON objects.

    Example output:
        {"timestamp": "2026-01-01T00:00:00+00:00", "level": "DEBUG",
         "logger": "string_extensions.cli.output",
         "message": "Rejected argument separator",
         "context": {"operation": "split", "argument": "separator"}}
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
        }
        if record.name and record.name != "root":
            entry["logger"] = record.name
        entry["message"] = record.getMessage()

        context = {
            name: getattr(record, name)
            for name in CONTEXT_FIELDS
            if getattr(record, name, None) is not None
        }
        if context:
            entry["context"] = context

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
