"""
Logging setup for adapter processes.

Standard output carries protocol frames, so every log record goes to
standard error. Two formats are supported:

- text: "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
- json: one JSON object per line with timestamp, level, logger, message

Example json output:
    {"timestamp": "2026-01-02T10:30:00+00:00", "level": "info",
     "logger": "toolgate.tools.dispatcher", "message": "[dispatcher] ..."}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def configure_logging(
    level: str | int = "INFO",
    *,
    json_format: bool = False,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """
    Route all logging to stderr (or the given stream).

    Replaces handlers previously installed on the root logger so
    repeated calls do not duplicate output.

    Returns:
        The installed handler
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return handler
