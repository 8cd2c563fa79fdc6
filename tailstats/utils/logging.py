from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO


_RESERVED = {
    "args", "msg", "levelname", "levelno", "pathname", "filename", "module",
    "exc_info", "exc_text", "stack_info", "lineno", "funcName", "created",
    "msecs", "relativeCreated", "thread", "threadName", "processName", "process",
    "name", "taskName", "message", "asctime",
}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        # Attach any extra contextual fields
        for key, value in record.__dict__.items():
            if key in _RESERVED:
                continue
            payload[key] = value
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Route all records through a single JSON-lines handler (stdout by default)."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter())
    root.handlers.clear()
    root.addHandler(handler)

    # matplotlib font discovery and PIL plugin loading are chatty at DEBUG
    for name in ("matplotlib", "PIL"):
        noisy = logging.getLogger(name)
        noisy.setLevel(logging.WARNING)
