from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from guts.config import get_settings


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logs with stable keys."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, object] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Optional protocol context
        if hasattr(record, "guarded_type"):
            data["guarded_type"] = record.guarded_type
        if hasattr(record, "operation"):
            data["operation"] = record.operation

        return json.dumps(data, ensure_ascii=False)


def setup_logging(level: str | None = None) -> None:
    """Configure global structured logging; level defaults to ``GUTS_LOG_LEVEL``."""
    name = (level or get_settings().log_level).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, name, logging.WARNING))
    # Avoid duplicate handlers if setup is called multiple times
    if not any(isinstance(h.formatter, StructuredFormatter) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return module logger."""
    return logging.getLogger(name)
