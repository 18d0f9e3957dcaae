# hide/logging_config.py

"""Structured logging configuration for the command line tool."""

import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

# Attributes present on every LogRecord; anything else came in via extra=
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in vars(record).items() if k not in _RESERVED}


class StructuredFormatter(logging.Formatter):
    """JSON formatter emitting one object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for name, value in _extra_fields(record).items():
            log_data.setdefault(name, value)

        return json.dumps(log_data, default=str)


def configure_logging(level: str = "WARNING", stream: Optional[TextIO] = None) -> None:
    """Configure application logging.

    Logs go to stderr by default so stdout only carries the redacted document.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Destination stream, sys.stderr when omitted
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if root_logger.handlers:
        root_logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(StructuredFormatter())

    root_logger.addHandler(handler)

    logging.debug(
        "Logging configured successfully",
        extra={"log_level": level, "python_version": sys.version},
    )
