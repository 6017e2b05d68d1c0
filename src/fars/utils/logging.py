"""Centralized logging setup and JSON formatter for structured logging."""

import json
import logging
import sys
from datetime import datetime
from typing import IO, Any, Dict, Optional, Union

import pytz

# LogRecord attributes that are not user-supplied `extra=` fields
_RESERVED_ATTRS = frozenset({
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
})

_PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Marks the handler installed by configure_logging so it can be replaced
_HANDLER_NAME = "fars-default"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Timestamps are UTC ISO-8601.  Any `extra=` kwargs are merged directly
    into the payload.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=pytz.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        # Merge any extra fields passed via log.info(..., extra={...})
        for key, value in getattr(record, "__dict__", {}).items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        # safe fallback for non-serializable objects
        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = "INFO",
    json_format: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Attach a stream handler to the ``fars`` package logger.

    Calling it again replaces the handler installed by the previous call;
    handlers added by the application are left alone.

    Args:
        level: Logger level name or number.
        json_format: Use ``JsonFormatter`` instead of a plain text line.
        stream: Target stream.  Defaults to ``sys.stderr``.

    Returns:
        The configured ``fars`` logger.
    """
    logger = logging.getLogger("fars")

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JsonFormatter() if json_format else logging.Formatter(_PLAIN_FORMAT)
    )

    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
