"""Structured logging for setgraph.

Graph modules log through ``logging.getLogger(__name__)`` and attach graph
context with ``extra=``:

- operation / vertex: an ignored or completed mutation (Graph)
- order / visited: a finished traversal (traversal functions)

The library installs no handlers on import. Applications that want JSON
lines call setup_structured_logging() or setup_logging_from_settings(),
which attach handlers to the package logger so every setgraph.* record is
covered.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import IO, Any

from setgraph.core.config import Settings, get_settings

PACKAGE_LOGGER = "setgraph"

# Record attributes copied into the JSON output when a log call sets them.
GRAPH_CONTEXT_FIELDS = ("operation", "vertex", "order", "visited")


class JSONFormatter(logging.Formatter):
    """Render a record as one JSON object, including graph context fields."""

    def __init__(
        self,
        context_fields: tuple[str, ...] = GRAPH_CONTEXT_FIELDS,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.context_fields = context_fields

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in self.context_fields:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_structured_logging(
    log_level: int = logging.INFO,
    log_file_path: str | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach JSON handlers to the setgraph package logger and return it.

    Args:
        log_level: Level for the package logger and its handlers
        log_file_path: Also write to a rotating file when given
        stream: Console stream (stdout by default)
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setFormatter(JSONFormatter())
    logger.addHandler(console_handler)

    if log_file_path:
        try:
            Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                filename=log_file_path,
                maxBytes=10_485_760,
                backupCount=5,
                encoding="utf-8",
            )
        except PermissionError:
            logger.warning("Cannot write to %s, file logging disabled", log_file_path)
        else:
            file_handler.setFormatter(JSONFormatter())
            file_handler.setLevel(log_level)
            logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def setup_logging_from_settings(settings: Settings | None = None) -> logging.Logger:
    """Configure structured logging from SETGRAPH_LOG_LEVEL / SETGRAPH_LOG_FILE_PATH."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    return setup_structured_logging(
        log_level=level if isinstance(level, int) else logging.INFO,
        log_file_path=settings.log_file_path,
    )
