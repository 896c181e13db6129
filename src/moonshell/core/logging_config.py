"""Centralized logging configuration for moonshell.

Usage:
    from moonshell.core.logging_config import configure_logging

    # Configure once at application startup
    configure_logging(level="DEBUG", format="text")

    # Modules get their own loggers
    logger = logging.getLogger(__name__)

Environment Variables:
    MOONSHELL_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    MOONSHELL_LOG_FORMAT: Output format ("text" or "json")
    MOONSHELL_LOG_FILE: Optional log file path

Logs go to stderr. The default level is WARNING so that log lines never
interleave with results printed by an interactive session.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime
from typing import Any, Literal

TEXT_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL = "WARNING"

_STANDARD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

# Track if logging has been configured
_configured = False


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging.

    Outputs one JSON object per record:
    {
        "timestamp": "2026-10-18T14:30:00.123",
        "level": "DEBUG",
        "logger": "moonshell.frontends.cli.repl.core",
        "message": "turn_complete: outcome=Values, lines=2",
        "extra": {...}
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_ATTRS}
        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, default=str)


def configure_logging(
    level: str | None = None,
    format: Literal["text", "json"] | None = None,
    file_path: str | None = None,
    force: bool = False,
) -> None:
    """Configure logging for the application.

    Subsequent calls are ignored unless force=True.

    Args:
        level: Log level. Defaults to MOONSHELL_LOG_LEVEL or "WARNING".
        format: Output format. Defaults to MOONSHELL_LOG_FORMAT or "text".
        file_path: Optional file path. Defaults to MOONSHELL_LOG_FILE.
        force: Force reconfiguration even if already configured.
    """
    global _configured
    if _configured and not force:
        return

    level = level or os.environ.get("MOONSHELL_LOG_LEVEL", DEFAULT_LEVEL)
    format = format or os.environ.get("MOONSHELL_LOG_FORMAT", "text")  # type: ignore
    file_path = file_path or os.environ.get("MOONSHELL_LOG_FILE")

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root_logger.handlers.clear()

    if format == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if file_path:
        file_handler = logging.FileHandler(file_path)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _configured = True
