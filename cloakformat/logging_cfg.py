"""Logging setup for applications that want CloakFormat's log output."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

PACKAGE_LOGGER = "cloakformat"


class JsonFormatter(logging.Formatter):
    """JSON formatter for standard logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "funcName": record.funcName,
            "lineno": record.lineno,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False)


def configure_logging(
    level: str = "INFO", fmt: str = "text", stream: Optional[TextIO] = None
) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Args:
        level: Logging level name
        fmt: ``"text"`` or ``"json"``
        stream: Output stream (stderr if None)

    Returns:
        The configured package logger
    """
    if fmt == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
