from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from eisenhower.core.config import Settings


PACKAGE_LOGGER = "eisenhower"
TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields
        if hasattr(record, "extra"):
            log_data.update(record.extra)

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logger(name: str, level: str = "WARNING", json_output: bool = True) -> logging.Logger:
    """Setup a structured logger, JSON output by default"""
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        return logger

    logger.setLevel(getattr(logging, level.upper()))

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if json_output else logging.Formatter(TEXT_FORMAT))

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **kwargs: Any
) -> None:
    """Log a message with additional context"""
    if kwargs:
        logger.log(
            getattr(logging, level.upper()),
            message,
            extra={"extra": kwargs}
        )
    else:
        logger.log(getattr(logging, level.upper()), message)


def configure_logging(settings: Settings) -> None:
    """
    Send package records to stdout at the configured level and format.

    Until this is called the package loggers only propagate, so records end
    up wherever the host application's root logger sends them.
    """
    level = settings.logging.level
    logger = setup_logger(PACKAGE_LOGGER, level, settings.logging.json_output)
    logger.setLevel(getattr(logging, level.upper()))
    formatter = JSONFormatter() if settings.logging.json_output else logging.Formatter(TEXT_FORMAT)
    for handler in logger.handlers:
        handler.setFormatter(formatter)


# Create default loggers
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())
matrix_logger = logging.getLogger(f"{PACKAGE_LOGGER}.matrix")
planner_logger = logging.getLogger(f"{PACKAGE_LOGGER}.planner")
