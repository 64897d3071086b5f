"""
Tasklist - Logging Configuration
Structured logging with JSON support
"""

import logging
import sys
import json
import os
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pathlib import Path


# Set by the request logging middleware for the lifetime of one request
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logs"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        request_id = request_id_var.get()
        if request_id:
            log_data["request_id"] = request_id

        if hasattr(record, "extra_data"):
            log_data["data"] = record.extra_data

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored console formatter"""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Copy so the color codes don't leak into other handlers
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the "tasklist" logger tree.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR
        json_logs: Emit JSON lines (production)
        log_file: Optional path of a JSON log file

    Returns:
        The configured root "tasklist" logger
    """
    level = getattr(logging, log_level.upper())

    logger = logging.getLogger("tasklist")
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    if json_logs:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))

    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger


class LoggerAdapter(logging.LoggerAdapter):
    """Adapter that merges bound context into every record"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra = kwargs.get("extra", {})
        extra.update(self.extra)
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str, **context) -> LoggerAdapter:
    """
    Get a logger with bound context.

    Args:
        name: Logger name below "tasklist" (e.g. "api.tasks")
        **context: Extra fields attached to every record

    Returns:
        Logger adapter
    """
    base_logger = logging.getLogger(f"tasklist.{name}")
    return LoggerAdapter(base_logger, context)


def log_error(
    logger: logging.LoggerAdapter,
    error: Exception,
    context: str = "",
    **extra
):
    """Log an exception with traceback"""
    logger.error(
        f"Error in {context}: {type(error).__name__}: {str(error)}",
        exc_info=error,
        extra={"extra_data": extra}
    )


DEBUG = os.environ.get("APP_ENV", "").lower() in ("development", "dev")

root_logger = setup_logging(
    log_level=os.environ.get("LOG_LEVEL") or ("DEBUG" if DEBUG else "INFO"),
    json_logs=not DEBUG,
    log_file=os.environ.get("LOG_FILE"),
)
