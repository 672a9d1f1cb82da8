# -*- coding: utf-8 -*-
"""
Logging configuration for the stack bootstrapper.

Console output is human-readable; an optional log file receives one JSON
object per record so a run can be inspected afterwards.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Attributes every LogRecord carries; anything else came in through `extra`.
_STANDARD_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for the log file.

    Each record becomes one line holding timestamp, level, logger, message,
    location, and any `extra` fields passed to the logging call.
    """

    def __init__(self, service_name: str = "stack-setup"):
        super().__init__()
        self.service_name = service_name
        self.hostname = os.environ.get("HOSTNAME", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "service": self.service_name,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "hostname": self.hostname,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_RECORD_ATTRS
        }
        if extra_fields:
            log_entry["extra"] = extra_fields

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def setup_logging(
    logger_name: str = "stack_setup",
    verbose: bool = False,
    log_file_path: Optional[str] = None,
    log_prefix: Optional[str] = None,
) -> logging.Logger:
    """
    Set up logging for the bootstrapper.

    Args:
        logger_name: Name of the logger returned to the caller.
        verbose: Use DEBUG instead of the LOG_LEVEL environment variable
                 (default INFO).
        log_file_path: Optional path of a JSON-lines log file.
        log_prefix: Optional text put in front of every console line.

    Returns:
        The configured logger.
    """
    if verbose:
        numeric_level = logging.DEBUG
    else:
        level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
        numeric_level = getattr(logging, level_name, None)
        if not isinstance(numeric_level, int):
            numeric_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    actual_prefix = (
        (log_prefix.strip() + " ")
        if log_prefix and log_prefix.strip()
        else ""
    )
    console_handler.setFormatter(
        logging.Formatter(actual_prefix + CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT)
    )
    root_logger.addHandler(console_handler)

    if log_file_path:
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    logger = logging.getLogger(logger_name)
    logger.debug(
        "Logging initialized",
        extra={
            "log_level": logging.getLevelName(numeric_level),
            "file_enabled": bool(log_file_path),
        },
    )
    return logger
