"""Logging setup for email dispatch.

Handlers are attached to the ``email_dispatch`` package logger only, so an
application that already configured the root logger keeps its own output.
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .config import LoggingSettings

PACKAGE_LOGGER = "email_dispatch"

# Fields the dispatcher attaches with ``extra=``
DISPATCH_FIELDS = ("recipient", "template_id", "message_id", "error_kind", "simulated")


class DispatchJSONFormatter(logging.Formatter):
    """One JSON object per record, carrying the dispatch fields when present."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in DISPATCH_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                data[key] = value
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str, ensure_ascii=False)


def _console_handler(config: LoggingSettings) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(config.format))
    return handler


def _file_handler(config: LoggingSettings) -> logging.Handler:
    log_file = Path(config.file_path)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=config.max_file_size,
        backupCount=config.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(DispatchJSONFormatter())
    return handler


def setup_logging(config: Optional[LoggingSettings] = None) -> logging.Logger:
    """Attach console and file handlers to the package logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        config: Logging configuration; defaults are read from the environment

    Returns:
        The configured ``email_dispatch`` logger
    """
    config = config or LoggingSettings()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, config.level.upper()))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if config.console_output:
        logger.addHandler(_console_handler(config))
    if config.file_path:
        logger.addHandler(_file_handler(config))
    logger.propagate = not logger.handlers

    # EmailJS calls go through requests
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
    return logger
