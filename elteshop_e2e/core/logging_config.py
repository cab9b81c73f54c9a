# elteshop_e2e/core/logging_config.py

import json
import logging
import os
import sys
from datetime import datetime

logger = logging.getLogger(__name__)

# Chatty third-party loggers (HTTP wire traffic to the grid, driver downloads)
NOISY_LOGGERS = ("urllib3", "selenium", "WDM")


class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for logging."""
    def format(self, record):
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).astimezone().isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            # Source location
            "module": record.name,
            "funcName": record.funcName,
            "lineno": record.lineno,
            "process": record.process,
            "thread": record.thread,
            "threadName": record.threadName,
        }

        # Which layer of the suite emitted the record
        if ".page_objects." in record.name:
            log_record["component"] = "page-object"
        elif ".utils." in record.name:
            log_record["component"] = "wait-layer"
        elif ".config." in record.name:
            log_record["component"] = "config"
        elif record.name.startswith("tests") or record.name.startswith("test_"):
            log_record["component"] = "test"
        else:
            log_record["component"] = "other"

        # logger.warning("message", extra={'extra_context': {'locator': 'css=.results'}})
        if hasattr(record, "extra_context") and isinstance(record.extra_context, dict):
            log_record.update(record.extra_context)

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_record["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_record, default=str)


def setup_logging(level: str = None):
    """Configures the root logger with a JSON formatter."""
    root_logger = logging.getLogger()

    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicate logs
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(JsonFormatter())
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.info("Logging configured with JSON format.")
