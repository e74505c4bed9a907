import json
import logging
import os
import sys
from logging import Logger
from typing import List, Optional

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOGGER_ROOT = "adserver_acceptance"
TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | %(message)s"


class JsonFormatter(logging.Formatter):
    """Structured JSON formatter for log records."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%SZ"),
        }
        if record.exc_info:
            log["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log)


def resolve_log_level(level: Optional[str] = None) -> int:
    """Explicit level, then $LOG_LEVEL, then INFO; unknown names fall back to INFO."""
    name = (level or os.getenv(LOG_LEVEL_ENV_VAR) or "INFO").strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Optional[str] = None, json_output: bool = False, log_file: Optional[str] = None) -> None:
    """
    Route all logs to stdout, and to `log_file` as well when one is given.

    Replaces any handlers already installed on the root logger, so it is safe
    to call once per CLI invocation.
    """
    formatter = JsonFormatter() if json_output else logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
    logging.basicConfig(level=resolve_log_level(level), handlers=handlers, force=True)


def get_logger(name: str) -> Logger:
    """Return a logger namespaced under the package root."""
    if name == LOGGER_ROOT or name.startswith(LOGGER_ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_ROOT}.{name}")
