"""Structured logging setup for antisync.

Logs are JSON lines, one event per line, written to
``~/.cache/antisync/logs/antisync.log``:

    ANTISYNC_LOG_LEVEL=DEBUG antisync push prod posts/
    tail -f ~/.cache/antisync/logs/antisync.log | jq .

Levels:
- DEBUG: request payloads, per-file parse results
- INFO: config loading, entries created/updated, ids injected
- WARNING: files skipped because they failed to parse
- ERROR: API failures, failed rewrites
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import structlog


LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def default_log_file() -> Path:
    return Path.home() / ".cache" / "antisync" / "logs" / "antisync.log"


def configure_logging(log_file: Optional[Path] = None) -> Path:
    """
    Send structlog events to a JSON log file.

    The level comes from ANTISYNC_LOG_LEVEL; unknown values fall back to INFO.

    Args:
        log_file: Log file path (default: ~/.cache/antisync/logs/antisync.log)

    Returns:
        Path of the log file in use
    """
    if log_file is None:
        log_file = default_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    level = LEVELS.get(os.environ.get("ANTISYNC_LOG_LEVEL", "INFO").upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=open(log_file, "a")),
        cache_logger_on_first_use=True,
    )
    return log_file


def get_logger(name: str) -> Any:
    """Get a structured logger, e.g. ``get_logger(__name__).info("entry_created", id=42)``."""
    return structlog.get_logger(name)
