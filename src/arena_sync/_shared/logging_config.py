# Area: Shared
"""
arena_sync._shared.logging_config — Structured logging setup
=============================================================

Two handlers on the ``arena_sync`` logger: a colored terminal stream
and an optional JSON-lines file. Records logged with
``extra={"connection_id": ...}`` keep that id in the file output.

Fatal startup errors go through ``log_and_terminate``, which prints
the error's boxed block to stderr before exiting.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..errors import ConfigurationError, InvalidPositionError

logger = logging.getLogger("arena_sync")

TERMINAL_FORMAT = "%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s"


class TerminalFormatter(logging.Formatter):
    """Colors the level name; the record itself is left untouched."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        connection_id = getattr(record, "connection_id", None)
        if connection_id:
            entry["connection_id"] = connection_id
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _terminal_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(TerminalFormatter(fmt=TERMINAL_FORMAT, datefmt="%H:%M:%S"))
    return handler


def _file_handler(log_file_path: str, level: int) -> logging.Handler:
    log_path = Path(log_file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter())
    return handler


def setup_logging(
    log_file_path: Optional[str] = "arena_sync.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure the ``arena_sync`` logger.

    Parameters
    ----------
    log_file_path : str or None
        JSON-lines log file. None logs to the terminal only.
    level : int
        Level for the logger and both handlers.
    """
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(_terminal_handler(level))

    if log_file_path:
        try:
            logger.addHandler(_file_handler(log_file_path, level))
        except OSError as e:
            logger.warning(f"Could not create log file {log_file_path}: {e}")

    logger.propagate = False


def log_and_terminate(
    error: "ConfigurationError | InvalidPositionError", exit_code: int = 1
) -> None:
    """
    Report a fatal startup error and exit.

    Parameters
    ----------
    error : ConfigurationError or InvalidPositionError
        Error whose ``format_error_log()`` block is printed to stderr.
    exit_code : int
        Process exit code. Defaults to 1.
    """
    print(error.format_error_log(), file=sys.stderr)
    logger.critical(
        f"Process terminated: {error.__class__.__name__}: {error}",
        extra={"error_type": error.__class__.__name__},
    )
    sys.exit(exit_code)
