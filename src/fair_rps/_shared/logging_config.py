# Area: Shared
"""
fair_rps._shared.logging_config — Structured logging setup
==========================================================

Configures dual logging: terminal (colored) + file (JSON).
The terminal handler defaults to WARNING so the game's own output stays
readable; the file keeps the full INFO trail.
Provides the fatal-error logging and termination function.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..errors import FairRPSError

# Package logger
logger = logging.getLogger("fair_rps")


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: Optional[str] = "fair_rps.log",
    level: int = logging.INFO,
    console_level: int = logging.WARNING,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str or None
        Path to the JSON log file. ``None`` disables file logging.
    level : int
        Level for the package logger and the file handler.
    console_level : int
        Level for the terminal handler.
    """
    pkg_logger = logging.getLogger("fair_rps")
    pkg_logger.setLevel(min(level, console_level))

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(console_level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_and_terminate(error: "FairRPSError", exit_code: int = 2) -> None:
    """
    Log a fatal error and terminate the process.

    Errors that provide ``format_error_log()`` get the boxed block on
    stderr; others are printed as a single line.
    """
    formatter = getattr(error, "format_error_log", None)
    if formatter is not None:
        print(formatter(), file=sys.stderr)
    else:
        print(f"Fatal: {error}", file=sys.stderr)

    logger.critical(
        f"Process terminated: {error.__class__.__name__}: {error}",
        extra={"error_type": error.__class__.__name__},
    )
    sys.exit(exit_code)
