"""Logging setup for Sky Hopper."""

from __future__ import annotations

import logging
import sys
from datetime import datetime

from .config import get_log_level

ROOT_LOGGER = "sky_hopper"


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    COLORS = {
        "DEBUG": "\033[90m",     # grey
        "INFO": "\033[36m",      # cyan
        "WARNING": "\033[33m",   # yellow
        "ERROR": "\033[31m",     # red
        "CRITICAL": "\033[1;31m",  # bold red
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace(f"{ROOT_LOGGER}.", "")
        line = f"{ts} [{record.levelname[0]}] {name}: {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        if not self.use_color:
            return line
        color = self.COLORS.get(record.levelname, "")
        return f"{color}{line}{self.RESET}"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level or get_log_level())
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(HumanFormatter(use_color=sys.stderr.isatty()))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the package namespace."""
    if name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
