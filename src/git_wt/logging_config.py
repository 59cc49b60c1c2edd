"""Logging configuration for git-wt"""

import logging
import sys


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when writing to a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if not sys.stderr.isatty() or levelname not in self.COLORS:
            return super().format(record)
        # The record is shared by every handler; color only this rendering
        record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for the application.

    Only the package logger is configured so that embedding applications keep
    control of the root logger.

    Args:
        verbose: If True, show DEBUG level messages (every git invocation)
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger("git_wt")
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(fmt="[%(name)s] %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Logger instance
    """
    if not name.startswith("git_wt"):
        name = f"git_wt.{name}"
    return logging.getLogger(name)
