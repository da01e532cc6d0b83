"""
Logging configuration for dotclaude.

All loggers live under the ``dotclaude`` namespace. Console output goes to
stderr through Rich; stdout is reserved for the statusline itself.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .settings import get_log_dir

DEFAULT_LOG_DIR = get_log_dir()

ROOT_LOGGER_NAME = "dotclaude"

FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Set to any non-empty value to get DEBUG logs from the statusline
DEBUG_ENV_VAR = "DOTCLAUDE_DEBUG"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the dotclaude namespace."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    console: bool = True,
    rich_console: bool = True,
) -> None:
    """Configure the dotclaude root logger.

    Args:
        level: Logging level for the dotclaude namespace
        log_file: Optional file to append logs to (parent dirs are created)
        console: Attach a stderr handler
        rich_console: Use Rich formatting for the stderr handler
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(level)
    logger.propagate = False

    if console:
        if rich_console:
            handler: logging.Handler = RichHandler(
                console=Console(stderr=True),
                show_path=False,
                rich_tracebacks=True,
            )
        else:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)


def setup_cli_logging() -> logging.Logger:
    """Logging for interactive CLI commands: warnings and above, Rich console."""
    setup_logging(level=logging.WARNING, console=True, rich_console=True)
    return get_logger("cli")


def setup_statusline_logging(log_file: Optional[Path] = None) -> logging.Logger:
    """Logging for the statusline filter.

    Plain warnings on stderr; stdout is never touched. With DOTCLAUDE_DEBUG
    set, DEBUG records are also appended to the statusline log file.
    """
    if os.environ.get(DEBUG_ENV_VAR):
        setup_logging(
            level=logging.DEBUG,
            log_file=log_file or DEFAULT_LOG_DIR / "statusline.log",
            console=True,
            rich_console=False,
        )
    else:
        setup_logging(level=logging.WARNING, console=True, rich_console=False)
    return get_logger("statusline")
