"""Simple logging utilities for graph-controls.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

and the entry points decide where records go: the CLI logs to stderr, the
Textual app logs to a rotating file so the terminal UI is not disturbed.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "graph_controls"


def _formatter() -> logging.Formatter:
    return logging.Formatter(_FORMAT, datefmt=_DATEFMT)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Send package logs to stderr (CLI commands)."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_formatter())
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)
    logger.setLevel(level)
    return logger


def setup_tui_logging(log_file: Path, verbose: bool = False) -> Optional[logging.Logger]:
    """Send package logs to a rotating file while a Textual app owns the terminal."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.INFO

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
        )
    except OSError as e:
        print(f"Warning: could not open log file {log_file}: {e}", file=sys.stderr)
        return None

    handler.setLevel(level)
    handler.setFormatter(_formatter())

    # Drop stderr handlers, they would draw over the TUI
    for existing in list(logger.handlers):
        if isinstance(existing, logging.StreamHandler) and not isinstance(
            existing, logging.FileHandler
        ):
            logger.removeHandler(existing)

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
