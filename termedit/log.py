"""Logging setup. The terminal belongs to the editor, so logs go to a file."""

import logging
import os
from pathlib import Path

import platformdirs

from .constants import EditorConstants


def default_log_path() -> Path:
    log_dir = Path(platformdirs.user_log_dir(EditorConstants.LOG_APP_NAME))
    return log_dir / EditorConstants.LOG_FILE_NAME


def configure_logging() -> logging.Handler:
    """Attach a file handler to the package logger and return it.

    TERMEDIT_LOG_FILE overrides the location and TERMEDIT_LOG_LEVEL the
    level. If the file can't be opened, logging is silently disabled.
    """
    path = Path(os.environ.get(EditorConstants.LOG_FILE_ENV) or default_log_path())
    level_name = os.environ.get(EditorConstants.LOG_LEVEL_ENV, EditorConstants.DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    handler: logging.Handler
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding='utf-8')
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s"))

    logger = logging.getLogger("termedit")
    logger.setLevel(level)
    logger.addHandler(handler)
    return handler
