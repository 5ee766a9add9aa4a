"""Logging for arbor.

Handlers live on the ``arbor`` package logger only. Module loggers returned
by :func:`get_logger` have none of their own and propagate to it, so every
module writes to the console and to one rolling ``arbor.log``.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

PACKAGE_LOGGER_NAME = "arbor"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "ARBOR_LOG_DIR"
DEFAULT_LOG_DIR = Path.home() / ".arbor" / "logs"
LOG_FILENAME = "arbor.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MiB
BACKUP_COUNT = 5


def _log_level() -> int:
    name = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").strip().upper()
    level = logging.getLevelName(name)
    # getLevelName answers "Level X" for names it does not know.
    return level if isinstance(level, int) else logging.INFO


def _log_path() -> Path:
    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    directory = Path(log_dir).expanduser() if log_dir else DEFAULT_LOG_DIR
    directory.mkdir(parents=True, exist_ok=True)
    return directory / LOG_FILENAME


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(_log_level())
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)
    file_handler = RotatingFileHandler(
        _log_path(), maxBytes=MAX_LOG_BYTES, backupCount=BACKUP_COUNT
    )
    for handler in (logging.StreamHandler(), file_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, nested under the ``arbor`` logger."""

    package = _package_logger()
    if name == PACKAGE_LOGGER_NAME or name.startswith(f"{PACKAGE_LOGGER_NAME}."):
        return logging.getLogger(name)
    return package.getChild(name)
