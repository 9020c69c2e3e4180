"""Logging setup for script hosts.

Library modules only call ``logging.getLogger(__name__)``; a host that wants
console plus rotating file output calls ``setup_logging`` once at start-up.
"""

import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 10

logger = logging.getLogger("actorscript")


def _default_log_path(log_dir: str) -> str:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return os.path.join(log_dir, f"scripts_{timestamp}.log")


def _resolve_log_file(log_file: Optional[str]):
    """Return (log_dir, log_file); a directory argument gets a timestamped file inside it."""
    if not log_file:
        return DEFAULT_LOG_DIR, _default_log_path(DEFAULT_LOG_DIR)
    if os.path.isdir(log_file):
        return log_file, _default_log_path(log_file)
    return os.path.dirname(log_file) or ".", log_file


def _has_console_handler(root_logger) -> bool:
    return any(
        isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)
        for handler in root_logger.handlers
    )


def _has_file_handler(root_logger, log_file) -> bool:
    target = os.path.abspath(log_file)
    return any(
        isinstance(handler, RotatingFileHandler) and os.path.abspath(handler.baseFilename) == target
        for handler in root_logger.handlers
    )


def setup_logging(log_file: Optional[str] = None, level: int = DEFAULT_LOG_LEVEL) -> str:
    """
    Attach console and rotating file handlers to the root logger.

    Calling it again with the same file adds no duplicate handlers.

    Args:
        log_file: Log file path or directory; defaults to ``logs/scripts_<timestamp>.log``
        level: Root logger level

    Returns:
        str: Path of the log file in use
    """
    root_logger = logging.getLogger()
    log_dir, log_file = _resolve_log_file(log_file)
    os.makedirs(log_dir, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_console_handler(root_logger):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

    if not _has_file_handler(root_logger, log_file):
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUPS,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)

    logger.debug("Logging initialized", extra={"log_file": log_file})
    return log_file


def setup_logging_from_config(config, level: int = DEFAULT_LOG_LEVEL) -> str:
    """Set up logging using ``config.log_file`` (a ``RotationConfig``)."""
    return setup_logging(config.log_file, level)
