"""Tests for logging setup."""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

import pytest

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, ROOT_DIR)

from actorscript.config import RotationConfig
from actorscript.utils.logger import setup_logging, setup_logging_from_config


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def _file_handlers(root, path):
    return [
        h for h in root.handlers
        if isinstance(h, RotatingFileHandler) and os.path.abspath(h.baseFilename) == os.path.abspath(path)
    ]


def test_setup_logging_file(root_logger, tmp_path):
    path = str(tmp_path / "scripts.log")
    assert setup_logging(path, level=logging.DEBUG) == path
    assert root_logger.level == logging.DEBUG
    assert len(_file_handlers(root_logger, path)) == 1

    logging.getLogger("actorscript.test").info("hello log")
    for handler in _file_handlers(root_logger, path):
        handler.flush()
    with open(path, encoding="utf-8") as f:
        assert "hello log" in f.read()


def test_setup_logging_is_idempotent(root_logger, tmp_path):
    path = str(tmp_path / "scripts.log")
    setup_logging(path)
    setup_logging(path)
    assert len(_file_handlers(root_logger, path)) == 1


def test_setup_logging_directory(root_logger, tmp_path):
    path = setup_logging(str(tmp_path))
    assert os.path.dirname(path) == str(tmp_path)
    assert os.path.basename(path).startswith("scripts_")


def test_setup_from_config(root_logger, tmp_path):
    path = str(tmp_path / "logs" / "host.log")
    assert setup_logging_from_config(RotationConfig(log_file=path)) == path
    assert os.path.isdir(tmp_path / "logs")
