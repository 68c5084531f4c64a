import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import logging
from logging.handlers import RotatingFileHandler

import pytest

from inkpad import logging_setup


@pytest.fixture
def app_logger():
    logger = logging.getLogger("inkpad")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    for handler in logger.handlers:
        if handler not in saved[0]:
            handler.close()
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def test_import_attaches_no_handlers(app_logger):
    assert logging_setup.log.logger is app_logger
    assert not any(
        isinstance(h, RotatingFileHandler) for h in app_logger.handlers
    )


def test_setup_logging_writes_to_log_dir(app_logger, tmp_path, monkeypatch):
    log_dir = tmp_path / "logs"
    monkeypatch.setattr(logging_setup, "LOG_DIR", log_dir)
    monkeypatch.setattr(logging_setup, "LOG_PATH", log_dir / "inkpad.log")
    app_logger.handlers.clear()

    logger = logging_setup.setup_logging()
    assert logger is app_logger
    assert len(logger.handlers) == 2

    logging_setup.setup_logging()
    assert len(logger.handlers) == 2

    logging_setup.log.info("hello")
    for handler in logger.handlers:
        handler.flush()
    text = (log_dir / "inkpad.log").read_text(encoding="utf-8")
    assert "hello" in text
    assert f"sid={logging_setup.SESSION_ID}" in text
