from __future__ import annotations

import logging

import pytest

from mathview import config
from mathview.logging_config import resolve_level, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("mathview")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_setup_logging_is_idempotent(package_logger):
    logger = setup_logging(logging.DEBUG)
    setup_logging(logging.DEBUG)
    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_setup_logging_writes_to_file(package_logger, tmp_path):
    log_file = tmp_path / "mathview.log"
    logger = setup_logging(logging.INFO, log_file=str(log_file))
    assert len(logger.handlers) == 2

    logging.getLogger("mathview.model.panes").info("panes ready")
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "mathview.model.panes - INFO - panes ready" in text


@pytest.mark.parametrize("level, expected", [
    ("debug", logging.DEBUG),
    (" Warning ", logging.WARNING),
    (logging.ERROR, logging.ERROR),
])
def test_resolve_level(level, expected):
    assert resolve_level(level) == expected


def test_resolve_level_defaults_to_configured_level(monkeypatch):
    monkeypatch.setattr(config, "LOG_LEVEL", "WARNING")
    assert resolve_level(None) == logging.WARNING


def test_unknown_level_name_is_rejected():
    with pytest.raises(ValueError):
        resolve_level("chatty")


def test_setup_logging_accepts_level_names(package_logger):
    logger = setup_logging("debug")
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG
