import io
import logging

import pytest

import proplist
from proplist import logconfig


@pytest.fixture
def proplist_logger(monkeypatch) -> logging.Logger:
    logger = logging.getLogger("proplist")
    monkeypatch.setattr(logger, "handlers", list(logger.handlers))
    monkeypatch.setattr(logger, "level", logger.level)
    return logger


def test_default_level(monkeypatch):
    monkeypatch.delenv("PROPLIST_LOGGING_LEVEL", raising=False)
    assert "WARNING" == logconfig.get_level()


def test_level_from_env(monkeypatch):
    monkeypatch.setenv("PROPLIST_LOGGING_LEVEL", "DEBUG")
    assert "DEBUG" == logconfig.get_level()


def test_import_leaves_logger_unconfigured():
    logger = logging.getLogger("proplist")
    assert logging.NOTSET == logger.level
    assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_debug_records_reach_application_handlers(caplog):
    caplog.set_level(logging.DEBUG)
    with pytest.raises(KeyError):
        proplist.fetch_strict([], "x")
    assert any(
        r.name == "proplist.lang.proplist" and r.levelno == logging.DEBUG
        for r in caplog.records
    )


def test_configure_logger(proplist_logger: logging.Logger):
    stream = io.StringIO()
    handler = logconfig.configure_logger(
        level="DEBUG", fmt="%(message)s", stream=stream
    )
    assert handler in proplist_logger.handlers
    assert logging.DEBUG == proplist_logger.level

    with pytest.raises(KeyError):
        proplist.update_strict([("a", 1)], "b", abs)
    assert "Key 'b' not found for strict update\n" == stream.getvalue()


def test_configure_logger_level_from_env(monkeypatch, proplist_logger: logging.Logger):
    monkeypatch.setenv("PROPLIST_LOGGING_LEVEL", "ERROR")
    handler = logconfig.configure_logger(stream=io.StringIO())
    assert logging.ERROR == handler.level
    assert logging.ERROR == proplist_logger.level
