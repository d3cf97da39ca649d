"""Unit test configuration - isolate tests from developer environment"""

import logging

import pytest

CONFIG_ENV_VARS = ("LOG_LEVEL", "UKSTEMMER_LOG_FILE", "UKSTEMMER_TRACE")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove stemmer config variables so defaults apply"""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    """
    Restore root logger handlers after tests that call setup_logging.

    setup_logging replaces root handlers; without this, pytest's own
    capture handlers would be lost for the rest of the session.
    """
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
