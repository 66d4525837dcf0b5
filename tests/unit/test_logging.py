"""Unit tests for logging setup."""

import logging

import pytest

from moviemagnet.core.logging import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    setup_logging("debug")
    assert logging.getLogger().level == logging.DEBUG


def test_env_level_used_by_default(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    setup_logging()
    assert logging.getLogger().level == logging.WARNING


def test_second_call_changes_level():
    setup_logging("INFO")
    setup_logging("ERROR")
    assert logging.getLogger().level == logging.ERROR


def test_noisy_libraries_quieted():
    setup_logging("DEBUG")
    assert logging.getLogger("pymongo").level == logging.WARNING
    assert logging.getLogger("asyncio").level == logging.WARNING
