"""Tests for structlog setup."""
import logging

import pytest
import structlog

from passablewords.core.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_structlog():
    yield
    structlog.reset_defaults()


def test_setup_logging_json_output(capsys):
    setup_logging(logging.INFO)

    get_logger("test").info("corpus ready", passwords=3)

    out = capsys.readouterr().out
    assert '"event": "corpus ready"' in out
    assert '"passwords": 3' in out
    assert '"level": "info"' in out


def test_setup_logging_filters_below_level(capsys):
    setup_logging(logging.WARNING)

    get_logger("test").info("hidden")

    assert "hidden" not in capsys.readouterr().out


def test_debug_level_renders_for_console(monkeypatch, capsys):
    """The renderer follows the level passed in, not the debug setting."""
    monkeypatch.setattr("passablewords.core.logging.settings.debug", False)
    setup_logging(logging.DEBUG)

    get_logger("test").debug("corpus ready", passwords=3)

    out = capsys.readouterr().out
    assert "corpus ready" in out
    assert '"event"' not in out


def test_debug_setting_selects_console_by_default(monkeypatch, capsys):
    monkeypatch.setattr("passablewords.core.logging.settings.debug", True)
    setup_logging()

    get_logger("test").debug("corpus ready")

    out = capsys.readouterr().out
    assert "corpus ready" in out
    assert '"event"' not in out


def test_json_output_includes_traceback(capsys):
    setup_logging(logging.INFO)

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        get_logger("test").exception("estimator failed")

    out = capsys.readouterr().out
    assert '"event": "estimator failed"' in out
    assert "RuntimeError: boom" in out
