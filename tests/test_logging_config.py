"""Tests for process-wide logging setup."""

import logging

from pomodoro_mcp.logging_config import setup_logging


def test_setup_logging_installs_single_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("debug")
        setup_logging("warning")
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_completion_is_logged(timer, scheduler, caplog) -> None:
    caplog.set_level(logging.INFO, logger="pomodoro_mcp.core.timer")
    timer.start(0, 1)
    scheduler.advance(1_000)
    assert "Pomodoro complete." in caplog.messages
