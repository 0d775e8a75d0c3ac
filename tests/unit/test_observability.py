"""Unit tests for structured logging utilities in ``observability``."""

from __future__ import annotations

import logging

import pytest

from config_finder import ConfigDirs, bind_trace_id, get_logger
from config_finder.observability import TRACE_ID, log_info, make_event


def test_null_handler_present() -> None:
    """Package logger should always include a NullHandler to avoid surprises."""

    logger = get_logger()
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_trace_id_in_log(caplog: pytest.LogCaptureFixture) -> None:
    """Structured logs should include the bound trace identifier and contextual fields."""

    caplog.set_level(logging.INFO, logger="config_finder")
    bind_trace_id("trace-123")
    try:
        log_info("lookup", kind="cwd", path=None)
    finally:
        bind_trace_id(None)
    record = caplog.records[-1]
    assert getattr(record, "context") == {"trace_id": "trace-123", "kind": "cwd", "path": None}


def test_bind_trace_id_clears_context() -> None:
    bind_trace_id("trace-temp")
    bind_trace_id(None)
    assert TRACE_ID.get() is None


def test_make_event_merges_optional_payload() -> None:
    assert make_event("path", "a/.config", {"position": 0}) == {"kind": "path", "path": "a/.config", "position": 0}


def test_accumulator_logs_added_and_skipped(caplog: pytest.LogCaptureFixture) -> None:
    """Adding a directory twice should log one addition and one skip."""

    caplog.set_level(logging.DEBUG, logger="config_finder")
    ConfigDirs.empty().add_path("repo").add_path("repo/.config")
    messages = [record.getMessage() for record in caplog.records]
    assert messages.count("config_dir_added") == 1
    assert messages.count("config_dir_skipped") == 1
    added = next(record for record in caplog.records if record.getMessage() == "config_dir_added")
    assert getattr(added, "context")["kind"] == "path"
