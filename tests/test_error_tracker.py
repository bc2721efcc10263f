# tests/test_error_tracker.py
"""Tests for ErrorTracker and logger wiring."""

from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger as root_logger

from beltframe.config import get_settings
from beltframe.errors import DegenerateGeometryError, FrameFitError
from beltframe.utils import logger as logger_module
from beltframe.utils.error_tracker import ErrorTracker
from beltframe.utils.logger import configure, get_logger, log_file


@pytest.fixture
def captured() -> list[str]:
    """Host-side loguru sink collecting rendered messages."""
    messages: list[str] = []
    handler_id = root_logger.add(messages.append, format="{message}", level="DEBUG")
    yield messages
    root_logger.remove(handler_id)


def test_record_and_summary() -> None:
    tracker = ErrorTracker(context="test")
    assert tracker.summary() == {}

    tracker.record("fit", "first")
    tracker.record("fit", "second")

    assert tracker.failed
    assert tracker.summary() == {"fit": ["first", "second"]}


def test_record_logs_message_verbatim(captured: list[str]) -> None:
    tracker = ErrorTracker(context="test")

    tracker.record("profile 0.cx", "shape {N, 2} not supported")
    tracker.summary()

    assert any("profile 0.cx: shape {N, 2} not supported" in m for m in captured)
    assert any("Encountered 1 issues for profile 0.cx" in m for m in captured)


def test_capture_only_listed_errors() -> None:
    tracker = ErrorTracker(context="test")

    with tracker.capture("frame", FrameFitError):
        raise DegenerateGeometryError("zero-length radial vector")
    assert tracker.errors["frame"] == ["DegenerateGeometryError: zero-length radial vector"]

    with pytest.raises(KeyError):
        with tracker.capture("frame", FrameFitError):
            raise KeyError("unrelated")


def test_logger_has_tag_helper() -> None:
    log = get_logger("test.logger")

    log.tag("FIT", "points={}", 9)
    log.debug("debug line")


def test_configure_keeps_host_sinks(captured: list[str]) -> None:
    configure()
    configure()

    get_logger("test.logger").info("after reconfigure")
    root_logger.info("host message")

    assert any("after reconfigure" in m for m in captured)
    assert any("host message" in m for m in captured)


def test_reconfigure_closes_file_sink(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("BELTFRAME_LOGS_ROOT", str(tmp_path))
    get_settings.cache_clear()
    try:
        configure(to_file=True)
        path = log_file()
        handle = logger_module._LOG_HANDLE
        assert path is not None and path.parent == tmp_path
        get_logger("test.logger").info("written to file")

        configure(to_file=False)

        assert handle is not None and handle.closed
        assert log_file() is None
        assert "written to file" in path.read_text(encoding="utf-8")
    finally:
        get_settings.cache_clear()
        configure()
