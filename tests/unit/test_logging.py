"""Unit tests for the femtologging helpers."""

from __future__ import annotations

import pytest

from deploykeys.logging import (
    configure_logging,
    format_log_message,
    log_debug,
    log_error,
    log_exception,
    log_info,
    log_warning,
    normalize_log_level,
)
from tests.helpers.recording_logger import RecordingLogger


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("debug", ("DEBUG", False)),
        (" warn ", ("WARN", False)),
        ("CRITICAL", ("CRITICAL", False)),
        (None, ("INFO", True)),
        ("", ("INFO", True)),
        ("verbose", ("INFO", True)),
    ],
)
def test_normalize_log_level(raw: str | None, expected: tuple[str, bool]) -> None:
    """Known names are upper-cased; anything else falls back to INFO."""
    assert normalize_log_level(raw) == expected


def test_format_log_message_interpolates_percent_args() -> None:
    """Templates use percent-style placeholders."""
    assert format_log_message("key %d on %s", 7, "o/r") == "key 7 on o/r"


@pytest.mark.parametrize(
    ("helper", "level"),
    [
        (log_debug, "DEBUG"),
        (log_info, "INFO"),
        (log_warning, "WARNING"),
        (log_error, "ERROR"),
    ],
)
def test_level_helpers_emit_formatted_messages(helper: object, level: str) -> None:
    """Each helper formats first and logs at its own level."""
    logger = RecordingLogger()

    helper(logger, "GET %s", "/repos/o/r/keys")  # type: ignore[operator]

    assert logger.records == [(level, "GET /repos/o/r/keys", None, False)]


def test_log_warning_forwards_exc_info() -> None:
    """exc_info reaches the logger untouched."""
    logger = RecordingLogger()
    exc = RuntimeError("boom")

    log_warning(logger, "request failed: %s", "timeout", exc_info=exc)

    assert logger.records == [("WARNING", "request failed: timeout", exc, False)]


def test_log_exception_logs_at_error_with_exception() -> None:
    """log_exception attaches the exception to an ERROR record."""
    logger = RecordingLogger()
    exc = ValueError("bad key")

    log_exception(logger, "create failed", exc)

    assert logger.records == [("ERROR", "create failed", exc, False)]


@pytest.mark.parametrize("force", [False, True])
def test_configure_logging_applies_normalized_level(
    monkeypatch: pytest.MonkeyPatch,
    *,
    force: bool,
) -> None:
    """configure_logging hands the normalised level to basicConfig."""
    captured: dict[str, object] = {}

    def _basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr("deploykeys.logging.basicConfig", _basic_config)

    assert configure_logging("bogus", force=force) == ("INFO", True)
    assert captured == {"level": "INFO", "force": force}
