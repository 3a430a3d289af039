from __future__ import annotations

import json
import logging

import pytest

from gradient_slice import WindowGradient, log_event
from gradient_slice.logging_utils import resolve_level


def test_log_event_json_payload(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("gradient_slice.test")
    with caplog.at_level(logging.INFO, logger="gradient_slice.test"):
        log_event(logger, "windows", json_logs=True, length=3)

    assert json.loads(caplog.records[-1].getMessage()) == {"event": "windows", "length": 3}


def test_log_event_respects_env(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv("GRADIENT_SLICE_JSON_LOGS", "true")
    logger = logging.getLogger("gradient_slice.test")
    with caplog.at_level(logging.INFO, logger="gradient_slice.test"):
        log_event(logger, "count", windows=15)

    assert json.loads(caplog.records[-1].getMessage())["windows"] == 15


def test_gradient_logs_pass_completion(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="gradient_slice.gradient"):
        list(WindowGradient("abc").with_max_width(2))

    messages = [r.getMessage() for r in caplog.records if r.name == "gradient_slice.gradient"]
    assert messages == [
        "completed pass width=1 length=3",
        "completed pass width=2 length=3",
        "gradient capped at max_width=2",
    ]


def test_gradient_logs_natural_exhaustion_once(caplog: pytest.LogCaptureFixture) -> None:
    g = WindowGradient("ab")
    with caplog.at_level(logging.DEBUG, logger="gradient_slice.gradient"):
        list(g)
        assert next(g, None) is None

    messages = [r.getMessage() for r in caplog.records if r.name == "gradient_slice.gradient"]
    assert messages == [
        "completed pass width=1 length=2",
        "completed pass width=2 length=2",
        "gradient exhausted at width=2 length=2",
    ]


@pytest.mark.parametrize(
    "level,env,expected",
    [("debug", None, logging.DEBUG), (None, "error", logging.ERROR), (None, None, logging.WARNING), ("bogus", None, logging.WARNING)],
)
def test_resolve_level(monkeypatch: pytest.MonkeyPatch, level: str | None, env: str | None, expected: int) -> None:
    monkeypatch.delenv("GRADIENT_SLICE_LOG_LEVEL", raising=False)
    if env is not None:
        monkeypatch.setenv("GRADIENT_SLICE_LOG_LEVEL", env)
    assert resolve_level(level) == expected


def test_log_event_uses_requested_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("gradient_slice.test")
    with caplog.at_level(logging.INFO, logger="gradient_slice.test"):
        log_event(logger, "skipped", level=logging.DEBUG, json_logs=True)
        log_event(logger, "kept", level=logging.WARNING, json_logs=True)

    assert [json.loads(r.getMessage())["event"] for r in caplog.records] == ["kept"]
    assert caplog.records[-1].levelno == logging.WARNING
