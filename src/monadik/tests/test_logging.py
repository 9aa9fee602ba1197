"""Tests for structured logging and capture logging in Try."""

from __future__ import annotations

import io
import json

import pytest

from monadik import Failure, Try
from monadik.config import clear_settings_cache
from monadik.observability import (
    BoundLogger,
    ConsoleRenderer,
    JsonRenderer,
    NoOpRenderer,
    configure_logging,
    get_logger,
    log_context,
)


def _fail() -> int:
    raise ValueError("bad value")


# ═════════════════════════════════════════════════════════════════════════════
# Logger
# ═════════════════════════════════════════════════════════════════════════════


def test_console_output() -> None:
    out = io.StringIO()
    configure_logging(format="console", level="INFO", output=out, colors=False)

    get_logger("orders", region="eu").info("parsed", count=3)

    line = out.getvalue().strip()
    assert "[info] parsed" in line
    assert 'logger="orders"' in line
    assert 'region="eu"' in line
    assert "count=3" in line


def test_level_filtering() -> None:
    out = io.StringIO()
    configure_logging(format="console", level="WARNING", output=out, colors=False)
    log = get_logger()

    log.info("hidden")
    log.warning("shown")

    assert "hidden" not in out.getvalue()
    assert "shown" in out.getvalue()


def test_logger_follows_later_configuration() -> None:
    log = get_logger("early")
    out = io.StringIO()
    configure_logging(format="console", level="DEBUG", output=out, colors=False)

    log.debug("visible")

    assert "visible" in out.getvalue()


def test_json_output() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="DEBUG", output=out)

    get_logger("svc").bind(attempt=2).error("failed", reason="timeout")

    record = json.loads(out.getvalue())
    assert record["event"] == "failed"
    assert record["level"] == "error"
    assert record["logger"] == "svc"
    assert record["attempt"] == 2
    assert record["reason"] == "timeout"


def test_json_output_serializes_unknown_values() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="DEBUG", output=out)

    get_logger().info("obj", value=object())

    assert "<object object" in json.loads(out.getvalue())["value"]


def test_bind_and_unbind_are_immutable() -> None:
    base = BoundLogger(context={"a": 1})
    bound = base.bind(b=2)

    assert base.context == {"a": 1}
    assert bound.context == {"a": 1, "b": 2}
    assert bound.unbind("a").context == {"b": 2}


def test_log_context_scope() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="INFO", output=out)
    log = get_logger()

    with log_context(request_id="abc"):
        log.info("inside")
    log.info("outside")

    inside, outside = (json.loads(line) for line in out.getvalue().splitlines())
    assert inside["request_id"] == "abc"
    assert "request_id" not in outside


def test_exception_includes_traceback() -> None:
    out = io.StringIO()
    configure_logging(format="console", level="ERROR", output=out, colors=False)

    try:
        _fail()
    except ValueError:
        get_logger().exception("crashed")

    assert "ValueError: bad value" in out.getvalue()


def test_configure_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADIK_LOG_FORMAT", "none")
    clear_settings_cache()

    assert isinstance(configure_logging(), NoOpRenderer)


def test_configure_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging(format="xml")


def test_renderer_types() -> None:
    assert isinstance(configure_logging(format="console", output=io.StringIO()), ConsoleRenderer)
    assert isinstance(configure_logging(format="json", output=io.StringIO()), JsonRenderer)


# ═════════════════════════════════════════════════════════════════════════════
# Try capture logging
# ═════════════════════════════════════════════════════════════════════════════


def test_capture_logged_at_debug() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="DEBUG", output=out)

    Try.of(_fail)

    record = json.loads(out.getvalue())
    assert record["event"] == "try.captured"
    assert record["error_type"] == "ValueError"
    assert record["error"] == "bad value"
    assert record["function"] == "_fail"


def test_capture_silent_above_debug() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="INFO", output=out)

    Try.of(_fail)

    assert out.getvalue() == ""


def test_capture_logging_can_be_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADIK_TRY_LOG_CAPTURES", "false")
    clear_settings_cache()
    out = io.StringIO()
    configure_logging(format="json", level="DEBUG", output=out)

    Try.of(_fail)

    assert out.getvalue() == ""


def test_rethrow_logged() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="DEBUG", output=out)

    with pytest.raises(KeyError):
        Failure(KeyError("k")).throw_if_failure()

    assert json.loads(out.getvalue())["event"] == "try.rethrow"
