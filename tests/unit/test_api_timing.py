"""Tests for ApiTimer log lines."""

import json
import logging

from app.shared.telemetry.timing import ApiTimer

TIMING_LOGGER = "app.shared.telemetry.timing"


def test_enabled_timer_logs_json_marks(caplog) -> None:
    caplog.set_level(logging.INFO, logger=TIMING_LOGGER)
    timer = ApiTimer("POST /tags/resolve", enabled=True)

    timer.mark("resolve_start", count=2)
    timer.end(status=200)

    lines = [r.getMessage() for r in caplog.records if r.name == TIMING_LOGGER]
    assert len(lines) == 2
    assert all(line.startswith("[api-timing] ") for line in lines)
    first = json.loads(lines[0].removeprefix("[api-timing] "))
    last = json.loads(lines[1].removeprefix("[api-timing] "))
    assert first["route"] == "POST /tags/resolve"
    assert first["event"] == "resolve_start"
    assert first["count"] == 2
    assert last["event"] == "end"
    assert last["elapsed_ms"] >= first["elapsed_ms"]


def test_disabled_timer_is_silent(caplog) -> None:
    caplog.set_level(logging.INFO, logger=TIMING_LOGGER)
    ApiTimer("GET /auth/session", enabled=False).end(status=200)
    assert not [r for r in caplog.records if r.name == TIMING_LOGGER]
