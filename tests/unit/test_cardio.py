from __future__ import annotations

from datetime import date

import pytest

from liftlog.core.cardio import (
    add_log,
    calculate_pace,
    format_input_time,
    format_stopwatch,
    load_logs,
    normalize_time_input,
    parse_time_input,
    recent_logs,
)
from liftlog.core.constants import CARDIO_KEY
from liftlog.core.models import CardioLog
from liftlog.core.storage import MemoryStore


@pytest.mark.parametrize(("raw", "expected"), [("0530", "05:30"), ("05:30", "05:30"), ("12", "12"), ("1a2b3", "12:3")])
def test_normalize_time_input(raw: str, expected: str) -> None:
    assert normalize_time_input(raw) == expected


def test_parse_time_input() -> None:
    assert parse_time_input("05:30") == 330_000
    assert parse_time_input("0530") == 330_000
    assert parse_time_input("25:00") == 1_500_000


@pytest.mark.parametrize("raw", ["", "12", "ab:cd", "1:2:3"])
def test_parse_time_input_rejects_garbage(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_time_input(raw)


def test_time_formatting() -> None:
    assert format_input_time(330_000) == "05:30"
    assert format_stopwatch(330_450) == "05:30.45"
    assert format_stopwatch(0) == "00:00.00"


def test_calculate_pace() -> None:
    assert calculate_pace(1_500_000, 5) == "5:00"
    assert calculate_pace(330_000, 1) == "5:30"
    assert calculate_pace(330_000, 0) == "--"


def test_add_log_prepends_newest(store: MemoryStore) -> None:
    first = add_log(store, 600_000, 2.0, today=date(2025, 1, 5))
    second = add_log(store, 900_000, 3.0, today=date(2025, 1, 6))

    logs = load_logs(store)
    assert [log.id for log in logs] == [second.id, first.id]
    assert logs[0].date == "2025-01-06"
    assert '"timeMillis": 900000' in store.get_item(CARDIO_KEY)


@pytest.mark.parametrize(("millis", "distance"), [(0, 1.0), (600_000, 0.0), (600_000, -1.0)])
def test_add_log_validates_input(store: MemoryStore, millis: int, distance: float) -> None:
    with pytest.raises(ValueError):
        add_log(store, millis, distance)
    assert load_logs(store) == []


def test_recent_logs_window() -> None:
    logs = [
        CardioLog(id="a", time_millis=1, distance=1, date="2025-01-10"),
        CardioLog(id="b", time_millis=1, distance=1, date="2025-01-03"),
        CardioLog(id="c", time_millis=1, distance=1, date="2025-01-02"),
        CardioLog(id="d", time_millis=1, distance=1, date="2025-01-11"),
        CardioLog(id="e", time_millis=1, distance=1, date="garbage"),
    ]
    recent = recent_logs(logs, days=7, today=date(2025, 1, 10))
    assert [log.id for log in recent] == ["a", "b"]
