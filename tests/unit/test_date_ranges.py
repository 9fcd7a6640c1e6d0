from datetime import date

import pytest
import typer

from liftlog.utils.date_ranges import parse_date, resolve_day, validate_date


def test_validate_date_accepts_iso() -> None:
    assert validate_date("2026-01-15") == "2026-01-15"
    assert validate_date(None) is None


@pytest.mark.parametrize("value", ["2026/01/15", "15-01-2026", "2026-02-30", "yesterday"])
def test_validate_date_rejects_bad_values(value: str) -> None:
    with pytest.raises(typer.BadParameter):
        validate_date(value)


def test_parse_date() -> None:
    assert parse_date("2026-02-14") == date(2026, 2, 14)


def test_resolve_day_prefers_explicit_value() -> None:
    assert resolve_day("2025-01-08", today=date(2026, 2, 14)) == date(2025, 1, 8)
    assert resolve_day(None, today=date(2026, 2, 14)) == date(2026, 2, 14)
