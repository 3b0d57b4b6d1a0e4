import calendar
from datetime import datetime, timezone
from itertools import combinations

import pytest

from task_frontend.utils.dates import (
    DateParts,
    extract_date_parts,
    format_date,
    format_date_time,
    parse_date_parts,
    parse_timestamp,
)


def test_parse_date_parts_returns_iso_datetime() -> None:
    assert parse_date_parts("15", "3", "2024") == "2024-03-15T00:00:00"
    assert parse_date_parts("5", "12", "2024") == "2024-12-05T00:00:00"
    assert parse_date_parts("1", "1", "2026") == "2026-01-01T00:00:00"


def test_parse_date_parts_pads_day_and_month() -> None:
    assert parse_date_parts("5", "3", "2024") == "2024-03-05T00:00:00"
    assert parse_date_parts("10", "03", "2024") == "2024-03-10T00:00:00"


@pytest.mark.parametrize("blank", ["", None])
def test_parse_date_parts_missing_any_component(blank) -> None:
    fields = ("day", "month", "year")
    for n in range(1, 4):
        for missing in combinations(fields, n):
            parts = {"day": "15", "month": "3", "year": "2024"}
            parts.update({name: blank for name in missing})
            assert parse_date_parts(**parts) is None, missing


def test_parse_date_parts_does_not_check_calendar() -> None:
    assert parse_date_parts("31", "2", "2024") == "2024-02-31T00:00:00"


def test_extract_date_parts_strips_leading_zeros() -> None:
    assert extract_date_parts("2024-03-05T00:00:00") == DateParts(day="5", month="3", year="2024")
    assert extract_date_parts("2024-12-25") == DateParts(day="25", month="12", year="2024")


def test_parse_then_extract_round_trips_real_dates() -> None:
    for year in (1999, 2023, 2024, 2100):
        for month in range(1, 13):
            for day in range(1, calendar.monthrange(year, month)[1] + 1):
                canonical = parse_date_parts(str(day), str(month), str(year))
                assert extract_date_parts(canonical) == (str(day), str(month), str(year))


def test_format_date_is_uk_long_form_without_time() -> None:
    assert format_date("2024-03-15T00:00:00") == "15 March 2024"
    assert format_date("2024-01-05T00:00:00") == "5 January 2024"

    result = format_date("2024-03-15T10:30:00")
    assert "15" in result and "March" in result and "2024" in result
    assert "10:30" not in result


def test_format_date_treats_naive_timestamps_as_utc() -> None:
    assert format_date("2024-03-15T23:59:59") == "15 March 2024"
    assert format_date("2024-03-15T00:00:00Z") == "15 March 2024"
    # Explicit offsets are converted to UTC.
    assert format_date("2024-03-15T23:30:00-02:00") == "16 March 2024"


def test_format_date_time_includes_24_hour_time() -> None:
    assert format_date_time("2024-03-15T10:30:00") == "15 March 2024, 10:30:00"
    assert format_date_time("2024-01-05T00:00:00") == "5 January 2024, 00:00:00"
    assert format_date_time("2024-07-01T18:05:09Z") == "1 July 2024, 18:05:09"


def test_timestamps_with_any_fraction_length() -> None:
    assert parse_timestamp("2024-03-02T10:30:45.1") == datetime(2024, 3, 2, 10, 30, 45, 100000, tzinfo=timezone.utc)
    assert parse_timestamp("2024-03-02T10:30:45.1234567Z") == datetime(
        2024, 3, 2, 10, 30, 45, 123456, tzinfo=timezone.utc
    )
    assert format_date_time("2024-03-02T10:30:45.123456789") == "2 March 2024, 10:30:45"
    assert format_date("2024-03-15T23:59:59.9+00:00") == "15 March 2024"


def test_formatting_accepts_parsed_datetimes() -> None:
    naive = datetime(2024, 3, 15, 10, 30)
    assert format_date(naive) == "15 March 2024"
    assert format_date_time(naive) == "15 March 2024, 10:30:00"
    assert extract_date_parts(datetime(2024, 3, 5, tzinfo=timezone.utc)) == DateParts(day="5", month="3", year="2024")
