from datetime import datetime, timezone

import pytest

from publish_core.distribution.schedule import format_readable, normalize_schedule_string, parse_schedule
from publish_core.errors import InvalidSchedule


@pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
def test_absent_schedule(raw):
    assert parse_schedule(raw) is None


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("2024-06-01T10:00", "2024-06-01T10:00:00Z"),
        ("2024-06-01T10:00:30", "2024-06-01T10:00:30Z"),
        ("2024-06-01T10:00:00Z", "2024-06-01T10:00:00Z"),
        ("2024-06-01T10:00:00+02:00", "2024-06-01T10:00:00+02:00"),
        ("not-a-date", "not-a-date:00Z"),
    ],
)
def test_normalize_schedule_string(raw, expected):
    assert normalize_schedule_string(raw) == expected


def test_minutes_only_matches_explicit_utc():
    assert parse_schedule("2024-06-01T10:00") == parse_schedule("2024-06-01T10:00:00Z")
    assert parse_schedule("  2024-06-01T10:00  ") == datetime(2024, 6, 1, 10, 0, tzinfo=timezone.utc)


def test_offset_is_converted_to_utc():
    instant = parse_schedule("2024-06-01T12:30:00+02:00")
    assert instant == datetime(2024, 6, 1, 10, 30, tzinfo=timezone.utc)
    assert instant.utcoffset().total_seconds() == 0


@pytest.mark.parametrize("raw", ["not-a-date", "2024-13-01T10:00", "2024-02-30T10:00:00Z", "tomorrow at 10:00"])
def test_invalid_schedule_raises(raw):
    with pytest.raises(InvalidSchedule):
        parse_schedule(raw)


def test_invalid_schedule_is_a_value_error():
    with pytest.raises(ValueError):
        parse_schedule("not-a-date")


def test_format_readable():
    assert format_readable(None) is None
    assert format_readable(parse_schedule("2024-06-01T10:00")) == "2024-06-01T10:00:00.000Z"
