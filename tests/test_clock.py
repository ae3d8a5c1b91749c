import pytest

from bracketschedule.exceptions import TimeFormatException
from bracketschedule.utils.clock import add_minutes, format_clock, parse_clock


@pytest.mark.parametrize(
    "value, expected",
    [
        ("8:00 AM", (8, 0)),
        ("4:05PM", (16, 5)),
        ("12:00 AM", (0, 0)),
        ("12:30 pm", (12, 30)),
        (" 11:59 pm ", (23, 59)),
    ],
)
def test_parse_clock(value, expected):
    assert parse_clock(value) == expected


@pytest.mark.parametrize(
    "value", ["13:00 PM", "0:30 AM", "8:60 AM", "8 AM", "08:00", "", "noon"]
)
def test_parse_clock_rejects_malformed(value):
    with pytest.raises(TimeFormatException, match="Bad time format"):
        parse_clock(value)


def test_format_clock_midnight_and_noon():
    assert format_clock(0, 5) == "12:05 AM"
    assert format_clock(12, 0) == "12:00 PM"
    assert format_clock(19, 30) == "7:30 PM"


@pytest.mark.parametrize(
    "start, minutes, expected",
    [
        ("8:00 AM", 60, "9:00 AM"),
        ("11:00 AM", 90, "12:30 PM"),
        ("5:00 PM", 0, "5:00 PM"),
        ("11:30 PM", 60, "12:30 AM"),
        ("12:15 AM", -30, "11:45 PM"),
        ("8:00 AM", 24 * 60, "8:00 AM"),
    ],
)
def test_add_minutes_wraps_around_midnight(start, minutes, expected):
    assert add_minutes(start, minutes) == expected


def test_add_minutes_rejects_bad_start():
    with pytest.raises(TimeFormatException):
        add_minutes("25:00 PM", 60)
