import pytest

from logbook_ocr.application.days import find_day_indicator, match_day_header
from shared.models import DayKey


@pytest.mark.parametrize(
    "line, day, rest",
    [
        ("Monday: Worked on the schema", DayKey.MONDAY, "Worked on the schema"),
        ("Tue. Fixed the printer", DayKey.TUESDAY, "Fixed the printer"),
        ("Day 3 - Wrote docs", DayKey.WEDNESDAY, "Wrote docs"),
        ("• THURSDAY", DayKey.THURSDAY, ""),
        ("Date: Friday 14/06", DayKey.FRIDAY, "14/06"),
        ("1. Mon - Standup", DayKey.MONDAY, "Standup"),
    ],
)
def test_header_at_line_start(line, day, rest):
    match = match_day_header(line)

    assert match is not None
    assert match.day is day
    assert match.rest == rest


@pytest.mark.parametrize(
    "line",
    [
        "Worked on Monday",
        "Monday's meeting ran long",
        "Monitoring the servers all morning",
        "Wedding leave",
    ],
)
def test_not_a_header(line):
    assert match_day_header(line) is None


def test_indicator_anywhere_in_line():
    match = find_day_indicator("Meeting notes for Wednesday with the team")

    assert match.day is DayKey.WEDNESDAY
    assert match.rest.startswith("Meeting notes for")
    assert match.rest.endswith("with the team")


def test_earliest_indicator_wins():
    assert find_day_indicator("Monday and Tuesday were busy").day is DayKey.MONDAY


def test_indicator_absorbs_leading_date():
    match = find_day_indicator("12/06 - Thursday cabling")

    assert match.day is DayKey.THURSDAY
    assert match.rest == "cabling"


def test_no_indicator():
    assert find_day_indicator("Nothing to see here") is None
