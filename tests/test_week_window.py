# tests/test_week_window.py
from datetime import date, datetime

import pytest

from app.schemas.meeting import MeetingRecord, WeekWindow
from app.services.week_window import calendar_days, meetings_on, week_for_month, week_from_meetings


def _meeting(meeting_id, day):
    return MeetingRecord(
        id=meeting_id,
        date=day,
        start_time=datetime(day.year, day.month, day.day, 9),
        end_time=datetime(day.year, day.month, day.day, 10),
    )


def test_week_from_meetings_spans_min_to_max_date():
    meetings = [
        _meeting("a", date(2023, 3, 14)),
        _meeting("b", date(2023, 3, 12)),
        _meeting("c", date(2023, 3, 16)),
    ]

    week = week_from_meetings(meetings)

    assert week == WeekWindow(start=date(2023, 3, 12), end=date(2023, 3, 16), week_number=1)


def test_week_from_no_meetings_is_none():
    assert week_from_meetings([]) is None


def test_first_week_of_month_starts_on_the_first():
    week = week_for_month(2025, 3, 1)

    assert week.start == date(2025, 3, 1)
    assert week.end == date(2025, 3, 7)
    assert week.week_number == 1


def test_last_week_is_cut_at_month_end():
    week = week_for_month(2025, 2, 4)

    assert (week.start, week.end) == (date(2025, 2, 22), date(2025, 2, 28))


def test_leap_year_has_a_fifth_february_week():
    week = week_for_month(2024, 2, 5)

    assert week.start == week.end == date(2024, 2, 29)


@pytest.mark.parametrize(
    "year, month, week_number",
    [(2025, 2, 5), (2025, 13, 1), (2025, 0, 1), (2025, 3, 0)],
)
def test_invalid_month_week_raises(year, month, week_number):
    with pytest.raises(ValueError):
        week_for_month(year, month, week_number)


def test_calendar_days_are_five_consecutive_days():
    week = WeekWindow(start=date(2023, 3, 12), end=date(2023, 3, 13))

    assert calendar_days(week) == [date(2023, 3, d) for d in range(12, 17)]


def test_meetings_on_filters_by_date():
    meetings = [_meeting("a", date(2023, 3, 12)), _meeting("b", date(2023, 3, 13))]

    assert [m.id for m in meetings_on(meetings, date(2023, 3, 13))] == ["b"]


def test_week_window_rejects_inverted_range():
    with pytest.raises(ValueError):
        WeekWindow(start=date(2023, 3, 16), end=date(2023, 3, 12))
