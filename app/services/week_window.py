# app/services/week_window.py
from __future__ import annotations

import calendar
from datetime import date as date_type, timedelta
from typing import Iterable, List, Optional, Sequence

from app.schemas.meeting import MeetingRecord, WeekWindow

# The calendar shows a five-day working week.
DAYS_PER_VIEW = 5


def week_from_meetings(records: Sequence[MeetingRecord]) -> Optional[WeekWindow]:
    """
    Window spanning the earliest to the latest meeting date of a batch.

    Returns None for an empty batch.
    """
    if not records:
        return None
    dates = [r.date for r in records]
    return WeekWindow(start=min(dates), end=max(dates), week_number=1)


def week_for_month(year: int, month: int, week_number: int = 1) -> WeekWindow:
    """
    The `week_number`-th seven-day window of a month, counted from the 1st
    and cut at the last day of the month.

    Raises ValueError for an invalid month or a week past the month's end.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if week_number < 1:
        raise ValueError(f"week_number must be >= 1, got {week_number}")

    last_day = date_type(year, month, calendar.monthrange(year, month)[1])
    start = date_type(year, month, 1) + timedelta(days=7 * (week_number - 1))
    if start > last_day:
        raise ValueError(f"{year}-{month:02d} has no week {week_number}")

    end = min(start + timedelta(days=6), last_day)
    return WeekWindow(start=start, end=end, week_number=week_number)


def calendar_days(week: WeekWindow) -> List[date_type]:
    """
    The five consecutive days shown for `week`, starting at its start date.
    """
    return [week.start + timedelta(days=i) for i in range(DAYS_PER_VIEW)]


def meetings_on(records: Iterable[MeetingRecord], day: date_type) -> List[MeetingRecord]:
    return [r for r in records if r.date == day]
