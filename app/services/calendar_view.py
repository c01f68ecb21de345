# app/services/calendar_view.py
from __future__ import annotations

from typing import List, Sequence

from app.schemas.calendar import CalendarDay, CalendarWeek, PlacedMeeting
from app.schemas.meeting import MeetingRecord, WeekWindow
from app.services.formatting import (
    format_day_label,
    format_time_range,
    is_weekend,
    text_color_for,
)
from app.services.layout_assigner import assign_layout
from app.services.week_window import calendar_days, meetings_on


def build_calendar_week(
    meetings: Sequence[MeetingRecord],
    week: WeekWindow,
    day_labels: Sequence[str],
    grid_start_hour: int,
) -> CalendarWeek:
    """
    Lay out every day of `week` for rendering.

    Steps
    -----
    1) Take the five calendar days starting at `week.start`.
    2) For each day, pick its meetings and run the layout assigner.
    3) Label the day with the imported header label at the same position,
       falling back to the Arabic weekday name.
    4) Order each day's meetings by overlap group, then position.
    """
    days: List[CalendarDay] = []

    for day_index, day in enumerate(calendar_days(week)):
        day_meetings = meetings_on(meetings, day)
        placements = assign_layout(day_meetings, grid_start_hour=grid_start_hour)

        placed = [
            PlacedMeeting(
                meeting=meeting,
                placement=placement,
                time_range=format_time_range(meeting),
                text_color=text_color_for(meeting.color.primary),
            )
            for meeting, placement in zip(day_meetings, placements)
        ]
        placed.sort(key=lambda p: (p.placement.group_index, p.placement.position))

        imported_label = day_labels[day_index] if day_index < len(day_labels) else ""
        days.append(
            CalendarDay(
                date=day,
                label=format_day_label(day, imported_label),
                is_weekend=is_weekend(day),
                meetings=placed,
            )
        )

    return CalendarWeek(week=week, days=days)
