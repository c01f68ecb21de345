# app/schemas/calendar.py
from datetime import date as date_type
from typing import List

from pydantic import BaseModel, Field

from app.schemas.layout import MeetingPlacement
from app.schemas.meeting import MeetingRecord, WeekWindow


class TimeOption(BaseModel):
    """
    A selectable start/end time for meetings added by hand.
    """

    value: str = Field(..., description="24-hour HH:MM value.", examples=["14:30"])
    label: str = Field(..., description="12-hour label with Arabic marker.", examples=["2:30 م"])
    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)


class PlacedMeeting(BaseModel):
    """
    A meeting together with its computed placement and display labels.
    """

    meeting: MeetingRecord
    placement: MeetingPlacement
    time_range: str = Field(
        ...,
        description="Start and end as 12-hour labels.",
        examples=["9:00 ص - 12:00 م"],
    )
    text_color: str = Field(
        ...,
        description="Foreground color readable on the meeting's primary color.",
        examples=["#FFFFFF"],
    )


class CalendarDay(BaseModel):
    date: date_type = Field(..., description="Calendar day.", examples=["2023-03-15"])
    label: str = Field(
        ...,
        description="Imported day label when available, otherwise the Arabic weekday name.",
        examples=["الأربعاء"],
    )
    is_weekend: bool = Field(..., description="True on Saturday and Sunday.")
    meetings: List[PlacedMeeting] = Field(
        default_factory=list,
        description="Meetings of the day in start order, with placements.",
    )


class CalendarWeek(BaseModel):
    """
    Five-day calendar view of the current week.
    """

    week: WeekWindow
    days: List[CalendarDay]


class TimeGrid(BaseModel):
    start_hour: int = Field(..., description="Hour at which slot index 1 starts.", examples=[10])
    slots: List[str] = Field(
        ...,
        description="HH:MM label per 15-minute row; position i is slot index i + 1.",
    )


class ImportSummary(BaseModel):
    """
    Response of a successful workbook import.
    """

    imported_count: int = Field(..., description="Number of meetings imported.", examples=[12])
    day_labels: List[str] = Field(..., description="Day labels from the header row.")
    week: WeekWindow | None = Field(
        None,
        description="Window spanning the imported dates; null when nothing was imported.",
    )
    meetings: List[MeetingRecord]
