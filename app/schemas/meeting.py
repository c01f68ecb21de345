# app/schemas/meeting.py
from datetime import date as date_type, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.schemas.category import CategoryColor, DEFAULT_CATEGORY_COLOR, MeetingCategory

# Shown instead of missing organizer/location/description values.
NOT_AVAILABLE = "غير متوفر"
UNTITLED_MEETING = "اجتماع بدون عنوان"


class MeetingRecord(BaseModel):
    """
    A single meeting on the calendar, either imported from a workbook row
    or created by hand.

    Start/end are naive local timestamps on `date`. When both slot indices
    are present they are used for overlap detection and vertical placement
    instead of wall-clock time.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        description="Identifier, unique within the current in-memory session.",
        examples=["import-5f2c1a9e-0"],
    )
    title: str = Field(
        UNTITLED_MEETING,
        description="Display name of the meeting.",
        examples=["اجتماع اللجنة التنفيذية"],
    )
    date: date_type = Field(..., description="Calendar date of the meeting.", examples=["2023-03-15"])
    start_time: datetime = Field(
        ...,
        description="Start timestamp on `date`.",
        examples=["2023-03-15T09:00:00"],
    )
    end_time: datetime = Field(
        ...,
        description="End timestamp; always after `start_time`.",
        examples=["2023-03-15T12:00:00"],
    )
    description: str = Field(NOT_AVAILABLE, description="Free-text description.")
    organizer: str = Field(NOT_AVAILABLE, description="Organizer name.")
    location: str = Field(NOT_AVAILABLE, description="Meeting location.")
    category: Optional[MeetingCategory] = Field(
        None,
        description="Meeting type, or null when the source text is not a known category.",
    )
    color: CategoryColor = Field(
        DEFAULT_CATEGORY_COLOR,
        description="Display colors derived from the category (or the manual palette).",
    )
    is_pending: bool = Field(
        False,
        description="Engagement pending: tentative meeting, affects display only.",
    )
    start_slot_index: Optional[int] = Field(
        None,
        ge=1,
        description="1-based 15-minute grid slot where the meeting starts.",
        examples=[1],
    )
    end_slot_index: Optional[int] = Field(
        None,
        ge=1,
        description="1-based 15-minute grid slot where the meeting ends (inclusive).",
        examples=[4],
    )

    @model_validator(mode="after")
    def _check_time_order(self) -> "MeetingRecord":
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self

    @property
    def has_slots(self) -> bool:
        return self.start_slot_index is not None and self.end_slot_index is not None


class WeekWindow(BaseModel):
    """
    Date range shown by the calendar, with its ordinal number.
    """

    start: date_type = Field(..., description="First day of the window (inclusive).", examples=["2023-03-12"])
    end: date_type = Field(..., description="Last day of the window (inclusive).", examples=["2023-03-16"])
    week_number: int = Field(1, ge=1, description="Ordinal of the week.", examples=[1])

    @model_validator(mode="after")
    def _check_range(self) -> "WeekWindow":
        if self.end < self.start:
            raise ValueError("end must be greater than or equal to start")
        return self


class ImportResult(BaseModel):
    """
    Output of a successful workbook import.
    """

    records: list[MeetingRecord] = Field(
        ...,
        description="Imported meetings in source row order.",
    )
    day_labels: list[str] = Field(
        ...,
        min_length=5,
        max_length=5,
        description="Day-name labels from the header row, left-to-right. Empty when missing.",
    )


class MeetingCreate(BaseModel):
    """
    Payload for adding a meeting by hand.

    Times must be one of the 15-minute options between 08:00 and 20:45.
    """

    title: str = Field(..., description="Meeting title (required).", examples=["مراجعة الميزانية"])
    date: date_type = Field(..., description="Meeting date.", examples=["2023-03-15"])
    start_time: str = Field(..., description="Start time as HH:MM.", examples=["09:00"])
    end_time: str = Field(..., description="End time as HH:MM.", examples=["10:30"])
    description: str = Field("", description="Optional description.")
    organizer: str = Field("", description="Optional organizer.")
    location: str = Field("", description="Optional location.")
    is_pending: bool = Field(False, description="Mark the meeting as engagement pending.")
