# app/services/formatting.py
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import List

from app.schemas.meeting import MeetingRecord

AM_MARKER = "ص"
PM_MARKER = "م"
SLOT_MINUTES = 15

# Relative luminance above which a background needs dark text.
LIGHT_LUMINANCE_THRESHOLD = 0.75

_WEEKDAY_NAMES_AR = (
    "الاثنين",
    "الثلاثاء",
    "الأربعاء",
    "الخميس",
    "الجمعة",
    "السبت",
    "الأحد",
)


def format_minutes_ar(minutes: int) -> str:
    """
    12-hour clock label with Arabic AM/PM marker, e.g. 870 -> "2:30 م".

    1440 (end-of-day midnight) reads as "12:00 ص".
    """
    hour, minute = divmod(minutes % (24 * 60), 60)
    marker = PM_MARKER if hour >= 12 else AM_MARKER
    hour12 = hour % 12 or 12
    return f"{hour12}:{minute:02d} {marker}"


def format_time_ar(value: datetime) -> str:
    return format_minutes_ar(value.hour * 60 + value.minute)


def format_time_range(meeting: MeetingRecord) -> str:
    return f"{format_time_ar(meeting.start_time)} - {format_time_ar(meeting.end_time)}"


def format_date_dmy(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def weekday_name_ar(value: date) -> str:
    return _WEEKDAY_NAMES_AR[value.weekday()]


def format_day_label(value: date, imported_label: str = "") -> str:
    """
    Column heading for a calendar day: the label imported from the workbook
    header when there is one, otherwise the Arabic weekday name.
    """
    label = imported_label.strip()
    return label or weekday_name_ar(value)


def build_time_slots(start_hour: int, count: int) -> List[str]:
    """
    HH:MM labels for `count` consecutive 15-minute grid rows from `start_hour`.

    The label at list position i belongs to slot index i + 1.
    """
    start = datetime.combine(date.min, time(hour=start_hour))
    return [
        (start + timedelta(minutes=SLOT_MINUTES * i)).strftime("%H:%M")
        for i in range(count)
    ]


def is_light_color(hex_color: str) -> bool:
    """
    True for very light backgrounds (luminance > 0.75) that need black text.

    Anything that is not a 6-digit hex color is treated as dark.
    """
    value = hex_color.strip().lstrip("#")
    if len(value) != 6:
        return False
    try:
        r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return False
    luminance = (0.299 * r + 0.587 * g + 0.114 * b) / 255
    return luminance > LIGHT_LUMINANCE_THRESHOLD


def text_color_for(hex_color: str) -> str:
    return "#000000" if is_light_color(hex_color) else "#FFFFFF"


def days_between(first: date, second: date) -> int:
    return abs((second - first).days)


def is_weekend(value: date) -> bool:
    """Saturday or Sunday."""
    return value.weekday() >= 5
