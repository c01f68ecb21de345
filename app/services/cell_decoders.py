# app/services/cell_decoders.py
"""
Decoders for individual workbook cells.

Spreadsheet tools emit dates and times either as numbers (day serials and
fractions of a day) or as locale strings, depending on how the cell was
formatted. Everything here accepts both.
"""
from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime, time, timedelta
from typing import Optional

from app.schemas.meeting import NOT_AVAILABLE
from app.services.workbook import CellValue

logger = logging.getLogger(__name__)

SPREADSHEET_EPOCH = date(1899, 12, 30)
MINUTES_PER_DAY = 24 * 60

PENDING_AFFIRMATIVE = "نعم"

_AM_MARKERS = ("am", "ص")
_PM_MARKERS = ("pm", "م")
_TIME_PATTERN = re.compile(r"(\d{1,2})\s*:\s*(\d{1,2})")


def is_number(value: CellValue) -> bool:
    """
    True for finite int/float cells. Booleans are not numbers here.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_blank(value: CellValue) -> bool:
    return value is None or value == ""


def cell_text(value: CellValue) -> str:
    """
    Render a cell as text. Whole floats drop their ".0"; None becomes "".
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def text_or_not_available(value: CellValue) -> str:
    """
    Cell text, or the NOT_AVAILABLE sentinel for empty, undefined or
    boolean cells.
    """
    if value is None or isinstance(value, bool):
        return NOT_AVAILABLE
    text = cell_text(value).strip()
    return text or NOT_AVAILABLE


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def serial_to_date(serial: float) -> date:
    """
    Convert a spreadsheet day serial to a date. Any fractional (time) part
    is dropped.
    """
    return SPREADSHEET_EPOCH + timedelta(days=math.floor(serial))


def date_to_serial(value: date) -> int:
    return (value - SPREADSHEET_EPOCH).days


def parse_date_string(text: str) -> date:
    """
    Parse a DD/MM/YYYY string.

    Raises ValueError when the text does not have three numeric parts or
    does not name a real calendar day.
    """
    parts = [p.strip() for p in text.strip().split("/")]
    if len(parts) != 3:
        raise ValueError(f"expected DD/MM/YYYY, got {text!r}")
    try:
        day, month, year = (int(p) for p in parts)
    except ValueError:
        raise ValueError(f"expected DD/MM/YYYY, got {text!r}") from None
    return date(year, month, day)


def decode_date_cell(value: CellValue) -> date:
    """
    Decode a date cell holding either a day serial or a DD/MM/YYYY string.

    Raises ValueError for any other shape.
    """
    if is_number(value):
        return serial_to_date(value)  # type: ignore[arg-type]
    if isinstance(value, str):
        return parse_date_string(value)
    raise ValueError(f"unsupported date cell {value!r}")


# ---------------------------------------------------------------------------
# Times
# ---------------------------------------------------------------------------

def fraction_to_minutes(fraction: float) -> Optional[int]:
    """
    Minutes since midnight for a fraction-of-day value, rounded half up.

    The result lies in 0..1440; 1440 is the midnight that ends the day.
    Values > 1 are full date-time serials and only their time part is used.
    Negative values are not a time and return None.
    """
    if fraction < 0:
        return None
    if fraction > 1:
        fraction = fraction - math.floor(fraction)
    return math.floor(fraction * MINUTES_PER_DAY + 0.5)


def parse_time_string(text: str) -> Optional[int]:
    """
    Minutes since midnight for strings like "10:30 am", "2:45 م" or "14:45".

    `pm`/`م` add 12 hours below 12; `12 am`/`12 ص` is midnight.
    Returns None when the text is not a usable H:MM time.
    """
    lowered = text.lower()
    is_pm = any(marker in lowered for marker in _PM_MARKERS)
    is_am = any(marker in lowered for marker in _AM_MARKERS)

    for marker in _AM_MARKERS + _PM_MARKERS:
        lowered = lowered.replace(marker, "")

    match = _TIME_PATTERN.match(lowered.strip())
    if match is None:
        return None

    hour, minute = int(match.group(1)), int(match.group(2))
    if is_pm and hour < 12:
        hour += 12
    if is_am and hour == 12:
        hour = 0

    if hour > 23 or minute > 59:
        return None
    return hour * 60 + minute


def decode_time_cell(value: CellValue) -> Optional[int]:
    """
    Minutes since midnight for a time cell, or None when the cell is blank
    or unparseable. Never raises.
    """
    if is_number(value):
        minutes = fraction_to_minutes(value)  # type: ignore[arg-type]
    elif isinstance(value, str) and value.strip():
        minutes = parse_time_string(value)
    else:
        return None

    if minutes is None:
        logger.debug("Ignoring unparseable time cell %r", value)
    return minutes


def at_minutes(day: date, minutes: Optional[int]) -> datetime:
    """
    Timestamp on `day` at `minutes` past midnight; midnight when None.

    1440 minutes lands on midnight of the following day.
    """
    start = datetime.combine(day, time.min)
    if minutes is None:
        return start
    return start + timedelta(minutes=minutes)


# ---------------------------------------------------------------------------
# Flags and slot indices
# ---------------------------------------------------------------------------

def decode_pending_flag(value: CellValue) -> bool:
    """
    True only for the exact affirmative text or a literal boolean True.
    """
    if value is True:
        return True
    return value == PENDING_AFFIRMATIVE


def decode_slot_index(value: CellValue) -> Optional[int]:
    """
    Grid slot index from a numeric cell or numeric text; None otherwise.
    """
    if is_blank(value) or isinstance(value, bool):
        return None
    if is_number(value):
        return int(value)  # type: ignore[arg-type]
    if isinstance(value, str):
        try:
            return int(float(value.strip()))
        except (ValueError, OverflowError):
            logger.debug("Ignoring non-numeric slot index %r", value)
            return None
    return None
