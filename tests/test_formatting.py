# tests/test_formatting.py
from datetime import date, datetime

import pytest

from app.schemas.meeting import MeetingRecord
from app.services.formatting import (
    build_time_slots,
    days_between,
    format_date_dmy,
    format_day_label,
    format_minutes_ar,
    format_time_range,
    is_light_color,
    is_weekend,
    text_color_for,
    weekday_name_ar,
)


@pytest.mark.parametrize(
    "minutes, label",
    [(0, "12:00 ص"), (545, "9:05 ص"), (720, "12:00 م"), (870, "2:30 م"), (1439, "11:59 م"), (1440, "12:00 ص")],
)
def test_format_minutes_ar(minutes, label):
    assert format_minutes_ar(minutes) == label


def test_format_time_range():
    meeting = MeetingRecord(
        id="a",
        date=date(2023, 3, 15),
        start_time=datetime(2023, 3, 15, 9, 0),
        end_time=datetime(2023, 3, 15, 12, 0),
    )

    assert format_time_range(meeting) == "9:00 ص - 12:00 م"


def test_format_date_dmy_pads_day_and_month():
    assert format_date_dmy(date(2023, 3, 5)) == "05/03/2023"


def test_time_slots_for_default_grid():
    slots = build_time_slots(10, 41)

    assert len(slots) == 41
    assert slots[0] == "10:00"
    assert slots[1] == "10:15"
    assert slots[-1] == "20:00"


def test_light_colors_get_dark_text():
    assert is_light_color("#C8EEFD") is True
    assert text_color_for("#C8EEFD") == "#000000"


def test_dark_colors_get_light_text():
    assert is_light_color("#032059") is False
    assert text_color_for("#032059") == "#FFFFFF"


@pytest.mark.parametrize("value", ["", "red", "#FFF", "#GGGGGG"])
def test_non_hex_colors_are_treated_as_dark(value):
    assert is_light_color(value) is False


def test_weekday_and_weekend():
    assert weekday_name_ar(date(2023, 3, 15)) == "الأربعاء"
    assert weekday_name_ar(date(2023, 3, 12)) == "الأحد"
    assert is_weekend(date(2023, 3, 18)) is True
    assert is_weekend(date(2023, 3, 15)) is False


def test_days_between_is_symmetric():
    assert days_between(date(2023, 3, 16), date(2023, 3, 12)) == 4
    assert days_between(date(2023, 3, 12), date(2023, 3, 16)) == 4


def test_day_label_prefers_imported_text():
    assert format_day_label(date(2023, 3, 15), " يوم الأربعاء ") == "يوم الأربعاء"
    assert format_day_label(date(2023, 3, 15), "") == "الأربعاء"
