# tests/test_meeting_factory.py
from datetime import date, datetime

import pytest

from app.schemas.category import MANUAL_PALETTE
from app.schemas.meeting import NOT_AVAILABLE, MeetingCreate, WeekWindow
from app.services.meeting_factory import MeetingFactory, MeetingValidationError, time_options

WEEK = WeekWindow(start=date(2023, 3, 12), end=date(2023, 3, 16))


@pytest.fixture
def factory():
    return MeetingFactory(
        clock=lambda: datetime(2023, 3, 1, 12, 0, 0),
        color_strategy=lambda palette: palette[0],
    )


def _payload(**overrides):
    data = {
        "title": "مراجعة الميزانية",
        "date": date(2023, 3, 14),
        "start_time": "09:00",
        "end_time": "10:30",
    }
    data.update(overrides)
    return MeetingCreate(**data)


def test_time_options_cover_working_hours_in_quarter_hours():
    options = time_options()

    assert len(options) == 52
    assert options[0].value == "08:00"
    assert options[0].label == "8:00 ص"
    assert options[-1].value == "20:45"
    assert options[-1].label == "8:45 م"
    assert options[1].value == "08:15"


def test_create_builds_meeting_record(factory):
    meeting = factory.create(_payload(organizer="  ليلى "), week=WEEK)

    assert meeting.title == "مراجعة الميزانية"
    assert meeting.start_time == datetime(2023, 3, 14, 9, 0)
    assert meeting.end_time == datetime(2023, 3, 14, 10, 30)
    assert meeting.organizer == "ليلى"
    assert meeting.location == NOT_AVAILABLE
    assert meeting.description == NOT_AVAILABLE
    assert meeting.category is None
    assert meeting.color == MANUAL_PALETTE[0]
    assert meeting.has_slots is False


def test_ids_are_unique_even_with_a_frozen_clock(factory):
    first = factory.create(_payload())
    second = factory.create(_payload())

    assert first.id != second.id
    assert first.id.startswith("meeting-")


def test_default_color_is_taken_from_manual_palette():
    meeting = MeetingFactory().create(_payload())

    assert meeting.color in MANUAL_PALETTE


def test_blank_title_is_rejected(factory):
    with pytest.raises(MeetingValidationError):
        factory.create(_payload(title="   "))


@pytest.mark.parametrize("start, end", [("10:00", "10:00"), ("11:00", "10:00")])
def test_end_must_follow_start(factory, start, end):
    with pytest.raises(MeetingValidationError):
        factory.create(_payload(start_time=start, end_time=end))


@pytest.mark.parametrize("value", ["07:45", "21:00", "09:10", "nine", ""])
def test_time_must_be_an_offered_option(factory, value):
    with pytest.raises(MeetingValidationError):
        factory.create(_payload(start_time=value))


def test_date_outside_displayed_week_is_rejected(factory):
    with pytest.raises(MeetingValidationError) as exc_info:
        factory.create(_payload(date=date(2023, 3, 20)), week=WEEK)

    assert "2023-03-20" in str(exc_info.value)


def test_date_is_free_without_a_week(factory):
    meeting = factory.create(_payload(date=date(2023, 3, 20)))

    assert meeting.date == date(2023, 3, 20)


def test_last_quarter_of_final_hour_is_accepted(factory):
    meeting = factory.create(_payload(start_time="20:00", end_time="20:45"))

    assert meeting.end_time == datetime(2023, 3, 14, 20, 45)
