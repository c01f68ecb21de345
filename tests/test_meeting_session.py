# tests/test_meeting_session.py
from datetime import date, datetime

import pytest

from app.schemas.meeting import ImportResult, MeetingRecord, WeekWindow


def _manual(meeting_id="manual-1"):
    return MeetingRecord(
        id=meeting_id,
        title="مراجعة",
        date=date(2023, 3, 15),
        start_time=datetime(2023, 3, 15, 9),
        end_time=datetime(2023, 3, 15, 10),
    )


def test_import_replaces_meetings_labels_and_week(meeting_session, sample_import):
    meeting_session.add(_manual())

    week = meeting_session.replace_from_import(sample_import)

    assert [m.id for m in meeting_session.meetings] == ["m0", "m1", "m2"]
    assert meeting_session.day_labels == sample_import.day_labels
    assert week == WeekWindow(start=date(2023, 3, 14), end=date(2023, 3, 16))
    assert meeting_session.week == week


def test_empty_import_keeps_current_week(meeting_session, sample_import):
    meeting_session.replace_from_import(sample_import)
    previous_week = meeting_session.week

    week = meeting_session.replace_from_import(
        ImportResult(records=[], day_labels=["", "", "", "", ""])
    )

    assert week is None
    assert meeting_session.meetings == []
    assert meeting_session.week == previous_week


def test_add_rejects_duplicate_id(meeting_session):
    meeting_session.add(_manual())

    with pytest.raises(ValueError):
        meeting_session.add(_manual())

    assert len(meeting_session.meetings) == 1


def test_meetings_property_returns_a_copy(meeting_session):
    meeting_session.add(_manual())

    meeting_session.meetings.clear()

    assert len(meeting_session.meetings) == 1


def test_clear_resets_everything(meeting_session, sample_import):
    meeting_session.replace_from_import(sample_import)

    meeting_session.clear()

    assert meeting_session.meetings == []
    assert meeting_session.day_labels == []
    assert meeting_session.week is None
