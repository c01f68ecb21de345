# tests/conftest.py
from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.schemas.meeting import ImportResult, MeetingRecord
from app.services.meeting_session import MeetingSession, get_meeting_session

DAY_LABELS = ["الأحد", "الاثنين", "الثلاثاء", "الأربعاء", "الخميس"]


@pytest.fixture
def meeting_session() -> MeetingSession:
    """
    Fresh in-memory session per test so imports do not leak between tests.
    """
    return MeetingSession()


@pytest.fixture
def client(meeting_session: MeetingSession) -> TestClient:
    """
    TestClient built from the application factory, wired to the per-test
    session.
    """
    app = create_app()
    app.dependency_overrides[get_meeting_session] = lambda: meeting_session
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_import() -> ImportResult:
    """
    Two overlapping meetings on Tuesday 2023-03-14 and one on Thursday.
    """
    return ImportResult(
        records=[
            MeetingRecord(
                id="m0",
                title="اجتماع تنسيقي",
                date=date(2023, 3, 14),
                start_time=datetime(2023, 3, 14, 10, 0),
                end_time=datetime(2023, 3, 14, 11, 0),
            ),
            MeetingRecord(
                id="m1",
                title="زيارة وفد",
                date=date(2023, 3, 14),
                start_time=datetime(2023, 3, 14, 10, 30),
                end_time=datetime(2023, 3, 14, 12, 0),
            ),
            MeetingRecord(
                id="m2",
                title="لجنة المشتريات",
                date=date(2023, 3, 16),
                start_time=datetime(2023, 3, 16, 13, 0),
                end_time=datetime(2023, 3, 16, 14, 0),
            ),
        ],
        day_labels=DAY_LABELS,
    )
