# app/services/meeting_session.py
from __future__ import annotations

import logging
from typing import List, Optional

from app.schemas.meeting import ImportResult, MeetingRecord, WeekWindow
from app.services.week_window import week_from_meetings

logger = logging.getLogger(__name__)


class MeetingSession:
    """
    In-memory meeting state for the running process.

    An import replaces meetings, day labels and week together. The import
    result is only handed over after parsing succeeded, so a failed import
    never touches the current state.
    """

    def __init__(self) -> None:
        self._meetings: List[MeetingRecord] = []
        self._day_labels: List[str] = []
        self._week: Optional[WeekWindow] = None

    @property
    def meetings(self) -> List[MeetingRecord]:
        return list(self._meetings)

    @property
    def day_labels(self) -> List[str]:
        return list(self._day_labels)

    @property
    def week(self) -> Optional[WeekWindow]:
        return self._week

    def replace_from_import(self, result: ImportResult) -> Optional[WeekWindow]:
        """
        Swap in an imported batch. The week follows the batch's date range;
        an empty batch keeps the current week.
        """
        week = week_from_meetings(result.records)

        self._meetings = list(result.records)
        self._day_labels = list(result.day_labels)
        if week is not None:
            self._week = week

        logger.info(
            "Session now holds %d imported meetings (week %s)",
            len(self._meetings),
            f"{self._week.start}..{self._week.end}" if self._week else "unset",
        )
        return week

    def add(self, meeting: MeetingRecord) -> None:
        if any(m.id == meeting.id for m in self._meetings):
            raise ValueError(f"Meeting with id={meeting.id} already exists")
        self._meetings.append(meeting)

    def set_week(self, week: WeekWindow) -> None:
        self._week = week

    def clear(self) -> None:
        self._meetings = []
        self._day_labels = []
        self._week = None


_session_instance: Optional[MeetingSession] = None


def get_meeting_session() -> MeetingSession:
    """
    Process-wide session, created on first use.

    Used as a FastAPI dependency; tests override it with a fresh session.
    """
    global _session_instance
    if _session_instance is None:
        _session_instance = MeetingSession()
    return _session_instance
