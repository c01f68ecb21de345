# app/services/meeting_factory.py
from __future__ import annotations

import itertools
import logging
import random
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence

from app.schemas.calendar import TimeOption
from app.schemas.category import MANUAL_PALETTE, CategoryColor
from app.schemas.meeting import MeetingCreate, MeetingRecord, WeekWindow
from app.services.cell_decoders import at_minutes, text_or_not_available
from app.services.formatting import SLOT_MINUTES, format_minutes_ar
from app.services.week_window import calendar_days

logger = logging.getLogger(__name__)

FIRST_OPTION_HOUR = 8
LAST_OPTION_HOUR = 20

Clock = Callable[[], datetime]
ColorStrategy = Callable[[Sequence[CategoryColor]], CategoryColor]


class MeetingValidationError(ValueError):
    """
    Raised when a hand-entered meeting is incomplete or inconsistent.
    """


def time_options() -> List[TimeOption]:
    """
    15-minute options for every quarter of the hours 08 to 20, i.e. 08:00
    through 20:45.
    """
    options: List[TimeOption] = []
    for minutes in range(FIRST_OPTION_HOUR * 60, (LAST_OPTION_HOUR + 1) * 60, SLOT_MINUTES):
        hour, minute = divmod(minutes, 60)
        options.append(
            TimeOption(
                value=f"{hour:02d}:{minute:02d}",
                label=format_minutes_ar(minutes),
                hour=hour,
                minute=minute,
            )
        )
    return options


_OPTION_MINUTES: Dict[str, int] = {o.value: o.hour * 60 + o.minute for o in time_options()}


class MeetingFactory:
    """
    Builds MeetingRecords for meetings added by hand.

    The clock (used for ids) and the color strategy (used because manual
    meetings have no category) are injected so results are reproducible
    in tests. Defaults are the wall clock and a random palette pick.
    """

    def __init__(
        self,
        clock: Clock = datetime.now,
        color_strategy: ColorStrategy = random.choice,
    ) -> None:
        self._clock = clock
        self._color_strategy = color_strategy
        self._sequence = itertools.count()

    def create(self, payload: MeetingCreate, week: Optional[WeekWindow] = None) -> MeetingRecord:
        """
        Validate `payload` and turn it into a MeetingRecord.

        Rules
        -----
        - Title must not be blank.
        - Start and end must be one of `time_options()`.
        - End must be strictly after start.
        - When `week` is given, the date must be one of its calendar days.
        """
        title = payload.title.strip()
        if not title:
            raise MeetingValidationError("Meeting title is required.")

        start_minutes = self._option_minutes(payload.start_time, "start_time")
        end_minutes = self._option_minutes(payload.end_time, "end_time")
        if end_minutes <= start_minutes:
            raise MeetingValidationError("End time must be after start time.")

        if week is not None and payload.date not in calendar_days(week):
            raise MeetingValidationError(
                f"Date {payload.date.isoformat()} is outside the displayed week "
                f"({week.start.isoformat()} to {week.end.isoformat()})."
            )

        stamp = int(self._clock().timestamp() * 1000)
        meeting = MeetingRecord(
            id=f"meeting-{stamp}-{next(self._sequence)}",
            title=title,
            date=payload.date,
            start_time=at_minutes(payload.date, start_minutes),
            end_time=at_minutes(payload.date, end_minutes),
            description=text_or_not_available(payload.description),
            organizer=text_or_not_available(payload.organizer),
            location=text_or_not_available(payload.location),
            category=None,
            color=self._color_strategy(MANUAL_PALETTE),
            is_pending=payload.is_pending,
        )
        logger.info("Created meeting %s on %s", meeting.id, meeting.date)
        return meeting

    @staticmethod
    def _option_minutes(value: str, field_name: str) -> int:
        minutes = _OPTION_MINUTES.get(value.strip())
        if minutes is None:
            raise MeetingValidationError(
                f"{field_name} must be a 15-minute time between "
                f"{FIRST_OPTION_HOUR:02d}:00 and {LAST_OPTION_HOUR:02d}:45, got {value!r}."
            )
        return minutes


_factory_instance: Optional[MeetingFactory] = None


def get_meeting_factory() -> MeetingFactory:
    """
    Shared factory wired to the wall clock and random palette picks.
    """
    global _factory_instance
    if _factory_instance is None:
        _factory_instance = MeetingFactory()
    return _factory_instance
