# app/api/routes/calendar.py
from http import HTTPStatus

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.config import get_settings
from app.schemas.calendar import CalendarWeek, TimeGrid, TimeOption
from app.schemas.meeting import WeekWindow
from app.services.calendar_view import build_calendar_week
from app.services.formatting import build_time_slots
from app.services.meeting_factory import time_options
from app.services.meeting_session import MeetingSession, get_meeting_session
from app.services.week_window import week_for_month

router = APIRouter(prefix="/calendar", tags=["Calendar"])


@router.get(
    "/week",
    response_model=CalendarWeek,
    summary="Laid-out meetings for the displayed week",
    description=(
        "Return the five days of the displayed week. Each day carries its label "
        "and its meetings with a placement:\n"
        "- `group_size` / `position` / `width_share` for side-by-side layout of "
        "overlapping meetings\n"
        "- `top_offset_units` / `height_units` in 15-minute rows"
    ),
    responses={
        404: {"description": "No week is displayed yet (nothing imported or selected)."},
    },
)
async def get_calendar_week(
    session: MeetingSession = Depends(get_meeting_session),
) -> CalendarWeek:
    week = session.week
    if week is None:
        raise HTTPException(
            status_code=HTTPStatus.NOT_FOUND,
            detail="No week selected. Import a workbook or select a month first.",
        )
    settings = get_settings()
    return build_calendar_week(
        session.meetings,
        week,
        session.day_labels,
        grid_start_hour=settings.GRID_START_HOUR,
    )


@router.put(
    "/week",
    response_model=WeekWindow,
    summary="Select the displayed week from a month",
    description=(
        "Display the `week_number`-th seven-day window of the given month, "
        "counted from the 1st."
    ),
    responses={
        400: {"description": "Invalid month or week number."},
    },
)
async def select_week(
    year: int = Query(..., ge=1, le=9999, description="Calendar year.", examples=[2025]),
    month: int = Query(..., description="Month number (1-12).", examples=[3]),
    week_number: int = Query(1, description="Week of the month, from 1.", examples=[2]),
    session: MeetingSession = Depends(get_meeting_session),
) -> WeekWindow:
    try:
        week = week_for_month(year, month, week_number)
    except ValueError as exc:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(exc))
    session.set_week(week)
    return week


@router.get(
    "/time-slots",
    response_model=TimeGrid,
    summary="Labels of the day grid rows",
)
async def get_time_slots() -> TimeGrid:
    settings = get_settings()
    return TimeGrid(
        start_hour=settings.GRID_START_HOUR,
        slots=build_time_slots(settings.GRID_START_HOUR, settings.GRID_SLOT_COUNT),
    )


@router.get(
    "/time-options",
    response_model=list[TimeOption],
    summary="Selectable times for meetings added by hand",
)
async def get_time_options() -> list[TimeOption]:
    return time_options()
