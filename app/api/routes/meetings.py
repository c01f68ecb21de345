# app/api/routes/meetings.py
import logging
from http import HTTPStatus

from fastapi import APIRouter, Depends, HTTPException

from app.core.config import get_settings
from app.schemas.calendar import ImportSummary
from app.schemas.meeting import MeetingCreate, MeetingRecord
from app.schemas.workbook import ImportPreview, WorkbookPayload
from app.services.meeting_factory import (
    MeetingFactory,
    MeetingValidationError,
    get_meeting_factory,
)
from app.services.meeting_session import MeetingSession, get_meeting_session
from app.services.workbook_parser import (
    WorkbookImportError,
    build_import_preview,
    parse_workbook,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/meetings", tags=["Meetings"])


@router.post(
    "/import",
    response_model=ImportSummary,
    status_code=HTTPStatus.OK,
    summary="Import meetings from a decoded workbook",
    description=(
        "Parse the meeting sheet of an already-decoded workbook and replace the "
        "current meetings with the result.\n\n"
        "The import is all-or-nothing:\n"
        "- A missing sheet, a row with too few columns or an undecodable date "
        "fails the whole import with 422 and leaves current meetings untouched.\n"
        "- Unparseable times and unknown categories are tolerated.\n\n"
        "On success the displayed week is set to the span of imported dates."
    ),
    responses={
        200: {"description": "Workbook imported; current meetings replaced."},
        422: {
            "description": "The workbook could not be imported.",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Invalid data in row 6: expected at least 7 columns, found 4.",
                    }
                }
            },
        },
    },
)
async def import_meetings(
    payload: WorkbookPayload,
    session: MeetingSession = Depends(get_meeting_session),
) -> ImportSummary:
    """
    Run the workbook import and hand the result to the session.
    """
    settings = get_settings()
    try:
        result = parse_workbook(payload.to_workbook(), sheet_name=settings.IMPORT_SHEET_NAME)
    except WorkbookImportError as exc:
        logger.warning("Workbook import rejected: %s", exc)
        raise HTTPException(status_code=HTTPStatus.UNPROCESSABLE_ENTITY, detail=str(exc))

    week = session.replace_from_import(result)
    return ImportSummary(
        imported_count=len(result.records),
        day_labels=result.day_labels,
        week=week,
        meetings=result.records,
    )


@router.post(
    "/import/preview",
    response_model=ImportPreview,
    summary="Preview the first rows of a workbook",
    description=(
        "Return the day labels and the first few non-empty rows formatted for "
        "display, without importing anything."
    ),
    responses={
        422: {"description": "The meeting sheet is missing."},
    },
)
async def preview_import(payload: WorkbookPayload) -> ImportPreview:
    settings = get_settings()
    try:
        return build_import_preview(
            payload.to_workbook(),
            limit=settings.PREVIEW_ROW_LIMIT,
            sheet_name=settings.IMPORT_SHEET_NAME,
        )
    except WorkbookImportError as exc:
        raise HTTPException(status_code=HTTPStatus.UNPROCESSABLE_ENTITY, detail=str(exc))


@router.get(
    "",
    response_model=list[MeetingRecord],
    summary="List current meetings",
    description="Return every meeting held by the in-memory session, in insertion order.",
)
async def list_meetings(
    session: MeetingSession = Depends(get_meeting_session),
) -> list[MeetingRecord]:
    return session.meetings


@router.post(
    "",
    response_model=MeetingRecord,
    status_code=HTTPStatus.CREATED,
    summary="Add a meeting by hand",
    description=(
        "Create a meeting from form input.\n\n"
        "- Title, date, start and end are required.\n"
        "- Times are 15-minute options between 08:00 and 20:45.\n"
        "- End must be after start.\n"
        "- When a week is displayed, the date must be one of its five days."
    ),
    responses={
        201: {"description": "Meeting created."},
        400: {
            "description": "The meeting is incomplete or inconsistent.",
            "content": {
                "application/json": {
                    "example": {"detail": "End time must be after start time."}
                }
            },
        },
        409: {"description": "A meeting with the same id already exists."},
    },
)
async def create_meeting(
    payload: MeetingCreate,
    session: MeetingSession = Depends(get_meeting_session),
    factory: MeetingFactory = Depends(get_meeting_factory),
) -> MeetingRecord:
    try:
        meeting = factory.create(payload, week=session.week)
    except MeetingValidationError as exc:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(exc))

    try:
        session.add(meeting)
    except ValueError as exc:
        raise HTTPException(status_code=HTTPStatus.CONFLICT, detail=str(exc))
    return meeting
