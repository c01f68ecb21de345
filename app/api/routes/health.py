# app/api/routes/health.py
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.core.config import get_settings
from app.services.meeting_session import MeetingSession, get_meeting_session


router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    """
    Response schema for the health check endpoint.
    """

    status: str = Field(
        ...,
        description="Overall health status of the Meeting Calendar service.",
        examples=["ok"],
    )
    app_name: str = Field(
        ...,
        description="Human-friendly name of the running application.",
        examples=["Meeting Calendar"],
    )
    environment: str = Field(
        ...,
        description="Current deployment environment (local/dev/stage/prod).",
        examples=["local"],
    )
    meetings_loaded: int = Field(
        ...,
        description="Number of meetings currently held in memory.",
        examples=[12],
    )
    timestamp_utc: datetime = Field(
        ...,
        description="Server-side timestamp (UTC) at which this health check was generated.",
        examples=["2025-01-01T10:30:00Z"],
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check for the Meeting Calendar service",
    description=(
        "Lightweight endpoint to verify that the calendar backend is up and "
        "responding.\n\n"
        "Typical use-cases:\n"
        "- Container health probes\n"
        "- Quick smoke-test after deployments\n"
    ),
    responses={
        200: {
            "description": "Service is healthy and responding as expected.",
            "content": {
                "application/json": {
                    "example": {
                        "status": "ok",
                        "app_name": "Meeting Calendar",
                        "environment": "local",
                        "meetings_loaded": 0,
                        "timestamp_utc": "2025-01-01T10:30:00Z",
                    }
                }
            },
        }
    },
)
async def health_check(
    session: MeetingSession = Depends(get_meeting_session),
) -> HealthResponse:
    """
    Returns the current health status of the service.

    Only reads in-memory state, so it stays reliable whatever was imported.
    """
    settings = get_settings()
    return HealthResponse(
        status="ok",
        app_name=settings.APP_NAME,
        environment=settings.APP_ENV,
        meetings_loaded=len(session.meetings),
        timestamp_utc=datetime.now(tz=timezone.utc),
    )
