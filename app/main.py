# app/main.py
from fastapi import FastAPI

from app.api.routes import calendar, health, meetings
from app.core.config import get_settings
from app.core.logging import configure_logging


def create_app() -> FastAPI:
    """
    Application factory for the Meeting Calendar service.
    """
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description=(
            "Backend for a weekly meeting calendar: imports meeting tables from\n"
            "decoded spreadsheet workbooks, keeps them in memory, and lays out\n"
            "overlapping meetings side by side on a 15-minute day grid."
        ),
        version="0.1.0",
    )

    # Routers
    app.include_router(health.router)
    app.include_router(meetings.router)
    app.include_router(calendar.router)

    return app


app = create_app()
