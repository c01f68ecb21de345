# app/core/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Global application configuration.

    Values are loaded from environment variables (or a local `.env` file)
    at runtime.

    These settings drive:
    - Workbook import (sheet name, preview size)
    - Time grid geometry used by the layout assigner
    - Logging verbosity
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    APP_NAME: str = "Meeting Calendar"
    APP_ENV: str = Field("local", description="Environment name: local/dev/stage/prod")
    LOG_LEVEL: str = Field("INFO", description="Root log level for the service.")

    IMPORT_SHEET_NAME: str = Field(
        "Data",
        description="Name of the workbook sheet holding the meeting table.",
    )
    PREVIEW_ROW_LIMIT: int = Field(
        2,
        description="Number of non-empty rows returned by the import preview.",
    )

    # --- Time grid ---
    GRID_START_HOUR: int = Field(
        10,
        description=(
            "Hour of day at which slot index 1 starts. Time-based placement "
            "is measured from this anchor as well."
        ),
    )
    GRID_SLOT_COUNT: int = Field(
        41,
        description="Number of 15-minute rows rendered in the day grid.",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Cached accessor for application settings.

    Using LRU cache ensures settings are read and validated only once,
    while still being easily importable across the app.
    """
    return Settings()
