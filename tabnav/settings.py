from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for section navigation.

    Values are loaded from environment variables and `.env`.

    Notes:
    - History is in-memory only; nothing here points at persistent storage.
    - File logging is opt-in (TABNAV_LOG_TO_FILE).
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # History
    TABNAV_MAX_HISTORY: int = Field(default=20)
    # Where an in-app Back goes when already at a section root.
    TABNAV_BACK_FALLBACK: str = Field(default="/community")

    # Logging
    TABNAV_LOG_DIR: Path = Field(default=Path("_logs"))
    TABNAV_LOG_LEVEL: str = Field(default="INFO")
    TABNAV_LOG_TO_FILE: bool = Field(default=False)
    # Timed rotation retention count (days).
    TABNAV_LOG_BACKUP_COUNT: int = Field(default=14)

    @field_validator("TABNAV_MAX_HISTORY")
    @classmethod
    def _positive_history(cls, v: int) -> int:
        if v < 1:
            raise ValueError("TABNAV_MAX_HISTORY must be >= 1")
        return v


def load_settings() -> Settings:
    return Settings()
