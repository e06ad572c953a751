"""Application configuration and settings management."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from org_reminder.models import (
    DEFAULT_EXTENSION,
    DEFAULT_MAX_WORKERS,
    DEFAULT_SCHEDULE_MARKERS,
    DEFAULT_TASK_MARKER,
    ScanOptions,
    TimestampMode,
)


class Settings(BaseSettings):
    """Project-level settings loaded from environment variables/.env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    org_dir: Path = Field(Path("~/org"), alias="ORG_DIR")
    extension: str = Field(DEFAULT_EXTENSION, min_length=1, alias="ORG_EXTENSION")
    task_marker: str = Field(DEFAULT_TASK_MARKER, min_length=1, alias="ORG_TASK_MARKER")
    schedule_markers: Tuple[str, ...] = Field(
        DEFAULT_SCHEDULE_MARKERS, min_length=1, alias="ORG_SCHEDULE_MARKERS"
    )
    timestamp_mode: TimestampMode = Field("compatible", alias="ORG_TIMESTAMP_MODE")
    max_workers: int = Field(DEFAULT_MAX_WORKERS, ge=1, alias="ORG_MAX_WORKERS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level '{value}'")
        return level

    def scan_options(self) -> ScanOptions:
        return ScanOptions(
            extension=self.extension,
            task_marker=self.task_marker,
            schedule_markers=self.schedule_markers,
            timestamp_mode=self.timestamp_mode,
            max_workers=self.max_workers,
        )


_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    """Return cached settings instance."""

    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings()
    return _SETTINGS


__all__ = ["Settings", "get_settings"]
