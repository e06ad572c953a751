"""Data models shared across the project."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_EXTENSION = ".org"
DEFAULT_TASK_MARKER = "*TODO"
DEFAULT_SCHEDULE_MARKERS: Tuple[str, ...] = ("DEADLINE", "SCHEDULED")
DEFAULT_MAX_WORKERS = 8

# "compatible" drops the time of day when the "date weekday time" form matches.
TimestampMode = Literal["compatible", "corrected"]


@dataclass(frozen=True, slots=True)
class TaskRecord:
    """A TODO line with its parsed timestamp."""

    text: str
    timestamp: datetime

    def __str__(self) -> str:
        return f"{self.text},{self.timestamp}"


ScanResult = List[TaskRecord]


class ScanOptions(BaseModel):
    """Knobs for a single scan, defaults match plain org-mode files."""

    model_config = ConfigDict(frozen=True)

    extension: str = Field(DEFAULT_EXTENSION, min_length=1)
    task_marker: str = Field(DEFAULT_TASK_MARKER, min_length=1)
    schedule_markers: Tuple[str, ...] = Field(DEFAULT_SCHEDULE_MARKERS, min_length=1)
    timestamp_mode: TimestampMode = "compatible"
    max_workers: int = Field(DEFAULT_MAX_WORKERS, ge=1)


__all__ = [
    "DEFAULT_EXTENSION",
    "DEFAULT_TASK_MARKER",
    "DEFAULT_SCHEDULE_MARKERS",
    "DEFAULT_MAX_WORKERS",
    "TimestampMode",
    "TaskRecord",
    "ScanResult",
    "ScanOptions",
]
