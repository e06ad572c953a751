"""Decide whether an org line is a scheduled or deadlined TODO."""
from __future__ import annotations

from typing import Iterable

from org_reminder.models import DEFAULT_SCHEDULE_MARKERS, DEFAULT_TASK_MARKER


def is_task_line(
    line: str,
    task_marker: str = DEFAULT_TASK_MARKER,
    schedule_markers: Iterable[str] = DEFAULT_SCHEDULE_MARKERS,
) -> bool:
    """Return True if *line* has the task marker and any scheduling marker."""

    if task_marker not in line:
        return False
    return any(marker in line for marker in schedule_markers)


__all__ = ["is_task_line"]
