"""Turn qualifying org lines into :class:`TaskRecord` values."""
from __future__ import annotations

import logging
from typing import List

from org_reminder.classifier import is_task_line
from org_reminder.models import ScanOptions, TaskRecord
from org_reminder.timestamp import ParseFailure, extract_timestamp

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = ScanOptions()


def build_record(line: str, options: ScanOptions = DEFAULT_OPTIONS) -> TaskRecord | None:
    """Build a record from *line*, or return None when it does not qualify.

    Lines whose timestamp cannot be parsed are dropped so that one bad
    entry never aborts the scan of its file.
    """

    if not is_task_line(line, options.task_marker, options.schedule_markers):
        return None

    _, text = line.split(options.task_marker, 1)
    outcome = extract_timestamp(line, options.timestamp_mode)
    if isinstance(outcome, ParseFailure):
        logger.debug("Dropping TODO line (%s): %s", outcome.reason, line)
        return None
    return TaskRecord(text=text, timestamp=outcome)


def extract_records(content: str, options: ScanOptions = DEFAULT_OPTIONS) -> List[TaskRecord]:
    """Collect records from every line of a file's text."""

    records: List[TaskRecord] = []
    for line in content.splitlines():
        record = build_record(line, options)
        if record is not None:
            records.append(record)
    return records


__all__ = ["build_record", "extract_records"]
