"""Parse org-mode timestamps such as ``<2023-08-08 Tue 10:06>``."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import List, Union

from org_reminder.models import TimestampMode

DATE_WEEKDAY_TIME_FORMAT = "%Y-%m-%d %a %H:%M"  # 2023-09-05 Tue 10:06
DATE_WEEKDAY_FORMAT = "%Y-%m-%d %a"  # 2023-09-05 Tue
DATE_TIME_FORMAT = "%Y-%m-%d %H:%M"  # 2023-09-05 10:06
DATE_FORMAT = "%Y-%m-%d"  # 2023-09-05

TIMESTAMP_FORMATS = (
    DATE_WEEKDAY_TIME_FORMAT,
    DATE_WEEKDAY_FORMAT,
    DATE_TIME_FORMAT,
    DATE_FORMAT,
)


@dataclass(frozen=True, slots=True)
class ParseFailure:
    line: str
    reason: str


@dataclass(frozen=True, slots=True)
class StructuralParseFailure(ParseFailure):
    """The line has no ``<...>`` token at all."""


@dataclass(frozen=True, slots=True)
class FormatParseFailure(ParseFailure):
    """A token was found but none of the accepted formats fit it."""

    token: str = ""


ParseOutcome = Union[datetime, ParseFailure]


def find_timestamp_token(line: str) -> str | None:
    """Return the text between the first ``<`` and the next ``>``."""

    start = line.find("<")
    if start == -1:
        return None
    end = line.find(">", start + 1)
    if end == -1:
        return None
    return line[start + 1 : end]


def _try_parse(token: str, fmt: str) -> datetime | ValueError:
    try:
        return datetime.strptime(token, fmt)
    except ValueError as exc:
        return exc


def _pick_compatible(attempts: List[datetime | ValueError]) -> datetime | None:
    with_weekday_and_time, with_weekday, with_time, date_only = attempts
    if isinstance(with_weekday_and_time, datetime):
        # Matches the historical output: only the date survives.
        return datetime.combine(with_weekday_and_time.date(), time.min)
    for attempt in (with_weekday, with_time, date_only):
        if isinstance(attempt, datetime):
            return attempt
    return None


def _pick_corrected(attempts: List[datetime | ValueError]) -> datetime | None:
    for attempt in attempts:
        if isinstance(attempt, datetime):
            return attempt
    return None


def extract_timestamp(line: str, mode: TimestampMode = "compatible") -> ParseOutcome:
    """Parse the timestamp token embedded in *line*.

    The token is tried against :data:`TIMESTAMP_FORMATS` in order. In
    ``"compatible"`` mode a token carrying a weekday and a time of day
    yields midnight of that date, which is what existing reminder setups
    were built against; ``"corrected"`` keeps the time of day. Weekdays go
    through ``%a``: only locale abbreviations (``Tue``) are accepted, and
    they are not checked against the date.

    Never raises: a failure is returned as a :class:`ParseFailure`.
    """

    token = find_timestamp_token(line)
    if token is None:
        return StructuralParseFailure(line=line, reason="no <...> timestamp token found")

    attempts = [_try_parse(token, fmt) for fmt in TIMESTAMP_FORMATS]
    picked = _pick_corrected(attempts) if mode == "corrected" else _pick_compatible(attempts)
    if picked is not None:
        return picked
    return FormatParseFailure(line=line, reason=str(attempts[0]), token=token)


__all__ = [
    "TIMESTAMP_FORMATS",
    "ParseFailure",
    "StructuralParseFailure",
    "FormatParseFailure",
    "ParseOutcome",
    "find_timestamp_token",
    "extract_timestamp",
]
