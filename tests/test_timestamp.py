from datetime import datetime

import pytest

from org_reminder.timestamp import (
    FormatParseFailure,
    StructuralParseFailure,
    extract_timestamp,
    find_timestamp_token,
)


@pytest.mark.parametrize(
    "line, token",
    [
        ("*TODO this should be good <2023-08-08>", "2023-08-08"),
        ("*TODO this should be good <2023-08-08 Sun 10:10>", "2023-08-08 Sun 10:10"),
        ("*TODO this should be good too <2023-08-08 10:10>", "2023-08-08 10:10"),
        ("*TODO two stamps <2023-08-08> <2023-09-01>", "2023-08-08"),
        ("*TODO nested <a<b> c>", "a<b"),
        ("*TODO empty <>", ""),
    ],
)
def test_find_timestamp_token(line, token):
    assert find_timestamp_token(line) == token


@pytest.mark.parametrize(
    "line",
    [
        "*TODO no token at all",
        "*TODO unterminated <2023-08-08",
        "*TODO only closing 2023-08-08>",
        "*TODO reversed >2023-08-08<",
    ],
)
def test_find_timestamp_token_missing(line):
    assert find_timestamp_token(line) is None


COMPATIBLE_CASES = [
    ("2023-08-08", datetime(2023, 8, 8)),
    ("2023-08-08 Tue", datetime(2023, 8, 8)),
    ("2023-08-08 10:06", datetime(2023, 8, 8, 10, 6)),
    # Date, weekday and time: only the date is kept in compatible mode.
    ("2023-08-08 Tue 10:06", datetime(2023, 8, 8)),
    ("2023-08-08 Sun 10:10", datetime(2023, 8, 8)),
]


@pytest.mark.parametrize("token, expected", COMPATIBLE_CASES)
def test_extract_timestamp_accepts_compatible(token, expected):
    assert extract_timestamp(f"*TODO task SCHEDULED: <{token}>") == expected


@pytest.mark.parametrize(
    "token, expected",
    [
        ("2023-08-08", datetime(2023, 8, 8)),
        ("2023-08-08 Tue", datetime(2023, 8, 8)),
        ("2023-08-08 10:06", datetime(2023, 8, 8, 10, 6)),
        ("2023-08-08 Tue 10:06", datetime(2023, 8, 8, 10, 6)),
    ],
)
def test_extract_timestamp_accepts_corrected(token, expected):
    line = f"*TODO task DEADLINE: <{token}>"
    assert extract_timestamp(line, mode="corrected") == expected


def test_compatible_mode_is_default():
    line = "*TODO task DEADLINE: <2023-08-08 Tue 10:06>"
    assert extract_timestamp(line) == extract_timestamp(line, mode="compatible")
    assert extract_timestamp(line) != extract_timestamp(line, mode="corrected")


@pytest.mark.parametrize(
    "token",
    [
        "Mon 10:10",  # weekday and time without a date
        "10:10",  # time alone
        "Tue",  # weekday alone
        "",
        "2023/08/08",
        "08-08-2023",
        "2023-08-08T10:06",
        "2023-13-01",
        "2023-02-30",
        "2023-08-08 25:00",
        "2023-08-08 Xyz 10:06",
        "2023-08-08 Tue 10:06 +1w",
    ],
)
def test_extract_timestamp_rejects_bad_tokens(token):
    line = f"*TODO x SCHEDULED: <{token}>"
    for mode in ("compatible", "corrected"):
        outcome = extract_timestamp(line, mode=mode)
        assert isinstance(outcome, FormatParseFailure)
        assert outcome.token == token
        assert outcome.line == line


def test_format_failure_reports_first_attempt():
    outcome = extract_timestamp("*TODO x <Mon 10:10>")
    assert isinstance(outcome, FormatParseFailure)
    assert "%Y-%m-%d %a %H:%M" in outcome.reason


@pytest.mark.parametrize(
    "line",
    [
        "*TODO x SCHEDULED: 2023-08-08",
        "*TODO x DEADLINE: <2023-08-08",
    ],
)
def test_extract_timestamp_structural_failure(line):
    outcome = extract_timestamp(line)
    assert isinstance(outcome, StructuralParseFailure)
    assert not isinstance(outcome, FormatParseFailure)
    assert outcome.line == line
