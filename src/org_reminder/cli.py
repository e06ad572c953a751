"""Simple CLI that prints the scheduled TODOs found in an org directory."""
from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Sequence

from org_reminder.config import get_settings
from org_reminder.logging_utils import setup_logging
from org_reminder.models import ScanOptions, ScanResult
from org_reminder.pipeline import DirectoryAccessError, scan


def print_records(records: ScanResult) -> None:
    print(len(records))
    for record in records:
        print(record)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List scheduled and deadlined TODOs from org files")
    parser.add_argument("org_dir", nargs="?", type=Path, help="Override ORG_DIR")
    parser.add_argument("--extension", help="File extension to scan (default: .org)")
    parser.add_argument(
        "--corrected",
        action="store_true",
        help="Keep the time of day for '<YYYY-MM-DD Day HH:MM>' timestamps",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level)

    updates: dict = {}
    if args.extension:
        updates["extension"] = args.extension
    if args.corrected:
        updates["timestamp_mode"] = "corrected"
    options = ScanOptions(**{**settings.scan_options().model_dump(), **updates})
    root = args.org_dir or settings.org_dir

    try:
        records = asyncio.run(scan(root, options=options))
    except DirectoryAccessError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print_records(records)
    return 0


if __name__ == "__main__":
    sys.exit(main())
