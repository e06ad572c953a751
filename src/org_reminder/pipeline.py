"""High-level pipeline: org directory -> flat list of scheduled TODOs."""
from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import List

import aiofiles

from org_reminder.builder import extract_records
from org_reminder.models import ScanOptions, ScanResult, TaskRecord
from org_reminder.scanner import find_task_files

logger = logging.getLogger(__name__)


class DirectoryAccessError(RuntimeError):
    """Raised when the root of a scan cannot be listed."""

    def __init__(self, root: Path, reason: str):
        super().__init__(f"Cannot scan '{root}': {reason}")
        self.root = root
        self.reason = reason


def _check_root(root: Path) -> None:
    if not root.exists():
        raise DirectoryAccessError(root, "directory does not exist")
    if not root.is_dir():
        raise DirectoryAccessError(root, "not a directory")
    if not os.access(root, os.R_OK | os.X_OK):
        raise DirectoryAccessError(root, "permission denied")


async def read_task_file(path: Path) -> str | None:
    """Return the UTF-8 text of *path*, or None when it cannot be read."""

    try:
        async with aiofiles.open(path, "r", encoding="utf-8") as handle:
            return await handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Skipping unreadable file %s: %s", path, exc)
        return None


async def _scan_file(
    path: Path,
    options: ScanOptions,
    semaphore: asyncio.Semaphore,
) -> List[TaskRecord]:
    async with semaphore:
        content = await read_task_file(path)
        if content is None:
            return []
        return await asyncio.to_thread(extract_records, content, options)


async def scan(root: str | Path, *, options: ScanOptions | None = None) -> ScanResult:
    """Scan *root* recursively and return every scheduled or deadlined TODO.

    Files are read concurrently and parsed on worker threads, at most
    ``options.max_workers`` at a time. Unreadable files and unparseable
    lines are skipped; the order of the result carries no meaning.

    Raises :class:`DirectoryAccessError` when *root* itself is unusable.
    """

    opts = options or ScanOptions()
    root_path = Path(root).expanduser()
    _check_root(root_path)

    paths = await asyncio.to_thread(find_task_files, root_path, opts.extension)
    logger.debug("Found %d %s files under %s", len(paths), opts.extension, root_path)

    semaphore = asyncio.Semaphore(opts.max_workers)
    per_file = await asyncio.gather(*(_scan_file(path, opts, semaphore) for path in paths))
    records: ScanResult = [record for chunk in per_file for record in chunk]

    logger.info("Collected %d tasks from %d files under %s", len(records), len(paths), root_path)
    return records


__all__ = ["DirectoryAccessError", "read_task_file", "scan"]
