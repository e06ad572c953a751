"""Locate org files below a directory, skipping hidden directories."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, List

from org_reminder.models import DEFAULT_EXTENSION

logger = logging.getLogger(__name__)


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _log_walk_error(exc: OSError) -> None:
    logger.warning("Skipping unreadable directory %s: %s", exc.filename, exc.strerror)


def iter_task_files(root: Path, extension: str = DEFAULT_EXTENSION) -> Iterator[Path]:
    """Yield files under *root* whose name ends with *extension*.

    Directories below *root* whose name starts with ``.`` are pruned, so
    nothing inside them is ever yielded. Symlinked directories are not
    followed.
    """

    if not root.is_dir():
        return
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames[:] = [name for name in dirnames if not _is_hidden(name)]
        base = Path(dirpath)
        for filename in filenames:
            if not filename.endswith(extension):
                continue
            path = base / filename
            if path.is_file():
                yield path


def find_task_files(root: Path, extension: str = DEFAULT_EXTENSION) -> List[Path]:
    """Return the sorted list of matching files under *root*."""

    return sorted(iter_task_files(Path(root), extension))


__all__ = ["iter_task_files", "find_task_files"]
