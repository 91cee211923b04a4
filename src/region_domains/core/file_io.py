"""Safe file I/O utilities.

Provides atomic-ish append for JSONL files with file locking (``fcntl``)
and ``fsync`` to minimise data loss on crash or concurrent access.
"""

from __future__ import annotations

import fcntl
import logging
import os
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


def safe_append_line(path: Path, line: str) -> None:
    """Append a single line to a file with locking and fsync.

    * ``fcntl.LOCK_EX`` prevents interleaved writes from concurrent
      processes or server threads saving to the same store.
    * ``os.fsync`` ensures the data hits disk before the lock is
      released.
    * Parent directories are created on demand.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a") as f:
        fcntl.flock(f.fileno(), fcntl.LOCK_EX)
        try:
            f.write(line + "\n")
            f.flush()
            os.fsync(f.fileno())
        finally:
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)


def read_lines(path: Path) -> Iterator[tuple[int, str]]:
    """Yield ``(line_no, line)`` for each non-blank line under a shared lock.

    Missing files yield nothing.
    """
    if not path.exists():
        logger.debug("File %s does not exist, nothing to read", path)
        return
    with open(path) as f:
        fcntl.flock(f.fileno(), fcntl.LOCK_SH)
        try:
            lines = f.readlines()
        finally:
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)
    for line_no, line in enumerate(lines, 1):
        stripped = line.strip()
        if stripped:
            yield line_no, stripped
