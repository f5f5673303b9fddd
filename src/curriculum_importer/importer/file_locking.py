"""
Module: importer.file_locking

Purpose:
    File writing helpers shared by the resource store and the JSONL
    repository. Uses portalocker for Mac, Windows, and Linux compatibility.

Key Functions:
    - locked_file: Context manager for locked file access
    - locked_append_jsonl: Append to JSONL with exclusive lock
    - atomic_write_bytes: Write via temporary file and replace

Dependencies:
    - portalocker: Cross-platform file locking

Used By:
    - importer.repository: tracks.jsonl / missions.jsonl
    - importer.resources: Store entries
"""

from __future__ import annotations

import json
import logging
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Generator

import portalocker

logger = logging.getLogger(__name__)

LOCK_FILENAME = ".lock"


@contextmanager
def locked_file(
    path: Path,
    mode: str = 'r',
    lock_type: int = portalocker.LOCK_EX,
) -> Generator:
    """
    Context manager for cross-platform locked file access.

    Args:
        path: Path to file.
        mode: File open mode ('r', 'w', 'a', etc.).
        lock_type: Lock type (LOCK_EX for exclusive, LOCK_SH for shared).

    Yields:
        Open file handle with lock held.

    Example:
        >>> with locked_file(path, 'a') as f:
        ...     f.write('data')
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    # Ensure file exists for read modes
    if 'r' in mode and not path.exists():
        path.touch()

    with open(path, mode, encoding='utf-8') as f:
        portalocker.lock(f, lock_type)
        try:
            yield f
        finally:
            portalocker.unlock(f)


def locked_append_jsonl(path: Path, record: Dict[str, Any]) -> None:
    """
    Append a record to JSONL file with exclusive lock.

    Args:
        path: Path to JSONL file.
        record: Dictionary to append as JSON line.

    Example:
        >>> locked_append_jsonl(missions_path, {"id": "python:Loops", "parents": []})
    """
    with locked_file(path, 'a', portalocker.LOCK_EX) as f:
        f.write(json.dumps(record, ensure_ascii=False) + '\n')

    logger.debug(f"Appended record to {path.name}")


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """
    Write ``data`` to ``path`` through a temporary file in the same directory.

    Writers of the same directory are serialized through an exclusive lock
    on its ``.lock`` file. Readers never observe a partially written file.
    The temporary file is removed if writing or replacing fails.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with locked_file(path.parent / LOCK_FILENAME, 'a', portalocker.LOCK_EX):
        fd, name = tempfile.mkstemp(prefix=".tmp-", dir=path.parent)
        temp_path = Path(name)
        try:
            with open(fd, "wb") as f:
                f.write(data)
            # replace() overwrites existing files on all platforms
            temp_path.replace(path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise
