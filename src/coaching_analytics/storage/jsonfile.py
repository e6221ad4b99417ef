"""JSON file helpers shared by the file-backed stores (fcntl.flock + atomic write)."""

import contextlib
import fcntl
import json
import os
import re
import tempfile
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from coaching_analytics.errors import InvalidInput

_SAFE_ID = re.compile(r"^[A-Za-z0-9_-]+$")


def validate_record_id(record_id: str) -> str:
    """Reject identifiers that cannot be used as a file name."""
    if not _SAFE_ID.match(record_id):
        raise InvalidInput(f"Invalid identifier format: {record_id!r}")
    return record_id


@contextlib.contextmanager
def exclusive_lock(path: Path) -> Iterator[None]:
    """Hold an exclusive lock on ``<path>.lock`` for a read-modify-write cycle."""
    lock_path = path.with_name(path.name + ".lock")
    with open(lock_path, "w") as lock_file:
        fcntl.flock(lock_file, fcntl.LOCK_EX)
        try:
            yield
        finally:
            fcntl.flock(lock_file, fcntl.LOCK_UN)


def read_json(path: Path, default: Any) -> Any:
    """Read a JSON document under a shared lock. Returns ``default`` if missing."""
    if not path.exists():
        return default
    with open(path, encoding="utf-8") as f:
        fcntl.flock(f, fcntl.LOCK_SH)
        data = json.load(f)
        fcntl.flock(f, fcntl.LOCK_UN)
    return data


def write_json(path: Path, data: Any) -> None:
    """Write a JSON document atomically via a temp file in the same directory."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "w", dir=path.parent, delete=False, suffix=".json", encoding="utf-8"
    ) as tmp:
        try:
            json.dump(data, tmp, indent=2, default=str)
        except Exception:
            tmp.close()
            os.unlink(tmp.name)
            raise
    os.replace(tmp.name, path)
