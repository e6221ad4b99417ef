"""Progress ledger persistence: one JSON document per user."""

from pathlib import Path

import structlog

from coaching_analytics.models.progress import CourseProgress
from coaching_analytics.storage.jsonfile import (
    exclusive_lock,
    read_json,
    validate_record_id,
    write_json,
)

logger = structlog.get_logger()


class JsonProgressStore:
    """Stores each user's course progress entries in ``<root>/<user_id>.json``.

    Writes are read-modify-write under an exclusive lock; concurrent writers
    of the same user get last-write-wins semantics.
    """

    def __init__(self, root: Path):
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)

    def _path(self, user_id: str) -> Path:
        return self.root / f"{validate_record_id(user_id)}.json"

    def _load(self, user_id: str) -> list[CourseProgress]:
        data = read_json(self._path(user_id), {"courses_progress": []})
        return [CourseProgress(**entry) for entry in data["courses_progress"]]

    def _save(self, user_id: str, entries: list[CourseProgress]) -> None:
        write_json(
            self._path(user_id),
            {"courses_progress": [e.model_dump(mode="json") for e in entries]},
        )

    def list_for_user(self, user_id: str) -> list[CourseProgress]:
        return self._load(user_id)

    def find(self, user_id: str, course_id: str) -> CourseProgress | None:
        for entry in self._load(user_id):
            if entry.course_id == course_id:
                return entry
        return None

    def upsert(self, user_id: str, entry: CourseProgress) -> None:
        path = self._path(user_id)
        with exclusive_lock(path):
            entries = self._load(user_id)
            for i, existing in enumerate(entries):
                if existing.course_id == entry.course_id:
                    entries[i] = entry
                    break
            else:
                entries.append(entry)
            self._save(user_id, entries)
        logger.debug("progress_saved", user_id=user_id, course_id=entry.course_id)

    def remove(self, user_id: str, course_id: str) -> bool:
        path = self._path(user_id)
        with exclusive_lock(path):
            entries = self._load(user_id)
            kept = [e for e in entries if e.course_id != course_id]
            if len(kept) == len(entries):
                return False
            self._save(user_id, kept)
        return True
