"""Mood log persistence: a single JSON document for all users."""

from datetime import date
from pathlib import Path

from coaching_analytics.models.mood import MoodLog
from coaching_analytics.storage.jsonfile import exclusive_lock, read_json, write_json

MOOD_LOG_FILENAME = "mood_logs.json"


class JsonMoodStore:
    """Keeps at most one mood log per (user, day); upserting the same day overwrites."""

    def __init__(self, data_dir: Path):
        data_dir.mkdir(parents=True, exist_ok=True)
        self.path = data_dir / MOOD_LOG_FILENAME

    def _load(self) -> list[MoodLog]:
        data = read_json(self.path, {"logs": []})
        return [MoodLog(**entry) for entry in data["logs"]]

    def upsert(self, log: MoodLog) -> MoodLog:
        with exclusive_lock(self.path):
            logs = [
                existing
                for existing in self._load()
                if not (existing.user_id == log.user_id and existing.day == log.day)
            ]
            logs.append(log)
            write_json(self.path, {"logs": [entry.model_dump(mode="json") for entry in logs]})
        return log

    def find_for_user_in_range(self, user_id: str, start: date, end: date) -> list[MoodLog]:
        """Logs of ``user_id`` with ``start <= day <= end``, newest first."""
        logs = [
            log
            for log in self._load()
            if log.user_id == user_id and start <= log.day <= end
        ]
        return sorted(logs, key=lambda log: log.day, reverse=True)
