"""Read-only access to coaching sessions stored as one JSON file each."""

import json
from datetime import datetime
from pathlib import Path

import structlog

from coaching_analytics.models.session import CoachingSession

logger = structlog.get_logger()


class JsonSessionStore:
    def __init__(self, sessions_dir: Path):
        self.sessions_dir = sessions_dir
        self.sessions_dir.mkdir(parents=True, exist_ok=True)

    def _iter_sessions(self):
        for path in sorted(self.sessions_dir.glob("*.json")):
            yield CoachingSession(**json.loads(path.read_text(encoding="utf-8")))

    def find_completed_for_user_in_range(
        self, user_id: str, start: datetime | None, end: datetime | None
    ) -> list[CoachingSession]:
        """Completed sessions attended by ``user_id`` with ``start <= start_time < end``.

        A ``None`` bound leaves that side of the range open.
        """
        sessions = []
        for session in self._iter_sessions():
            if not session.is_completed or user_id not in session.attendees:
                continue
            if start is not None and session.start_time < start:
                continue
            if end is not None and session.start_time >= end:
                continue
            sessions.append(session)
        logger.debug("sessions_loaded", user_id=user_id, count=len(sessions))
        return sessions
