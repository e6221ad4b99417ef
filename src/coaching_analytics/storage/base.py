"""Store interfaces the engine reads from and writes to."""

from datetime import date, datetime
from typing import Protocol

from coaching_analytics.models.course import Course
from coaching_analytics.models.mood import MoodLog
from coaching_analytics.models.progress import CourseProgress
from coaching_analytics.models.session import CoachingSession
from coaching_analytics.models.user import User, UserRole


class CourseCatalog(Protocol):
    def get_course(self, course_id: str) -> Course | None: ...


class ProgressStore(Protocol):
    def find(self, user_id: str, course_id: str) -> CourseProgress | None: ...

    def upsert(self, user_id: str, entry: CourseProgress) -> None: ...

    def list_for_user(self, user_id: str) -> list[CourseProgress]: ...

    def remove(self, user_id: str, course_id: str) -> bool: ...


class SessionStore(Protocol):
    def find_completed_for_user_in_range(
        self, user_id: str, start: datetime | None, end: datetime | None
    ) -> list[CoachingSession]: ...


class MoodStore(Protocol):
    def find_for_user_in_range(self, user_id: str, start: date, end: date) -> list[MoodLog]: ...

    def upsert(self, log: MoodLog) -> MoodLog: ...


class UserDirectory(Protocol):
    def get_user(self, user_id: str) -> User | None: ...

    def list_users(self, roles: frozenset[UserRole] | None = None) -> list[User]: ...
