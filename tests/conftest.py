"""Shared fixtures: in-memory stores, a sample catalog and a fixed clock."""

from datetime import UTC, date, datetime

import pytest

from coaching_analytics.engine import ProgressEngine
from coaching_analytics.models.course import Course, Lesson, LessonType, Module, QuizQuestion
from coaching_analytics.models.mood import MoodLog
from coaching_analytics.models.progress import CourseProgress
from coaching_analytics.models.session import CoachingSession
from coaching_analytics.models.user import User, UserRole

# Wednesday
NOW = datetime(2026, 3, 4, 15, 30, tzinfo=UTC)


class MemoryCatalog:
    def __init__(self, courses: list[Course]):
        self.courses = {c.id: c for c in courses}

    def get_course(self, course_id: str) -> Course | None:
        return self.courses.get(course_id)


class MemoryProgressStore:
    def __init__(self):
        self.entries: dict[str, dict[str, CourseProgress]] = {}

    def find(self, user_id, course_id):
        entry = self.entries.get(user_id, {}).get(course_id)
        return entry.model_copy(deep=True) if entry else None

    def upsert(self, user_id, entry):
        self.entries.setdefault(user_id, {})[entry.course_id] = entry.model_copy(deep=True)

    def list_for_user(self, user_id):
        return [e.model_copy(deep=True) for e in self.entries.get(user_id, {}).values()]

    def remove(self, user_id, course_id):
        return self.entries.get(user_id, {}).pop(course_id, None) is not None


class MemorySessionStore:
    def __init__(self, sessions: list[CoachingSession] | None = None):
        self.sessions = sessions or []

    def find_completed_for_user_in_range(self, user_id, start, end):
        return [
            s
            for s in self.sessions
            if s.is_completed
            and user_id in s.attendees
            and (start is None or s.start_time >= start)
            and (end is None or s.start_time < end)
        ]


class MemoryMoodStore:
    def __init__(self, logs: list[MoodLog] | None = None):
        self.logs = {(log.user_id, log.day): log for log in logs or []}

    def upsert(self, log):
        self.logs[(log.user_id, log.day)] = log
        return log

    def find_for_user_in_range(self, user_id, start: date, end: date):
        logs = [
            log for (uid, day), log in self.logs.items() if uid == user_id and start <= day <= end
        ]
        return sorted(logs, key=lambda log: log.day, reverse=True)


class MemoryUserDirectory:
    def __init__(self, users: list[User]):
        self.users = {u.id: u for u in users}

    def get_user(self, user_id):
        return self.users.get(user_id)

    def list_users(self, roles=None):
        return [u for u in self.users.values() if roles is None or u.role in roles]


def make_course(lesson_count: int = 3, course_id: str = "c1") -> Course:
    lessons = [Lesson(id=f"l{i}", title=f"Lesson {i}") for i in range(1, lesson_count + 1)]
    quiz = Lesson(
        id="quiz",
        title="Final quiz",
        type=LessonType.QUIZ,
        questions=[
            QuizQuestion(id=f"q{i}", question=f"Question {i}", options=["a", "b", "c"],
                         correct_answer_index=i % 3)
            for i in range(1, 11)
        ],
    )
    return Course(
        id=course_id,
        title="Leadership Essentials",
        category="Management",
        modules=[
            Module(id="m1", title="Foundations", lessons=lessons),
            Module(id="m2", title="Assessment", lessons=[quiz]),
        ],
    )


def make_session(
    start: datetime,
    duration: int = 60,
    attendees: tuple[str, ...] = ("u1",),
    assessments: list[dict] | None = None,
    status: str = "COMPLETED",
) -> CoachingSession:
    return CoachingSession(
        id=f"s-{start.isoformat()}",
        coach_id="coach",
        attendees=list(attendees),
        start_time=start,
        end_time=start,
        duration=duration,
        status=status,
        assessments=assessments or [],
    )


def assessment(target: str = "u1", leadership=8, communication=7, adaptability=9, emotional_int=8):
    return {
        "rater_id": "peer",
        "target_id": target,
        "leadership": leadership,
        "communication": communication,
        "adaptability": adaptability,
        "emotional_int": emotional_int,
    }


@pytest.fixture
def users():
    return MemoryUserDirectory([
        User(id="u1", name="Alice Martin", email="alice@example.com"),
        User(id="u2", name="Bruno Petit", email="bruno@example.com"),
        User(id="coach", name="Chloe Coach", role=UserRole.COACH),
        User(id="boss", name="Dana Manager", role=UserRole.MANAGER),
        User(id="admin", name="Admin", role=UserRole.ADMIN),
    ])


@pytest.fixture
def catalog():
    return MemoryCatalog([make_course(), make_course(lesson_count=0, course_id="empty")])


@pytest.fixture
def progress_store():
    return MemoryProgressStore()


@pytest.fixture
def session_store():
    return MemorySessionStore()


@pytest.fixture
def mood_store():
    return MemoryMoodStore()


@pytest.fixture
def engine(catalog, progress_store, session_store, mood_store, users):
    return ProgressEngine(
        catalog=catalog,
        progress=progress_store,
        sessions=session_store,
        moods=mood_store,
        users=users,
        clock=lambda: NOW,
    )
