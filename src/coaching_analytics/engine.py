"""Entry point used by the platform's routes."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import structlog

from coaching_analytics.analytics.aggregator import AnalyticsAggregator
from coaching_analytics.certificates.eligibility import build_certificate, is_eligible
from coaching_analytics.errors import InvalidInput, NotEligible, NotFound
from coaching_analytics.grading.quiz import grade, validate_answers
from coaching_analytics.models.certificate import Certificate
from coaching_analytics.models.course import Course
from coaching_analytics.models.mood import MoodLevel, MoodLog
from coaching_analytics.models.progress import CourseProgress, LessonToggleResult, utc_now
from coaching_analytics.models.quiz import QuizResult
from coaching_analytics.models.statistics import TeamMemberStatistics, UserStatistics
from coaching_analytics.models.user import User
from coaching_analytics.progress.ledger import ProgressLedger
from coaching_analytics.storage.base import (
    CourseCatalog,
    MoodStore,
    ProgressStore,
    SessionStore,
    UserDirectory,
)

logger = structlog.get_logger()

DEFAULT_ORGANIZATION = "CoachyLearning"


class ProgressEngine:
    """Progress, quiz, certificate and analytics operations over the platform stores.

    Every call works on a fresh read of the stores; nothing is cached between
    calls.
    """

    def __init__(
        self,
        catalog: CourseCatalog,
        progress: ProgressStore,
        sessions: SessionStore,
        moods: MoodStore,
        users: UserDirectory,
        organization: str = DEFAULT_ORGANIZATION,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.catalog = catalog
        self.moods = moods
        self.users = users
        self.organization = organization
        self.clock = clock
        self.ledger = ProgressLedger(catalog, progress, users, clock=clock)
        self.aggregator = AnalyticsAggregator(sessions, moods, progress, users, clock=clock)

    def _get_user(self, user_id: str) -> User:
        user = self.users.get_user(user_id)
        if user is None:
            raise NotFound("User", user_id)
        return user

    def _get_course(self, course_id: str) -> Course:
        course = self.catalog.get_course(course_id)
        if course is None:
            raise NotFound("Course", course_id)
        return course

    # Progress ledger

    def toggle_lesson(self, user_id: str, course_id: str, lesson_id: str) -> LessonToggleResult:
        return self.ledger.toggle_lesson(user_id, course_id, lesson_id)

    def mark_lesson_complete(
        self, user_id: str, course_id: str, lesson_id: str, completed: bool = True
    ) -> LessonToggleResult:
        return self.ledger.mark_lesson_complete(user_id, course_id, lesson_id, completed)

    def update_progress(
        self, user_id: str, course_id: str, lesson_id: str, is_completed: bool
    ) -> CourseProgress:
        return self.ledger.update_progress(user_id, course_id, lesson_id, is_completed)

    def remove_acquisition(self, user_id: str, course_id: str) -> None:
        self.ledger.remove_acquisition(user_id, course_id)

    # Quizzes

    def submit_quiz(
        self, user_id: str, course_id: str, lesson_id: str, answers: Any
    ) -> QuizResult:
        """Grade a quiz and, when passed, complete its lesson in the ledger.

        Raises:
            InvalidInput: Malformed answers, or the lesson is not a quiz.
            NotFound: Unknown course, lesson or user.
        """
        answers = validate_answers(answers)
        self._get_user(user_id)
        course = self._get_course(course_id)
        lesson = course.find_lesson(lesson_id)
        if lesson is None:
            raise NotFound("Lesson", lesson_id)
        if not lesson.is_quiz:
            raise InvalidInput(f"Lesson {lesson_id} is not a quiz")

        result = grade(lesson, answers)
        if result.passed:
            self.ledger.record_quiz_pass(user_id, course, lesson_id, result.score)

        logger.info(
            "quiz_submitted",
            user_id=user_id,
            course_id=course_id,
            lesson_id=lesson_id,
            score=result.score,
            passed=result.passed,
        )
        return result

    # Certificates

    def check_certificate_eligibility(self, user_id: str, course_id: str) -> bool:
        self._get_user(user_id)
        course = self._get_course(course_id)
        return is_eligible(self.ledger.store.find(user_id, course_id), course)

    def issue_certificate(self, user_id: str, course_id: str) -> Certificate:
        """Certificate descriptor for a finished course.

        Raises:
            NotEligible: The course has not been started or not every lesson is done.
        """
        user = self._get_user(user_id)
        course = self._get_course(course_id)
        if not is_eligible(self.ledger.store.find(user_id, course_id), course):
            raise NotEligible(f"Course {course_id} not completed by {user_id}")
        certificate = build_certificate(user, course, self.organization)
        logger.info("certificate_issued", user_id=user_id, course_id=course_id)
        return certificate

    # Daily mood check

    def record_mood(self, user_id: str, mood: int) -> MoodLog:
        """Save today's mood, replacing an earlier submission of the same day."""
        if isinstance(mood, bool) or not isinstance(mood, int):
            raise InvalidInput("Invalid mood value. Must be 1, 2, or 3.")
        try:
            level = MoodLevel(mood)
        except ValueError:
            raise InvalidInput("Invalid mood value. Must be 1, 2, or 3.") from None
        self._get_user(user_id)
        log = self.moods.upsert(
            MoodLog(user_id=user_id, day=self.clock().astimezone(UTC).date(), mood=level)
        )
        logger.info("mood_recorded", user_id=user_id, mood=int(level), day=str(log.day))
        return log

    def today_mood(self, user_id: str) -> MoodLevel | None:
        today = self.clock().astimezone(UTC).date()
        logs = self.moods.find_for_user_in_range(user_id, today, today)
        return logs[0].mood if logs else None

    def mood_history(self, user_id: str, days: int = 7) -> list[MoodLog]:
        """Mood logs of the last ``days`` days plus today, newest first."""
        if days < 0:
            raise InvalidInput("days must not be negative")
        today = self.clock().astimezone(UTC).date()
        return self.moods.find_for_user_in_range(user_id, today - timedelta(days=days), today)

    # Statistics

    def compute_user_statistics(self, user_id: str) -> UserStatistics:
        return self.aggregator.compute_user_statistics(user_id)

    def compute_team_statistics(self, manager_id: str) -> list[TeamMemberStatistics]:
        return self.aggregator.compute_team_statistics(manager_id)
