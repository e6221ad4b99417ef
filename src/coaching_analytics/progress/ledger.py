"""Progress ledger: completed lessons and completion percentage per course."""

from collections.abc import Callable
from datetime import datetime

import structlog

from coaching_analytics.errors import NotFound
from coaching_analytics.models.course import Course
from coaching_analytics.models.progress import CourseProgress, LessonToggleResult, utc_now
from coaching_analytics.scoring import percentage
from coaching_analytics.storage.base import CourseCatalog, ProgressStore, UserDirectory

logger = structlog.get_logger()


def compute_progress(completed_lesson_ids: list[str], lesson_ids: set[str]) -> int:
    """Completion percentage of a course.

    Stale ids (lessons deleted from the catalog) are ignored. A course with no
    lessons counts as complete.

    Args:
        completed_lesson_ids: Lesson ids recorded as completed.
        lesson_ids: Every lesson id currently in the course.

    Returns:
        Integer percentage 0-100.
    """
    valid = lesson_ids.intersection(completed_lesson_ids)
    return percentage(len(valid), len(lesson_ids), empty=100)


class ProgressLedger:
    """Reads and mutates per-user course progress against the live catalog.

    Args:
        catalog: Course catalog used to count lessons.
        store: Persistence for progress entries.
        users: Directory used to check that users exist.
        clock: Source of the current time for ``last_access``.
    """

    def __init__(
        self,
        catalog: CourseCatalog,
        store: ProgressStore,
        users: UserDirectory,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.catalog = catalog
        self.store = store
        self.users = users
        self.clock = clock

    def _require_user(self, user_id: str) -> None:
        if self.users.get_user(user_id) is None:
            raise NotFound("User", user_id)

    def _require_course(self, course_id: str) -> Course:
        course = self.catalog.get_course(course_id)
        if course is None:
            raise NotFound("Course", course_id)
        return course

    def _require_lesson(self, course: Course, lesson_id: str) -> None:
        if course.find_lesson(lesson_id) is None:
            raise NotFound("Lesson", lesson_id)

    def get_or_create(self, user_id: str, course_id: str) -> CourseProgress:
        """Return the user's entry for a course, creating a zeroed one if needed."""
        entry = self.store.find(user_id, course_id)
        if entry is not None:
            return entry
        entry = CourseProgress(course_id=course_id, last_access=self.clock())
        self.store.upsert(user_id, entry)
        logger.info("progress_entry_created", user_id=user_id, course_id=course_id)
        return entry

    def list_progress(self, user_id: str) -> list[CourseProgress]:
        return self.store.list_for_user(user_id)

    def _save(self, user_id: str, course: Course, entry: CourseProgress) -> None:
        entry.progress = compute_progress(entry.completed_lesson_ids, course.lesson_ids)
        entry.touch(self.clock())
        self.store.upsert(user_id, entry)

    def toggle_lesson(self, user_id: str, course_id: str, lesson_id: str) -> LessonToggleResult:
        """Flip the completion state of a lesson and recompute progress."""
        self._require_user(user_id)
        course = self._require_course(course_id)
        self._require_lesson(course, lesson_id)

        entry = self.get_or_create(user_id, course_id)
        if entry.is_completed(lesson_id):
            entry.remove_lesson(lesson_id)
        else:
            entry.add_lesson(lesson_id)
        self._save(user_id, course, entry)

        logger.info(
            "lesson_toggled",
            user_id=user_id,
            course_id=course_id,
            lesson_id=lesson_id,
            is_completed=entry.is_completed(lesson_id),
            progress=entry.progress,
        )
        return LessonToggleResult(
            is_completed=entry.is_completed(lesson_id),
            completed_lesson_ids=list(entry.completed_lesson_ids),
            progress=entry.progress,
        )

    def mark_lesson_complete(
        self, user_id: str, course_id: str, lesson_id: str, completed: bool = True
    ) -> LessonToggleResult:
        """Set (not toggle) the completion state of a lesson."""
        self._require_user(user_id)
        course = self._require_course(course_id)
        self._require_lesson(course, lesson_id)

        if not completed:
            existing = self.store.find(user_id, course_id)
            if existing is None or not existing.is_completed(lesson_id):
                # nothing to remove; leave the store untouched
                return LessonToggleResult(
                    is_completed=False,
                    completed_lesson_ids=list(existing.completed_lesson_ids) if existing else [],
                    progress=existing.progress if existing else 0,
                )

        entry = self.get_or_create(user_id, course_id)
        if completed:
            entry.add_lesson(lesson_id)
        else:
            entry.remove_lesson(lesson_id)
        self._save(user_id, course, entry)

        logger.info(
            "lesson_marked",
            user_id=user_id,
            course_id=course_id,
            lesson_id=lesson_id,
            completed=completed,
            progress=entry.progress,
        )
        return LessonToggleResult(
            is_completed=entry.is_completed(lesson_id),
            completed_lesson_ids=list(entry.completed_lesson_ids),
            progress=entry.progress,
        )

    def update_progress(
        self, user_id: str, course_id: str, lesson_id: str, is_completed: bool
    ) -> CourseProgress:
        """Legacy progress update.

        Unlike ``mark_lesson_complete`` the lesson does not have to exist in
        the catalog, and if the course itself is gone the stored percentage is
        kept as is.
        """
        self._require_user(user_id)
        entry = self.get_or_create(user_id, course_id)
        if is_completed:
            entry.add_lesson(lesson_id)
        else:
            entry.remove_lesson(lesson_id)

        course = self.catalog.get_course(course_id)
        if course is not None:
            entry.progress = compute_progress(entry.completed_lesson_ids, course.lesson_ids)
        entry.touch(self.clock())
        self.store.upsert(user_id, entry)
        return entry

    def record_quiz_pass(
        self, user_id: str, course: Course, lesson_id: str, score: int
    ) -> CourseProgress:
        """Mark a passed quiz lesson complete and store its score."""
        entry = self.get_or_create(user_id, course.id)
        entry.add_lesson(lesson_id)
        entry.score = score
        self._save(user_id, course, entry)
        return entry

    def remove_acquisition(self, user_id: str, course_id: str) -> None:
        """Delete the user's progress entry for a course."""
        if not self.store.remove(user_id, course_id):
            raise NotFound("Progress entry", f"{user_id}/{course_id}")
        logger.info("progress_entry_removed", user_id=user_id, course_id=course_id)
