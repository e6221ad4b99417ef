"""Certificate eligibility and descriptor construction."""

from coaching_analytics.models.certificate import Certificate
from coaching_analytics.models.course import Course
from coaching_analytics.models.progress import CourseProgress
from coaching_analytics.models.user import User


def is_eligible(entry: CourseProgress | None, course: Course) -> bool:
    """True when every lesson of the course is in the completed set."""
    if entry is None:
        return False
    return course.lesson_ids.issubset(entry.completed_lesson_ids)


def build_certificate(user: User, course: Course, organization: str) -> Certificate:
    return Certificate(
        id=f"cert-{user.id}-{course.id}",
        student_name=user.name,
        course_title=course.title,
        organization=organization,
    )
