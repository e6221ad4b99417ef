"""Per-user, per-course progress ledger models."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator


def utc_now() -> datetime:
    return datetime.now(UTC)


class CourseProgress(BaseModel):
    """Progress of one user through one course."""

    course_id: str
    completed_lesson_ids: list[str] = Field(default_factory=list)
    progress: int = 0  # 0-100, always derived from the catalog
    score: int = 0  # last passing quiz score
    last_access: datetime = Field(default_factory=utc_now)

    @field_validator("completed_lesson_ids")
    @classmethod
    def dedupe_lesson_ids(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))

    def is_completed(self, lesson_id: str) -> bool:
        return lesson_id in self.completed_lesson_ids

    def add_lesson(self, lesson_id: str) -> None:
        if lesson_id not in self.completed_lesson_ids:
            self.completed_lesson_ids.append(lesson_id)

    def remove_lesson(self, lesson_id: str) -> None:
        self.completed_lesson_ids = [
            lid for lid in self.completed_lesson_ids if lid != lesson_id
        ]

    def touch(self, now: datetime | None = None) -> None:
        self.last_access = now or utc_now()


class LessonToggleResult(BaseModel):
    """Outcome of a lesson toggle or explicit completion change."""

    is_completed: bool
    completed_lesson_ids: list[str]
    progress: int
