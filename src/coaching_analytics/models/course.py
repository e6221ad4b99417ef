"""Course catalog models: Course -> Module -> Lesson/Quiz."""

from enum import StrEnum

from pydantic import BaseModel, Field


class LessonType(StrEnum):
    """Kinds of catalog content."""

    LESSON = "LESSON"
    CHAPTER = "CHAPTER"
    QUIZ = "QUIZ"


class QuizQuestion(BaseModel):
    """A multiple-choice question with the index of its correct option."""

    id: str
    question: str
    options: list[str] = Field(default_factory=list)
    correct_answer_index: int


class Lesson(BaseModel):
    id: str
    title: str
    type: LessonType = LessonType.LESSON
    duration: str | None = None
    content: str | None = None
    questions: list[QuizQuestion] = Field(default_factory=list)

    @property
    def is_quiz(self) -> bool:
        return self.type == LessonType.QUIZ


class Module(BaseModel):
    id: str
    title: str
    lessons: list[Lesson] = Field(default_factory=list)


class Course(BaseModel):
    """A course as published in the catalog."""

    id: str
    title: str
    category: str = ""
    modules: list[Module] = Field(default_factory=list)

    @property
    def lessons(self) -> list[Lesson]:
        """All lessons across all modules, in catalog order."""
        return [lesson for module in self.modules for lesson in module.lessons]

    @property
    def lesson_ids(self) -> set[str]:
        return {lesson.id for lesson in self.lessons}

    @property
    def quizzes_by_id(self) -> dict[str, Lesson]:
        return {lesson.id: lesson for lesson in self.lessons if lesson.is_quiz}

    def find_lesson(self, lesson_id: str) -> Lesson | None:
        for lesson in self.lessons:
            if lesson.id == lesson_id:
                return lesson
        return None
