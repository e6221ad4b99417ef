"""Quiz grading results."""

from pydantic import BaseModel, Field


class QuestionResult(BaseModel):
    question_id: str
    is_correct: bool
    correct_answer_index: int


class QuizResult(BaseModel):
    """Score (0-100) and verdict for one quiz submission."""

    score: int = 0
    passed: bool = False
    per_question: list[QuestionResult] = Field(default_factory=list)
