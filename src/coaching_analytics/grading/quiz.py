"""Quiz grading."""

from collections.abc import Mapping
from typing import Any

from coaching_analytics.errors import InvalidInput
from coaching_analytics.models.course import Lesson
from coaching_analytics.models.quiz import QuestionResult, QuizResult
from coaching_analytics.scoring import percentage

PASSING_SCORE = 70


def validate_answers(answers: Any) -> dict[str, int]:
    """Check that submitted answers map question ids to option indexes.

    Raises:
        InvalidInput: If ``answers`` is not a mapping of str to int.
    """
    if not isinstance(answers, Mapping):
        raise InvalidInput("Answers must be a mapping of question id to option index")
    for question_id, selected in answers.items():
        # bool is an int subclass but never a valid option index
        if not isinstance(question_id, str) or isinstance(selected, bool) or not isinstance(
            selected, int
        ):
            raise InvalidInput(f"Invalid answer for question {question_id!r}: {selected!r}")
    return dict(answers)


def grade(quiz: Lesson, answers: Mapping[str, int]) -> QuizResult:
    """Score submitted answers against a quiz.

    Unanswered questions count as incorrect. A quiz without questions scores
    0 and does not pass.

    Args:
        quiz: Quiz lesson holding the questions.
        answers: Selected option index per question id.

    Returns:
        QuizResult with the 0-100 score, verdict and per-question detail.
    """
    per_question = [
        QuestionResult(
            question_id=question.id,
            is_correct=answers.get(question.id) == question.correct_answer_index,
            correct_answer_index=question.correct_answer_index,
        )
        for question in quiz.questions
    ]
    correct = sum(1 for result in per_question if result.is_correct)
    score = percentage(correct, len(per_question), empty=0)
    passed = bool(per_question) and score >= PASSING_SCORE
    return QuizResult(score=score, passed=passed, per_question=per_question)
