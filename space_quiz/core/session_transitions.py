"""Pure transition functions over :class:`SessionState`.

None of these functions mutate their input. A transition that does not apply
returns the very same state object, which lets callers detect no-ops with an
identity check.
"""

from __future__ import annotations

from dataclasses import replace

from space_quiz.core.errors import QuizStateError
from space_quiz.core.models import AnswerRecord, QuestionRecord, SessionState


def new_round(round_questions: tuple[QuestionRecord, ...], round_number: int = 1) -> SessionState:
    if not round_questions:
        raise QuizStateError("A round needs at least one question.")
    return SessionState(round_questions=round_questions, round_number=round_number)


def select_option(state: SessionState, option: str) -> SessionState:
    """Record ``option`` for the current question and enter the reveal window."""
    question = state.current_question
    if question is None or state.selected_option is not None:
        return state
    if option not in question.options:
        return state

    is_correct = question.is_correct(option)
    return replace(
        state,
        selected_option=option,
        correct_count=state.correct_count + (1 if is_correct else 0),
        answers=state.answers + (AnswerRecord(question, option, is_correct),),
    )


def advance(state: SessionState) -> SessionState:
    """Leave the reveal window and move to the next question or finish."""
    if state.selected_option is None or state.is_over:
        return state

    next_index = state.current_index + 1
    return replace(
        state,
        selected_option=None,
        current_index=next_index,
        is_over=next_index >= state.question_count,
    )


def score_percentage(state: SessionState) -> int:
    """Percentage of correct answers, rounding halves up."""
    total = state.question_count
    if total == 0:
        raise QuizStateError("Score is undefined for a round without questions.")
    return (200 * state.correct_count + total) // (2 * total)


def is_perfect(state: SessionState) -> bool:
    return state.is_over and state.correct_count == state.question_count
