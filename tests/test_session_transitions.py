"""Tests for the pure session transition functions."""

import pytest

from conftest import make_question, wrong_option
from space_quiz.core import session_transitions
from space_quiz.core.errors import QuizStateError
from space_quiz.core.models import SessionPhase, SessionState


def make_state(count: int) -> SessionState:
    return session_transitions.new_round(tuple(make_question(n) for n in range(count)))


class TestNewRound:

    def test_fresh_state(self):
        state = make_state(3)

        assert state.phase == SessionPhase.IN_PROGRESS
        assert state.current_question == state.round_questions[0]
        assert state.round_number == 1

    def test_empty_round_is_rejected(self):
        with pytest.raises(QuizStateError):
            session_transitions.new_round(())


class TestSelectAndAdvance:

    def test_select_does_not_mutate_input(self):
        state = make_state(2)
        option = state.current_question.correct_option

        updated = session_transitions.select_option(state, option)

        assert state.selected_option is None
        assert updated.selected_option == option
        assert updated.correct_count == 1

    def test_select_returns_same_state_when_revealing(self):
        state = session_transitions.select_option(make_state(2), "Q0 option 1")

        assert session_transitions.select_option(state, "Q0 option 0") is state

    def test_advance_without_selection_is_noop(self):
        state = make_state(2)

        assert session_transitions.advance(state) is state

    def test_advance_past_last_question_completes(self):
        state = make_state(1)
        state = session_transitions.select_option(state, wrong_option(state.current_question))

        finished = session_transitions.advance(state)

        assert finished.is_over is True
        assert finished.current_index == 1
        assert finished.selected_option is None
        assert finished.phase == SessionPhase.COMPLETE
        assert finished.current_question is None

    def test_advance_when_complete_is_noop(self):
        state = make_state(1)
        state = session_transitions.advance(
            session_transitions.select_option(state, state.current_question.correct_option)
        )

        assert session_transitions.advance(state) is state


class TestScorePercentage:

    @pytest.mark.parametrize(
        ("correct", "total", "expected"),
        [
            (0, 10, 0),
            (10, 10, 100),
            (1, 4, 25),
            (1, 3, 33),
            (2, 3, 67),
            (1, 8, 13),  # halves round up
            (7, 10, 70),
        ],
    )
    def test_rounding(self, correct, total, expected):
        state = SessionState(
            round_questions=tuple(make_question(n) for n in range(total)),
            correct_count=correct,
        )

        assert session_transitions.score_percentage(state) == expected

    def test_empty_round_has_no_score(self):
        with pytest.raises(QuizStateError):
            session_transitions.score_percentage(SessionState(round_questions=()))

    def test_is_perfect_requires_finished_round(self):
        state = SessionState(
            round_questions=(make_question(0),), correct_count=1, is_over=False
        )

        assert session_transitions.is_perfect(state) is False
