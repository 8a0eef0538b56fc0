"""Tests for question sampling and option shuffling."""

from collections import Counter
import logging

import pytest

from conftest import make_question
from space_quiz.core.errors import EmptyQuestionBankError
from space_quiz.core.round_builder import RoundBuilder


class TestRoundBuilder:

    def test_round_is_capped_at_round_size(self):
        questions = [make_question(n) for n in range(25)]

        result = RoundBuilder(seed=1).build_round(questions, 10)

        assert len(result) == 10
        assert len({question.question_text for question in result}) == 10

    def test_small_bank_logs_warning(self, caplog):
        questions = [make_question(n) for n in range(3)]

        with caplog.at_level(logging.WARNING, logger="space_quiz.core.round_builder"):
            result = RoundBuilder(seed=1).build_round(questions, 10)

        assert len(result) == 3
        assert "only 3 questions" in caplog.text

    def test_empty_questions_raise(self):
        with pytest.raises(EmptyQuestionBankError):
            RoundBuilder().build_round([], 10)

    def test_non_positive_round_size_raises(self):
        with pytest.raises(ValueError):
            RoundBuilder().build_round([make_question(0)], 0)

    def test_seed_makes_rounds_repeatable(self):
        questions = [make_question(n) for n in range(12)]
        builder = RoundBuilder(seed=99)
        first = builder.build_round(questions, 5)

        builder.set_seed(99)

        assert builder.build_round(questions, 5) == first

    def test_input_questions_are_not_modified(self):
        questions = [make_question(n) for n in range(5)]
        snapshot = list(questions)

        RoundBuilder(seed=3).build_round(questions, 5)

        assert questions == snapshot

    def test_every_option_reaches_first_position(self):
        """Option order is spread roughly evenly over many shuffles."""
        question = make_question(0, option_count=4)
        builder = RoundBuilder(seed=1234)

        first_positions = Counter(
            builder.build_round([question], 1)[0].options[0] for _ in range(400)
        )

        assert set(first_positions) == set(question.options)
        assert all(count > 50 for count in first_positions.values())
