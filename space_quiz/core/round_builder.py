"""Builds the randomized question sequence for a quiz round."""

from __future__ import annotations

from collections.abc import Sequence
import logging
import random

from space_quiz.core.errors import EmptyQuestionBankError
from space_quiz.core.models import QuestionRecord

logger = logging.getLogger(__name__)


class RoundBuilder:
    """Samples questions and shuffles their options with a private RNG."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def set_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    def build_round(
        self, questions: Sequence[QuestionRecord], round_size: int
    ) -> tuple[QuestionRecord, ...]:
        """Return up to ``round_size`` distinct questions with shuffled options."""
        if not questions:
            raise EmptyQuestionBankError("Cannot start a round without questions.")
        if round_size <= 0:
            raise ValueError("Round size must be a positive integer.")

        if len(questions) < round_size:
            logger.warning(
                "Question bank has only %d questions; round capped below %d.",
                len(questions),
                round_size,
            )
        count = min(round_size, len(questions))
        sampled = self._rng.sample(list(questions), count)
        return tuple(self._shuffle_options(question) for question in sampled)

    def _shuffle_options(self, question: QuestionRecord) -> QuestionRecord:
        options = list(question.options)
        self._rng.shuffle(options)
        return QuestionRecord(
            question_text=question.question_text,
            options=tuple(options),
            correct_option=question.correct_option,
        )
