"""Exception hierarchy for the quiz core."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for all quiz errors."""


class QuestionBankError(QuizError):
    """Raised when a question bank cannot be loaded or fails validation."""


class EmptyQuestionBankError(QuestionBankError):
    """Raised when a round is requested from a bank with no questions."""


class QuizStateError(QuizError):
    """Raised when a query needs a round that has not been started."""
