"""Shared fixtures for the quiz core tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from space_quiz.core.models import QuestionRecord
from space_quiz.core.question_bank import QuestionBank
from space_quiz.core.quiz_controller import QuizSessionController


class ManualScheduledCallback:
    """Pending callback that only runs when a test fires it."""

    def __init__(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.delay_ms = delay_ms
        self._callback = callback
        self._pending = True

    @property
    def is_pending(self) -> bool:
        return self._pending

    def cancel(self) -> None:
        self._pending = False

    def fire(self) -> None:
        if not self._pending:
            return
        self._pending = False
        self._callback()

    def fire_ignoring_cancel(self) -> None:
        """Simulate a timer backend that delivers a callback after cancel()."""
        self._pending = False
        self._callback()


class ManualScheduler:
    """RevealScheduler whose callbacks run only when the test asks."""

    def __init__(self) -> None:
        self.scheduled: list[ManualScheduledCallback] = []

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ManualScheduledCallback:
        handle = ManualScheduledCallback(delay_ms, callback)
        self.scheduled.append(handle)
        return handle

    @property
    def pending(self) -> list[ManualScheduledCallback]:
        return [handle for handle in self.scheduled if handle.is_pending]

    def fire_all(self) -> None:
        for handle in list(self.scheduled):
            handle.fire()


def make_question(number: int, option_count: int = 4) -> QuestionRecord:
    options = tuple(f"Q{number} option {index}" for index in range(option_count))
    return QuestionRecord(
        question_text=f"Question {number}?",
        options=options,
        correct_option=options[0],
    )


def make_bank(count: int, option_count: int = 4) -> QuestionBank:
    return QuestionBank(make_question(number, option_count) for number in range(count))


def wrong_option(question: QuestionRecord) -> str:
    return next(option for option in question.options if option != question.correct_option)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def bank() -> QuestionBank:
    return make_bank(15)


@pytest.fixture
def controller(bank: QuestionBank, scheduler: ManualScheduler) -> QuizSessionController:
    return QuizSessionController(bank, scheduler, seed=7)
