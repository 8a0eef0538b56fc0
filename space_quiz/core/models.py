"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class SessionPhase(Enum):
    """Observable phase of the quiz session state machine."""

    IDLE = auto()
    IN_PROGRESS = auto()
    REVEALING = auto()
    COMPLETE = auto()


@dataclass(frozen=True, slots=True)
class QuestionRecord:
    """Multiple-choice question with its option texts and correct answer."""

    question_text: str
    options: tuple[str, ...]
    correct_option: str

    def is_correct(self, option: str) -> bool:
        return option == self.correct_option


@dataclass(frozen=True, slots=True)
class AnswerRecord:
    """Represents the option chosen for one question of a round."""

    question: QuestionRecord
    selected_option: str
    is_correct: bool


@dataclass(frozen=True, slots=True)
class SessionState:
    """Immutable snapshot of one quiz round.

    Every transition produces a new instance; nothing mutates a snapshot
    after it has been handed to listeners.
    """

    round_questions: tuple[QuestionRecord, ...]
    current_index: int = 0
    selected_option: str | None = None
    correct_count: int = 0
    is_over: bool = False
    answers: tuple[AnswerRecord, ...] = field(default_factory=tuple)
    round_number: int = 1

    @property
    def question_count(self) -> int:
        return len(self.round_questions)

    @property
    def current_question(self) -> QuestionRecord | None:
        if self.is_over or not 0 <= self.current_index < len(self.round_questions):
            return None
        return self.round_questions[self.current_index]

    @property
    def phase(self) -> SessionPhase:
        if self.is_over:
            return SessionPhase.COMPLETE
        if self.selected_option is not None:
            return SessionPhase.REVEALING
        return SessionPhase.IN_PROGRESS
