"""Quiz session controller shared by the UI and tests."""

from __future__ import annotations

from collections.abc import Callable
import logging

from space_quiz.constants.quiz_constants import REVEAL_DELAY_MS, ROUND_SIZE
from space_quiz.core import session_transitions
from space_quiz.core.errors import EmptyQuestionBankError, QuizStateError
from space_quiz.core.models import QuestionRecord, SessionPhase, SessionState
from space_quiz.core.question_bank import QuestionBank
from space_quiz.core.reveal_scheduler import RevealScheduler, ScheduledCallback
from space_quiz.core.round_builder import RoundBuilder

logger = logging.getLogger(__name__)

StateListener = Callable[[SessionState], None]


class QuizSessionController:
    """Owns the session state, the reveal timer and the change listeners.

    State is an immutable :class:`SessionState` replaced on every transition.
    Listeners receive the new snapshot after each change. The controller runs
    on a single thread; the only deferred work is the reveal callback, which
    ``reset()`` cancels.
    """

    def __init__(
        self,
        question_bank: QuestionBank,
        scheduler: RevealScheduler,
        *,
        round_size: int = ROUND_SIZE,
        reveal_delay_ms: int = REVEAL_DELAY_MS,
        seed: int | None = None,
    ) -> None:
        self._bank = question_bank
        self._scheduler = scheduler
        self._round_builder = RoundBuilder(seed)
        self._round_size = round_size
        self._reveal_delay_ms = reveal_delay_ms

        self._state: SessionState | None = None
        self._pending_reveal: ScheduledCallback | None = None
        self._rounds_started: int = 0
        self._listeners: list[StateListener] = []

    # --- Configuration ---

    def set_question_bank(self, question_bank: QuestionBank) -> None:
        """Swap the bank; takes effect on the next round."""
        self._bank = question_bank

    def configure(
        self,
        *,
        round_size: int | None = None,
        reveal_delay_ms: int | None = None,
    ) -> None:
        if round_size is not None:
            self._round_size = round_size
        if reveal_delay_ms is not None:
            self._reveal_delay_ms = reveal_delay_ms

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._round_builder.set_seed(seed)

    def get_question_bank(self) -> QuestionBank:
        return self._bank

    # --- Listeners ---

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # --- Transitions ---

    def start_round(self) -> SessionState:
        """Sample a fresh round and replace the whole session state."""
        self._cancel_pending_reveal()
        try:
            round_questions = self._round_builder.build_round(
                self._bank.get_questions(), self._round_size
            )
        except EmptyQuestionBankError:
            self._state = None
            logger.error("Cannot start a round: the question bank is empty.")
            raise

        self._rounds_started += 1
        state = session_transitions.new_round(round_questions, round_number=self._rounds_started)
        logger.info(
            "Starting round %d with %d questions", state.round_number, state.question_count
        )
        self._set_state(state)
        return state

    def reset(self) -> SessionState:
        return self.start_round()

    def select_option(self, option: str) -> bool:
        """Answer the current question. Returns False when the call is ignored."""
        if self._state is None:
            logger.debug("Ignoring selection %r: no round in progress", option)
            return False

        updated = session_transitions.select_option(self._state, option)
        if updated is self._state:
            logger.debug("Ignoring selection %r in phase %s", option, self._state.phase.name)
            return False

        answer = updated.answers[-1]
        logger.info(
            "Question %d/%d answered %s",
            updated.current_index + 1,
            updated.question_count,
            "correctly" if answer.is_correct else "incorrectly",
        )
        self._set_state(updated)

        round_number = updated.round_number
        self._pending_reveal = self._scheduler.schedule(
            self._reveal_delay_ms, lambda: self._finish_reveal(round_number)
        )
        return True

    def _finish_reveal(self, round_number: int) -> None:
        if self._state is None or self._state.round_number != round_number:
            logger.debug("Discarding reveal callback from replaced round %d", round_number)
            return
        self._pending_reveal = None

        updated = session_transitions.advance(self._state)
        if updated is self._state:
            return
        if updated.is_over:
            logger.info(
                "Round %d complete: %d/%d correct",
                updated.round_number,
                updated.correct_count,
                updated.question_count,
            )
        self._set_state(updated)

    def shutdown(self) -> None:
        """Cancel pending work and drop the session state."""
        self._cancel_pending_reveal()
        self._state = None
        self._listeners.clear()

    # --- Queries ---

    @property
    def state(self) -> SessionState | None:
        return self._state

    @property
    def phase(self) -> SessionPhase:
        if self._state is None:
            return SessionPhase.IDLE
        return self._state.phase

    @property
    def current_question(self) -> QuestionRecord | None:
        if self._state is None:
            return None
        return self._state.current_question

    def score(self) -> int:
        return session_transitions.score_percentage(self._require_state())

    def is_perfect_score(self) -> bool:
        return session_transitions.is_perfect(self._require_state())

    def has_pending_reveal(self) -> bool:
        return self._pending_reveal is not None and self._pending_reveal.is_pending

    # --- Internals ---

    def _require_state(self) -> SessionState:
        if self._state is None:
            raise QuizStateError("No round has been started.")
        return self._state

    def _cancel_pending_reveal(self) -> None:
        if self._pending_reveal is not None:
            self._pending_reveal.cancel()
            self._pending_reveal = None

    def _set_state(self, state: SessionState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
