"""Application entry point for Space Quiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from space_quiz.constants.quiz_constants import DEFAULT_QUESTION_BANK_PATH
from space_quiz.core.errors import QuestionBankError
from space_quiz.core.question_bank import QuestionBank, load_question_bank
from space_quiz.core.quiz_controller import QuizSessionController
from space_quiz.core.settings import QuizSettings
from space_quiz.ui.dialog_helpers import show_error
from space_quiz.ui.qt_reveal_scheduler import QtRevealScheduler
from space_quiz.ui.quiz_window import QuizWindow
from space_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, load the bundled questions, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting Space Quiz…")

    app = QApplication(sys.argv)

    load_error: QuestionBankError | None = None
    try:
        question_bank = load_question_bank(DEFAULT_QUESTION_BANK_PATH).bank
    except QuestionBankError as exc:
        logger.error("Could not load bundled questions: %s", exc)
        load_error = exc
        question_bank = QuestionBank()

    settings = QuizSettings()
    controller = QuizSessionController(
        question_bank,
        QtRevealScheduler(app),
        round_size=settings.round_size,
        reveal_delay_ms=settings.reveal_delay_ms,
        seed=settings.shuffle_seed,
    )
    window = QuizWindow(controller=controller, settings=settings)
    window.show()
    if load_error is not None:
        show_error(window, "Question bank unavailable", str(load_error))
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
