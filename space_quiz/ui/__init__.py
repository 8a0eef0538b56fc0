"""Qt UI components for the quiz application."""

from .dialog_helpers import show_error, show_info
from .qt_reveal_scheduler import QtRevealScheduler
from .quiz_window import QuizWindow

__all__ = [
    "QuizWindow",
    "QtRevealScheduler",
    "show_error",
    "show_info",
]
