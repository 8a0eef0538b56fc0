"""Component for the end-of-round score screen."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import (
    QFrame,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from space_quiz.constants.ui_constants import (
    RESULT_INTRO,
    RESULT_PERCENTAGE_TEMPLATE,
    RESULT_PERFECT_MESSAGE,
    RESULT_REVIEW_TITLE,
    RETRY_BUTTON,
)
from space_quiz.core.models import SessionState
from space_quiz.styling.color_palette import ColorPalette, Theme
from space_quiz.styling.styles import Styles


class ResultPanel(QWidget):
    """Shows the final percentage, an answer review and the retry button."""

    def __init__(self, on_retry: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_retry = on_retry
        self._font_size: int = 14
        self._theme: Theme = Theme.LIGHT

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.result_box = QFrame(self)
        box_layout = QVBoxLayout()
        self.result_box.setLayout(box_layout)

        self.congratulations_label = QLabel(RESULT_PERFECT_MESSAGE, self.result_box)
        self.congratulations_label.setAlignment(Qt.AlignCenter)
        self.congratulations_label.setWordWrap(True)
        box_layout.addWidget(self.congratulations_label)

        self.intro_label = QLabel(RESULT_INTRO, self.result_box)
        self.intro_label.setAlignment(Qt.AlignCenter)
        box_layout.addWidget(self.intro_label)

        self.percentage_label = QLabel("", self.result_box)
        self.percentage_label.setAlignment(Qt.AlignCenter)
        box_layout.addWidget(self.percentage_label)

        self.retry_button = QPushButton(RETRY_BUTTON, self.result_box)
        self.retry_button.clicked.connect(self._handle_retry)
        box_layout.addWidget(self.retry_button)

        layout.addWidget(self.result_box)

        self.review_label = QLabel(RESULT_REVIEW_TITLE, self)
        layout.addWidget(self.review_label)

        self.review_list = QListWidget(self)
        layout.addWidget(self.review_list, stretch=1)

    def _handle_retry(self) -> None:
        self.on_retry()

    def render(self, state: SessionState, score: int, is_perfect: bool) -> None:
        self.congratulations_label.setVisible(is_perfect)
        self.intro_label.setVisible(not is_perfect)
        self.percentage_label.setVisible(not is_perfect)
        self.percentage_label.setText(RESULT_PERCENTAGE_TEMPLATE.format(score=score))

        self.review_list.clear()
        for number, answer in enumerate(state.answers, start=1):
            mark = "✓" if answer.is_correct else "✗"
            text = f"{number}. {mark} {answer.question.question_text}: {answer.selected_option}"
            if not answer.is_correct:
                text += f" (resposta: {answer.question.correct_option})"
            item = QListWidgetItem(text, self.review_list)
            color = ColorPalette.CORRECT if answer.is_correct else ColorPalette.INCORRECT
            item.setForeground(QBrush(QColor(ColorPalette.TEXT_PRIMARY.get(self._theme))))
            item.setBackground(QBrush(QColor(color.get(self._theme))))

    def apply_display_settings(self, font_size: int, theme: Theme) -> None:
        self._font_size = font_size
        self._theme = theme
        self.result_box.setStyleSheet(Styles.get_result_box_style(theme))
        self.congratulations_label.setStyleSheet(Styles.get_congratulations_style(font_size, theme))
        self.intro_label.setStyleSheet(f"font-size: {font_size + 4}pt;")
        self.percentage_label.setStyleSheet(Styles.get_percentage_style(font_size, theme))
        self.retry_button.setStyleSheet(Styles.get_option_button_style(font_size, theme))
        self.review_label.setStyleSheet(Styles.get_subtitle_style(theme))
        self.review_list.setStyleSheet(f"font-size: {max(10, font_size - 2)}pt;")
