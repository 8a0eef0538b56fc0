"""Component showing the current question and its option buttons."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from space_quiz.constants.ui_constants import PROGRESS_TEMPLATE
from space_quiz.core.markdown_renderer import renderer
from space_quiz.core.models import QuestionRecord, SessionState
from space_quiz.styling.color_palette import ColorPalette, Theme
from space_quiz.styling.styles import Styles


class QuestionPanel(QWidget):
    """UI component for answering one question at a time."""

    def __init__(
        self,
        on_option_selected: Callable[[str], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_option_selected = on_option_selected

        self._font_size: int = 14
        self._theme: Theme = Theme.LIGHT
        self._rendered_question: QuestionRecord | None = None
        self._option_buttons: list[QPushButton] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.progress_label = QLabel("", self)
        self.progress_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.progress_label)

        self.question_label = QLabel("", self)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setWordWrap(True)
        self.question_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.question_label)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)
        layout.addStretch()

    def render(self, state: SessionState) -> None:
        question = state.current_question
        if question is None:
            return

        self.progress_label.setText(
            PROGRESS_TEMPLATE.format(current=state.current_index + 1, total=state.question_count)
        )
        if question is not self._rendered_question:
            self._rendered_question = question
            self.question_label.setText(
                renderer.render_for_label(
                    question.question_text,
                    self._font_size + 2,
                    ColorPalette.TEXT_PRIMARY.get(self._theme),
                )
            )
            self._rebuild_option_buttons(question)

        revealing = state.selected_option is not None
        for button in self._option_buttons:
            option = button.text()
            button.setEnabled(not revealing)
            button.setStyleSheet(
                Styles.get_option_button_style(
                    self._font_size,
                    self._theme,
                    correct=revealing and question.is_correct(option),
                    incorrect=revealing
                    and option == state.selected_option
                    and not question.is_correct(option),
                )
            )

    def _rebuild_option_buttons(self, question: QuestionRecord) -> None:
        for button in self._option_buttons:
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self._option_buttons = []

        for option in question.options:
            button = QPushButton(option, self)
            button.clicked.connect(lambda _checked=False, text=option: self.on_option_selected(text))
            self.options_layout.addWidget(button)
            self._option_buttons.append(button)

    def apply_display_settings(self, font_size: int, theme: Theme) -> None:
        self._font_size = font_size
        self._theme = theme
        self._rendered_question = None
        self.progress_label.setStyleSheet(Styles.get_subtitle_style(theme))
        self.question_label.setStyleSheet(Styles.get_question_box_style(theme))

    def reset_state(self) -> None:
        self._rendered_question = None
