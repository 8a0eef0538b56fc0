"""Qt main window presenting the quiz round and its result."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from space_quiz.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from space_quiz.constants.ui_constants import (
    ABOUT_BUTTON,
    LOAD_BUTTON,
    LOAD_DIALOG_TITLE,
    LOAD_FILE_FILTER,
    NO_QUESTIONS_MESSAGE,
    QUIZ_SUBTITLE,
    QUIZ_TITLE,
    SETTINGS_BUTTON,
    WINDOW_TITLE,
)
from space_quiz.core.errors import EmptyQuestionBankError, QuestionBankError
from space_quiz.core.models import SessionPhase, SessionState
from space_quiz.core.question_bank import load_question_bank
from space_quiz.core.quiz_controller import QuizSessionController
from space_quiz.core.settings import QuizSettings
from space_quiz.styling.color_palette import Theme
from space_quiz.styling.styles import Styles
from space_quiz.ui.components.question_panel import QuestionPanel
from space_quiz.ui.components.result_panel import ResultPanel
from space_quiz.ui.dialog_helpers import show_error, show_info
from space_quiz.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)

_PAGE_EMPTY = 0
_PAGE_QUESTION = 1
_PAGE_RESULT = 2


class QuizWindow(QMainWindow):
    """Main Qt window; a pure view of the controller's session state."""

    def __init__(
        self,
        controller: QuizSessionController,
        settings: QuizSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.controller = controller
        self._settings = settings or QuizSettings()
        self._last_load_dir: Path = Path.home()

        self._build_ui()
        self._apply_styles()
        self.controller.add_listener(self._render_state)
        self._start_new_round()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_toolbar_buttons(root_layout)

        self.title_label = QLabel(QUIZ_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.title_label)

        self.subtitle_label = QLabel(QUIZ_SUBTITLE, self)
        self.subtitle_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.subtitle_label)

        self.page_stack = QStackedWidget(self)

        self.empty_label = QLabel(NO_QUESTIONS_MESSAGE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setWordWrap(True)
        self.question_panel = QuestionPanel(self._handle_option_selected, self)
        self.result_panel = ResultPanel(self._handle_retry, self)

        self.page_stack.addWidget(self.empty_label)
        self.page_stack.addWidget(self.question_panel)
        self.page_stack.addWidget(self.result_panel)

        root_layout.addWidget(self.page_stack, stretch=1)

    def _build_toolbar_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.load_button = QPushButton(LOAD_BUTTON, self)
        self.load_button.clicked.connect(self._handle_load_questions)
        button_row.addWidget(self.load_button)

        button_row.addStretch()

        self.settings_button = QPushButton(SETTINGS_BUTTON, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        layout.addLayout(button_row)

    # --- Controller interaction ---

    def _start_new_round(self) -> None:
        self.question_panel.reset_state()
        try:
            self.controller.start_round()
        except EmptyQuestionBankError:
            self.page_stack.setCurrentIndex(_PAGE_EMPTY)

    def _handle_option_selected(self, option: str) -> None:
        self.controller.select_option(option)

    def _handle_retry(self) -> None:
        self._start_new_round()

    def _render_state(self, state: SessionState) -> None:
        phase = state.phase
        if phase == SessionPhase.COMPLETE:
            self.result_panel.render(
                state,
                score=self.controller.score(),
                is_perfect=self.controller.is_perfect_score(),
            )
            self.page_stack.setCurrentIndex(_PAGE_RESULT)
        else:
            self.question_panel.render(state)
            self.page_stack.setCurrentIndex(_PAGE_QUESTION)

    # --- Toolbar handlers ---

    def _handle_load_questions(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            LOAD_DIALOG_TITLE,
            str(self._last_load_dir),
            LOAD_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            loaded = load_question_bank(Path(file_path))
        except QuestionBankError as exc:
            show_error(self, "Load failed", str(exc))
            return

        self._last_load_dir = loaded.source_path.parent
        self.controller.set_question_bank(loaded.bank)
        self._start_new_round()
        show_info(
            self,
            "Questions loaded",
            f"Loaded {loaded.bank.get_question_count()} questions from {loaded.source_path.name}.",
        )

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self._settings)
        if not dialog.exec():
            return

        self._settings = dialog.get_settings()
        logger.info("Applying settings: %s", self._settings)
        self.controller.configure(
            round_size=self._settings.round_size,
            reveal_delay_ms=self._settings.reveal_delay_ms,
        )
        self.controller.set_shuffle_seed(self._settings.shuffle_seed)
        self._apply_styles()
        self._start_new_round()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}\n\n"
            f"{HELP_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    # --- Styling ---

    def _current_theme(self) -> Theme:
        return Theme.DARK if self._settings.dark_theme else Theme.LIGHT

    def _apply_styles(self) -> None:
        theme = self._current_theme()
        self.setStyleSheet(Styles.get_main_window_style(theme))
        self.title_label.setStyleSheet(Styles.get_title_style(theme))
        self.subtitle_label.setStyleSheet(Styles.get_subtitle_style(theme))
        self.empty_label.setStyleSheet(Styles.get_subtitle_style(theme))

        font_size = self._settings.game_font_size
        self.question_panel.apply_display_settings(font_size, theme)
        self.result_panel.apply_display_settings(font_size, theme)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt override
        self.controller.shutdown()
        super().closeEvent(event)
