"""Settings dialog for configuring quiz preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from space_quiz.constants.quiz_constants import (
    GAME_FONT_SIZE_RANGE,
    REVEAL_DELAY_RANGE_MS,
    ROUND_SIZE_RANGE,
)
from space_quiz.core.settings import QuizSettings


class SettingsDialog(QDialog):
    """Dialog for configuring round size, reveal timing, seed and display."""

    def __init__(self, parent=None, settings: QuizSettings | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._settings = settings or QuizSettings()

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Round settings group
        round_group = QGroupBox("Round")
        round_layout = QVBoxLayout()
        round_group.setLayout(round_layout)

        self.round_size_spinbox = QSpinBox()
        self.round_size_spinbox.setRange(*ROUND_SIZE_RANGE)
        self.round_size_spinbox.setValue(self._settings.round_size)
        round_layout.addLayout(
            self._labeled_row("Questions per round:", self.round_size_spinbox,
                              "Rounds use every question when the bank is smaller.")
        )

        self.reveal_delay_spinbox = QSpinBox()
        self.reveal_delay_spinbox.setRange(*REVEAL_DELAY_RANGE_MS)
        self.reveal_delay_spinbox.setSingleStep(100)
        self.reveal_delay_spinbox.setSuffix(" ms")
        self.reveal_delay_spinbox.setValue(self._settings.reveal_delay_ms)
        round_layout.addLayout(
            self._labeled_row("Answer reveal time:", self.reveal_delay_spinbox,
                              "How long the correct answer stays highlighted.")
        )

        self.seed_input = QLineEdit()
        self.seed_input.setPlaceholderText("random")
        if self._settings.shuffle_seed is not None:
            self.seed_input.setText(str(self._settings.shuffle_seed))
        round_layout.addLayout(
            self._labeled_row("Shuffle seed:", self.seed_input,
                              "Fixed integer seed to repeat the same rounds; leave empty for random.")
        )

        layout.addWidget(round_group)

        # Display settings group
        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        self.font_spinbox = QSpinBox()
        self.font_spinbox.setRange(*GAME_FONT_SIZE_RANGE)
        self.font_spinbox.setSuffix(" pt")
        self.font_spinbox.setValue(self._settings.game_font_size)
        display_layout.addLayout(
            self._labeled_row("Game font size:", self.font_spinbox,
                              "Font size for questions, options and results.")
        )

        self.dark_theme_checkbox = QCheckBox("Dark theme")
        self.dark_theme_checkbox.setChecked(self._settings.dark_theme)
        display_layout.addWidget(self.dark_theme_checkbox)

        layout.addWidget(display_group)

        self.seed_error_label = QLabel("")
        self.seed_error_label.setVisible(False)
        layout.addWidget(self.seed_error_label)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self._handle_apply)
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    @staticmethod
    def _labeled_row(text: str, widget, tooltip: str) -> QHBoxLayout:
        row = QHBoxLayout()
        label = QLabel(text)
        label.setToolTip(tooltip)
        row.addWidget(label)
        row.addStretch()
        row.addWidget(widget)
        return row

    def _handle_apply(self) -> None:
        try:
            self._parse_seed()
        except ValueError:
            self.seed_error_label.setText("Shuffle seed must be a whole number.")
            self.seed_error_label.setVisible(True)
            return
        self.accept()

    def _parse_seed(self) -> int | None:
        raw = self.seed_input.text().strip()
        if not raw:
            return None
        return int(raw)

    def get_settings(self) -> QuizSettings:
        """Return the settings chosen in the dialog."""
        return QuizSettings(
            round_size=self.round_size_spinbox.value(),
            reveal_delay_ms=self.reveal_delay_spinbox.value(),
            shuffle_seed=self._parse_seed(),
            game_font_size=self.font_spinbox.value(),
            dark_theme=self.dark_theme_checkbox.isChecked(),
        )
