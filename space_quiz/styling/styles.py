"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QLabel {{
                background-color: transparent;
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.TOOLBAR_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QListWidget {{
                background-color: {ColorPalette.RESULT_BG.get(theme)};
                border: 1px solid {ColorPalette.BORDER.get(theme)};
                border-radius: 4px;
            }}
            QSpinBox, QLineEdit {{
                background-color: {ColorPalette.TOOLBAR_BG.get(theme)};
                border: 1px solid {ColorPalette.BORDER.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_title_style(theme: Theme = Theme.LIGHT) -> str:
        return f"font-size: 24pt; font-weight: bold; color: {ColorPalette.TEXT_PRIMARY.get(theme)};"

    @staticmethod
    def get_subtitle_style(theme: Theme = Theme.LIGHT) -> str:
        return f"font-size: 12pt; color: {ColorPalette.TEXT_SECONDARY.get(theme)};"

    @staticmethod
    def get_question_box_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.QUESTION_BG.get(theme)};"
            " border-radius: 10px; padding: 15px;"
        )

    @staticmethod
    def get_option_button_style(
        font_size: int,
        theme: Theme = Theme.LIGHT,
        *,
        correct: bool = False,
        incorrect: bool = False,
    ) -> str:
        if correct:
            background = ColorPalette.CORRECT.get(theme)
        elif incorrect:
            background = ColorPalette.INCORRECT.get(theme)
        else:
            background = ColorPalette.OPTION_BG.get(theme)
        return f"""
            QPushButton {{
                background-color: {background};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: none;
                border-radius: 10px;
                padding: 10px;
                font-size: {font_size}pt;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.OPTION_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                background-color: {background};
                color: {ColorPalette.OPTION_DISABLED_TEXT.get(theme)};
            }}
        """

    @staticmethod
    def get_result_box_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.RESULT_BG.get(theme)};"
            " border-radius: 10px; padding: 20px;"
        )

    @staticmethod
    def get_congratulations_style(font_size: int, theme: Theme = Theme.LIGHT) -> str:
        return (
            f"font-size: {font_size + 6}pt; font-weight: bold;"
            f" color: {ColorPalette.CONGRATULATIONS.get(theme)};"
        )

    @staticmethod
    def get_percentage_style(font_size: int, theme: Theme = Theme.LIGHT) -> str:
        return (
            f"font-size: {font_size * 2 + 12}pt; font-weight: bold;"
            f" color: {ColorPalette.TEXT_PRIMARY.get(theme)};"
        )
