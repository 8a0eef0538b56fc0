"""Color palette for Space Quiz supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    # Window
    BACKGROUND = ThemeColors(
        light="#1B1440",      # Night sky indigo
        dark="#07061A"        # Near black
    )

    TEXT_PRIMARY = ThemeColors(
        light="#FFFFFF",
        dark="#F5F5F5"
    )

    TEXT_SECONDARY = ThemeColors(
        light="#D8D2F5",
        dark="#AAAAAA"
    )

    # Question box
    QUESTION_BG = ThemeColors(
        light="#800080",      # Purple
        dark="#4B0F5C"
    )

    # Option buttons
    OPTION_BG = ThemeColors(
        light="#008000",      # Green
        dark="#1E6B1E"
    )

    OPTION_HOVER_BG = ThemeColors(
        light="#16A016",
        dark="#2C8A2C"
    )

    OPTION_DISABLED_TEXT = ThemeColors(
        light="#E0E0E0",
        dark="#BBBBBB"
    )

    CORRECT = ThemeColors(
        light="#006400",      # Dark green
        dark="#0B4F0B"
    )

    INCORRECT = ThemeColors(
        light="#FF0000",      # Red
        dark="#C62828"
    )

    # Result screen
    RESULT_BG = ThemeColors(
        light="#000000",
        dark="#000000"
    )

    CONGRATULATIONS = ThemeColors(
        light="#FFD700",      # Gold
        dark="#FFC83D"
    )

    # Toolbar buttons
    TOOLBAR_BG = ThemeColors(
        light="#2D2466",
        dark="#2D2D2D"
    )

    BORDER = ThemeColors(
        light="#4A3F8C",
        dark="#555555"
    )
