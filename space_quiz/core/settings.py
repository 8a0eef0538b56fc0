"""User-adjustable quiz settings."""

from __future__ import annotations

from dataclasses import dataclass

from space_quiz.constants.quiz_constants import (
    GAME_FONT_SIZE,
    GAME_FONT_SIZE_RANGE,
    REVEAL_DELAY_MS,
    REVEAL_DELAY_RANGE_MS,
    ROUND_SIZE,
    ROUND_SIZE_RANGE,
)


def _clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(high, value))


@dataclass(frozen=True, slots=True)
class QuizSettings:
    """Settings edited through the settings dialog; values are clamped on creation."""

    round_size: int = ROUND_SIZE
    reveal_delay_ms: int = REVEAL_DELAY_MS
    shuffle_seed: int | None = None
    game_font_size: int = GAME_FONT_SIZE
    dark_theme: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "round_size", _clamp(self.round_size, ROUND_SIZE_RANGE))
        object.__setattr__(
            self, "reveal_delay_ms", _clamp(self.reveal_delay_ms, REVEAL_DELAY_RANGE_MS)
        )
        object.__setattr__(
            self, "game_font_size", _clamp(self.game_font_size, GAME_FONT_SIZE_RANGE)
        )
