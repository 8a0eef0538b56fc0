"""Quiz-related constants shared across UI and core layers."""

from pathlib import Path

ROUND_SIZE: int = 10
ROUND_SIZE_RANGE: tuple[int, int] = (1, 50)
REVEAL_DELAY_MS: int = 1000
REVEAL_DELAY_RANGE_MS: tuple[int, int] = (200, 5000)
GAME_FONT_SIZE: int = 14
GAME_FONT_SIZE_RANGE: tuple[int, int] = (10, 32)
DEFAULT_QUESTION_BANK_PATH: Path = Path(__file__).resolve().parent.parent / "data" / "questions.json"
