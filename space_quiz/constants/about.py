"""Static metadata describing Space Quiz."""

APP_NAME = "Space Quiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Space Quiz is a single-screen multiple-choice quiz built with Qt. "
    "Each round draws up to ten random questions, shuffles their options "
    "and shows your score at the end."
)

HELP_TEXT = (
    "Load a .json file (a list of {\"question\", \"options\", \"answer\"} records) "
    "or a .txt file in the block format:\n\n"
    "Q: Qual planeta é conhecido como Planeta Vermelho?\n"
    "A: Vênus\nB: Marte\nC: Júpiter\n"
    "CORRECT: B"
)
