"""Loading and validation of the read-only question bank.

Two file formats are accepted:

JSON (the bundled format), a list of records:

    [
      {"question": "Qual é o maior planeta?", "options": ["Júpiter", "Marte"], "answer": "Júpiter"}
    ]

Plain text, blocks separated by blank lines or '---':

    Q: Question text (supports markdown). Additional lines until the
       next marker are treated as part of the question.
    A: First option text
    B: Second option text
    C: Third option text   (up to F, at least two options)
    CORRECT: A|B|...

Example:

    Q: Qual planeta é conhecido como Planeta Vermelho?
    A: Vênus
    B: Marte
    C: Júpiter
    CORRECT: B
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
import logging
from pathlib import Path

from pydantic import BaseModel, TypeAdapter, ValidationError

from space_quiz.core.errors import EmptyQuestionBankError, QuestionBankError
from space_quiz.core.models import QuestionRecord

logger = logging.getLogger(__name__)

MIN_OPTION_COUNT = 2
_OPTION_ORDER = ["A", "B", "C", "D", "E", "F"]


class QuestionPayload(BaseModel):
    """Schema of one record in a JSON question bank file."""

    question: str
    options: list[str]
    answer: str


_PAYLOAD_LIST = TypeAdapter(list[QuestionPayload])


class QuestionBank:
    """Validated, immutable collection of quiz questions."""

    def __init__(self, questions: Iterable[QuestionRecord] = ()) -> None:
        self._questions: tuple[QuestionRecord, ...] = tuple(
            self._prepare_question(question) for question in questions
        )

    def get_questions(self) -> tuple[QuestionRecord, ...]:
        return self._questions

    def get_question_count(self) -> int:
        return len(self._questions)

    def has_questions(self) -> bool:
        return bool(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[QuestionRecord]:
        return iter(self._questions)

    @staticmethod
    def _prepare_question(question: QuestionRecord) -> QuestionRecord:
        """Validate and normalize a question before storage."""
        cleaned_text = question.question_text.strip()
        if not cleaned_text:
            raise QuestionBankError("Question text must not be empty.")

        options = QuestionBank._validate_options(cleaned_text, question.options)
        correct_option = question.correct_option.strip()
        if correct_option not in options:
            raise QuestionBankError(
                f"Correct answer '{correct_option}' is not one of the options of '{cleaned_text}'."
            )

        return QuestionRecord(
            question_text=cleaned_text,
            options=options,
            correct_option=correct_option,
        )

    @staticmethod
    def _validate_options(question_text: str, options: Iterable[str]) -> tuple[str, ...]:
        cleaned = tuple(option.strip() for option in options)
        if len(cleaned) < MIN_OPTION_COUNT:
            raise QuestionBankError(
                f"Question '{question_text}' must have at least {MIN_OPTION_COUNT} options."
            )
        if any(not option for option in cleaned):
            raise QuestionBankError("Option text cannot be empty.")
        if len(set(cleaned)) != len(cleaned):
            raise QuestionBankError(f"Question '{question_text}' has duplicate options.")
        return cleaned


@dataclass(slots=True)
class LoadedQuestionBank:
    """Container for a loaded bank and the file it came from."""

    source_path: Path
    bank: QuestionBank


def load_question_bank(file_path: Path) -> LoadedQuestionBank:
    """Read a ``.json`` or plain-text question file into a validated bank."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise QuestionBankError(f"Could not read question file {file_path}: {exc}") from exc

    if file_path.suffix.lower() == ".json":
        questions = parse_question_json(text)
    else:
        questions = parse_question_text(text)

    if not questions:
        raise EmptyQuestionBankError(f"Question file {file_path} did not contain any questions.")

    bank = QuestionBank(questions)
    logger.info("Loaded %d questions from %s", len(bank), file_path)
    return LoadedQuestionBank(source_path=file_path, bank=bank)


def parse_question_json(text: str) -> list[QuestionRecord]:
    try:
        payloads = _PAYLOAD_LIST.validate_json(text)
    except ValidationError as exc:
        raise QuestionBankError(f"Invalid question bank JSON: {exc}") from exc
    return [
        QuestionRecord(
            question_text=payload.question,
            options=tuple(payload.options),
            correct_option=payload.answer,
        )
        for payload in payloads
    ]


def parse_question_text(text: str) -> list[QuestionRecord]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    return [_parse_block(block) for block in blocks if block]


def _parse_block(block: str) -> QuestionRecord:
    question_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in _OPTION_ORDER and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section in _OPTION_ORDER:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuestionBankError(f"Encountered text outside of a known section: '{line}'.")

    if not question_lines:
        raise QuestionBankError("Question text missing (Q: ...)")

    if len(options) < MIN_OPTION_COUNT:
        raise QuestionBankError(
            f"Question '{question_lines[0]}' must have at least {MIN_OPTION_COUNT} options."
        )

    letters = _OPTION_ORDER[: len(options)]
    if sorted(options) != letters:
        raise QuestionBankError(
            f"Options must be lettered consecutively from A; got {', '.join(sorted(options))}."
        )
    option_list = [options[letter].strip() for letter in letters]

    if correct_letter is None:
        raise QuestionBankError("Each question must name its answer (CORRECT: ...).")
    if correct_letter not in letters:
        raise QuestionBankError(f"CORRECT must be one of {', '.join(letters)}.")

    question_text = "\n".join(question_lines).strip()
    return QuestionRecord(
        question_text=question_text,
        options=tuple(option_list),
        correct_option=option_list[letters.index(correct_letter)],
    )
