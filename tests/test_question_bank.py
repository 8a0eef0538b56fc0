"""Tests for loading and validating question banks."""

import json

import pytest

from space_quiz.constants.quiz_constants import DEFAULT_QUESTION_BANK_PATH, ROUND_SIZE
from space_quiz.core.errors import EmptyQuestionBankError, QuestionBankError
from space_quiz.core.models import QuestionRecord
from space_quiz.core.question_bank import (
    QuestionBank,
    load_question_bank,
    parse_question_text,
)


def write_json(tmp_path, records):
    path = tmp_path / "questions.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


class TestQuestionBank:

    def test_normalizes_whitespace(self):
        bank = QuestionBank([
            QuestionRecord("  Qual é a cor do céu?  ", (" Azul ", "Verde"), "Azul "),
        ])

        question = bank.get_questions()[0]
        assert question.question_text == "Qual é a cor do céu?"
        assert question.options == ("Azul", "Verde")
        assert question.correct_option == "Azul"

    def test_empty_bank_is_allowed(self):
        bank = QuestionBank()

        assert len(bank) == 0
        assert bank.has_questions() is False

    @pytest.mark.parametrize(
        "record",
        [
            QuestionRecord("", ("A", "B"), "A"),
            QuestionRecord("Q?", ("A",), "A"),
            QuestionRecord("Q?", ("A", "A"), "A"),
            QuestionRecord("Q?", ("A", " "), "A"),
            QuestionRecord("Q?", ("A", "B"), "C"),
        ],
    )
    def test_invalid_records_are_rejected(self, record):
        with pytest.raises(QuestionBankError):
            QuestionBank([record])


class TestJsonLoading:

    def test_bundled_bank_is_valid(self):
        loaded = load_question_bank(DEFAULT_QUESTION_BANK_PATH)

        assert loaded.bank.get_question_count() >= ROUND_SIZE
        for question in loaded.bank:
            assert question.correct_option in question.options

    def test_loads_records(self, tmp_path):
        path = write_json(tmp_path, [
            {"question": "Qual planeta é vermelho?", "options": ["Marte", "Vênus"], "answer": "Marte"},
            {"question": "Quantas luas tem a Terra?", "options": ["1", "2", "3"], "answer": "1"},
        ])

        loaded = load_question_bank(path)

        assert loaded.source_path == path
        assert loaded.bank.get_question_count() == 2
        assert loaded.bank.get_questions()[1].options == ("1", "2", "3")

    def test_missing_field_is_rejected(self, tmp_path):
        path = write_json(tmp_path, [{"question": "Q?", "options": ["A", "B"]}])

        with pytest.raises(QuestionBankError, match="Invalid question bank JSON"):
            load_question_bank(path)

    def test_malformed_json_is_rejected(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(QuestionBankError):
            load_question_bank(path)

    def test_answer_outside_options_is_rejected(self, tmp_path):
        path = write_json(tmp_path, [{"question": "Q?", "options": ["A", "B"], "answer": "C"}])

        with pytest.raises(QuestionBankError, match="not one of the options"):
            load_question_bank(path)

    def test_empty_list_is_empty_bank_error(self, tmp_path):
        path = write_json(tmp_path, [])

        with pytest.raises(EmptyQuestionBankError):
            load_question_bank(path)

    def test_missing_file_is_bank_error(self, tmp_path):
        with pytest.raises(QuestionBankError, match="Could not read"):
            load_question_bank(tmp_path / "nope.json")

    @pytest.mark.parametrize("file_name", ["latin1.txt", "latin1.json"])
    def test_non_utf8_file_is_bank_error(self, tmp_path, file_name):
        """A Latin-1 encoded file is reported as unreadable, not a decode crash."""
        path = tmp_path / file_name
        path.write_bytes("Q: Qual é?\nA: Sim\nB: Não\nCORRECT: A\n".encode("latin-1"))

        with pytest.raises(QuestionBankError, match="Could not read"):
            load_question_bank(path)


class TestTextLoading:

    def test_parses_blocks(self, tmp_path):
        path = tmp_path / "quiz.txt"
        path.write_text(
            "Q: Qual é o maior planeta?\n"
            "Pense no gigante gasoso.\n"
            "A: Saturno\n"
            "B: Júpiter\n"
            "C: Netuno\n"
            "CORRECT: b\n"
            "\n"
            "---\n"
            "\n"
            "Q: O Sol é uma estrela?\n"
            "A: Sim\n"
            "B: Não\n"
            "CORRECT: A\n",
            encoding="utf-8",
        )

        questions = load_question_bank(path).bank.get_questions()

        assert len(questions) == 2
        assert questions[0].question_text == "Qual é o maior planeta?\nPense no gigante gasoso."
        assert questions[0].options == ("Saturno", "Júpiter", "Netuno")
        assert questions[0].correct_option == "Júpiter"
        assert questions[1].correct_option == "Sim"

    def test_option_continuation_lines(self):
        questions = parse_question_text(
            "Q: Qual frase está correta?\nA: Primeira linha\ncontinua aqui\nB: Outra\nCORRECT: A\n"
        )

        assert questions[0].options[0] == "Primeira linha\ncontinua aqui"

    @pytest.mark.parametrize(
        ("text", "message"),
        [
            ("Q: Q?\nA: x\nB: y\n", "CORRECT"),
            ("Q: Q?\nA: x\nB: y\nCORRECT: D\n", "CORRECT must be one of"),
            ("Q: Q?\nA: x\nC: y\nCORRECT: A\n", "consecutively"),
            ("solto\nQ: Q?\nA: x\nB: y\nCORRECT: A\n", "outside of a known section"),
            ("A: x\nB: y\nCORRECT: A\n", "Question text missing"),
            ("Q: Q?\nCORRECT: A\n", "at least 2 options"),
        ],
    )
    def test_malformed_blocks(self, text, message):
        with pytest.raises(QuestionBankError, match=message):
            parse_question_text(text)

    def test_single_option_rejected_when_loaded(self, tmp_path):
        path = tmp_path / "quiz.txt"
        path.write_text("Q: Q?\nA: x\nCORRECT: A\n", encoding="utf-8")

        with pytest.raises(QuestionBankError, match="at least 2 options"):
            load_question_bank(path)
