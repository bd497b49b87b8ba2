"""
Unit Tests for the Difficulty/Answer Annotator

Tests for difficulty markers and the answer fallback chain.
"""

import pytest

from exam_latex_toolkit.core.models import ChoiceOption, QuestionType
from exam_latex_toolkit.exporter.annotate import (
    DifficultyLevel,
    answer_block,
    derive_answer,
    difficulty_level,
    difficulty_marker,
)


class TestDifficultyMarker:
    """Tests for difficulty_marker."""

    @pytest.mark.parametrize("difficulty,expected", [
        (1, "\\vs"),
        (2, "\\bs"),
        (3, "\\mi"),
        (4, "\\di"),
        (5, "\\vd"),
    ])
    def test_marker_when_in_range_then_macro(self, difficulty, expected):
        assert difficulty_marker(difficulty) == expected

    @pytest.mark.parametrize("difficulty", [None, 0, 6, -1, "3", True, 2.5])
    def test_marker_when_missing_or_out_of_range_then_medium(self, difficulty):
        assert difficulty_marker(difficulty) == "\\mi"
        assert difficulty_level(difficulty) is DifficultyLevel.MEDIUM

    def test_marker_when_source_then_optional_argument(self):
        assert difficulty_marker(4, "2023 Final") == "\\di[2023 Final]"

    def test_marker_when_empty_source_then_omitted(self):
        assert difficulty_marker(1, "") == "\\vs"


class TestAnswerFallback:
    """The first non-empty candidate wins."""

    def test_choice_when_solution_present_then_solution_wins(self, make_question):
        question = make_question(
            "c", QuestionType.CHOICE,
            options=[ChoiceOption("x", is_correct=True)],
            answer="A",
            solution="Because x.",
        )

        assert derive_answer(question) == "Because x."

    def test_choice_when_no_solution_then_correct_letters(self, make_question):
        question = make_question(
            "c", QuestionType.MULTIPLE_CHOICE,
            options=[
                ChoiceOption("w", is_correct=True),
                ChoiceOption("x"),
                ChoiceOption("y", is_correct=True),
            ],
            answer="ignored",
        )

        assert derive_answer(question) == "Answer: A, C"

    def test_choice_when_no_correct_option_then_raw_answer(self, make_question):
        question = make_question("c", QuestionType.CHOICE, options=[ChoiceOption("x")], answer="B")

        assert derive_answer(question) == "Answer: B"

    def test_choice_when_blank_solution_then_falls_through(self, make_question):
        question = make_question(
            "c", QuestionType.CHOICE, options=[ChoiceOption("x", is_correct=True)], solution="  "
        )

        assert derive_answer(question) == "Answer: A"

    def test_fill_when_fill_answers_then_joined(self, make_question):
        question = make_question("f", QuestionType.FILL, fill_answers=["4", "8"], answer="x")

        assert derive_answer(question) == "Answer: 4; 8"

    def test_fill_when_only_answer_then_answer(self, make_question):
        question = make_question("f", QuestionType.FILL, answer="12")

        assert derive_answer(question) == "Answer: 12"

    def test_solution_when_solution_answers_then_rewritten_and_joined(self, solution_question):
        """Each entry is rewritten on its own and entries are separated by a blank line."""
        assert derive_answer(solution_question) == (
            "\\begin{subproblem}\\item 1\\end{subproblem}"
            "\n\n"
            "\\begin{subproblem}\\item 2\\end{subproblem}"
        )

    def test_solution_when_entry_malformed_then_entry_passthrough(self, make_question):
        question = make_question(
            "s", QuestionType.SOLUTION, solution_answers=["\\subsubp orphan", "plain"]
        )

        assert derive_answer(question) == "\\subsubp orphan\n\nplain"

    def test_other_when_everything_set_then_empty(self, make_question):
        question = make_question("o", QuestionType.OTHER, answer="A", solution="S")

        assert derive_answer(question) == ""

    def test_any_when_nothing_set_then_empty(self, make_question):
        for qtype in QuestionType:
            assert derive_answer(make_question("q", qtype)) == ""


class TestAnswerBlock:
    """Tests for answer_block."""

    def test_block_when_answer_then_wrapped(self, fill_question):
        assert answer_block(fill_question) == "\n\\begin{answer}\nAnswer: 4\n\\end{answer}\n"

    def test_block_when_no_answer_then_no_empty_block(self, make_question):
        assert answer_block(make_question("q", QuestionType.FILL)) == ""
