"""
Unit Tests for the Markup Fragment Transformer

Tests for render_question and its per-type rules.
"""

import logging
import pytest

from exam_latex_toolkit.core.models import ChoiceOption, QuestionType
from exam_latex_toolkit.exporter.config import CopyConfig, ExportMode
from exam_latex_toolkit.exporter.markup.transformer import (
    CHOICE_BLANK,
    FILL_BLANK,
    TYPE_RULES,
    join_marker,
    option_tasks,
    render_question,
    replace_choice_blanks,
    replace_fill_blanks,
)

RICH = CopyConfig()
RICH_NO_VSPACE = CopyConfig(add_vspace=False)
MINIMAL_NO_VSPACE = CopyConfig(mode=ExportMode.MINIMAL, add_vspace=False)


class TestDispatchTable:
    """The per-type table covers the closed QuestionType set."""

    def test_type_rules_when_inspected_then_every_type_covered(self):
        assert set(TYPE_RULES) == set(QuestionType)


class TestTokenReplacement:
    """Tests for \\choice and \\fill replacement."""

    def test_replace_choice_when_multiple_tokens_then_all_replaced(self):
        result = replace_choice_blanks("a \\choice b \\choice")

        assert result == f"a {CHOICE_BLANK} b {CHOICE_BLANK}"

    def test_replace_fill_when_longer_control_word_then_kept(self):
        """\\fillcolor is not a \\fill token."""
        result = replace_fill_blanks("\\fill and \\fillcolor")

        assert result == f"{FILL_BLANK} and \\fillcolor"


class TestJoinMarker:
    """Tests for join_marker spacing."""

    @pytest.mark.parametrize("marker,content,expected", [
        ("\\vs", "1+1=", "\\vs1+1="),
        ("\\vs", "Find x", "\\vs Find x"),
        ("\\di[2023 Final]", "Find x", "\\di[2023 Final]Find x"),
        ("", "Find x", "Find x"),
        ("\\mi", "", "\\mi"),
    ])
    def test_join_when_marker_and_content_then_space_only_between_letters(
        self, marker, content, expected
    ):
        assert join_marker(marker, content) == expected


class TestChoiceQuestions:
    """Tests for choice and multiple-choice rendering."""

    def test_render_when_quiz_choice_then_exact_fragment(self, choice_question):
        """The 'Quiz' question renders marker, options, answer and spacing in order."""
        # Act
        fragment = render_question(choice_question, RICH)

        # Assert
        assert fragment == (
            "\\item \\vs1+1=\\dotfill （\\qquad \\qquad）\n"
            "\\begin{tasks}(4)\n"
            "  \\task 1\n"
            "  \\task 2\n"
            "\\end{tasks}\n"
            "\n\\begin{answer}\nAnswer: B\n\\end{answer}\n"
            "\\vspace{3cm}\n"
        )

    def test_render_when_no_options_then_no_tasks_list(self, make_question):
        question = make_question("c", QuestionType.MULTIPLE_CHOICE, "Pick \\choice")

        fragment = render_question(question, MINIMAL_NO_VSPACE)

        assert fragment == f"\\item Pick {CHOICE_BLANK}\n"
        assert "tasks" not in fragment

    def test_option_tasks_when_three_options_then_in_order(self, make_question):
        question = make_question(
            "c", QuestionType.CHOICE, options=[ChoiceOption("x"), ChoiceOption("y"), ChoiceOption("z")]
        )

        assert option_tasks(question).splitlines() == [
            "\\begin{tasks}(4)", "  \\task x", "  \\task y", "  \\task z", "\\end{tasks}",
        ]


class TestFillQuestions:
    """Tests for fill rendering."""

    def test_render_when_minimal_then_blank_without_marker(self, fill_question):
        fragment = render_question(fill_question, MINIMAL_NO_VSPACE)

        assert fragment == f"\\item 2+2={FILL_BLANK}\n"

    def test_render_when_rich_then_marker_and_fill_answer(self, fill_question):
        fragment = render_question(fill_question, RICH_NO_VSPACE)

        assert fragment.startswith(f"\\item \\bs2+2={FILL_BLANK}\n")
        assert "Answer: 4" in fragment


class TestSolutionQuestions:
    """Tests for solution rendering."""

    def test_render_when_rich_then_subproblem_environments(self, solution_question):
        fragment = render_question(solution_question, RICH)

        first_line = fragment.splitlines()[0]
        assert first_line == (
            "\\item \\di[2023 Final]Solve \\begin{subproblem}\\item first "
            "\\end{subproblem}\\begin{subproblem}\\item second\\end{subproblem}"
        )
        assert fragment.endswith("\\vspace{5cm}\n")

    def test_render_when_minimal_then_enumerate_environments(self, solution_question):
        fragment = render_question(solution_question, MINIMAL_NO_VSPACE)

        assert "\\begin{enumerate}[label=(\\arabic*)]\\item first" in fragment
        assert "subproblem" not in fragment

    def test_render_when_malformed_nesting_then_passthrough_and_warning(self, make_question, caplog):
        """A \\subsubp before any \\subp leaves the stem unchanged."""
        # Arrange
        stem = "Bad \\subsubp x \\subp y"
        question = make_question("bad", QuestionType.SOLUTION, stem)

        # Act
        with caplog.at_level(logging.WARNING):
            fragment = render_question(question, MINIMAL_NO_VSPACE)

        # Assert
        assert fragment == f"\\item {stem}\n"
        assert "bad" in caplog.text


class TestOtherQuestions:
    """Tests for untyped questions."""

    def test_render_when_other_then_tokens_untouched(self, make_question):
        question = make_question("o", QuestionType.OTHER, "Keep \\choice and \\fill")

        fragment = render_question(question, RICH)

        assert fragment == "\\item \\mi Keep \\choice and \\fill\n\\vspace{3cm}\n"

    def test_render_when_media_then_between_options_and_answer(self, make_question, make_images):
        """Append order: options, media, answer, spacing."""
        question = make_question(
            "m",
            QuestionType.CHOICE,
            "Look",
            options=[ChoiceOption("a", is_correct=True)],
            images=make_images(1),
        )

        fragment = render_question(question, RICH)

        tasks = fragment.index("\\end{tasks}")
        media = fragment.index("\\begin{flushright}")
        answer = fragment.index("\\begin{answer}")
        vspace = fragment.index("\\vspace{3cm}")
        assert tasks < media < answer < vspace


class TestDeterminism:
    """Rendering is pure."""

    def test_render_when_called_twice_then_identical(self, solution_question, choice_question):
        for question in (solution_question, choice_question):
            for config in (RICH, MINIMAL_NO_VSPACE):
                assert render_question(question, config) == render_question(question, config)
