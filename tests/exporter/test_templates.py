"""
Unit Tests for Document Templates

Tests for the rich (problemlab) and minimal templates.
"""

import pytest

from exam_latex_toolkit.exporter.config import A4_GEOMETRY, B5_GEOMETRY
from exam_latex_toolkit.exporter.templates import minimal, rich
from exam_latex_toolkit.exporter.templates.rich import (
    RichTemplateOptions,
    problemlab_style,
    project_name,
    rich_preamble,
)


class TestRichPreamble:
    """Tests for rich_preamble."""

    def test_preamble_when_default_then_inputs_style_file(self):
        preamble = rich_preamble("Quiz")

        assert "\\documentclass[UTF8,10pt]{article}" in preamble
        assert "\\input{problemlab}" in preamble
        assert "\\title{\\textbf{Quiz}}" in preamble
        assert preamble.index("\\showanswers") < preamble.index("\\begin{document}")
        assert preamble.rstrip().endswith("\\renewcommand{\\headrulewidth}{0pt}")

    def test_preamble_when_answers_hidden_then_hideanswers(self):
        preamble = rich_preamble("Quiz", show_answers=False)

        assert "\\hideanswers" in preamble
        assert "\\showanswers" not in preamble

    def test_preamble_when_no_title_then_default_title(self):
        options = RichTemplateOptions(default_title="Review")

        assert "\\title{\\textbf{Review}}" in rich_preamble(None, options)

    def test_preamble_when_custom_text_then_used(self):
        """Branding comes from the options, not the template."""
        options = RichTemplateOptions(
            author="Maths Dept",
            footer_left="Autumn 2025",
            page_label="p. {page}/{total}",
        )

        preamble = rich_preamble("Quiz", options)

        assert "\\author{Maths Dept}" in preamble
        assert "\\lfoot{\\textbf{Autumn 2025}}" in preamble
        assert "\\cfoot{\\ p. \\thepage/\\pageref{LastPage}}" in preamble

    def test_project_name_when_punctuation_then_underscored(self):
        assert project_name("Mid-term: 期中") == "Mid_term__期中"
        assert project_name("") == "Exercise"


class TestProblemlabStyle:
    """Tests for the problemlab.tex style file."""

    @pytest.fixture
    def style(self) -> str:
        return problemlab_style()

    @pytest.mark.parametrize("macro", ["vs", "bs", "mi", "di", "vd"])
    def test_style_when_rendered_then_defines_difficulty_macros(self, style, macro):
        assert f"\\newcommand{{\\{macro}}}[1][]" in style

    def test_style_when_rendered_then_answer_visibility_switch(self, style):
        assert "\\newif\\ifshowanswers" in style
        assert "\\newcommand{\\showanswers}{\\showanswerstrue}" in style
        assert "\\newcommand{\\hideanswers}{\\showanswersfalse}" in style
        assert "\\NewEnviron{answer}" in style

    @pytest.mark.parametrize("env", ["problem", "subproblem", "subsubproblem"])
    def test_style_when_rendered_then_environments_defined(self, style, env):
        assert f"\\newenvironment{{{env}}}" in style

    def test_style_when_rendered_then_counters_and_answer_area(self, style):
        assert "\\newcounter{subsubproblemcounter}[subproblemcounter]" in style
        assert "\\newcommand{\\answerarea}[1]" in style
        assert f"\\usepackage[{A4_GEOMETRY}]{{geometry}}" in style

    def test_style_when_custom_labels_then_used(self):
        options = RichTemplateOptions(
            difficulty_labels=("1", "2", "3", "4", "5"),
            problem_label="Aufgabe",
            geometry=B5_GEOMETRY,
        )

        style = problemlab_style(options)

        assert "Aufgabe~\\theproblemcounter" in style
        assert f"\\usepackage[{B5_GEOMETRY}]{{geometry}}" in style

    def test_options_when_wrong_label_count_then_raises(self):
        with pytest.raises(ValueError, match="difficulty_labels needs 5 entries"):
            RichTemplateOptions(difficulty_labels=("easy", "hard"))

    def test_options_when_from_dict_then_unknown_keys_ignored(self):
        options = RichTemplateOptions.from_dict({"author": "X", "colour": "red"})

        assert options.author == "X"


class TestMinimalTemplate:
    """Tests for the minimal template."""

    def test_preamble_when_geometry_then_document_opening(self):
        preamble = minimal.minimal_preamble(B5_GEOMETRY)

        assert preamble.startswith("\\documentclass{article}\n")
        assert f"\\usepackage[{B5_GEOMETRY}]{{geometry}}" in preamble
        assert "\\usepackage[hidelinks]{hyperref}" in preamble
        assert "\\settasks{label={\\Alph*. }}" in preamble
        assert preamble.endswith("\\begin{document}\n\n")

    def test_preamble_when_default_then_no_remote_layout(self):
        preamble = minimal.minimal_preamble(B5_GEOMETRY)

        assert "\\parindent" not in preamble
        assert "\\usetikzlibrary" not in preamble

    def test_preamble_when_remote_layout_then_before_geometry(self):
        preamble = minimal.minimal_preamble(B5_GEOMETRY, remote_layout=True)

        for line in minimal.REMOTE_LAYOUT:
            assert line in preamble
        assert "\\setlength{\\parindent}{4em}" in preamble
        assert "\\usetikzlibrary{calc}" in preamble
        assert preamble.index("\\addtolength{\\parskip}{5pt}") < preamble.index(
            "\\usepackage[" + B5_GEOMETRY
        )

    def test_section_when_opened_then_heading_and_bold_enumerate(self):
        assert minimal.section_open("Part 1") == (
            "\\section{Part 1}\n\n\\begin{enumerate}[label=\\textbf{\\arabic*}.]\n"
        )
        assert minimal.section_close() == "\\end{enumerate}\n\n"

    def test_rich_section_when_opened_then_problem_environment(self):
        assert rich.section_open("A") == "\\begin{problem}[A]\n"
        assert rich.section_close() == "\\end{problem}\n\n"
