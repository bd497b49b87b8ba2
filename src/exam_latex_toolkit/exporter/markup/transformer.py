"""
Module: exporter.markup.transformer

Purpose:
    Convert one question into a LaTeX list entry (a "markup fragment").
    Pure and deterministic; malformed stems are passed through rather
    than raising.

    Fragment layout, in order:
        \\item <difficulty marker (rich)><rewritten stem>
        <option tasks (choice types)>
        <media block>
        <answer block (rich)>
        <vspace directive (if enabled)>

Key Classes:
    - TypeRule: Stem rewrite + extra markup for one question type

Key Functions:
    - render_question(): Main entry point
    - replace_choice_blanks(): \\choice -> dotted answer slot
    - replace_fill_blanks(): \\fill -> underline blank
    - option_tasks(): 4-column tasks list for choice options
    - rewrite_stem(): Type-specific stem rewrite

Dependencies:
    - core.models: Question, QuestionType
    - exporter.config: CopyConfig
    - exporter.layout: Media blocks
    - exporter.annotate: Difficulty markers, answer blocks
    - exporter.markup.nesting: \\subp / \\subsubp rewriting

Used By:
    - exporter.assembler: Section bodies
    - exporter.selective: Selective copy
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict

from exam_latex_toolkit.core.models import Question, QuestionType

from ..annotate import answer_block, difficulty_marker
from ..config import CopyConfig, ExportMode
from ..errors import NestingError
from ..layout import layout_media
from .nesting import MINIMAL_NESTING, RICH_NESTING, NestingStyle, rewrite_nested

logger = logging.getLogger(__name__)


CHOICE_BLANK = "\\dotfill （\\qquad \\qquad）"
FILL_BLANK = "\\underline{\\hspace{3cm}}"
OPTION_COLUMNS = 4

_CHOICE_TOKEN = re.compile(r"\\choice(?![A-Za-z])")
_FILL_TOKEN = re.compile(r"\\fill(?![A-Za-z])")


def replace_choice_blanks(stem: str) -> str:
    """Replace every \\choice token with the dotted answer slot."""
    return _CHOICE_TOKEN.sub(lambda _: CHOICE_BLANK, stem)


def replace_fill_blanks(stem: str) -> str:
    """Replace every \\fill token with a fixed-width underline."""
    return _FILL_TOKEN.sub(lambda _: FILL_BLANK, stem)


def option_tasks(question: Question) -> str:
    """
    Build the multi-column option list.

    Returns:
        ``tasks`` environment with one ``\\task`` per option in order,
        or "" when the question has no options
    """
    options = question.content.options
    if not options:
        return ""
    lines = [f"\\begin{{tasks}}({OPTION_COLUMNS})"]
    lines.extend(f"  \\task {option.text}" for option in options)
    lines.append("\\end{tasks}")
    return "\n".join(lines) + "\n"


def nesting_style_for(mode: ExportMode) -> NestingStyle:
    """Sub-question markup used by a template."""
    return RICH_NESTING if mode is ExportMode.RICH else MINIMAL_NESTING


# ─────────────────────────────────────────────────────────────────────────────
# Per-type Rules
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TypeRule:
    """
    How one question type is rendered.

    Attributes:
        rewrite: (question, stem, nesting) -> rewritten stem
        extras: question -> markup placed right after the \\item line
    """

    rewrite: Callable[[Question, str, NestingStyle], str]
    extras: Callable[[Question], str]


def _rewrite_choice(question: Question, stem: str, nesting: NestingStyle) -> str:
    return replace_choice_blanks(stem)


def _rewrite_fill(question: Question, stem: str, nesting: NestingStyle) -> str:
    return replace_fill_blanks(stem)


def _rewrite_solution(question: Question, stem: str, nesting: NestingStyle) -> str:
    try:
        return rewrite_nested(stem, nesting)
    except NestingError as e:
        logger.warning(f"Sub-questions of {question.id} left unchanged: {e}")
        return stem


def _rewrite_nothing(question: Question, stem: str, nesting: NestingStyle) -> str:
    return stem


def _no_extras(question: Question) -> str:
    return ""


TYPE_RULES: Dict[QuestionType, TypeRule] = {
    QuestionType.CHOICE: TypeRule(_rewrite_choice, option_tasks),
    QuestionType.MULTIPLE_CHOICE: TypeRule(_rewrite_choice, option_tasks),
    QuestionType.FILL: TypeRule(_rewrite_fill, _no_extras),
    QuestionType.SOLUTION: TypeRule(_rewrite_solution, _no_extras),
    QuestionType.OTHER: TypeRule(_rewrite_nothing, _no_extras),
}


def rewrite_stem(question: Question, nesting: NestingStyle = RICH_NESTING) -> str:
    """
    Apply the type-specific stem rewrite.

    Args:
        question: Question to rewrite
        nesting: Sub-question markup for solution questions

    Returns:
        Rewritten stem (unchanged for ``other``)
    """
    rule = TYPE_RULES[question.type]
    return rule.rewrite(question, question.content.stem or "", nesting)


def join_marker(marker: str, content: str) -> str:
    """
    Put a difficulty marker directly in front of content.

    A space is inserted only when the marker ends in a control word and
    the content starts with a letter, which would otherwise extend the
    control word name.
    """
    if marker and marker[-1].isalpha() and content[:1].isalpha():
        return f"{marker} {content}"
    return marker + content


def render_question(question: Question, config: CopyConfig) -> str:
    """
    Render one question as a LaTeX list entry.

    Args:
        question: Question to render
        config: Export configuration (mode and spacing are used)

    Returns:
        Markup fragment ending in a newline

    Example:
        >>> q = Question("q1", QuestionType.CHOICE, QuestionContent(stem="1+1=\\\\choice"))
        >>> render_question(q, CopyConfig(add_vspace=False)).splitlines()[0]
        '\\\\item \\\\mi1+1=\\\\dotfill （\\\\qquad \\\\qquad）'
    """
    rich = config.mode is ExportMode.RICH
    nesting = nesting_style_for(config.mode)
    rule = TYPE_RULES[question.type]

    stem = rule.rewrite(question, question.content.stem or "", nesting)
    if rich:
        stem = join_marker(difficulty_marker(question.difficulty, question.source), stem)

    fragment = f"\\item {stem}\n"
    fragment += rule.extras(question)
    fragment += layout_media(question)

    if rich:
        fragment += answer_block(question)

    vspace = config.vspace_for(question.type)
    if vspace:
        fragment += f"{vspace}\n"

    return fragment
