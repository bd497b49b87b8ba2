"""
Module: exporter.selective

Purpose:
    Copy a hand-picked list of questions as bare ``\\item`` entries, for
    pasting into an existing document. No section or document wrapping.

Key Functions:
    - generate_selective_copy_markup(): Entries joined by a blank line
    - selective_entry(): One question

Dependencies:
    - exporter.markup.transformer: Stem rewriting
    - exporter.layout: Media blocks
    - exporter.annotate: Difficulty markers

Used By:
    - exporter.controller
"""

from __future__ import annotations

import logging
from typing import Iterable

from exam_latex_toolkit.core.models import Question, QuestionType

from .annotate import difficulty_marker
from .config import SelectiveCopyOptions
from .errors import NestingError
from .layout import layout_media
from .markup.nesting import MINIMAL_NESTING, RICH_NESTING, rewrite_nested
from .markup.transformer import rewrite_stem

logger = logging.getLogger(__name__)

ENTRY_SEPARATOR = "\n\n"


def _prefix(question: Question, options: SelectiveCopyOptions) -> str:
    """Difficulty marker and/or source in front of the stem."""
    if options.show_difficulty and question.difficulty:
        source = question.source if options.show_source else None
        return f"{difficulty_marker(question.difficulty, source)} "
    if options.show_source and question.source:
        return f"[{question.source}] "
    return ""


def _options_list(question: Question) -> str:
    if not question.type.is_choice or not question.content.options:
        return ""
    tasks = "".join(f"\\task {option.text}\n" for option in question.content.options)
    return f"\n\\begin{{tasks}}(4)\n{tasks}\\end{{tasks}}"


def _solution_block(question: Question) -> str:
    solution = question.content.solution
    if question.type is QuestionType.SOLUTION:
        try:
            solution = rewrite_nested(solution, RICH_NESTING)
        except NestingError as e:
            logger.warning(f"Solution of {question.id} left unchanged: {e}")
    return f"\n\n\\begin{{answer}}\n{solution}\n\\end{{answer}}"


def selective_entry(question: Question, options: SelectiveCopyOptions) -> str:
    """
    Render one question for selective copy.

    Only the worked ``solution`` is shown as the answer; the fallback
    chain of full exports does not apply here.

    Args:
        question: Question to render
        options: Which annotations to include

    Returns:
        ``\\item`` entry without a trailing newline
    """
    entry = "\\item " + _prefix(question, options)
    entry += rewrite_stem(question, MINIMAL_NESTING)
    entry += _options_list(question)
    entry += layout_media(question)

    if options.show_answer and question.content.solution:
        entry += _solution_block(question)

    return entry


def generate_selective_copy_markup(
    questions: Iterable[Question],
    options: SelectiveCopyOptions = SelectiveCopyOptions(),
) -> str:
    """
    Render a list of questions as ``\\item`` entries.

    Args:
        questions: Questions in the order to emit them
        options: Difficulty / source / answer toggles

    Returns:
        Entries separated by a blank line, "" for no questions

    Example:
        >>> generate_selective_copy_markup([q1, q2], SelectiveCopyOptions(show_answer=True))
    """
    entries = [selective_entry(q, options) for q in questions]
    logger.debug(f"Selective copy of {len(entries)} question(s)")
    return ENTRY_SEPARATOR.join(entries)
