"""
Module: exporter.annotate

Purpose:
    Difficulty markers and answer blocks for rich-mode fragments.

    Difficulty 1-5 maps to one of five problemlab macros; anything else
    (unset, 0, 6, ...) renders as medium. A source citation rides along
    as the macro's optional argument.

    Answers come from a fallback chain per question type; the first
    non-empty candidate wins and an empty result emits no block at all.

Key Classes:
    - DifficultyLevel: Five named difficulty markers

Key Functions:
    - difficulty_level(): Clamp a raw difficulty to a level
    - difficulty_marker(): Marker macro with optional [source]
    - derive_answer(): Fallback chain over solution / options / answers
    - answer_block(): Wrap a derived answer in the answer environment

Dependencies:
    - core.models: Question, QuestionType
    - exporter.markup.nesting: Solution answer rewriting

Used By:
    - exporter.markup.transformer
    - exporter.selective
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional

from exam_latex_toolkit.core.models import Question, QuestionType

from .errors import NestingError
from .markup.nesting import RICH_NESTING, NestingStyle, rewrite_nested

logger = logging.getLogger(__name__)


ANSWER_PREFIX = "Answer: "
CHOICE_LETTER_SEPARATOR = ", "
FILL_ANSWER_SEPARATOR = "; "
SOLUTION_ANSWER_SEPARATOR = "\n\n"


class DifficultyLevel(Enum):
    """Difficulty level with its problemlab macro and display label."""

    VERY_EASY = (1, "vs", "Very easy")
    EASY = (2, "bs", "Easy")
    MEDIUM = (3, "mi", "Medium")
    HARD = (4, "di", "Hard")
    VERY_HARD = (5, "vd", "Very hard")

    def __init__(self, score: int, macro: str, label: str):
        self.score = score
        self.macro = macro
        self.label = label

    @property
    def command(self) -> str:
        """Macro invocation, e.g. ``\\vs``."""
        return f"\\{self.macro}"


_LEVELS_BY_SCORE = {level.score: level for level in DifficultyLevel}


def difficulty_level(difficulty: Any) -> DifficultyLevel:
    """
    Map a raw difficulty to a level, defaulting to MEDIUM.

    Args:
        difficulty: Integer 1-5; None, out-of-range or non-integer
            values fall back to MEDIUM

    Returns:
        DifficultyLevel
    """
    if isinstance(difficulty, bool) or not isinstance(difficulty, int):
        return DifficultyLevel.MEDIUM
    return _LEVELS_BY_SCORE.get(difficulty, DifficultyLevel.MEDIUM)


def difficulty_marker(difficulty: Any, source: Optional[str] = None) -> str:
    """
    Build the difficulty marker for a question.

    Args:
        difficulty: Raw difficulty score
        source: Optional citation, appended as ``[source]``

    Returns:
        Marker such as ``\\vs`` or ``\\di[2023 Final]``

    Example:
        >>> difficulty_marker(4, "2023 Final")
        '\\\\di[2023 Final]'
    """
    marker = difficulty_level(difficulty).command
    if source:
        marker += f"[{source}]"
    return marker


# ─────────────────────────────────────────────────────────────────────────────
# Answer Derivation
# ─────────────────────────────────────────────────────────────────────────────

def option_letter(index: int) -> str:
    """Column label for an option index: 0 -> A, 1 -> B, ..."""
    return chr(ord("A") + index)


def derive_answer(question: Question, nesting: NestingStyle = RICH_NESTING) -> str:
    """
    Derive the answer text for a question.

    Fallback chain, first non-empty wins:
    - choice / multiple-choice: solution -> correct option letters -> answer
    - fill: solution -> fill answers -> answer
    - solution: solution -> rewritten solution answers -> answer
    - other: nothing

    Args:
        question: Question to annotate
        nesting: Markup for \\subp / \\subsubp in solution answers

    Returns:
        Answer text, "" when nothing is available
    """
    content = question.content
    qtype = question.type

    if qtype is QuestionType.OTHER:
        return ""

    if content.has_solution:
        return content.solution

    if qtype.is_choice:
        letters = [
            option_letter(i) for i, option in enumerate(content.options) if option.is_correct
        ]
        if letters:
            return ANSWER_PREFIX + CHOICE_LETTER_SEPARATOR.join(letters)
    elif qtype is QuestionType.FILL:
        if content.fill_answers:
            return ANSWER_PREFIX + FILL_ANSWER_SEPARATOR.join(content.fill_answers)
    elif qtype is QuestionType.SOLUTION:
        if content.solution_answers:
            return SOLUTION_ANSWER_SEPARATOR.join(
                _rewrite_answer_entry(question, entry, nesting)
                for entry in content.solution_answers
            )

    if content.answer:
        return ANSWER_PREFIX + content.answer
    return ""


def answer_block(question: Question, nesting: NestingStyle = RICH_NESTING) -> str:
    """
    Wrap the derived answer in the answer environment.

    Returns:
        ``\\begin{answer}...\\end{answer}`` block, or "" when the
        question has no answer (no empty block is emitted)
    """
    answer = derive_answer(question, nesting)
    if not answer:
        return ""
    return f"\n\\begin{{answer}}\n{answer}\n\\end{{answer}}\n"


def _rewrite_answer_entry(question: Question, entry: str, nesting: NestingStyle) -> str:
    """Rewrite one solution answer on its own; malformed entries pass through."""
    try:
        return rewrite_nested(entry, nesting)
    except NestingError as e:
        logger.warning(f"Answer for {question.id} left unchanged: {e}")
        return entry
