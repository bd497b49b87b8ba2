"""
Core Models Package

Immutable data models describing the exporter's input.

All models in this package are frozen dataclasses. The exporter treats
papers and questions as read-only input, so any derived value is
computed on the fly and never stored back.

| API payload key | Model field |
|-----------------|-------------|
| `_id` | `id` |
| `tikzCodes` | `tikz_codes` |
| `content.fillAnswers` | `content.fill_answers` |
| `content.solutionAnswers` | `content.solution_answers` |
| `options[].isCorrect` | `options[].is_correct` |
"""

from .questions import (
    ChoiceOption,
    MediaImage,
    Question,
    QuestionContent,
    QuestionType,
    TikzCode,
)
from .papers import Paper, PaperSection, SectionItem

__all__ = [
    "ChoiceOption",
    "MediaImage",
    "Question",
    "QuestionContent",
    "QuestionType",
    "TikzCode",
    "Paper",
    "PaperSection",
    "SectionItem",
]
