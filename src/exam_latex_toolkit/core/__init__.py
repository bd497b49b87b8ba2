"""
Exam LaTeX Toolkit Core Package

Shared data models, payload validation and serialization used by the
exporter and the command line.

Papers and questions are frozen dataclasses: the exporter reads them,
never mutates them, and builds its output from scratch on every call.
"""

from .models import (
    ChoiceOption,
    MediaImage,
    Paper,
    PaperSection,
    Question,
    QuestionContent,
    QuestionType,
    SectionItem,
    TikzCode,
)

__all__ = [
    "ChoiceOption",
    "MediaImage",
    "Paper",
    "PaperSection",
    "Question",
    "QuestionContent",
    "QuestionType",
    "SectionItem",
    "TikzCode",
]
