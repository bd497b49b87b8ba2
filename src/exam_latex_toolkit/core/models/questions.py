"""
Module: questions

Purpose:
    Provides the Question dataclass and its content/media members - the
    read-only description of one test item as supplied by the question
    bank API. Immutable; parsing from API payloads is tolerant so missing
    optional fields degrade to empty values instead of failing.

Key Classes:
    - QuestionType: Closed set of question variants
    - ChoiceOption: One option of a choice question
    - QuestionContent: Stem, options, answers and worked solution
    - MediaImage / TikzCode: Ordered media attached to a question
    - Question: Complete question record

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.papers.PaperSection
    - exporter.markup.transformer
    - exporter.layout.planner
    - exporter.annotate
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class QuestionType(str, Enum):
    """Question variant tag."""
    CHOICE = "choice"
    MULTIPLE_CHOICE = "multiple-choice"
    FILL = "fill"
    SOLUTION = "solution"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value

    @property
    def is_choice(self) -> bool:
        """True for single and multiple choice questions."""
        return self in (QuestionType.CHOICE, QuestionType.MULTIPLE_CHOICE)

    @classmethod
    def parse(cls, value: Any) -> QuestionType:
        """
        Parse a type tag, mapping anything unrecognised to OTHER.

        Args:
            value: Raw type string (or QuestionType)

        Returns:
            Matching QuestionType, OTHER when unknown
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class ChoiceOption:
    """One option of a choice question."""

    text: str
    is_correct: bool = False

    def to_dict(self) -> dict:
        return {"text": self.text, "isCorrect": self.is_correct}

    @classmethod
    def from_dict(cls, data: dict) -> ChoiceOption:
        return cls(
            text=str(data.get("text") or ""),
            is_correct=bool(data.get("isCorrect", data.get("is_correct", False))),
        )


@dataclass(frozen=True)
class QuestionContent:
    """
    Textual content of a question (immutable).

    Attributes:
        stem: Question body as LaTeX, may contain \\choice, \\fill,
            \\subp and \\subsubp placeholder tokens
        options: Ordered choice options (choice types only)
        answer: Short raw answer
        fill_answers: Per-blank answers for fill questions
        solution_answers: Per-subquestion answers for solution questions
        solution: Worked solution; always preferred over the fallbacks

    Invariants:
        - options is empty for non-choice questions
        - fill_answers / solution_answers never override solution
    """

    stem: str = ""
    options: tuple[ChoiceOption, ...] = ()
    answer: str = ""
    fill_answers: tuple[str, ...] = ()
    solution_answers: tuple[str, ...] = ()
    solution: str = ""

    @property
    def has_solution(self) -> bool:
        """True when the worked solution has non-whitespace text."""
        return bool(self.solution and self.solution.strip())

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"stem": self.stem, "answer": self.answer}
        if self.options:
            d["options"] = [option.to_dict() for option in self.options]
        if self.fill_answers:
            d["fillAnswers"] = list(self.fill_answers)
        if self.solution_answers:
            d["solutionAnswers"] = list(self.solution_answers)
        if self.solution:
            d["solution"] = self.solution
        return d

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> QuestionContent:
        data = data or {}
        return cls(
            stem=str(data.get("stem") or ""),
            options=tuple(
                ChoiceOption.from_dict(option) for option in data.get("options") or []
            ),
            answer=str(data.get("answer") or ""),
            fill_answers=_str_tuple(data.get("fillAnswers", data.get("fill_answers"))),
            solution_answers=_str_tuple(
                data.get("solutionAnswers", data.get("solution_answers"))
            ),
            solution=str(data.get("solution") or ""),
        )


@dataclass(frozen=True)
class MediaImage:
    """
    Image attached to a question.

    Only ``url`` and ``order`` influence rendering; the remaining fields
    are provenance kept for round-tripping.
    """

    id: str
    url: str
    order: int = 0
    filename: str = ""
    uploaded_by: Optional[str] = None
    uploaded_at: Optional[str] = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "id": self.id,
            "url": self.url,
            "order": self.order,
            "filename": self.filename,
        }
        if self.uploaded_by:
            d["uploadedBy"] = self.uploaded_by
        if self.uploaded_at:
            d["uploadedAt"] = self.uploaded_at
        return d

    @classmethod
    def from_dict(cls, data: dict) -> MediaImage:
        return cls(
            id=str(data.get("id") or ""),
            url=str(data.get("url") or ""),
            order=_as_int(data.get("order"), 0),
            filename=str(data.get("filename") or ""),
            uploaded_by=data.get("uploadedBy"),
            uploaded_at=_as_optional_str(data.get("uploadedAt")),
        )


@dataclass(frozen=True)
class TikzCode:
    """TikZ drawing attached to a question (body of a tikzpicture)."""

    id: str
    code: str
    order: int = 0
    format: str = "svg"
    created_by: Optional[str] = None
    created_at: Optional[str] = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "id": self.id,
            "code": self.code,
            "order": self.order,
            "format": self.format,
        }
        if self.created_by:
            d["createdBy"] = self.created_by
        if self.created_at:
            d["createdAt"] = self.created_at
        return d

    @classmethod
    def from_dict(cls, data: dict) -> TikzCode:
        return cls(
            id=str(data.get("id") or ""),
            code=str(data.get("code") or ""),
            order=_as_int(data.get("order"), 0),
            format=str(data.get("format") or "svg"),
            created_by=data.get("createdBy"),
            created_at=_as_optional_str(data.get("createdAt")),
        )


@dataclass(frozen=True)
class Question:
    """
    Complete question representation (immutable).

    Attributes:
        id: Opaque unique identifier (``_id`` in API payloads)
        type: Variant tag
        content: Stem, options and answers
        difficulty: 1-5, or None when unset (rendered as medium)
        source: Optional short citation
        images: Attached images
        tikz_codes: Attached TikZ drawings

    Example:
        >>> q = Question(
        ...     id="q1",
        ...     type=QuestionType.FILL,
        ...     content=QuestionContent(stem="2+2=\\\\fill"),
        ... )
        >>> q.type.is_choice
        False
    """

    id: str
    type: QuestionType
    content: QuestionContent = QuestionContent()
    difficulty: Optional[int] = None
    source: Optional[str] = None
    images: tuple[MediaImage, ...] = ()
    tikz_codes: tuple[TikzCode, ...] = ()

    @property
    def media_count(self) -> int:
        """Number of images plus TikZ drawings."""
        return len(self.images) + len(self.tikz_codes)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize to the camelCase API shape."""
        d: dict[str, Any] = {
            "_id": self.id,
            "type": self.type.value,
            "content": self.content.to_dict(),
        }
        if self.difficulty is not None:
            d["difficulty"] = self.difficulty
        if self.source:
            d["source"] = self.source
        if self.images:
            d["images"] = [image.to_dict() for image in self.images]
        if self.tikz_codes:
            d["tikzCodes"] = [tikz.to_dict() for tikz in self.tikz_codes]
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Question:
        """
        Deserialize from an API payload.

        Accepts both ``_id`` and ``id``; unknown types become OTHER and a
        non-numeric difficulty becomes None.
        """
        return cls(
            id=str(data.get("_id", data.get("id", ""))),
            type=QuestionType.parse(data.get("type", "other")),
            content=QuestionContent.from_dict(data.get("content")),
            difficulty=_as_int(data.get("difficulty"), None),
            source=_as_optional_str(data.get("source")),
            images=tuple(MediaImage.from_dict(i) for i in data.get("images") or []),
            tikz_codes=tuple(
                TikzCode.from_dict(t)
                for t in data.get("tikzCodes", data.get("tikz_codes")) or []
            ),
        )

    def __repr__(self) -> str:
        return f"Question({self.id!r}, type={self.type.value}, difficulty={self.difficulty})"


def _str_tuple(values: Any) -> tuple[str, ...]:
    if not values:
        return ()
    return tuple(str(v) for v in values)


def _as_int(value: Any, default: Optional[int]) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text or None
