"""
Module: papers

Purpose:
    Provides the Paper / PaperSection dataclasses - the ordered,
    read-only structure of an exam paper handed to the exporter.

Key Classes:
    - SectionItem: One slot in a section, wrapping a Question
    - PaperSection: Titled, ordered list of items
    - Paper: Complete paper with metadata

Dependencies:
    - dataclasses (std)
    - .questions.Question

Used By:
    - core.utils.serialization
    - exporter.assembler
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from .questions import Question


@dataclass(frozen=True)
class SectionItem:
    """
    One item of a paper section.

    ``order`` and ``score`` are carried through from the API but the
    exporter only uses the question and the tuple position.
    """

    question: Question
    order: Optional[int] = None
    score: Optional[float] = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"question": self.question.to_dict()}
        if self.order is not None:
            d["order"] = self.order
        if self.score is not None:
            d["score"] = self.score
        return d

    @classmethod
    def from_dict(cls, data: dict) -> SectionItem:
        return cls(
            question=Question.from_dict(data["question"]),
            order=data.get("order"),
            score=data.get("score"),
        )


@dataclass(frozen=True)
class PaperSection:
    """
    Titled section of a paper (immutable).

    Invariants:
        - A section with no items contributes nothing to exported output
    """

    title: str
    items: tuple[SectionItem, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when the section has no items."""
        return len(self.items) == 0

    @property
    def questions(self) -> list[Question]:
        """Questions in item order."""
        return [item.question for item in self.items]

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: dict) -> PaperSection:
        return cls(
            title=str(data.get("title") or ""),
            items=tuple(SectionItem.from_dict(item) for item in data.get("items") or []),
        )


@dataclass(frozen=True)
class Paper:
    """
    Exam paper (immutable, read-only input to the exporter).

    Attributes:
        id: Paper identifier (``_id`` in API payloads)
        name: Display name, used as the rich-template title
        sections: Ordered sections
        owner: Owner display name, if known
        bank_id: Identifier of the paper bank the paper belongs to
        created_at / updated_at: ISO timestamps as supplied
        overleaf_edit_link: Link to an already-created remote project

    Example:
        >>> paper = Paper(id="p1", name="Mock exam", sections=())
        >>> paper.question_count
        0
    """

    id: str
    name: str
    sections: tuple[PaperSection, ...] = ()
    owner: Optional[str] = None
    bank_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    overleaf_edit_link: Optional[str] = None

    @property
    def non_empty_sections(self) -> list[PaperSection]:
        """Sections that have at least one item, in order."""
        return [section for section in self.sections if not section.is_empty]

    @property
    def question_count(self) -> int:
        """Total number of items across all sections."""
        return sum(len(section.items) for section in self.sections)

    def iter_questions(self) -> Iterator[Question]:
        """Iterate every question in paper order."""
        for section in self.sections:
            for item in section.items:
                yield item.question

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "_id": self.id,
            "name": self.name,
            "sections": [section.to_dict() for section in self.sections],
        }
        if self.owner:
            d["owner"] = {"name": self.owner}
        if self.bank_id:
            d["bank"] = {"_id": self.bank_id}
        if self.created_at:
            d["createdAt"] = self.created_at
        if self.updated_at:
            d["updatedAt"] = self.updated_at
        if self.overleaf_edit_link:
            d["overleafEditLink"] = self.overleaf_edit_link
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Paper:
        owner = data.get("owner")
        bank = data.get("bank")
        return cls(
            id=str(data.get("_id", data.get("id", ""))),
            name=str(data.get("name") or ""),
            sections=tuple(PaperSection.from_dict(s) for s in data.get("sections") or []),
            owner=owner.get("name") if isinstance(owner, dict) else owner,
            bank_id=bank.get("_id") if isinstance(bank, dict) else bank,
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            overleaf_edit_link=data.get("overleafEditLink"),
        )

    def __repr__(self) -> str:
        return (
            f"Paper({self.id!r}, name={self.name!r}, "
            f"sections={len(self.sections)}, questions={self.question_count})"
        )
