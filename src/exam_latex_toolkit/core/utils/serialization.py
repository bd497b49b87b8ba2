"""
Serialization Utilities

Provides to/from JSON utilities for papers and questions.

- ``paper_from_dict`` validates the payload structure first, then
  parses tolerantly: optional fields default, unknown question types
  become ``other``.
- ``load_paper_json`` accepts either a bare paper object or the API's
  ``{"success": ..., "data": {...}}`` envelope.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models.papers import Paper
from ..models.questions import Question
from ..schemas.validator import ValidationError, validate_paper, validate_question

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Paper Serialization
# ─────────────────────────────────────────────────────────────────────────────

def paper_to_dict(paper: Paper) -> dict[str, Any]:
    """
    Serialize a Paper to the camelCase API shape.

    Args:
        paper: Paper instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return paper.to_dict()


def paper_from_dict(data: dict[str, Any], *, strict: bool = False) -> Paper:
    """
    Deserialize a Paper from an API payload.

    Args:
        data: Dictionary from JSON
        strict: Run full jsonschema validation before parsing

    Returns:
        Paper instance

    Raises:
        ValidationError: If the payload structure is unusable
    """
    validate_paper(data, strict=strict)
    paper = Paper.from_dict(data)
    logger.debug(f"Parsed {paper!r}")
    return paper


def question_from_dict(data: dict[str, Any]) -> Question:
    """
    Deserialize a single Question from an API payload.

    Raises:
        ValidationError: If the payload structure is unusable
    """
    validate_question(data)
    return Question.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# File I/O
# ─────────────────────────────────────────────────────────────────────────────

def load_paper_json(path: Path, *, strict: bool = False) -> Paper:
    """
    Load a paper from a JSON file.

    Args:
        path: Path to a JSON file holding a paper, or an API response
            envelope with the paper under ``data``
        strict: Run full jsonschema validation

    Returns:
        Paper instance

    Raises:
        ValidationError: If the file is not valid JSON or not a paper
        OSError: If the file cannot be read
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {path}: {e}", path="") from e

    if isinstance(data, dict) and "sections" not in data and isinstance(data.get("data"), dict):
        data = data["data"]

    paper = paper_from_dict(data, strict=strict)
    logger.info(
        f"Loaded paper {paper.name!r} from {path} "
        f"({len(paper.sections)} sections, {paper.question_count} questions)"
    )
    return paper


def save_paper_json(paper: Paper, path: Path) -> None:
    """
    Save a paper to a JSON file.

    Args:
        paper: Paper to save
        path: Output path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(paper_to_dict(paper), f, ensure_ascii=False, indent=2)
