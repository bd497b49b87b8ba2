"""
Schema Validation Utilities

Validates paper payloads (as returned by the question bank API) before
they are turned into model objects.

Two levels:
- Basic checks (always): the structure the exporter walks must exist -
  a ``sections`` list, each with an ``items`` list, each item holding a
  ``question`` object with a ``content`` object.
- Strict checks (``strict=True``): full JSON Schema validation with
  ``jsonschema`` against ``paper.schema.json``.

Optional fields are never required; the exporter degrades gracefully
when they are missing.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema


PAPER_SCHEMA_NAME = "paper"


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


@lru_cache(maxsize=None)
def load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    schema_path = Path(__file__).parent / f"{name}.schema.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")
    with open(schema_path, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_paper(data: Any, *, strict: bool = False) -> None:
    """
    Validate a paper payload.

    Args:
        data: Paper dictionary to validate
        strict: If True, also run full jsonschema validation

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Paper must be an object, got {type(data).__name__}",
            path="",
        )

    sections = data.get("sections")
    if sections is None:
        raise ValidationError(
            "Missing required fields: ['sections']",
            path="",
            errors=["Missing field: sections"],
        )
    if not isinstance(sections, list):
        raise ValidationError("sections must be a list", path="sections")

    for i, section in enumerate(sections):
        _validate_section(section, f"sections[{i}]")

    if strict:
        try:
            jsonschema.validate(data, load_schema(PAPER_SCHEMA_NAME))
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            ) from e


def validate_question(data: Any, path: str = "question") -> None:
    """
    Validate a single question payload.

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("question must be an object", path=path)

    content = data.get("content")
    if content is not None and not isinstance(content, dict):
        raise ValidationError("content must be an object", path=f"{path}.content")

    for key in ("options", "fillAnswers", "solutionAnswers"):
        value = (content or {}).get(key)
        if value is not None and not isinstance(value, list):
            raise ValidationError(f"{key} must be a list", path=f"{path}.content.{key}")

    for key in ("images", "tikzCodes"):
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, list):
            raise ValidationError(f"{key} must be a list", path=f"{path}.{key}")
        for j, media in enumerate(value):
            if not isinstance(media, dict):
                raise ValidationError(
                    f"{key} entries must be objects",
                    path=f"{path}.{key}[{j}]",
                )


def _validate_section(data: Any, path: str) -> None:
    """Validate one section and its items."""
    if not isinstance(data, dict):
        raise ValidationError("section must be an object", path=path)

    items = data.get("items", [])
    if not isinstance(items, list):
        raise ValidationError("items must be a list", path=f"{path}.items")

    for j, item in enumerate(items):
        item_path = f"{path}.items[{j}]"
        if not isinstance(item, dict) or "question" not in item:
            raise ValidationError(
                "item must have a question",
                path=item_path,
                errors=["Missing field: question"],
            )
        validate_question(item["question"], f"{item_path}.question")
