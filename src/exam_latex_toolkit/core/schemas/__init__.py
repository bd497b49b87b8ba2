"""
Schemas Package

JSON schema definitions and validation utilities for paper payloads.
"""

from .validator import (
    validate_paper,
    validate_question,
    load_schema,
    ValidationError,
    PAPER_SCHEMA_NAME,
)

__all__ = [
    "validate_paper",
    "validate_question",
    "load_schema",
    "ValidationError",
    "PAPER_SCHEMA_NAME",
]
