"""
Module: exporter.markup

Purpose:
    Question-level LaTeX generation.

Submodules:
    - nesting: \\subp / \\subsubp tokenizer and rewriter
    - transformer: Per-type question fragments (render_question)

Only the nesting helpers are re-exported here; import the transformer
from ``exporter.markup.transformer`` (it depends on exporter.annotate,
which itself uses the nesting helpers).
"""

from .nesting import (
    MINIMAL_NESTING,
    RICH_NESTING,
    NestingStyle,
    NestingToken,
    has_nesting_tokens,
    rewrite_nested,
    tokenize,
)

__all__ = [
    "MINIMAL_NESTING",
    "RICH_NESTING",
    "NestingStyle",
    "NestingToken",
    "has_nesting_tokens",
    "rewrite_nested",
    "tokenize",
]
