"""
Module: exporter.templates

Purpose:
    Document templates wrapped around the rendered sections.

Submodules:
    - rich: problemlab main document + style file
    - minimal: Plain article with optional document opening
"""

from .rich import (
    DEFAULT_RICH_OPTIONS,
    STYLE_FILE_NAME,
    RichTemplateOptions,
    problemlab_style,
    rich_document_end,
    rich_preamble,
)
from .minimal import minimal_document_end, minimal_preamble

__all__ = [
    # Rich
    "DEFAULT_RICH_OPTIONS",
    "STYLE_FILE_NAME",
    "RichTemplateOptions",
    "problemlab_style",
    "rich_document_end",
    "rich_preamble",
    # Minimal
    "minimal_document_end",
    "minimal_preamble",
]
