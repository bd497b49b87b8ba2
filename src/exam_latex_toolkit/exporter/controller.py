"""
Module: exporter.controller

Purpose:
    Public entry points of the export engine.
    Paper + CopyConfig → assemble → (deliver)

Key Functions:
    - convert_paper_to_latex(): Single LaTeX string for the clipboard
    - open_in_remote_editor(): Submit the paper to the remote editor
    - generate_selective_copy_markup(): Bare \\item list of questions
    - export_paper(): Assemble per copy method and deliver

Dependencies:
    - exporter.assembler: Document assembly
    - exporter.delivery: Transports
    - exporter.selective: Selective copy

Used By:
    - cli: Command line front-end
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from exam_latex_toolkit.core.models import Paper

from .assembler import assemble, build_export
from .config import DEFAULT_COPY_CONFIG, CopyConfig, CopyMethod
from .delivery import BrowserFormTransport, Transport, copy_to_clipboard, deliver
from .selective import generate_selective_copy_markup
from .templates.rich import DEFAULT_RICH_OPTIONS, RichTemplateOptions

logger = logging.getLogger(__name__)

__all__ = [
    "convert_paper_to_latex",
    "copy_to_clipboard",
    "export_paper",
    "generate_selective_copy_markup",
    "open_in_remote_editor",
]


def convert_paper_to_latex(
    paper: Paper,
    config: CopyConfig = DEFAULT_COPY_CONFIG,
    *,
    show_answers: bool = True,
    rich_options: RichTemplateOptions = DEFAULT_RICH_OPTIONS,
) -> str:
    """
    Render a paper as one LaTeX string.

    Args:
        paper: Paper to export
        config: Export configuration
        show_answers: Rich mode answer visibility
        rich_options: Rich mode display text

    Returns:
        LaTeX source (the clipboard payload)

    Example:
        >>> latex = convert_paper_to_latex(paper)
        >>> "\\\\begin{problem}" in latex
        True
    """
    return assemble(paper, config, show_answers=show_answers, rich_options=rich_options)


def open_in_remote_editor(
    paper: Paper,
    config: CopyConfig = DEFAULT_COPY_CONFIG,
    *,
    transport: Optional[Transport] = None,
    show_answers: bool = True,
    rich_options: RichTemplateOptions = DEFAULT_RICH_OPTIONS,
) -> None:
    """
    Submit a paper to the remote LaTeX editor.

    The copy method is forced to remote submission, so the file set is
    always a complete project. Fire-and-forget: a failed submission is
    logged, not raised.

    Args:
        paper: Paper to export
        config: Export configuration
        transport: Delivery transport (browser form by default)
        show_answers: Rich mode answer visibility
        rich_options: Rich mode display text
    """
    if config.copy_method is not CopyMethod.REMOTE_SUBMIT:
        config = replace(config, copy_method=CopyMethod.REMOTE_SUBMIT)
    result = build_export(paper, config, show_answers=show_answers, rich_options=rich_options)
    if not deliver(result, config, transport or BrowserFormTransport()):
        logger.warning(f"Could not open '{paper.name}' in the remote editor")


def export_paper(
    paper: Paper,
    config: CopyConfig = DEFAULT_COPY_CONFIG,
    *,
    transport: Optional[Transport] = None,
    show_answers: bool = True,
    rich_options: RichTemplateOptions = DEFAULT_RICH_OPTIONS,
) -> bool:
    """
    Assemble a paper for its copy method and deliver it.

    Args:
        paper: Paper to export
        config: Export configuration; copy_method picks the transport
            when none is given
        transport: Optional explicit transport
        show_answers: Rich mode answer visibility
        rich_options: Rich mode display text

    Returns:
        True when delivery succeeded
    """
    result = build_export(paper, config, show_answers=show_answers, rich_options=rich_options)
    return deliver(result, config, transport)
