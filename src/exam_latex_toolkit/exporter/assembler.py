"""
Module: exporter.assembler

Purpose:
    Walk a paper's sections and wrap the rendered questions in the rich
    or minimal document template.
    Config → effective() → sections → fragments → template → files

Key Functions:
    - assemble(): Single document (clipboard payload)
    - assemble_multi_file(): File set for remote submission
    - build_export(): Pick single or multi-file from the copy method
    - render_sections(): Section bodies only

Dependencies:
    - exporter.markup.transformer: Question fragments
    - exporter.templates: Rich and minimal document templates

Used By:
    - exporter.controller: Public API
"""

from __future__ import annotations

import logging
from typing import List

from exam_latex_toolkit.core.models import Paper

from .config import CopyConfig, CopyMethod
from .markup.transformer import render_question
from .models import MAIN_FILE_NAME, ExportedFile, ExportResult
from .templates import minimal, rich
from .templates.rich import DEFAULT_RICH_OPTIONS, RichTemplateOptions

logger = logging.getLogger(__name__)


def render_sections(paper: Paper, config: CopyConfig) -> str:
    """
    Render every non-empty section of a paper.

    Rich mode wraps each section in a ``problem`` environment; minimal
    mode emits a ``\\section`` heading and a numbered enumerate.
    Sections without items produce nothing, not even a heading.

    Args:
        paper: Paper to render
        config: Effective configuration

    Returns:
        Concatenated section markup
    """
    template = rich if config.is_rich else minimal
    parts: List[str] = []

    for section in paper.sections:
        if section.is_empty:
            logger.debug(f"Skipping empty section '{section.title}'")
            continue

        parts.append(template.section_open(section.title))
        for item in section.items:
            parts.append(render_question(item.question, config))
        parts.append(template.section_close())

    return "".join(parts)


def assemble(
    paper: Paper,
    config: CopyConfig,
    *,
    show_answers: bool = True,
    rich_options: RichTemplateOptions = DEFAULT_RICH_OPTIONS,
) -> str:
    """
    Assemble a paper into one LaTeX string.

    Args:
        paper: Paper to export
        config: Export configuration (self-corrected before use)
        show_answers: Rich mode only; emit \\showanswers or \\hideanswers
        rich_options: Rich mode display text

    Returns:
        LaTeX source; a complete document in rich mode and in minimal
        mode with the document environment enabled, otherwise bare
        sections

    Example:
        >>> latex = assemble(paper, CopyConfig(mode=ExportMode.MINIMAL))
        >>> latex.startswith("\\\\section{")
        True
    """
    config = config.effective()
    body = render_sections(paper, config)

    if config.is_rich:
        latex = (
            rich.rich_preamble(paper.name, rich_options, show_answers=show_answers)
            + body
            + rich.rich_document_end()
        )
    elif config.normal_config.add_document_environment:
        latex = (
            minimal.minimal_preamble(
                config.normal_config.geometry,
                remote_layout=config.copy_method is CopyMethod.REMOTE_SUBMIT,
            )
            + body
            + minimal.minimal_document_end()
        )
    else:
        latex = body

    logger.info(
        f"Assembled '{paper.name}' ({config.mode}): "
        f"{len(paper.non_empty_sections)} section(s), {paper.question_count} question(s)"
    )
    return latex


def assemble_multi_file(
    paper: Paper,
    config: CopyConfig,
    *,
    show_answers: bool = True,
    rich_options: RichTemplateOptions = DEFAULT_RICH_OPTIONS,
) -> List[ExportedFile]:
    """
    Assemble the file set for a remote editor project.

    Rich mode yields main.tex plus problemlab.tex; minimal mode yields a
    single main.tex. The main document is always first.

    Args:
        paper: Paper to export
        config: Export configuration (self-corrected before use)
        show_answers: Rich mode only; emit \\showanswers or \\hideanswers
        rich_options: Rich mode display text

    Returns:
        Files, main document first
    """
    config = config.effective()
    main = ExportedFile(
        MAIN_FILE_NAME,
        assemble(paper, config, show_answers=show_answers, rich_options=rich_options),
    )
    if not config.is_rich:
        return [main]

    style = ExportedFile(rich.STYLE_FILE_NAME, rich.problemlab_style(rich_options))
    logger.debug(f"Generated {style.name} ({len(style.content)} chars)")
    return [main, style]


def build_export(
    paper: Paper,
    config: CopyConfig,
    *,
    show_answers: bool = True,
    rich_options: RichTemplateOptions = DEFAULT_RICH_OPTIONS,
) -> ExportResult:
    """
    Assemble according to the configured copy method.

    Clipboard exports are one document; remote submission gets the
    multi-file set.

    Returns:
        ExportResult with the files and the mode used
    """
    if config.copy_method is CopyMethod.REMOTE_SUBMIT:
        files = assemble_multi_file(
            paper, config, show_answers=show_answers, rich_options=rich_options
        )
    else:
        files = [
            ExportedFile(
                MAIN_FILE_NAME,
                assemble(paper, config, show_answers=show_answers, rich_options=rich_options),
            )
        ]
    return ExportResult(mode=config.mode, files=tuple(files))
