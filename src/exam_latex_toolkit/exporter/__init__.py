"""
Module: exporter

Purpose:
    LaTeX export engine for exam papers.
    Paper → sections → question fragments → rich/minimal document → delivery

Public API:
    - convert_paper_to_latex(): Single document string
    - open_in_remote_editor(): Multi-file submission to the remote editor
    - generate_selective_copy_markup(): Bare \\item list
    - export_paper(): Assemble and deliver per copy method
    - copy_to_clipboard(): Clipboard write, returns success

Submodules:
    - config: CopyConfig and friends
    - markup: Question fragments and sub-question nesting
    - layout: Media placement
    - annotate: Difficulty markers and answers
    - templates: Rich and minimal document templates
    - assembler: Section walk and document wrapping
    - delivery: Clipboard, browser and HTTP transports
"""

from .config import (
    DEFAULT_COPY_CONFIG,
    CopyConfig,
    CopyMethod,
    ExportMode,
    NormalConfig,
    PaperSize,
    SelectiveCopyOptions,
    VspaceAmount,
    load_copy_config,
)
from .errors import DeliveryError, ExportError, NestingError
from .models import ExportedFile, ExportResult
from .assembler import assemble, assemble_multi_file, build_export
from .templates import RichTemplateOptions
from .controller import (
    convert_paper_to_latex,
    copy_to_clipboard,
    export_paper,
    generate_selective_copy_markup,
    open_in_remote_editor,
)

__all__ = [
    # Config
    "DEFAULT_COPY_CONFIG",
    "CopyConfig",
    "CopyMethod",
    "ExportMode",
    "NormalConfig",
    "PaperSize",
    "RichTemplateOptions",
    "SelectiveCopyOptions",
    "VspaceAmount",
    "load_copy_config",
    # Errors
    "DeliveryError",
    "ExportError",
    "NestingError",
    # Results
    "ExportedFile",
    "ExportResult",
    # Assembly
    "assemble",
    "assemble_multi_file",
    "build_export",
    # Public API
    "convert_paper_to_latex",
    "copy_to_clipboard",
    "export_paper",
    "generate_selective_copy_markup",
    "open_in_remote_editor",
]
