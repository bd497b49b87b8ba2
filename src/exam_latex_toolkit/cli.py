"""
Module: cli

Purpose:
    Command line front-end: load a paper JSON file, render it and send
    the result to stdout, a file, a directory, the clipboard or the
    remote editor.

Key Functions:
    - main(): Entry point (returns the exit code)
    - build_parser(): argparse definition
    - resolve_config(): --config file + flag overrides → CopyConfig

Exit codes:
    0: success
    1: unreadable or invalid input
    2: delivery failed
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from exam_latex_toolkit import __version__
from exam_latex_toolkit.core.schemas import ValidationError
from exam_latex_toolkit.core.utils import load_paper_json
from exam_latex_toolkit.exporter import (
    DEFAULT_COPY_CONFIG,
    CopyConfig,
    CopyMethod,
    ExportMode,
    PaperSize,
    assemble,
    assemble_multi_file,
    export_paper,
    load_copy_config,
)
from exam_latex_toolkit.exporter.delivery import HttpFormTransport, Transport

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_DELIVERY_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exam-latex",
        description="Render an exam paper JSON file to LaTeX.",
    )
    parser.add_argument("paper", type=Path, help="Paper JSON file (optionally wrapped in {\"data\": ...})")

    # Configuration
    parser.add_argument("--config", type=Path, help="CopyConfig JSON file (camelCase keys)")
    parser.add_argument("--mode", help="Template: rich or minimal")
    parser.add_argument("--method", help="Delivery: clipboard or remote-submit")
    parser.add_argument("--document", action="store_true", help="Minimal mode: emit a full document")
    parser.add_argument("--paper-size", help="Minimal mode geometry: A4, B5 or custom")
    parser.add_argument("--geometry", help="Custom geometry options (implies --paper-size custom)")
    parser.add_argument("--no-vspace", action="store_true", help="Do not add spacing after questions")
    parser.add_argument("--hide-answers", action="store_true", help="Rich mode: start with answers hidden")
    parser.add_argument("--strict", action="store_true", help="Validate the paper against the JSON schema")

    # Output
    parser.add_argument(
        "--output", "-o",
        help="'-' for stdout, a directory (trailing '/' or existing) for every file, or a file path",
    )
    parser.add_argument("--http", action="store_true", help="Remote submit with a direct HTTP post")

    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_config(args: argparse.Namespace) -> CopyConfig:
    """
    Build the CopyConfig from --config and the override flags.

    Raises:
        ValueError: Bad config file or flag value
        OSError: Config file unreadable
    """
    config = load_copy_config(args.config) if args.config else DEFAULT_COPY_CONFIG

    if args.mode:
        config = replace(config, mode=ExportMode.parse(args.mode))
    if args.method:
        config = replace(config, copy_method=CopyMethod.parse(args.method))
    if args.no_vspace:
        config = replace(config, add_vspace=False)

    normal = config.normal_config
    if args.document:
        normal = replace(normal, add_document_environment=True)
    if args.paper_size:
        normal = replace(normal, paper_size=PaperSize.parse(args.paper_size))
    if args.geometry:
        normal = replace(normal, paper_size=PaperSize.CUSTOM, custom_geometry=args.geometry)

    return replace(config, normal_config=normal)


def _is_directory_target(output: str) -> bool:
    return output.endswith(("/", "\\")) or Path(output).is_dir()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = resolve_config(args)
        paper = load_paper_json(args.paper, strict=args.strict)
    except (ValidationError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    show_answers = not args.hide_answers

    if args.output == "-":
        sys.stdout.write(assemble(paper, config, show_answers=show_answers))
        sys.stdout.write("\n")
        return EXIT_OK

    if args.output:
        try:
            if _is_directory_target(args.output):
                directory = Path(args.output)
                directory.mkdir(parents=True, exist_ok=True)
                for exported in assemble_multi_file(paper, config, show_answers=show_answers):
                    path = exported.write_to(directory)
                    logger.info(f"Wrote {path}")
            else:
                path = Path(args.output)
                path.write_text(assemble(paper, config, show_answers=show_answers), encoding="utf-8")
                logger.info(f"Wrote {path}")
        except OSError as e:
            print(f"error: {e}", file=sys.stderr)
            return EXIT_INPUT_ERROR
        return EXIT_OK

    transport: Optional[Transport] = None
    if args.http and config.copy_method is CopyMethod.REMOTE_SUBMIT:
        transport = HttpFormTransport()

    if not export_paper(paper, config, transport=transport, show_answers=show_answers):
        print("error: delivery failed", file=sys.stderr)
        return EXIT_DELIVERY_FAILED
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
