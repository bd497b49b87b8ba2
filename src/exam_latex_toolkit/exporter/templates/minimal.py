"""
Module: exporter.templates.minimal

Purpose:
    Document template for minimal mode: plain ``\\section`` headings with
    a bold-numbered enumerate per section. The document opening is
    optional and only emitted when the config asks for it.

    Documents sent to the remote editor also get an indented, more
    loosely spaced paragraph layout and the tikz arrows/calc libraries.

Key Functions:
    - minimal_preamble(): documentclass, packages, geometry, \\begin{document}
    - minimal_document_end(): Closing line
    - section_open() / section_close(): Heading + enumerate per section
"""

from __future__ import annotations

from typing import Tuple

MINIMAL_PACKAGES: Tuple[str, ...] = (
    "amsmath",
    "setspace",
    "ctex",
    "xeCJK",
    "zhnumber",
    "graphicx",
    "[hidelinks]{hyperref}",
    "booktabs",
    "enumitem",
    "soul",
    "ulem",
    "amssymb",
    "tikz",
    "xcolor",
    "pgfplots",
    "float",
    "subfigure",
    "fancyhdr",
    "lastpage",
    "framed",
    "[thicklines]{cancel}",
    "underscore",
    "multicol",
)

# Extra layout for documents submitted to the remote editor
REMOTE_LAYOUT: Tuple[str, ...] = (
    "\\setlength{\\parindent}{4em}",
    "\\usetikzlibrary{arrows}",
    "\\usetikzlibrary{calc}",
    "\\addtolength{\\parskip}{5pt}",
)


def _usepackage(package: str) -> str:
    if package.startswith("["):
        return f"\\usepackage{package}"
    return f"\\usepackage{{{package}}}"


def minimal_preamble(geometry: str, *, remote_layout: bool = False) -> str:
    """
    Build the minimal document opening.

    Args:
        geometry: Options for the geometry package
        remote_layout: Add the REMOTE_LAYOUT settings after the packages

    Returns:
        Preamble ending in ``\\begin{document}`` and a blank line
    """
    lines = ["\\documentclass{article}"]
    lines.extend(_usepackage(package) for package in MINIMAL_PACKAGES)
    if remote_layout:
        lines.extend(REMOTE_LAYOUT)
    lines.append(f"\\usepackage[{geometry}]{{geometry}}")
    lines.append("")
    lines.append("\\usepackage{tasks}")
    lines.append("\\settasks{label={\\Alph*. }}")
    lines.append("")
    lines.append("\\begin{document}")
    return "\n".join(lines) + "\n\n"


def minimal_document_end() -> str:
    return "\\end{document}"


def section_open(title: str) -> str:
    return f"\\section{{{title}}}\n\n\\begin{{enumerate}}[label=\\textbf{{\\arabic*}}.]\n"


def section_close() -> str:
    return "\\end{enumerate}\n\n"
