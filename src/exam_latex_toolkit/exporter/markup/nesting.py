"""
Module: exporter.markup.nesting

Purpose:
    Rewrite the \\subp (sub-question) and \\subsubp (sub-sub-question)
    placeholder tokens into nested LaTeX list environments.

    Every token opens its own block. Before opening, every open block of
    the same or a deeper level is closed; whatever is still open at the
    end of the input is closed there. A block therefore ends at the next
    token of the same or a higher level, or at the end of the string, and
    the output is always balanced.

    An explicit \\end{subp} or \\end{subsubp} closes the innermost open
    block of that level, and anything deeper, early. A closer with no
    matching open block is dropped.

Key Classes:
    - NestingStyle: Open/close markup for each level
    - NestingToken: One token found in the input

Key Functions:
    - tokenize(): Locate \\subp / \\subsubp tokens and explicit closers
    - rewrite_nested(): Token-to-environment rewrite

Dependencies:
    - re (std)
    - exporter.errors: NestingError

Used By:
    - exporter.markup.transformer: Solution question stems
    - exporter.annotate: Per-entry solution answers
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from ..errors import NestingError


SUBP_LEVEL = 1
SUBSUBP_LEVEL = 2

# Whole control words only: "\subproblem" must not match "\subp"
TOKEN_PATTERN = re.compile(
    r"\\(subsubp|subp)(?![A-Za-z])|\\end\{(subsubp|subp)\}"
)

_TOKEN_LEVELS = {"subp": SUBP_LEVEL, "subsubp": SUBSUBP_LEVEL}


@dataclass(frozen=True)
class NestingStyle:
    """
    Markup emitted for each nesting level.

    Attributes:
        name: Style name for logging
        sub_open / sub_close: Markup around a \\subp block
        subsub_open / subsub_close: Markup around a \\subsubp block
    """

    name: str
    sub_open: str
    sub_close: str
    subsub_open: str
    subsub_close: str

    def open_for(self, level: int) -> str:
        return self.sub_open if level == SUBP_LEVEL else self.subsub_open

    def close_for(self, level: int) -> str:
        return self.sub_close if level == SUBP_LEVEL else self.subsub_close


# problemlab.tex environments (rich mode)
RICH_NESTING = NestingStyle(
    name="rich",
    sub_open="\\begin{subproblem}\\item",
    sub_close="\\end{subproblem}",
    subsub_open="\\begin{subsubproblem}\\item",
    subsub_close="\\end{subsubproblem}",
)

# Plain enumitem lists (minimal mode)
MINIMAL_NESTING = NestingStyle(
    name="minimal",
    sub_open="\\begin{enumerate}[label=(\\arabic*)]\\item",
    sub_close="\\end{enumerate}",
    subsub_open="\\begin{enumerate}[label=\\roman*)]\\item",
    subsub_close="\\end{enumerate}",
)


@dataclass(frozen=True)
class NestingToken:
    """A \\subp, \\subsubp or explicit \\end{...} in the source text."""

    level: int
    start: int
    end: int
    closing: bool = False


def tokenize(text: str) -> List[NestingToken]:
    """
    Find all nesting tokens in order.

    Args:
        text: Source markup

    Returns:
        Tokens with their level and span
    """
    tokens: List[NestingToken] = []
    for m in TOKEN_PATTERN.finditer(text):
        opener, closer = m.group(1), m.group(2)
        tokens.append(NestingToken(
            level=_TOKEN_LEVELS[opener or closer],
            start=m.start(),
            end=m.end(),
            closing=closer is not None,
        ))
    return tokens


def has_nesting_tokens(text: str) -> bool:
    """True when the text contains \\subp, \\subsubp or an explicit closer."""
    return TOKEN_PATTERN.search(text) is not None


def rewrite_nested(text: str, style: NestingStyle = RICH_NESTING) -> str:
    """
    Rewrite nesting tokens into balanced environments.

    Args:
        text: Source markup
        style: Environment markup to emit

    Returns:
        Rewritten markup; text without tokens is returned unchanged

    Raises:
        NestingError: If a \\subsubp appears outside any \\subp block

    Example:
        Input ``Intro \\subp A \\subsubp x \\subp B`` becomes::

            Intro \\begin{subproblem}\\item A
                \\begin{subsubproblem}\\item x \\end{subsubproblem}
            \\end{subproblem}\\begin{subproblem}\\item B\\end{subproblem}

        (shown wrapped; the real output keeps the original spacing).
    """
    tokens = tokenize(text)
    if not tokens:
        return text

    out: List[str] = []
    stack: List[int] = []
    cursor = 0

    for token in tokens:
        out.append(text[cursor:token.start])
        cursor = token.end

        if token.closing:
            if token.level in stack:
                while stack[-1] > token.level:
                    out.append(style.close_for(stack.pop()))
                out.append(style.close_for(stack.pop()))
            continue

        if token.level > SUBP_LEVEL and SUBP_LEVEL not in stack:
            raise NestingError(
                f"\\subsubp at offset {token.start} has no enclosing \\subp",
                position=token.start,
            )

        while stack and stack[-1] >= token.level:
            out.append(style.close_for(stack.pop()))

        out.append(style.open_for(token.level))
        stack.append(token.level)

    out.append(text[cursor:])
    while stack:
        out.append(style.close_for(stack.pop()))

    return "".join(out)
