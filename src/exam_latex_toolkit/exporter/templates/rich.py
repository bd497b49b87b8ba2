"""
Module: exporter.templates.rich

Purpose:
    Document template for rich mode.

    A rich export is a main document that ``\\input``s a companion style
    file, ``problemlab.tex``. The style file defines the five difficulty
    macros, the answer environment (suppressed unless ``\\showanswers``),
    the problem / subproblem / subsubproblem environments and the page
    style. All display text comes from RichTemplateOptions.

Key Classes:
    - RichTemplateOptions: Cover, header/footer and label text

Key Functions:
    - rich_preamble(): Main document up to and including the title page
    - rich_document_end(): Closing line
    - section_open() / section_close(): problem environment per section
    - problemlab_style(): Contents of problemlab.tex

Dependencies:
    - exporter.annotate: DifficultyLevel (macro names and labels)

Used By:
    - exporter.assembler
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from string import Template
from typing import Optional, Tuple

from ..annotate import DifficultyLevel
from ..config import A4_GEOMETRY

STYLE_FILE_NAME = "problemlab.tex"
STYLE_INPUT_NAME = "problemlab"

# Background fill per difficulty macro, easiest first
DIFFICULTY_FILLS: Tuple[str, ...] = (
    "green!10",
    "accent1!15",
    "accent2!15",
    "accent3!15",
    "red!15",
)

_PROJECT_NAME_UNSAFE = re.compile(r"[^a-zA-Z0-9\u4e00-\u9fa5]")


@dataclass(frozen=True)
class RichTemplateOptions:
    """
    Display text for the rich template (immutable).

    Attributes:
        default_title: Title used when the paper has no name
        author: ``\\author{}`` value
        course_label: Italic line at the top of the cover page
        cover_heading: Large heading on the cover page
        cover_note: Paragraph under the cover heading
        notice: Bold notice at the bottom of the cover page
        copyright_line: Bold line under the notice
        serial: Italic document number on the cover page
        footer_left: Bold left footer
        footer_right: Bold right footer
        header_right: Right header set by the style file
        page_label: Centre footer, "{page}" and "{total}" are filled in
        problem_label: Word in front of each problem number
        answer_title: Title bar of the answer box
        answer_done: Closing mark inside the answer box
        difficulty_labels: Marker text, easiest first (five entries)
        geometry: Page geometry loaded by the style file
    """

    default_title: str = "Practice Paper"
    author: str = "Department of Admin"
    course_label: str = "Course Notes"
    cover_heading: str = "Course Handout"
    cover_note: str = (
        "Exercises taken from other sources cite them next to the difficulty "
        "marker; uncited exercises are original."
    )
    notice: str = "For course participants only. Do not distribute."
    copyright_line: str = ""
    serial: str = ""
    footer_left: str = ""
    footer_right: str = ""
    header_right: str = ""
    page_label: str = "Page {page} of {total}"
    problem_label: str = "Problem"
    answer_title: str = "Solution"
    answer_done: str = "Done"
    difficulty_labels: Tuple[str, ...] = field(
        default_factory=lambda: tuple(level.label for level in DifficultyLevel)
    )
    geometry: str = A4_GEOMETRY

    def __post_init__(self) -> None:
        if len(self.difficulty_labels) != len(DifficultyLevel):
            raise ValueError(
                f"difficulty_labels needs {len(DifficultyLevel)} entries, "
                f"got {len(self.difficulty_labels)}"
            )
        if "{page}" not in self.page_label:
            raise ValueError(f"page_label must contain {{page}}: {self.page_label!r}")

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> RichTemplateOptions:
        """Build from a snake_case dict; unknown keys are ignored."""
        data = data or {}
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if "difficulty_labels" in known:
            known["difficulty_labels"] = tuple(known["difficulty_labels"])
        return cls(**known)


DEFAULT_RICH_OPTIONS = RichTemplateOptions()


def project_name(title: Optional[str]) -> str:
    """Filesystem-friendly name used in the header comment."""
    if not title:
        return "Exercise"
    return _PROJECT_NAME_UNSAFE.sub("_", title)


# ─────────────────────────────────────────────────────────────────────────────
# Main Document
# ─────────────────────────────────────────────────────────────────────────────

_PREAMBLE = Template(r"""% ========================================
% Exam paper
% Project: $project
% ========================================

\documentclass[UTF8,10pt]{article}

\input{$style}

\title{\textbf{$title}}
\author{$author}
\date{\today}
\cfoot{\ $page_label}
\lfoot{\textbf{$footer_left}}
\rfoot{\textbf{$footer_right}}

$answers_switch

\begin{document}

\textit{$course_label}

\vspace{8cm}

\begin{center}

\huge

    \textbf{$cover_heading}

\normalsize

    $cover_note

    \vspace{10.5cm}
\end{center}

\begin{flushleft}
    \large

    \textbf{$notice}

    \textbf{$copyright_line}

    \textit{$serial}
\end{flushleft}

\newpage

\setcounter{page}{1}
\maketitle
\pagestyle{fancy}
\thispagestyle{fancy}
\renewcommand{\headrulewidth}{0pt}

""")


def rich_preamble(
    title: Optional[str],
    options: RichTemplateOptions = DEFAULT_RICH_OPTIONS,
    *,
    show_answers: bool = True,
) -> str:
    """
    Build the rich main document opening.

    Args:
        title: Paper name (falls back to options.default_title)
        options: Display text
        show_answers: Emit ``\\showanswers`` (True) or ``\\hideanswers``

    Returns:
        Everything from the header comment to the title page
    """
    page_label = options.page_label.format(
        page="\\thepage", total="\\pageref{LastPage}"
    )
    return _PREAMBLE.substitute(
        project=project_name(title),
        style=STYLE_INPUT_NAME,
        title=title or options.default_title,
        author=options.author,
        page_label=page_label,
        footer_left=options.footer_left,
        footer_right=options.footer_right,
        answers_switch="\\showanswers" if show_answers else "\\hideanswers",
        course_label=options.course_label,
        cover_heading=options.cover_heading,
        cover_note=options.cover_note,
        notice=options.notice,
        copyright_line=options.copyright_line,
        serial=options.serial,
    )


def rich_document_end() -> str:
    return "\\end{document}"


def section_open(title: str) -> str:
    return f"\\begin{{problem}}[{title}]\n"


def section_close() -> str:
    return "\\end{problem}\n\n"


# ─────────────────────────────────────────────────────────────────────────────
# Style File (problemlab.tex)
# ─────────────────────────────────────────────────────────────────────────────

_DIFFICULTY_MACRO = Template(r"""\newcommand{\$macro}[1][]{%
  \tikz[baseline=(X.base)]\node[fill=$fill,
    inner xsep=6pt, inner ysep=2pt, rounded corners=3pt,
    font=\bfseries\small\sffamily\color{darkmain}] (X) {$label%
    \if\relax\detokenize{#1}\relax\else~{\color{main!80}\textbullet}~#1\fi};%
}
""")

_STYLE_HEAD = Template(r"""% problemlab.tex
% Problem environments, difficulty markers and answer boxes

\usepackage[$geometry]{geometry}
\usepackage{amsmath}
\usepackage{setspace}
\usepackage{ctex}
\usepackage{xeCJK}
\usepackage{zhnumber}
\usepackage{graphicx}
\usepackage[hidelinks]{hyperref}
\usepackage{booktabs}
\usepackage{enumitem}
\usepackage{soul}
\usepackage{ulem}
\usepackage{amssymb}
\usepackage{tikz}
\usepackage{xcolor}
\usepackage{pgfplots}
\usepackage{float}
\usepackage{subfigure}
\usepackage{fancyhdr}
\usepackage{lastpage}
\usepackage{framed}
\usepackage[thicklines]{cancel}
\usepackage{tasks}
\usepackage{underscore}
\usepackage{multicol}
\usepackage{environ}
\usepackage{mdframed}
\usepackage{fontawesome5}

\setlength{\parindent}{4em}
\addtolength{\parskip}{5pt}

\usetikzlibrary{arrows}
\usetikzlibrary{calc}
\usetikzlibrary{positioning}

% ================ Colours ================
\definecolor{main}{RGB}{0, 96, 110}
\definecolor{lightmain}{RGB}{220, 240, 240}
\definecolor{mediummain}{RGB}{160, 215, 215}
\definecolor{darkmain}{RGB}{0, 70, 80}
\definecolor{accent1}{RGB}{240, 190, 80}
\definecolor{accent2}{RGB}{170, 140, 200}
\definecolor{accent3}{RGB}{210, 100, 90}
\definecolor{answerbg}{RGB}{240, 248, 255}
\definecolor{answerborder}{RGB}{70, 140, 180}
\definecolor{answertitlebg}{RGB}{0, 96, 110}
\definecolor{answertext}{RGB}{30, 60, 70}
\definecolor{exercisecolor}{named}{main}

% ================ Difficulty markers ================
""")

_STYLE_BODY = Template(r"""
% ================ Answer visibility ================
\newif\ifshowanswers
\showanswersfalse

\newcommand{\showanswers}{\showanswerstrue}
\newcommand{\hideanswers}{\showanswersfalse}

% ================ Answer box ================
\mdfdefinestyle{answerstyle}{%
    linewidth=0.5pt,
    linecolor=answerborder,
    backgroundcolor=answerbg,
    roundcorner=8pt,
    innerleftmargin=12pt,
    innerrightmargin=12pt,
    innertopmargin=8pt,
    innerbottommargin=12pt,
    skipabove=10pt,
    skipbelow=10pt,
    frametitle={},
    frametitleaboveskip=0pt,
    frametitlebelowskip=0pt,
    frametitlerule=true,
    frametitlerulewidth=1.2pt,
    frametitlerulecolor=answertitlebg,
    frametitlebackgroundcolor=answertitlebg,
    frametitlefont=\bfseries\color{white}\small\sffamily,
    frametitlealignment=\raggedright,
    shadow=false,
    leftmargin=0pt,
    rightmargin=0pt
}

\NewEnviron{answer}[1][]{%
  \ifshowanswers%
    \begin{mdframed}[style=answerstyle, frametitle={\faLightbulb\  $answer_title}]
      \if\relax\detokenize{#1}\relax\else%
        \quad\textcolor{answertitlebg!80!white}{\textbf{[#1]}}%
      \fi%
      \par\vspace{5pt}
      \BODY
      \par\vspace{3pt}
      \hfill\small\color{answerborder}\faCheckCircle\ $answer_done
    \end{mdframed}
  \fi%
}

\setstretch{1.5}

% ================ Counters ================
\newcounter{problemcounter}
\newcounter{subproblemcounter}[problemcounter]
\newcounter{subsubproblemcounter}[subproblemcounter]

\newlength{\itemwd}

\newcommand{\underlines}{{\color{mediummain}\underline{\hspace{7em}}}}

\settasks{label={\Alph*. }}

% ================ Environments ================
\newenvironment{problem}[1][]{%
  \refstepcounter{problemcounter}%
  {\bfseries\Large\color{exercisecolor}%
  $problem_label~\theproblemcounter%
  \if\relax\detokenize{#1}\relax\else~:~#1\fi}%
  \quad%
  \vspace{2mm}%
  \begin{enumerate}[leftmargin=65pt,
    label={\colorbox{exercisecolor!15}{\makebox[2.2em][c]{\color{exercisecolor}\textbf{\arabic*.}}}},
    itemsep=0.8ex,
    parsep=0pt,
    labelsep=0.8em,
    topsep=0.5ex
  ]
}{%
  \end{enumerate}%
  \par\vspace{3mm}%
}

\newenvironment{subproblem}{%
  \refstepcounter{subproblemcounter}%
  \vspace{0.8ex}%
  \setbox0=\vbox\bgroup
  \begin{enumerate}[
    label={\colorbox{exercisecolor!8}{\makebox[1.8em][c]{\color{exercisecolor}\textbf{(\alph*)}}}},
    itemsep=0.6ex,
    parsep=0pt,
    labelsep=0.8em
  ]
}{%
  \end{enumerate}%
  \egroup
  \setlength{\itemwd}{\wd0}%
  \ifdim\itemwd<0.3\linewidth
    \begin{multicols}{3}%
    \unvbox0
    \end{multicols}%
  \else
    \unvbox0
  \fi
  \vspace{0.8ex}%
}

\newenvironment{subsubproblem}{%
  \refstepcounter{subsubproblemcounter}%
  \vspace{0.5ex}%
  \begin{enumerate}[
    label={\colorbox{exercisecolor!5}{\makebox[1.5em][c]{\color{exercisecolor!80}\textbf{\roman*.}}}},
    leftmargin=3.5em,
    itemsep=0.4ex,
    parsep=0pt,
    labelsep=0.8em
  ]
}{%
  \end{enumerate}%
  \vspace{0.5ex}%
}

% ================ Answer area ================
\mdfdefinestyle{answerboxstyle}{%
    linewidth=0.7pt,
    linecolor=gray!60,
    backgroundcolor=white,
    roundcorner=4pt,
    innerleftmargin=10pt,
    innerrightmargin=10pt,
    innertopmargin=12pt,
    innerbottommargin=8pt,
    skipabove=8pt,
    skipbelow=8pt,
    frametitle={},
    frametitlerule=false,
    shadow=false,
    leftmargin=0pt,
    rightmargin=0pt,
    nobreak=true
}

% \answerarea{n}: n ruled lines, only while answers are hidden
\newcommand{\answerarea}[1]{%
  \ifshowanswers\else%
    \par\vspace{1em}%
    \begin{mdframed}[style=answerboxstyle]
      \setlength{\parindent}{0pt}%
      \vspace*{1.5em}%
      \textcolor{gray!40}{\rule{\linewidth}{0.5pt}}%
      \par\vspace{1.2em}%
      \ifnum#1>1
        \foreach \n in {2,...,#1} {%
          \textcolor{gray!40}{\rule{\linewidth}{0.5pt}}%
          \par\vspace{1.2em}%
        }%
      \fi
    \end{mdframed}%
    \par\vspace{1em}%
  \fi%
}

% ================ Page style ================
\pagestyle{fancy}
\fancyhf{}
\fancyhead[R]{\small $header_right}
\renewcommand{\headrulewidth}{0.4pt}
\renewcommand{\footrulewidth}{0pt}
""")


def difficulty_macro_definitions(options: RichTemplateOptions = DEFAULT_RICH_OPTIONS) -> str:
    """``\\newcommand`` blocks for \\vs, \\bs, \\mi, \\di and \\vd."""
    blocks = []
    for level, fill, label in zip(DifficultyLevel, DIFFICULTY_FILLS, options.difficulty_labels):
        blocks.append(_DIFFICULTY_MACRO.substitute(macro=level.macro, fill=fill, label=label))
    return "\n".join(blocks)


def problemlab_style(options: RichTemplateOptions = DEFAULT_RICH_OPTIONS) -> str:
    """
    Build the contents of problemlab.tex.

    Args:
        options: Display text and page geometry

    Returns:
        Complete style file, meant to be ``\\input`` by the main document
    """
    return (
        _STYLE_HEAD.substitute(geometry=options.geometry)
        + difficulty_macro_definitions(options)
        + _STYLE_BODY.substitute(
            answer_title=options.answer_title,
            answer_done=options.answer_done,
            problem_label=options.problem_label,
            header_right=options.header_right,
        )
    )
