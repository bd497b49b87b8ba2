"""
Module: exporter.config

Purpose:
    Configuration dataclasses for a single export. Immutable, validated
    on construction, never persisted by the engine.

Key Classes:
    - ExportMode: rich / minimal template selection
    - CopyMethod: clipboard / remote-submit delivery
    - PaperSize: A4 / B5 / custom geometry
    - VspaceAmount: Per-type vertical spacing directives
    - NormalConfig: Minimal-mode document options
    - CopyConfig: Main export configuration
    - SelectiveCopyOptions: Toggles for selective (question list) copy

Key Functions:
    - load_copy_config(): Read a CopyConfig from a JSON file

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - exporter.assembler: Template selection and geometry
    - exporter.markup.transformer: Per-type rules and spacing
    - exporter.controller: Public API defaults
    - cli: --config handling
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from exam_latex_toolkit.core.models import QuestionType

logger = logging.getLogger(__name__)


class _AliasedEnum(str, Enum):
    """String enum that also accepts legacy UI spellings."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {}

    @classmethod
    def parse(cls, value: Any):
        """
        Parse a raw value, accepting aliases case-insensitively.

        Raises:
            ValueError: If the value names no member
        """
        if isinstance(value, cls):
            return value
        raw = str(value).strip()
        key = cls._aliases().get(raw.lower(), raw)
        for member in cls:
            if member.value.lower() == key.lower():
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__} {value!r} (expected one of: {valid})")


class ExportMode(_AliasedEnum):
    """Document template / per-question markup strategy."""
    RICH = "rich"        # problemlab template: counters, difficulty markers, answers
    MINIMAL = "minimal"  # plain sections + enumerate

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {"mareate": "rich", "normal": "minimal"}


class CopyMethod(_AliasedEnum):
    """Delivery channel."""
    CLIPBOARD = "clipboard"
    REMOTE_SUBMIT = "remote-submit"

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {"overleaf": "remote-submit", "remote_submit": "remote-submit"}


class PaperSize(_AliasedEnum):
    """Paper geometry preset for minimal documents."""
    A4 = "A4"
    B5 = "B5"
    CUSTOM = "custom"


# Geometry option strings passed to \usepackage[...]{geometry}
A4_GEOMETRY = "paperwidth=21cm,paperheight=29.7cm,top=2.4cm,bottom=2.6cm,right=2cm,left=2cm"
B5_GEOMETRY = "paperwidth=18.2cm,paperheight=25.7cm,top=2.4cm,bottom=2.6cm,right=2cm,left=2cm"


@dataclass(frozen=True)
class VspaceAmount:
    """
    Vertical spacing directive appended after each question, per type.

    Attributes:
        choice: For choice and multiple-choice questions
        fill: For fill-in-the-blank questions
        solution: For worked-solution questions
        default: For any other type
    """

    choice: str = "\\vspace{3cm}"
    fill: str = "\\vspace{3cm}"
    solution: str = "\\vspace{5cm}"
    default: str = "\\vspace{3cm}"

    def for_type(self, question_type: QuestionType) -> str:
        """Return the directive for a question type."""
        if question_type.is_choice:
            return self.choice
        if question_type is QuestionType.FILL:
            return self.fill
        if question_type is QuestionType.SOLUTION:
            return self.solution
        return self.default

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> VspaceAmount:
        data = data or {}
        defaults = cls()
        return cls(
            choice=str(data.get("choice", defaults.choice)),
            fill=str(data.get("fill", defaults.fill)),
            solution=str(data.get("solution", defaults.solution)),
            default=str(data.get("default", defaults.default)),
        )

    def to_dict(self) -> dict:
        return {
            "choice": self.choice,
            "fill": self.fill,
            "solution": self.solution,
            "default": self.default,
        }


@dataclass(frozen=True)
class NormalConfig:
    """
    Minimal-mode document options.

    Attributes:
        add_document_environment: Wrap output in a full document
        paper_size: Geometry preset; None means "unset" (treated as A4)
        custom_geometry: Raw geometry options used with PaperSize.CUSTOM
    """

    add_document_environment: bool = False
    paper_size: Optional[PaperSize] = PaperSize.A4
    custom_geometry: str = ""

    @property
    def geometry(self) -> str:
        """
        Resolve geometry options for \\usepackage[...]{geometry}.

        Custom geometry is passed through verbatim; an empty custom
        geometry (or an unset size) falls back to A4.
        """
        if self.paper_size is PaperSize.CUSTOM and self.custom_geometry.strip():
            return self.custom_geometry
        if self.paper_size is PaperSize.B5:
            return B5_GEOMETRY
        return A4_GEOMETRY

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> NormalConfig:
        data = data or {}
        size = data.get("paperSize", data.get("paper_size", PaperSize.A4.value))
        return cls(
            add_document_environment=bool(
                data.get("addDocumentEnvironment", data.get("add_document_environment", False))
            ),
            paper_size=PaperSize.parse(size) if size else None,
            custom_geometry=str(
                data.get("customGeometry", data.get("custom_geometry", "")) or ""
            ),
        )

    def to_dict(self) -> dict:
        return {
            "addDocumentEnvironment": self.add_document_environment,
            "paperSize": self.paper_size.value if self.paper_size else None,
            "customGeometry": self.custom_geometry,
        }


@dataclass(frozen=True)
class CopyConfig:
    """
    Configuration for one export (immutable).

    Attributes:
        mode: Template selection (rich or minimal)
        add_vspace: Append a spacing directive after each question
        vspace_amount: Directive per question type
        copy_method: Delivery channel
        normal_config: Minimal-mode document options

    Invariants:
        - Remote submission always produces a full document; see
          effective(), which the assembler applies before rendering

    Example:
        >>> config = CopyConfig(
        ...     mode=ExportMode.MINIMAL,
        ...     copy_method=CopyMethod.REMOTE_SUBMIT,
        ... )
        >>> config.effective().normal_config.add_document_environment
        True
    """

    mode: ExportMode = ExportMode.RICH
    add_vspace: bool = True
    vspace_amount: VspaceAmount = field(default_factory=VspaceAmount)
    copy_method: CopyMethod = CopyMethod.CLIPBOARD
    normal_config: NormalConfig = field(default_factory=NormalConfig)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.mode, ExportMode):
            raise ValueError(f"mode must be an ExportMode: {self.mode!r}")
        if not isinstance(self.copy_method, CopyMethod):
            raise ValueError(f"copy_method must be a CopyMethod: {self.copy_method!r}")

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_rich(self) -> bool:
        return self.mode is ExportMode.RICH

    @property
    def wraps_document(self) -> bool:
        """True when the output is a complete LaTeX document."""
        return self.is_rich or self.normal_config.add_document_environment

    def vspace_for(self, question_type: QuestionType) -> str:
        """Spacing directive for a type, or "" when spacing is off."""
        if not self.add_vspace:
            return ""
        return self.vspace_amount.for_type(question_type)

    def effective(self) -> CopyConfig:
        """
        Return the configuration actually used for rendering.

        Remote submission needs a complete document, so it forces
        ``add_document_environment`` on and defaults an unset paper size
        to A4. Contradictions are corrected silently, never rejected.
        """
        if self.copy_method is not CopyMethod.REMOTE_SUBMIT:
            return self

        normal = self.normal_config
        if normal.add_document_environment and normal.paper_size is not None:
            return self

        logger.debug("Remote submission requires a full document; enabling document environment")
        corrected = replace(
            normal,
            add_document_environment=True,
            paper_size=normal.paper_size or PaperSize.A4,
        )
        return replace(self, normal_config=corrected)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_dict(cls, data: dict) -> CopyConfig:
        """
        Build a config from a UI-style camelCase dict.

        Missing keys take the defaults; legacy spellings ("mareate",
        "normal", "overleaf") are accepted.

        Raises:
            ValueError: If an enum value is not recognised
        """
        defaults = cls()
        mode = data.get("mode", defaults.mode)
        method = data.get("copyMethod", data.get("copy_method", defaults.copy_method))
        return cls(
            mode=ExportMode.parse(mode),
            add_vspace=bool(data.get("addVspace", data.get("add_vspace", defaults.add_vspace))),
            vspace_amount=VspaceAmount.from_dict(
                data.get("vspaceAmount", data.get("vspace_amount"))
            ),
            copy_method=CopyMethod.parse(method),
            normal_config=NormalConfig.from_dict(
                data.get("normalConfig", data.get("normal_config"))
            ),
        )

    def to_dict(self) -> dict:
        return {
            "mode": self.mode.value,
            "addVspace": self.add_vspace,
            "vspaceAmount": self.vspace_amount.to_dict(),
            "copyMethod": self.copy_method.value,
            "normalConfig": self.normal_config.to_dict(),
        }


DEFAULT_COPY_CONFIG = CopyConfig()


@dataclass(frozen=True)
class SelectiveCopyOptions:
    """
    Toggles for copying a hand-picked list of questions.

    Attributes:
        show_difficulty: Prefix each item with its difficulty marker
        show_source: Include the question source
        show_answer: Append the worked solution as an answer block
    """

    show_difficulty: bool = True
    show_source: bool = True
    show_answer: bool = False

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> SelectiveCopyOptions:
        data = data or {}
        return cls(
            show_difficulty=bool(data.get("showDifficulty", data.get("show_difficulty", True))),
            show_source=bool(data.get("showSource", data.get("show_source", True))),
            show_answer=bool(data.get("showAnswer", data.get("show_answer", False))),
        )


def load_copy_config(path: Path) -> CopyConfig:
    """
    Load a CopyConfig from a JSON file.

    Args:
        path: JSON file holding a camelCase config object

    Returns:
        Parsed CopyConfig

    Raises:
        ValueError: If the file is not a JSON object or holds bad values
        OSError: If the file cannot be read
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    config = CopyConfig.from_dict(data)
    logger.info(f"Loaded export config from {path}: mode={config.mode}, method={config.copy_method}")
    return config
