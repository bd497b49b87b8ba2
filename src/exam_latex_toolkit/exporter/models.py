"""
Module: exporter.models

Purpose:
    Output types of the document assembler.

Key Classes:
    - ExportedFile: One named LaTeX file
    - ExportResult: Files produced by one export, plus the mode used
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from .config import ExportMode

MAIN_FILE_NAME = "main.tex"


@dataclass(frozen=True)
class ExportedFile:
    """
    A generated file (immutable).

    Attributes:
        name: File name inside the project, e.g. "main.tex"
        content: LaTeX source
    """

    name: str
    content: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ExportedFile needs a name")

    def write_to(self, directory: Path) -> Path:
        """Write the file into a directory and return its path."""
        path = Path(directory) / self.name
        path.write_text(self.content, encoding="utf-8")
        return path


@dataclass(frozen=True)
class ExportResult:
    """
    Files produced by one export (immutable).

    The first file is always the main document.

    Attributes:
        mode: Template the files were rendered with
        files: Generated files, main document first
    """

    mode: ExportMode
    files: Tuple[ExportedFile, ...]

    def __post_init__(self) -> None:
        if not self.files:
            raise ValueError("ExportResult needs at least one file")

    @property
    def main(self) -> ExportedFile:
        return self.files[0]

    @property
    def text(self) -> str:
        """Main document source, the clipboard payload."""
        return self.main.content

    @property
    def is_multi_file(self) -> bool:
        return len(self.files) > 1

    @property
    def names(self) -> List[str]:
        return [f.name for f in self.files]

    def write_to(self, directory: Path) -> List[Path]:
        """
        Write every file into a directory (created if missing).

        Returns:
            Paths written, in file order
        """
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        return [f.write_to(directory) for f in self.files]
