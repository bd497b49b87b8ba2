"""
Module: exporter.layout.models

Purpose:
    Data models for media layout.
    Immutable dataclasses describing which media a question shows, in
    which order, and how the row/stack decision came out.

Key Classes:
    - MediaKind: image or TikZ drawing
    - MediaItem: One media entry tagged with its kind
    - MediaArrangement: Layout branch chosen from the item count
    - MediaPlan: Complete layout decision for one question

Dependencies:
    - dataclasses (std)

Used By:
    - exporter.layout.planner: Creates and renders MediaPlans
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MediaKind(str, Enum):
    """Kind of media payload."""
    IMAGE = "image"
    TIKZ = "tikz"

    def __str__(self) -> str:
        return self.value


class MediaArrangement(str, Enum):
    """
    Layout branch, chosen purely from the number of media items.

    Attributes:
        NONE: No media, nothing emitted
        SINGLE_RIGHT: One item, right-aligned
        ROW: Two or three items side by side in one centered row
        STACKED: More than three items, one centered block each
    """
    NONE = "none"
    SINGLE_RIGHT = "single-right"
    ROW = "row"
    STACKED = "stacked"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MediaItem:
    """
    Media entry tagged with its kind (immutable).

    Attributes:
        kind: IMAGE or TIKZ
        payload: Image URL or TikZ body
        order: Sort key shared by images and drawings
    """

    kind: MediaKind
    payload: str
    order: int = 0

    @property
    def is_image(self) -> bool:
        return self.kind is MediaKind.IMAGE


@dataclass(frozen=True)
class MediaPlan:
    """
    Layout decision for one question's media.

    Attributes:
        arrangement: Branch chosen from the item count
        items: Items in render order
        image_width: Image width as a fraction of \\textwidth
        tikz_scale: tikzpicture scale, None for unscaled

    Example:
        >>> plan = MediaPlan(MediaArrangement.NONE, ())
        >>> plan.block_count
        0
    """

    arrangement: MediaArrangement
    items: tuple[MediaItem, ...]
    image_width: Optional[float] = None
    tikz_scale: Optional[float] = None

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def block_count(self) -> int:
        """Number of alignment environments the plan renders to."""
        if self.arrangement is MediaArrangement.NONE:
            return 0
        if self.arrangement is MediaArrangement.STACKED:
            return len(self.items)
        return 1
