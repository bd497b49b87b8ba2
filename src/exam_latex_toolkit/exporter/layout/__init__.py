"""
Module: exporter.layout

Purpose:
    Media layout for question fragments.
    Turns a question's images and TikZ drawings into placed LaTeX blocks.

Key Functions:
    - plan_media(): Choose arrangement from the item count
    - render_media_plan(): Emit LaTeX for a plan
    - layout_media(): Both in one call

Key Classes:
    - MediaPlan: Layout decision
    - MediaItem: Tagged media entry
    - MediaArrangement: Layout branch

Used By:
    - exporter.markup.transformer
    - exporter.selective
"""

from .models import MediaArrangement, MediaItem, MediaKind, MediaPlan
from .planner import collect_media, layout_media, plan_media, render_media_plan

__all__ = [
    # Models
    "MediaArrangement",
    "MediaItem",
    "MediaKind",
    "MediaPlan",
    # Functions
    "collect_media",
    "layout_media",
    "plan_media",
    "render_media_plan",
]
