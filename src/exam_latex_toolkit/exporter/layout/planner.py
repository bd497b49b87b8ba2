"""
Module: exporter.layout.planner

Purpose:
    Decide placement and sizing of a question's images and TikZ
    drawings, and render the decision to LaTeX.

    Images and drawings are merged into one sequence and stably sorted by
    ``order``. The layout is then picked from the item count alone:

    | items | arrangement | image width | TikZ scale |
    |-------|-------------|-------------|------------|
    | 0     | nothing     | -           | -          |
    | 1     | flushright  | 0.4         | 0.8        |
    | 2-3   | center row  | 0.3         | 0.6        |
    | >3    | center each | 0.8         | unscaled   |

Key Functions:
    - collect_media(): Merge and sort a question's media
    - plan_media(): Choose the arrangement
    - render_media_plan(): Emit LaTeX for a plan
    - layout_media(): plan + render in one call

Dependencies:
    - core.models: Question
    - exporter.layout.models: MediaPlan, MediaItem

Used By:
    - exporter.markup.transformer: Question fragments
    - exporter.selective: Selective copy
"""

from __future__ import annotations

import logging
from typing import List

from exam_latex_toolkit.core.models import Question

from .models import MediaArrangement, MediaItem, MediaKind, MediaPlan

logger = logging.getLogger(__name__)


SINGLE_IMAGE_WIDTH = 0.4
SINGLE_TIKZ_SCALE = 0.8
ROW_IMAGE_WIDTH = 0.3
ROW_TIKZ_SCALE = 0.6
STACKED_IMAGE_WIDTH = 0.8
MAX_ROW_ITEMS = 3

ROW_SEPARATOR = "\\quad"


def collect_media(question: Question) -> List[MediaItem]:
    """
    Merge images and TikZ drawings into one ordered list.

    Images come before drawings in the merged sequence, so equal
    ``order`` values keep images first (sorted() is stable).

    Args:
        question: Question whose media to collect

    Returns:
        Media items sorted ascending by order
    """
    items = [
        MediaItem(MediaKind.IMAGE, image.url, image.order or 0)
        for image in question.images
    ]
    items.extend(
        MediaItem(MediaKind.TIKZ, tikz.code, tikz.order or 0)
        for tikz in question.tikz_codes
    )
    return sorted(items, key=lambda item: item.order)


def plan_media(question: Question) -> MediaPlan:
    """
    Choose the media arrangement for a question.

    Args:
        question: Question whose media to lay out

    Returns:
        MediaPlan with arrangement, ordered items and sizing
    """
    items = tuple(collect_media(question))
    count = len(items)

    if count == 0:
        return MediaPlan(MediaArrangement.NONE, items)
    if count == 1:
        return MediaPlan(
            MediaArrangement.SINGLE_RIGHT,
            items,
            image_width=SINGLE_IMAGE_WIDTH,
            tikz_scale=SINGLE_TIKZ_SCALE,
        )
    if count <= MAX_ROW_ITEMS:
        return MediaPlan(
            MediaArrangement.ROW,
            items,
            image_width=ROW_IMAGE_WIDTH,
            tikz_scale=ROW_TIKZ_SCALE,
        )
    return MediaPlan(
        MediaArrangement.STACKED,
        items,
        image_width=STACKED_IMAGE_WIDTH,
        tikz_scale=None,
    )


def render_media_plan(plan: MediaPlan) -> str:
    """
    Render a media plan to LaTeX.

    Args:
        plan: Plan from plan_media()

    Returns:
        LaTeX markup, "" when the plan is empty
    """
    if plan.arrangement is MediaArrangement.NONE:
        return ""

    if plan.arrangement is MediaArrangement.SINGLE_RIGHT:
        body = _render_item(plan.items[0], plan, inline=False)
        return f"\n\\begin{{flushright}}\n{body}\\end{{flushright}}\n"

    if plan.arrangement is MediaArrangement.ROW:
        row = ROW_SEPARATOR.join(_render_item(item, plan, inline=True) for item in plan.items)
        return f"\n\\begin{{center}}\n{row}\n\\end{{center}}\n"

    return "".join(
        f"\n\\begin{{center}}\n{_render_item(item, plan, inline=False)}\\end{{center}}\n"
        for item in plan.items
    )


def layout_media(question: Question) -> str:
    """
    Plan and render a question's media in one step.

    Args:
        question: Question whose media to lay out

    Returns:
        LaTeX markup for the media, "" when there is none
    """
    plan = plan_media(question)
    if plan.count:
        logger.debug(f"Media for {question.id}: {plan.count} item(s) as {plan.arrangement}")
    return render_media_plan(plan)


def _render_item(item: MediaItem, plan: MediaPlan, *, inline: bool) -> str:
    """
    Render one media item.

    Inline items (row layout) carry no trailing newline so the row
    separator sits directly between them.
    """
    tail = "" if inline else "\n"
    if item.is_image:
        return f"\\includegraphics[width={plan.image_width:g}\\textwidth]{{{item.payload}}}{tail}"

    options = f"[scale={plan.tikz_scale:g}]" if plan.tikz_scale is not None else ""
    return f"\\begin{{tikzpicture}}{options}\n{item.payload}\n\\end{{tikzpicture}}{tail}"
