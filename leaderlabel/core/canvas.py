# leaderlabel/core/canvas.py
"""Canvas sizing: smallest box holding the drawing area and every placed label."""

from __future__ import annotations

from collections.abc import Sequence

from leaderlabel.core.config import LEADER_STROKE_MARGIN
from leaderlabel.core.types import BoundingBox, PlacedLabel


def canvas_bounds(
    drawing_area: BoundingBox,
    labels: Sequence[PlacedLabel],
    stroke_margin: float = LEADER_STROKE_MARGIN,
) -> BoundingBox:
    """
    Bounding box of the drawing area and all label boxes. stroke_margin is added below the
    lowest label so leader strokes leaving it are not clipped.

    The box starts from the drawing area's own left/top, not from the origin. For a drawing
    area at (0, 0) this is min(0, ...) / max(width, ...); an offset drawing area keeps its
    offset and the canvas does not stretch back to x = 0 or y = 0.
    """
    left = min([drawing_area.left] + [lab.left for lab in labels])
    right = max([drawing_area.right] + [lab.right for lab in labels])
    top = min([drawing_area.top] + [lab.top for lab in labels])
    bottom = max([drawing_area.bottom] + [lab.bottom + stroke_margin for lab in labels])
    return BoundingBox(left=left, top=top, width=right - left, height=bottom - top)
