# leaderlabel/core/render.py
"""
Matplotlib PNG preview of a labeling result: features, label boxes with text, leaders.
The y axis is inverted so the picture matches the SVG output.
"""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle

from leaderlabel.core.config import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE_PT,
    FEATURE_FILL,
    FEATURE_STROKE,
    LABEL_FILL,
    LABEL_STROKE,
    LEADER_STROKE,
    LEADER_STROKE_WIDTH,
    RENDER_DPI,
    RENDER_MIN_SIZE_PX,
)
from leaderlabel.core.types import BoundingBox, LabelingResult


def _new_fig(canvas: BoundingBox, scale: int = 1) -> tuple[plt.Figure, plt.Axes]:
    # One diagram unit per pixel at scale 1, never smaller than RENDER_MIN_SIZE_PX.
    w = max(RENDER_MIN_SIZE_PX, canvas.width) * scale
    h = max(RENDER_MIN_SIZE_PX, canvas.height) * scale
    fig = plt.figure(figsize=(w / RENDER_DPI, h / RENDER_DPI), dpi=RENDER_DPI, constrained_layout=False)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.axis("off")
    return fig, ax


def set_axes_to_canvas(ax: plt.Axes, canvas: BoundingBox) -> None:
    """xlim/ylim from canvas bounds, y pointing down, equal aspect."""
    ax.set_xlim(canvas.left, canvas.right)
    ax.set_ylim(canvas.bottom, canvas.top)
    ax.set_aspect("equal", adjustable="box")


def _draw_box(ax: plt.Axes, b: BoundingBox, facecolor: str, edgecolor: str, zorder: int) -> None:
    ax.add_patch(
        Rectangle((b.left, b.top), b.width, b.height, facecolor=facecolor, edgecolor=edgecolor, linewidth=1, zorder=zorder)
    )


def _draw_result(
    ax: plt.Axes,
    result: LabelingResult,
    font_family: str,
    font_size_pt: float,
    scale: int,
) -> None:
    for lab in result.labels:
        _draw_box(ax, lab.entity.location, FEATURE_FILL, FEATURE_STROKE, zorder=2)

    for lab in result.labels:
        _draw_box(ax, lab.box, LABEL_FILL, LABEL_STROKE, zorder=3)
        ax.text(
            lab.center_x, lab.top + lab.height / 2, lab.text,
            fontsize=font_size_pt * scale,
            fontfamily=font_family,
            ha="center", va="center",
            color="black",
            zorder=4,
        )

    for path in result.leaders:
        xy = np.array(path.points)
        ax.plot(xy[:, 0], xy[:, 1], color=LEADER_STROKE, linewidth=LEADER_STROKE_WIDTH * scale, zorder=5)

    set_axes_to_canvas(ax, result.canvas)


def render_labels_png(
    result: LabelingResult,
    output_path: str | Path,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_pt: float = DEFAULT_FONT_SIZE_PT,
    scale: int = 1,
) -> Path:
    """Render result to a PNG. scale multiplies output resolution (1x, 2x, 4x)."""
    out = Path(output_path)
    fig, ax = _new_fig(result.canvas, scale)
    try:
        _draw_result(ax, result, font_family, font_size_pt, scale)
        fig.savefig(out, dpi=RENDER_DPI, facecolor="white")
    finally:
        plt.close(fig)
    return out
