# leaderlabel/core/layout.py
"""
Boundary labeling orchestration: de-duplicate entities, split them into an upper and a
lower band, declump each band horizontally, route one leader per label, size the canvas.
Every call builds fresh output objects; inputs are never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from leaderlabel.core.canvas import canvas_bounds
from leaderlabel.core.config import LabelingOptions
from leaderlabel.core.declump import bounds_problem, layout_positions
from leaderlabel.core.grouping import dedupe_entities, require_metrics, split_entities
from leaderlabel.core.leaders import route_leaders
from leaderlabel.core.types import (
    BoundingBox,
    Entity,
    LabelingResult,
    LayoutItem,
    PlacedLabel,
    Side,
    TextDimensions,
)
from leaderlabel.core.validate import validate_result

logger = logging.getLogger(__name__)


def label_height(
    entities: Sequence[Entity],
    text_dimensions: TextDimensions,
    label_padding: float = 0.0,
) -> float:
    """Shared label height: tallest label text plus padding on both ends (0 if no entities)."""
    if not entities:
        return 0.0
    tallest = max(text_dimensions[e.label].height for e in entities)
    return tallest + 2 * label_padding


def layout_items(
    entities: Sequence[Entity],
    text_dimensions: TextDimensions,
    label_padding: float = 0.0,
) -> list[LayoutItem]:
    """One item per entity: ideal = feature center x, width = text width + padding on both sides."""
    return [
        LayoutItem(
            ideal=e.location.center_x,
            width=text_dimensions[e.label].width + 2 * label_padding,
            ref=i,
        )
        for i, e in enumerate(entities)
    ]


def band_top(
    drawing_area: BoundingBox,
    side: Side,
    height: float,
    boundary_margin: float = 0.0,
) -> float:
    """Top edge of the label band above or below the drawing area."""
    if side == "above":
        return drawing_area.top - boundary_margin - height
    return drawing_area.bottom + boundary_margin


def create_labels(
    entities: Sequence[Entity],
    text_dimensions: TextDimensions,
    drawing_area: BoundingBox,
    side: Side,
    height: float,
    options: LabelingOptions | None = None,
) -> list[PlacedLabel]:
    """
    Place one band of labels. Horizontal centers come from the declumper; all labels in
    the band share the same top edge and height.
    """
    opts = options or LabelingOptions()
    items = layout_items(entities, text_dimensions, opts.label_padding)
    positions = layout_positions(items, opts.position_bounds, opts.node_spacing)
    top = band_top(drawing_area, side, height, opts.boundary_margin)
    return [
        PlacedLabel(
            left=pos - item.width / 2,
            top=top,
            width=item.width,
            height=height,
            side=side,
            entity=entities[item.ref],
            text=entities[item.ref].label,
        )
        for item, pos in zip(items, positions)
    ]


def label_diagram(
    entities: Sequence[Entity],
    drawing_area: BoundingBox,
    text_dimensions: TextDimensions,
    options: LabelingOptions | None = None,
) -> LabelingResult:
    """
    Full pipeline for one diagram. Raises MissingMetricsError if any visible label has no
    measured size. Zero entities give an empty result whose canvas is the drawing area.
    """
    opts = options or LabelingOptions()
    visible = dedupe_entities(entities)
    require_metrics(visible, text_dimensions)
    warnings: list[str] = []

    above, below = split_entities(visible, text_dimensions)
    height = label_height(visible, text_dimensions, opts.label_padding)

    labels: list[PlacedLabel] = []
    for side, group in (("above", above), ("below", below)):
        problem = bounds_problem(
            layout_items(group, text_dimensions, opts.label_padding),
            opts.position_bounds,
            opts.node_spacing,
        )
        if problem is not None and problem not in warnings:
            warnings.append(problem)
        labels.extend(create_labels(group, text_dimensions, drawing_area, side, height, opts))

    leaders = route_leaders(labels, opts.feature_margin, opts.edge_trace)
    canvas = canvas_bounds(drawing_area, labels, opts.stroke_margin)
    result = LabelingResult(
        labels=labels,
        leaders=leaders,
        canvas=canvas,
        drawing_area=drawing_area,
        label_padding=opts.label_padding,
        warnings=warnings,
    )
    for problem in validate_result(result, opts.node_spacing):
        if problem not in result.warnings:
            result.warnings.append(problem)

    logger.info(
        "Labelled %d of %d entities (%d above, %d below); canvas %.1fx%.1f",
        len(labels), len(entities), len(above), len(below), canvas.width, canvas.height,
    )
    return result
