# leaderlabel/core/validate.py
"""
Post-condition checks on a labeling result using shapely:
leaders stay out of feature interiors, labels in a band do not overlap,
the canvas holds the drawing area and every label.
"""

from __future__ import annotations

from collections.abc import Sequence

from leaderlabel.core.config import NODE_SPACING, OVERLAP_TOLERANCE
from leaderlabel.core.error_codes import (
    CANVAS_CLIPS_LABEL,
    LABELS_OVERLAP,
    LEADER_OCCLUDES_FEATURE,
)
from leaderlabel.core.geometry import box_to_polygon, label_polygon, leader_geometry
from leaderlabel.core.types import BoundingBox, LabelingResult, LeaderPath, PlacedLabel

# Interior of the leader and its end points must both miss the feature interior.
_OUTSIDE_INTERIOR = "F**F*****"


def leader_clear_of_feature(path: LeaderPath, feature: BoundingBox) -> bool:
    """True if no part of the leader passes through the interior of the feature box."""
    if feature.width <= 0 or feature.height <= 0:
        return True
    geom = leader_geometry(path)
    if geom.geom_type == "Point":
        return not box_to_polygon(feature).contains(geom)
    return geom.relate_pattern(box_to_polygon(feature), _OUTSIDE_INTERIOR)


def labels_overlap_free(
    labels: Sequence[PlacedLabel],
    spacing: float = NODE_SPACING,
) -> bool:
    """
    True if no two labels on the same side intersect once each is grown by spacing/2.
    Touching boxes do not count.
    """
    for side in ("above", "below"):
        band = [label_polygon(lab) for lab in labels if lab.side == side]
        grown = [p.buffer(spacing / 2 - OVERLAP_TOLERANCE, join_style=2) for p in band]
        for i in range(len(grown)):
            for j in range(i + 1, len(grown)):
                if grown[i].intersection(grown[j]).area > OVERLAP_TOLERANCE:
                    return False
    return True


def canvas_contains(
    canvas: BoundingBox,
    drawing_area: BoundingBox,
    labels: Sequence[PlacedLabel],
) -> bool:
    """True if the canvas covers the drawing area and every label box."""
    poly = box_to_polygon(canvas)
    if not poly.covers(box_to_polygon(drawing_area)):
        return False
    return all(poly.covers(label_polygon(lab)) for lab in labels)


def validate_result(result: LabelingResult, spacing: float = NODE_SPACING) -> list[str]:
    """Error keys for every post-condition the result violates (empty if valid)."""
    problems: list[str] = []
    for lab, path in zip(result.labels, result.leaders):
        if not leader_clear_of_feature(path, lab.entity.location):
            problems.append(LEADER_OCCLUDES_FEATURE)
            break
    if not labels_overlap_free(result.labels, spacing):
        problems.append(LABELS_OVERLAP)
    if not canvas_contains(result.canvas, result.drawing_area, result.labels):
        problems.append(CANVAS_CLIPS_LABEL)
    return problems
