# leaderlabel/core/leaders.py
"""
L-shaped leader routing between a placed label and its feature.

The leader leaves the label from the middle of the edge facing the drawing area, runs
vertically, and bends at most once at the height of the connection site. When the label
is horizontally over the feature the leader is a straight vertical line into the facing
edge; otherwise it enters the nearest vertical edge at the feature's vertical middle.
For the terminology see Barth et al., "On the readability of leaders in boundary labeling", 2019.
"""

from __future__ import annotations

from leaderlabel.core.config import EDGE_TRACE, FEATURE_MARGIN
from leaderlabel.core.types import Attachment, BoundingBox, LeaderPath, PlacedLabel, Point, Side


def label_port(label: PlacedLabel, side: Side) -> Point:
    """Middle of the label edge nearest the drawing area."""
    y = label.bottom if side == "above" else label.top
    return (label.center_x, y)


def connection_site(
    port: Point,
    feature: BoundingBox,
    side: Side,
    feature_margin: float = FEATURE_MARGIN,
) -> tuple[Point, Attachment]:
    """Point just outside the feature boundary where the leader ends, and which edge it is on."""
    x = port[0]
    if x < feature.left:
        return (feature.left - feature_margin, feature.center_y), "left"
    if x > feature.right:
        return (feature.right + feature_margin, feature.center_y), "right"
    if side == "above":
        return (x, feature.top - feature_margin), "top"
    return (x, feature.bottom + feature_margin), "bottom"


def edge_trace(
    feature: BoundingBox,
    attachment: Attachment,
    feature_margin: float = FEATURE_MARGIN,
) -> tuple[Point, Point]:
    """End points of the whole attached edge, offset outward by feature_margin."""
    if attachment == "left":
        x = feature.left - feature_margin
        return (x, feature.top), (x, feature.bottom)
    if attachment == "right":
        x = feature.right + feature_margin
        return (x, feature.top), (x, feature.bottom)
    if attachment == "top":
        y = feature.top - feature_margin
        return (feature.left, y), (feature.right, y)
    y = feature.bottom + feature_margin
    return (feature.left, y), (feature.right, y)


def route_leader(
    label: PlacedLabel,
    feature: BoundingBox,
    side: Side,
    feature_margin: float = FEATURE_MARGIN,
    trace_edge: bool = EDGE_TRACE,
) -> LeaderPath:
    """Route one leader: [port, midpoint, site] plus the traced feature edge when trace_edge."""
    port = label_port(label, side)
    site, attachment = connection_site(port, feature, side, feature_margin)
    midpoint = (port[0], site[1])
    points: list[Point] = [port, midpoint, site]
    if trace_edge:
        points.extend(edge_trace(feature, attachment, feature_margin))
    return LeaderPath(points=tuple(points), attachment=attachment)


def route_leaders(
    labels: list[PlacedLabel],
    feature_margin: float = FEATURE_MARGIN,
    trace_edge: bool = EDGE_TRACE,
) -> list[LeaderPath]:
    """One leader per label, in label order."""
    return [
        route_leader(lab, lab.entity.location, lab.side, feature_margin, trace_edge)
        for lab in labels
    ]


def leader_to_svg_d(path: LeaderPath) -> str:
    """Polyline to SVG path d (M L L ...)."""
    if not path.points:
        return ""
    (x0, y0), rest = path.points[0], path.points[1:]
    parts = [f"M {x0:.4f} {y0:.4f}"]
    for x, y in rest:
        parts.append(f"L {x:.4f} {y:.4f}")
    return " ".join(parts)
