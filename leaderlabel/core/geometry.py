# leaderlabel/core/geometry.py
"""
Shapely conversions for boxes and leader polylines, used by validation.
"""

from __future__ import annotations

from shapely.geometry import LineString, Point, Polygon, box
from shapely.geometry.base import BaseGeometry

from leaderlabel.core.types import BoundingBox, LeaderPath, PlacedLabel


def box_to_polygon(b: BoundingBox) -> Polygon:
    """Rectangle polygon for a bounding box (y grows down, orientation irrelevant)."""
    return box(b.left, b.top, b.right, b.bottom)


def label_polygon(label: PlacedLabel) -> Polygon:
    return box_to_polygon(label.box)


def leader_geometry(path: LeaderPath) -> BaseGeometry:
    """
    LineString through the leader points with repeated points dropped.
    A leader that collapses to one point becomes a Point.
    """
    coords: list[tuple[float, float]] = []
    for pt in path.points:
        if not coords or coords[-1] != pt:
            coords.append(pt)
    if len(coords) == 1:
        return Point(coords[0])
    return LineString(coords)
