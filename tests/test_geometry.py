# tests/test_geometry.py
"""
Deterministic tests for geometry: box polygons and leader polylines.
"""

from __future__ import annotations

from leaderlabel.core.geometry import box_to_polygon, leader_geometry
from leaderlabel.core.types import BoundingBox, LeaderPath


def test_box_to_polygon_bounds_and_area() -> None:
    poly = box_to_polygon(BoundingBox(left=2.0, top=3.0, width=4.0, height=5.0))
    assert poly.bounds == (2.0, 3.0, 6.0, 8.0)
    assert poly.area == 20.0


def test_leader_geometry_drops_repeated_points() -> None:
    path = LeaderPath(points=((0.0, 0.0), (0.0, 10.0), (0.0, 10.0), (-5.0, 10.0), (5.0, 10.0)), attachment="top")
    geom = leader_geometry(path)
    assert geom.geom_type == "LineString"
    assert list(geom.coords) == [(0.0, 0.0), (0.0, 10.0), (-5.0, 10.0), (5.0, 10.0)]


def test_leader_geometry_single_point() -> None:
    path = LeaderPath(points=((1.0, 1.0), (1.0, 1.0), (1.0, 1.0)), attachment="bottom")
    assert leader_geometry(path).geom_type == "Point"
