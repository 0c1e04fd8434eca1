# leaderlabel/core/types.py
"""
Dataclasses for entities, text dimensions, layout items, placed labels and leader paths.
Coordinates follow the SVG convention: x grows right, y grows down.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


Side = Literal["above", "below"]
Attachment = Literal["top", "bottom", "left", "right"]
Point = tuple[float, float]


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle in diagram coordinates."""
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2

    @property
    def center_y(self) -> float:
        return self.top + self.height / 2

    def contains_box(self, other: BoundingBox) -> bool:
        return (
            self.left <= other.left
            and self.top <= other.top
            and other.right <= self.right
            and other.bottom <= self.bottom
        )


@dataclass(frozen=True)
class Entity:
    """
    A labelled feature. `location` is the feature's box, `label` the display text.
    Entities sharing a `tex` key collapse to one visible label (first occurrence wins).
    """
    id: str
    location: BoundingBox
    label: str
    tex: str | None = None


@dataclass(frozen=True)
class Dimensions:
    """Rendered size of a label text."""
    width: float
    height: float


TextDimensions = dict[str, Dimensions]


@dataclass(frozen=True)
class LayoutItem:
    """An item for the 1-D layout engine. `ref` points back at the originating entity (group index)."""
    ideal: float
    width: float
    ref: int


@dataclass(frozen=True)
class PlacedLabel:
    """A label box after layout and side assignment."""
    left: float
    top: float
    width: float
    height: float
    side: Side
    entity: Entity
    text: str

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2

    @property
    def box(self) -> BoundingBox:
        return BoundingBox(self.left, self.top, self.width, self.height)


@dataclass(frozen=True)
class LeaderPath:
    """
    Polyline from a label's port to its feature: [port, midpoint, site] optionally
    followed by the two end points of the traced feature edge.
    """
    points: tuple[Point, ...]
    attachment: Attachment

    @property
    def port(self) -> Point:
        return self.points[0]

    @property
    def midpoint(self) -> Point:
        return self.points[1]

    @property
    def site(self) -> Point:
        return self.points[2]

    @property
    def edge(self) -> tuple[Point, Point] | None:
        if len(self.points) < 5:
            return None
        return (self.points[3], self.points[4])

    @property
    def is_straight(self) -> bool:
        return self.port[0] == self.site[0]


@dataclass
class LabelingResult:
    """
    Full labeling output. `labels` lists the above band first, then the below band;
    `leaders[i]` belongs to `labels[i]`. `warnings` holds error_codes keys.
    """
    labels: list[PlacedLabel]
    leaders: list[LeaderPath]
    canvas: BoundingBox
    drawing_area: BoundingBox
    label_padding: float = 0.0
    warnings: list[str] = field(default_factory=list)

    @property
    def above(self) -> list[PlacedLabel]:
        return [lab for lab in self.labels if lab.side == "above"]

    @property
    def below(self) -> list[PlacedLabel]:
        return [lab for lab in self.labels if lab.side == "below"]
