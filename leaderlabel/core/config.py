# leaderlabel/core/config.py
"""
Central configuration for boundary label placement.
All tunable values live here; no magic numbers in other modules.
LabelingOptions bundles the per-run options; its defaults come from the constants below.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Label bands -----
BOUNDARY_MARGIN: float = 0.0
"""Gap between the drawing area and the nearest label band."""

LABEL_PADDING: float = 0.0
"""Inset between a label box edge and its text, applied on both sides."""

DEMO_BOUNDARY_MARGIN: float = 5.0
"""Boundary margin used by the CLI when none is given."""

DEMO_LABEL_PADDING: float = 2.0
"""Label padding used by the CLI when none is given."""

# ----- 1-D layout (declumper) -----
NODE_SPACING: float = 0.0
"""Minimum gap between adjacent labels in the same band."""

OVERLAP_TOLERANCE: float = 1e-9
"""Gaps above -OVERLAP_TOLERANCE count as touching, not overlapping."""

# ----- Leaders -----
FEATURE_MARGIN: float = 0.0
"""Gap between a feature boundary and its leader attachment site."""

EDGE_TRACE: bool = True
"""Extend each leader with a tick along the whole attached feature edge."""

LEADER_STROKE_MARGIN: float = 4.0
"""Extra room below the lowest label so leader strokes are not clipped."""

# ----- Text metrics -----
DEFAULT_FONT_FAMILY: str = "DejaVu Sans"
DEFAULT_FONT_SIZE_PT: float = 12.0

# ----- Rendering -----
RENDER_DPI: int = 100
RENDER_MIN_SIZE_PX: int = 200
FEATURE_FILL: str = "lightblue"
FEATURE_STROKE: str = "navy"
LABEL_FILL: str = "white"
LABEL_STROKE: str = "#444444"
LEADER_STROKE: str = "#444444"
LEADER_STROKE_WIDTH: float = 1.0

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Root log level for the CLI. Set env LOG_LEVEL=DEBUG for development."""


@dataclass(frozen=True)
class PositionBounds:
    """Optional clamp for label extents along the layout axis."""
    min_pos: float | None = None
    max_pos: float | None = None

    @property
    def is_empty(self) -> bool:
        return self.min_pos is None and self.max_pos is None


@dataclass(frozen=True)
class LabelingOptions:
    """Recognized options for one labeling run."""
    boundary_margin: float = BOUNDARY_MARGIN
    label_padding: float = LABEL_PADDING
    node_spacing: float = NODE_SPACING
    feature_margin: float = FEATURE_MARGIN
    position_bounds: PositionBounds | None = None
    edge_trace: bool = EDGE_TRACE
    stroke_margin: float = LEADER_STROKE_MARGIN

    def with_overrides(self, **overrides: Any) -> LabelingOptions:
        """Copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


_FLOAT_OPTIONS = ("boundary_margin", "label_padding", "node_spacing", "feature_margin", "stroke_margin")


def options_from_dict(data: dict | None) -> LabelingOptions:
    """
    Build LabelingOptions from a plain dict (e.g. the "options" object of an input file).
    Accepts snake_case keys and the camelCase names boundaryMargin, labelPadding, nodeSpacing,
    featureMargin, positionBounds, edgeTrace, strokeMargin. Unknown keys raise ValueError.
    """
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"options must be an object, got {type(data).__name__}")
    if not data:
        return LabelingOptions()
    camel = {
        "boundaryMargin": "boundary_margin",
        "labelPadding": "label_padding",
        "nodeSpacing": "node_spacing",
        "featureMargin": "feature_margin",
        "positionBounds": "position_bounds",
        "edgeTrace": "edge_trace",
        "strokeMargin": "stroke_margin",
    }
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        name = camel.get(key, key)
        if name == "position_bounds":
            kwargs[name] = _bounds_from_dict(value)
            continue
        if name not in _FLOAT_OPTIONS and name != "edge_trace":
            raise ValueError(f"Unknown labeling option: {key!r}")
        if value is None:
            raise ValueError(f"Labeling option {key!r} must not be null")
        try:
            kwargs[name] = bool(value) if name == "edge_trace" else float(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Labeling option {key!r} has invalid value {value!r}") from e
    return LabelingOptions(**kwargs)


def _bounds_from_dict(value: dict | None) -> PositionBounds | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"positionBounds must be an object, got {type(value).__name__}")
    lo = value.get("min", value.get("min_pos"))
    hi = value.get("max", value.get("max_pos"))
    try:
        bounds = PositionBounds(
            min_pos=float(lo) if lo is not None else None,
            max_pos=float(hi) if hi is not None else None,
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"positionBounds needs numeric min/max, got {value!r}") from e
    return None if bounds.is_empty else bounds
