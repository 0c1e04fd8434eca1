# leaderlabel/core/io.py
"""
Load a diagram description from JSON: drawing area, entities, optional text dimensions
and options. Raises FileNotFoundError for missing files and ValueError for malformed content.

Expected shape:
    {
      "drawing_area": {"left": 0, "top": 0, "width": 400, "height": 200},
      "entities": [{"id": "e1", "label": "x", "location": {...}, "tex": "x"}],
      "text_dimensions": {"x": {"width": 7.5, "height": 12}},   (optional)
      "options": {"boundaryMargin": 5, "labelPadding": 2}        (optional)
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from leaderlabel.core.config import LabelingOptions, options_from_dict
from leaderlabel.core.types import BoundingBox, Dimensions, Entity, TextDimensions


@dataclass
class DiagramInput:
    """Everything read from one input file."""
    drawing_area: BoundingBox
    entities: list[Entity]
    text_dimensions: TextDimensions | None
    options: LabelingOptions | None


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def parse_box(data: dict, what: str = "box") -> BoundingBox:
    """BoundingBox from {"left", "top", "width", "height"}; width/height must be >= 0."""
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be an object, got {type(data).__name__}")
    try:
        b = BoundingBox(
            left=float(data.get("left", 0.0)),
            top=float(data.get("top", 0.0)),
            width=float(data["width"]),
            height=float(data["height"]),
        )
    except KeyError as e:
        raise ValueError(f"{what} is missing {e.args[0]!r}") from e
    except TypeError as e:
        raise ValueError(f"{what} needs numeric left/top/width/height: {e}") from e
    if b.width < 0 or b.height < 0:
        raise ValueError(f"{what} has negative size: {b}")
    return b


def parse_entity(data: dict, index: int = 0) -> Entity:
    """Entity from {"id", "label", "location", "tex"?}. A missing id defaults to the list index."""
    if not isinstance(data, dict):
        raise ValueError(f"entities[{index}] must be an object")
    if "label" not in data:
        raise ValueError(f"entities[{index}] has no label")
    if "location" not in data:
        raise ValueError(f"entities[{index}] has no location")
    tex = data.get("tex")
    return Entity(
        id=str(data.get("id", index)),
        location=parse_box(data["location"], f"entities[{index}].location"),
        label=str(data["label"]),
        tex=str(tex) if tex is not None else None,
    )


def parse_text_dimensions(data: dict | None) -> TextDimensions | None:
    """Text dimensions mapping from {"text": {"width", "height"}}; None stays None."""
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError("text_dimensions must be an object")
    out: TextDimensions = {}
    for text, dims in data.items():
        try:
            out[str(text)] = Dimensions(width=float(dims["width"]), height=float(dims["height"]))
        except (KeyError, TypeError) as e:
            raise ValueError(f"text_dimensions[{text!r}] needs width and height") from e
    return out


def parse_diagram(data: dict) -> DiagramInput:
    """Validate and convert a decoded JSON document."""
    if not isinstance(data, dict):
        raise ValueError("Diagram document must be a JSON object")
    if "drawing_area" not in data:
        raise ValueError("Diagram document has no drawing_area")
    raw_entities = data.get("entities", [])
    if not isinstance(raw_entities, list):
        raise ValueError("entities must be a list")
    return DiagramInput(
        drawing_area=parse_box(data["drawing_area"], "drawing_area"),
        entities=[parse_entity(e, i) for i, e in enumerate(raw_entities)],
        text_dimensions=parse_text_dimensions(data.get("text_dimensions")),
        options=options_from_dict(data["options"]) if data.get("options") is not None else None,
    )


def load_diagram(path: str | Path, repo_root: Path | None = None) -> DiagramInput:
    """
    Read and parse a diagram JSON file.
    Raises FileNotFoundError if path is missing, ValueError if content is invalid.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Diagram file not found: {resolved}")
    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {resolved}: {e}") from e
    return parse_diagram(data)
