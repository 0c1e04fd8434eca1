# tests/test_io.py
"""
Diagram JSON loading and option parsing: valid documents, defaults, malformed input.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from leaderlabel.core.config import LabelingOptions, PositionBounds, options_from_dict
from leaderlabel.core.io import load_diagram, parse_box, parse_diagram
from leaderlabel.core.types import BoundingBox, Dimensions

DOC = {
    "drawing_area": {"left": 0, "top": 0, "width": 200, "height": 100},
    "entities": [
        {"id": "e1", "label": "x", "tex": "x", "location": {"left": 10, "top": 10, "width": 5, "height": 5}},
        {"label": "y", "location": {"left": 50, "top": 20, "width": 5, "height": 5}},
    ],
    "text_dimensions": {"x": {"width": 7.5, "height": 12}, "y": {"width": 6, "height": 12}},
    "options": {"boundaryMargin": 5, "labelPadding": 2, "positionBounds": {"min": 0, "max": 200}},
}


def test_load_diagram_reads_every_section() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        (root / "diagram.json").write_text(json.dumps(DOC), encoding="utf-8")
        diagram = load_diagram("diagram.json", repo_root=root)
    assert diagram.drawing_area == BoundingBox(0.0, 0.0, 200.0, 100.0)
    assert [e.id for e in diagram.entities] == ["e1", "1"]
    assert diagram.entities[0].tex == "x"
    assert diagram.entities[1].tex is None
    assert diagram.text_dimensions == {"x": Dimensions(7.5, 12.0), "y": Dimensions(6.0, 12.0)}
    assert diagram.options == LabelingOptions(
        boundary_margin=5.0,
        label_padding=2.0,
        position_bounds=PositionBounds(min_pos=0.0, max_pos=200.0),
    )


def test_optional_sections_default_to_none() -> None:
    diagram = parse_diagram({"drawing_area": DOC["drawing_area"]})
    assert diagram.entities == []
    assert diagram.text_dimensions is None
    assert diagram.options is None


def test_missing_file_raises() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        with pytest.raises(FileNotFoundError):
            load_diagram(Path(tmp) / "nope.json")


def test_invalid_json_raises_value_error() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError):
            load_diagram(path)


@pytest.mark.parametrize(
    "doc",
    [
        [],
        {"entities": []},
        {"drawing_area": {"width": 10}},
        {"drawing_area": {"width": -1, "height": 10}},
        {"drawing_area": {"width": 10, "height": 10}, "entities": {}},
        {"drawing_area": {"width": 10, "height": 10}, "entities": [{"location": {"width": 1, "height": 1}}]},
        {"drawing_area": {"width": 10, "height": 10}, "entities": [{"label": "x"}]},
        {"drawing_area": {"width": 10, "height": 10}, "text_dimensions": {"x": {"width": 1}}},
        {"drawing_area": {"width": 10, "height": 10}, "options": {"unknownOption": 1}},
        {"drawing_area": {"width": None, "height": 1}},
        {"drawing_area": {"left": None, "width": 1, "height": 1}},
        {"drawing_area": {"width": 10, "height": 10}, "options": {"nodeSpacing": None}},
        {"drawing_area": {"width": 10, "height": 10}, "options": {"labelPadding": "wide"}},
        {"drawing_area": {"width": 10, "height": 10}, "options": {"positionBounds": [0, 10]}},
        {"drawing_area": {"width": 10, "height": 10}, "options": {"positionBounds": {"min": "left"}}},
        {"drawing_area": {"width": 10, "height": 10}, "options": [1, 2]},
    ],
)
def test_malformed_documents_raise_value_error(doc: object) -> None:
    with pytest.raises(ValueError):
        parse_diagram(doc)  # type: ignore[arg-type]


def test_parse_box_defaults_origin() -> None:
    assert parse_box({"width": 3, "height": 4}) == BoundingBox(0.0, 0.0, 3.0, 4.0)


def test_options_accept_snake_and_camel_case() -> None:
    a = options_from_dict({"nodeSpacing": 3, "edgeTrace": False, "featureMargin": 1})
    b = options_from_dict({"node_spacing": 3, "edge_trace": False, "feature_margin": 1})
    assert a == b
    assert a.node_spacing == 3.0
    assert a.edge_trace is False


def test_options_defaults_and_overrides() -> None:
    assert options_from_dict(None) == LabelingOptions()
    assert options_from_dict({"positionBounds": {}}).position_bounds is None
    opts = LabelingOptions(boundary_margin=5.0)
    assert opts.with_overrides(boundary_margin=None, label_padding=2.0) == LabelingOptions(
        boundary_margin=5.0, label_padding=2.0
    )
    assert opts.with_overrides() is opts
