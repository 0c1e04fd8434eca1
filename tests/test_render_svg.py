# tests/test_render_svg.py
"""
SVG export: viewBox equals the canvas, one feature/label/leader element per label, file written.
PNG preview: file written with matplotlib (Agg).
"""

from __future__ import annotations

import tempfile
import xml.etree.ElementTree as ET
from pathlib import Path

import matplotlib.pyplot as plt
import pytest
from matplotlib.figure import Figure

from leaderlabel.core.config import LabelingOptions
from leaderlabel.core.layout import label_diagram
from leaderlabel.core.render import render_labels_png
from leaderlabel.core.render_svg import build_labels_svg, export_labels_svg
from leaderlabel.core.types import BoundingBox, Dimensions, Entity, LabelingResult


def _result() -> LabelingResult:
    area = BoundingBox(0.0, 0.0, 120.0, 80.0)
    entities = [
        Entity(id="n1", location=BoundingBox(10.0, 10.0, 10.0, 10.0), label="one"),
        Entity(id="n2", location=BoundingBox(60.0, 50.0, 10.0, 10.0), label="two"),
    ]
    dims = {"one": Dimensions(18.0, 10.0), "two": Dimensions(18.0, 10.0)}
    return label_diagram(entities, area, dims, LabelingOptions(boundary_margin=5.0, label_padding=2.0))


def _by_class(root: ET.Element, cls: str) -> list[ET.Element]:
    return [el for el in root.iter() if el.get("class") == cls]


def test_svg_has_one_element_per_label_in_each_layer() -> None:
    result = _result()
    root = build_labels_svg(result)
    n = len(result.labels)
    assert len(_by_class(root, "feature")) == n
    assert len(_by_class(root, "label__background")) == n
    assert len(_by_class(root, "link")) == n
    texts = [el.text for el in _by_class(root, "label__text")]
    assert texts == [lab.text for lab in result.labels]


def test_svg_viewbox_is_canvas() -> None:
    result = _result()
    root = build_labels_svg(result)
    c = result.canvas
    assert root.get("viewBox") == f"{c.left:.2f} {c.top:.2f} {c.width:.2f} {c.height:.2f}"
    layers = [child.get("class") for child in root]
    assert layers == ["feature-layer", "label-layer", "link-layer"]


def test_export_labels_svg_writes_parseable_file() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        out = export_labels_svg(_result(), Path(tmp) / "labels.svg")
        assert out.exists()
        root = ET.parse(out).getroot()
        assert root.tag.endswith("svg")


def test_render_labels_png_writes_file() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        out = render_labels_png(_result(), Path(tmp) / "labels.png")
        assert out.exists()
        assert out.stat().st_size > 0


def test_render_labels_png_closes_figure_on_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(*args: object, **kwargs: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(Figure, "savefig", fail)
    before = set(plt.get_fignums())
    with tempfile.TemporaryDirectory() as tmp:
        with pytest.raises(OSError):
            render_labels_png(_result(), Path(tmp) / "labels.png")
    assert set(plt.get_fignums()) == before
