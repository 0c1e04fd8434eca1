# leaderlabel/core/render_svg.py
"""
Export a labeling result as a self-contained SVG: feature layer, label layer, link layer.
viewBox is the canvas bounds, so every label is visible.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from leaderlabel.core.config import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE_PT,
    FEATURE_FILL,
    FEATURE_STROKE,
    LABEL_FILL,
    LABEL_STROKE,
    LEADER_STROKE,
    LEADER_STROKE_WIDTH,
)
from leaderlabel.core.leaders import leader_to_svg_d
from leaderlabel.core.types import LabelingResult

SVG_NS = "http://www.w3.org/2000/svg"


def _num(v: float) -> str:
    return f"{v:.2f}"


def build_labels_svg(
    result: LabelingResult,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_pt: float = DEFAULT_FONT_SIZE_PT,
) -> ET.Element:
    """SVG element tree for the result. Layers: features, labels, leaders (drawn last)."""
    c = result.canvas
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": _num(c.width),
            "height": _num(c.height),
            "viewBox": f"{_num(c.left)} {_num(c.top)} {_num(c.width)} {_num(c.height)}",
        },
    )

    features = ET.SubElement(root, "g", {"class": "feature-layer"})
    for lab in result.labels:
        loc = lab.entity.location
        ET.SubElement(
            features,
            "rect",
            {
                "class": "feature",
                "data-entity-id": lab.entity.id,
                "x": _num(loc.left),
                "y": _num(loc.top),
                "width": _num(loc.width),
                "height": _num(loc.height),
                "fill": FEATURE_FILL,
                "stroke": FEATURE_STROKE,
            },
        )

    labels = ET.SubElement(root, "g", {"class": "label-layer"})
    pad = result.label_padding
    for lab in result.labels:
        g = ET.SubElement(
            labels,
            "g",
            {"class": "label", "transform": f"translate({_num(lab.left)}, {_num(lab.top)})"},
        )
        ET.SubElement(
            g,
            "rect",
            {
                "class": "label__background",
                "width": _num(lab.width),
                "height": _num(lab.height),
                "fill": LABEL_FILL,
                "stroke": LABEL_STROKE,
            },
        )
        # Baseline two paddings above the bottom edge leaves room for descenders.
        text = ET.SubElement(
            g,
            "text",
            {
                "class": "label__text",
                "x": _num(pad),
                "y": _num(lab.height - 2 * pad),
                "font-family": font_family,
                "font-size": _num(font_size_pt),
            },
        )
        text.text = lab.text

    links = ET.SubElement(root, "g", {"class": "link-layer"})
    for path in result.leaders:
        ET.SubElement(
            links,
            "path",
            {
                "class": "link",
                "d": leader_to_svg_d(path),
                "fill": "none",
                "stroke": LEADER_STROKE,
                "stroke-width": _num(LEADER_STROKE_WIDTH),
            },
        )
    return root


def export_labels_svg(
    result: LabelingResult,
    out_path: str | Path,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_pt: float = DEFAULT_FONT_SIZE_PT,
) -> Path:
    """Write the SVG for result to out_path and return the path."""
    root = build_labels_svg(result, font_family, font_size_pt)
    out = Path(out_path)
    out_str = ET.tostring(root, encoding="unicode", method="xml")
    out.write_text('<?xml version="1.0" encoding="UTF-8"?>\n' + out_str, encoding="utf-8")
    return out
