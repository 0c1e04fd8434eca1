# tests/test_reporting_contract.py
"""
labels.json contract: required keys exist, values survive a JSON round trip,
metrics match the placed labels. Also checks run_metadata.json and the report dir.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from leaderlabel.core.config import LabelingOptions
from leaderlabel.core.layout import label_diagram
from leaderlabel.core.reporting import (
    SCHEMA_VERSION,
    ensure_report_dir,
    result_to_dict,
    write_labels_json,
    write_run_metadata_json,
)
from leaderlabel.core.scoring import displacement_stats
from leaderlabel.core.types import BoundingBox, Dimensions, Entity, LabelingResult

AREA = BoundingBox(0.0, 0.0, 100.0, 60.0)


def _minimal_result() -> LabelingResult:
    entities = [
        Entity(id="a", location=BoundingBox(10.0, 10.0, 10.0, 10.0), label="A"),
        Entity(id="b", location=BoundingBox(14.0, 40.0, 10.0, 10.0), label="B"),
        Entity(id="c", location=BoundingBox(80.0, 45.0, 10.0, 10.0), label="C"),
    ]
    dims = {"A": Dimensions(20.0, 8.0), "B": Dimensions(20.0, 8.0), "C": Dimensions(20.0, 8.0)}
    return label_diagram(entities, AREA, dims, LabelingOptions(boundary_margin=5.0, label_padding=2.0))


REQUIRED_KEYS = [
    "schema_version",
    ("drawing_area", "width"),
    ("canvas", "left"),
    ("canvas", "height"),
    "labels",
    ("metrics", "n_labels"),
    ("metrics", "mean_displacement"),
    ("metrics", "max_displacement"),
    ("metrics", "bent_leaders"),
    "warnings",
    "warning_messages",
]

LABEL_KEYS = ["entity_id", "text", "side", "box", "feature", "leader"]


def test_labels_schema_required_keys_exist() -> None:
    data = result_to_dict(_minimal_result())
    assert data["schema_version"] == SCHEMA_VERSION
    for key in REQUIRED_KEYS:
        if isinstance(key, tuple):
            obj = data
            for k in key:
                assert k in obj, f"Missing key: {key}"
                obj = obj[k]
        else:
            assert key in data, f"Missing key: {key}"
    for entry in data["labels"]:
        for key in LABEL_KEYS:
            assert key in entry, f"Missing label key: {key}"
        assert entry["leader"]["attachment"] in ("top", "bottom", "left", "right")
        assert len(entry["leader"]["points"]) == 5


def test_labels_json_roundtrip() -> None:
    result = _minimal_result()
    loaded = json.loads(json.dumps(result_to_dict(result)))
    assert [e["entity_id"] for e in loaded["labels"]] == [lab.entity.id for lab in result.labels]
    first = loaded["labels"][0]
    assert first["box"]["left"] == pytest.approx(result.labels[0].left)
    assert first["leader"]["points"][0] == {"x": result.leaders[0].port[0], "y": result.leaders[0].port[1]}


def test_metrics_match_labels() -> None:
    result = _minimal_result()
    stats = displacement_stats(result)
    assert stats["n_labels"] == 3
    expected = [abs(lab.center_x - lab.entity.location.center_x) for lab in result.labels]
    assert stats["max_displacement"] == pytest.approx(max(expected))
    assert stats["mean_displacement"] == pytest.approx(sum(expected) / 3)
    assert stats["bent_leaders"] == sum(1 for p in result.leaders if not p.is_straight)


def test_empty_result_metrics() -> None:
    stats = displacement_stats(label_diagram([], AREA, {}))
    assert stats["n_labels"] == 0
    assert stats["mean_displacement"] == 0.0
    assert stats["bent_leaders"] == 0


def test_report_files_written() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        report_dir = ensure_report_dir(Path(tmp), "contract", output_dir="out")
        assert report_dir == (Path(tmp) / "out").resolve() / "contract"
        labels_path = write_labels_json(report_dir, _minimal_result())
        meta_path = write_run_metadata_json(report_dir, "contract", "diagram.json", 3, LabelingOptions())
        assert json.loads(labels_path.read_text(encoding="utf-8"))["schema_version"] == SCHEMA_VERSION
        meta = json.loads(meta_path.read_text(encoding="utf-8"))
        assert meta["run_name"] == "contract"
        assert meta["n_entities"] == 3
        assert meta["options"]["position_bounds"] is None
        assert "timestamp_utc" in meta
