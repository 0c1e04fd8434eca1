# leaderlabel/core/reporting.py
"""
Create reports/<run_name>/ and write labels.json (exact schema) and run_metadata.json.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from leaderlabel.core.config import (
    DEFAULT_FONT_FAMILY,
    LEADER_STROKE_MARGIN,
    OVERLAP_TOLERANCE,
    REPORTS_DIR,
    LabelingOptions,
)
from leaderlabel.core.error_codes import user_message
from leaderlabel.core.scoring import displacement_stats
from leaderlabel.core.types import BoundingBox, LabelingResult

SCHEMA_VERSION = "1.0"


def box_to_dict(b: BoundingBox) -> dict:
    return {"left": b.left, "top": b.top, "width": b.width, "height": b.height}


def result_to_dict(result: LabelingResult) -> dict:
    """Exact structure for labels.json."""
    labels = []
    for lab, path in zip(result.labels, result.leaders):
        labels.append({
            "entity_id": lab.entity.id,
            "text": lab.text,
            "side": lab.side,
            "box": box_to_dict(lab.box),
            "feature": box_to_dict(lab.entity.location),
            "leader": {
                "attachment": path.attachment,
                "points": [{"x": float(x), "y": float(y)} for x, y in path.points],
            },
        })
    return {
        "schema_version": SCHEMA_VERSION,
        "drawing_area": box_to_dict(result.drawing_area),
        "canvas": box_to_dict(result.canvas),
        "labels": labels,
        "metrics": displacement_stats(result),
        "warnings": list(result.warnings),
        "warning_messages": [user_message(w) for w in result.warnings],
    }


def options_to_dict(options: LabelingOptions) -> dict:
    bounds = options.position_bounds
    return {
        "boundary_margin": options.boundary_margin,
        "label_padding": options.label_padding,
        "node_spacing": options.node_spacing,
        "feature_margin": options.feature_margin,
        "position_bounds": (
            None if bounds is None else {"min": bounds.min_pos, "max": bounds.max_pos}
        ),
        "edge_trace": options.edge_trace,
        "stroke_margin": options.stroke_margin,
    }


def run_metadata_dict(
    run_name: str,
    input_path: str,
    n_entities: int,
    options: LabelingOptions,
    font_family: str | None,
    font_size_pt: float | None,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "input_path": input_path,
        "n_entities": n_entities,
        "font_family": font_family,
        "font_size_pt": font_size_pt,
        "options": options_to_dict(options),
        "config": {
            "DEFAULT_FONT_FAMILY": DEFAULT_FONT_FAMILY,
            "LEADER_STROKE_MARGIN": LEADER_STROKE_MARGIN,
            "OVERLAP_TOLERANCE": OVERLAP_TOLERANCE,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_labels_json(report_dir: Path, result: LabelingResult) -> Path:
    """Write labels.json to report_dir. Returns path to file."""
    path = report_dir / "labels.json"
    path.write_text(json.dumps(result_to_dict(result), indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    input_path: str,
    n_entities: int,
    options: LabelingOptions,
    font_family: str | None = None,
    font_size_pt: float | None = None,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, input_path, n_entities, options, font_family, font_size_pt)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
