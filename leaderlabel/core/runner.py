# leaderlabel/core/runner.py
"""
CLI entrypoint: load a diagram JSON, measure label texts (unless the file carries
text_dimensions), place labels and leaders, export labels.json, run_metadata.json and SVG/PNG.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from leaderlabel.core.config import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE_PT,
    DEMO_BOUNDARY_MARGIN,
    DEMO_LABEL_PADDING,
    LOG_LEVEL,
    REPORTS_DIR,
    LabelingOptions,
    PositionBounds,
)
from leaderlabel.core.error_codes import LabelingError, user_message
from leaderlabel.core.grouping import dedupe_entities
from leaderlabel.core.io import load_diagram
from leaderlabel.core.layout import label_diagram
from leaderlabel.core.render_svg import export_labels_svg
from leaderlabel.core.reporting import (
    ensure_report_dir,
    write_labels_json,
    write_run_metadata_json,
)
from leaderlabel.core.text_metrics import measure_texts

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Boundary label placement with L-shaped leaders.")
    p.add_argument("--input", type=str, required=True, help="Diagram JSON path (repo-relative)")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--font-family", type=str, default=DEFAULT_FONT_FAMILY, dest="font_family", help="Font for measuring/rendering")
    p.add_argument("--font-size-pt", type=float, default=DEFAULT_FONT_SIZE_PT, dest="font_size_pt", help="Font size (pt)")
    p.add_argument("--boundary-margin", type=float, default=None, dest="boundary_margin", help=f"Gap between drawing area and label bands (default {DEMO_BOUNDARY_MARGIN})")
    p.add_argument("--label-padding", type=float, default=None, dest="label_padding", help=f"Inset between label box and text (default {DEMO_LABEL_PADDING})")
    p.add_argument("--node-spacing", type=float, default=None, dest="node_spacing", help="Minimum gap between adjacent labels")
    p.add_argument("--feature-margin", type=float, default=None, dest="feature_margin", help="Gap between feature and leader end")
    p.add_argument("--min-pos", type=float, default=None, dest="min_pos", help="Leftmost allowed label edge")
    p.add_argument("--max-pos", type=float, default=None, dest="max_pos", help="Rightmost allowed label edge")
    p.add_argument("--no-edge-trace", action="store_false", dest="edge_trace", default=None, help="Do not trace the attached feature edge")
    p.add_argument("--png", action="store_true", dest="png", help="Also render labels.png with matplotlib")
    return p.parse_args(argv)


def _resolve_input_path(repo_root: Path, path_arg: str) -> Path:
    """Resolve path: if relative, from repo root; else as-is then resolve."""
    p = Path(path_arg)
    if not p.is_absolute():
        p = repo_root / p
    return p.resolve()


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    input_path = _resolve_input_path(repo_root, args.input)
    try:
        diagram = load_diagram(input_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Cannot read diagram: %s", e)
        return 1

    # File options win over the demo defaults; CLI flags win over both.
    options = diagram.options or LabelingOptions(
        boundary_margin=DEMO_BOUNDARY_MARGIN,
        label_padding=DEMO_LABEL_PADDING,
    )
    bounds = None
    if args.min_pos is not None or args.max_pos is not None:
        bounds = PositionBounds(min_pos=args.min_pos, max_pos=args.max_pos)
    options = options.with_overrides(
        boundary_margin=args.boundary_margin,
        label_padding=args.label_padding,
        node_spacing=args.node_spacing,
        feature_margin=args.feature_margin,
        position_bounds=bounds,
        edge_trace=args.edge_trace,
    )

    text_dimensions = diagram.text_dimensions
    if text_dimensions is None:
        texts = [e.label for e in dedupe_entities(diagram.entities)]
        text_dimensions = measure_texts(texts, args.font_family, args.font_size_pt)

    try:
        result = label_diagram(diagram.entities, diagram.drawing_area, text_dimensions, options)
    except LabelingError as e:
        logger.error("%s (%s)", e, user_message(e.error_key))
        return 1

    for key in result.warnings:
        logger.warning(user_message(key))

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    written = [
        write_labels_json(report_dir, result),
        write_run_metadata_json(
            report_dir,
            args.run_name,
            args.input,
            len(diagram.entities),
            options,
            args.font_family,
            args.font_size_pt,
        ),
        export_labels_svg(result, report_dir / "labels.svg", args.font_family, args.font_size_pt),
    ]
    if args.png:
        from leaderlabel.core.render import render_labels_png
        written.append(render_labels_png(result, report_dir / "labels.png", args.font_family, args.font_size_pt))

    for p in written:
        print(p)
    return 0


if __name__ == "__main__":
    sys.exit(main())
