# leaderlabel/core/grouping.py
"""
Entity de-duplication and the above/below group split.
Labels for features nearer the top of the diagram go to the upper band first.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from leaderlabel.core.error_codes import MissingMetricsError
from leaderlabel.core.types import Entity, TextDimensions


def dedupe_entities(entities: Iterable[Entity]) -> tuple[Entity, ...]:
    """
    Collapse entities sharing a `tex` key to their first occurrence; keep input order.
    Entities without a key are always kept.
    """
    seen: set[str] = set()
    out: list[Entity] = []
    for entity in entities:
        if entity.tex is not None:
            if entity.tex in seen:
                continue
            seen.add(entity.tex)
        out.append(entity)
    return tuple(out)


def require_metrics(entities: Iterable[Entity], text_dimensions: TextDimensions) -> None:
    """Raise MissingMetricsError naming every label text absent from text_dimensions."""
    missing: list[str] = []
    for entity in entities:
        if entity.label not in text_dimensions and entity.label not in missing:
            missing.append(entity.label)
    if missing:
        raise MissingMetricsError(missing)


def split_entities(
    entities: Sequence[Entity],
    text_dimensions: TextDimensions,
) -> tuple[tuple[Entity, ...], tuple[Entity, ...]]:
    """
    Split entities into (above, below) of roughly equal total label width.

    Entities are sorted by feature top (stable). The split index is the first index whose
    running width sum exceeds half the total; everything before it goes above. When no
    prefix exceeds half (no entities, zero widths) the split index is 0.
    """
    require_metrics(entities, text_dimensions)
    ordered = sorted(entities, key=lambda e: e.location.top)
    widths = [text_dimensions[e.label].width for e in ordered]
    half = sum(widths) / 2

    split_index = 0
    running = 0.0
    for i, w in enumerate(widths):
        running += w
        if running > half:
            split_index = i
            break
    return tuple(ordered[:split_index]), tuple(ordered[split_index:])
