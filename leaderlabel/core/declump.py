# leaderlabel/core/declump.py
"""
1-D layout engine ("declumper"): non-overlapping label positions close to their ideal positions.

Items are sorted by ideal position (ties by input index) and pushed left to right onto a stack
of clusters. While the two topmost clusters overlap they merge; a merged cluster sits at the
width-weighted average of its members' ideal positions and spans the sum of member widths plus
spacing. Optional bounds clamp each cluster's extent; a clamped cluster runs into its neighbour
and merges with it. Every merge removes one cluster, so the pass ends after at most N-1 merges.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from leaderlabel.core.config import NODE_SPACING, OVERLAP_TOLERANCE, PositionBounds
from leaderlabel.core.error_codes import INVALID_BOUNDS
from leaderlabel.core.types import LayoutItem

logger = logging.getLogger(__name__)


@dataclass
class _Cluster:
    """Consecutive items (in sorted order) sharing one rigid span."""
    members: list[int] = field(default_factory=list)
    widths: list[float] = field(default_factory=list)
    ideal_sum: float = 0.0
    weighted_ideal_sum: float = 0.0
    width_sum: float = 0.0
    center: float = 0.0

    def span(self, spacing: float) -> float:
        return self.width_sum + spacing * (len(self.members) - 1)

    def left(self, spacing: float) -> float:
        return self.center - self.span(spacing) / 2

    def right(self, spacing: float) -> float:
        return self.center + self.span(spacing) / 2

    def target(self) -> float:
        """Width-weighted mean of member ideals (plain mean when all widths are zero)."""
        if self.width_sum > 0:
            return self.weighted_ideal_sum / self.width_sum
        return self.ideal_sum / len(self.members)


def _single(idx: int, item: LayoutItem) -> _Cluster:
    w = max(0.0, item.width)
    return _Cluster(
        members=[idx],
        widths=[w],
        ideal_sum=item.ideal,
        weighted_ideal_sum=item.ideal * w,
        width_sum=w,
    )


def _merge(a: _Cluster, b: _Cluster) -> _Cluster:
    return _Cluster(
        members=a.members + b.members,
        widths=a.widths + b.widths,
        ideal_sum=a.ideal_sum + b.ideal_sum,
        weighted_ideal_sum=a.weighted_ideal_sum + b.weighted_ideal_sum,
        width_sum=a.width_sum + b.width_sum,
    )


def _ordered(items: list[LayoutItem]) -> list[int]:
    """Input indices sorted by ideal position; ties keep submission order."""
    return sorted(range(len(items)), key=lambda i: (items[i].ideal, i))


def _effective_range(bounds: PositionBounds | None) -> tuple[float | None, float | None]:
    """Return (lo, hi); min > max collapses to the midpoint."""
    if bounds is None:
        return None, None
    lo, hi = bounds.min_pos, bounds.max_pos
    if lo is not None and hi is not None and lo > hi:
        mid = (lo + hi) / 2
        return mid, mid
    return lo, hi


def bounds_problem(
    items: list[LayoutItem],
    bounds: PositionBounds | None,
    spacing: float = NODE_SPACING,
) -> str | None:
    """
    Return INVALID_BOUNDS when the bounds cannot hold the items at full width
    (min > max, or total width plus spacing wider than the range), else None.
    """
    if not items or bounds is None or bounds.min_pos is None or bounds.max_pos is None:
        return None
    if bounds.min_pos > bounds.max_pos:
        return INVALID_BOUNDS
    required = sum(max(0.0, it.width) for it in items) + spacing * (len(items) - 1)
    if required > (bounds.max_pos - bounds.min_pos) + OVERLAP_TOLERANCE:
        return INVALID_BOUNDS
    return None


def _place(cluster: _Cluster, spacing: float, lo: float | None, hi: float | None) -> None:
    """Center the cluster on its target, then clamp its extent into [lo, hi]."""
    center = cluster.target()
    half = cluster.span(spacing) / 2
    if lo is not None and hi is not None and 2 * half > hi - lo:
        center = (lo + hi) / 2
    else:
        if lo is not None and center - half < lo:
            center = lo + half
        if hi is not None and center + half > hi:
            center = hi - half
    cluster.center = center


def _overlaps(a: _Cluster, b: _Cluster, spacing: float) -> bool:
    gap = b.left(spacing) - a.right(spacing) - spacing
    return gap < -OVERLAP_TOLERANCE


def _expand(cluster: _Cluster, spacing: float, lo: float | None, hi: float | None) -> list[float]:
    """Member centers left to right; a cluster wider than [lo, hi] is compressed into it."""
    offsets: list[float] = []
    cursor = 0.0
    for w in cluster.widths:
        offsets.append(cursor + w / 2)
        cursor += w + spacing
    span = cluster.span(spacing)
    if lo is not None and hi is not None and span > hi - lo:
        scale = (hi - lo) / span if span > 0 else 0.0
        return [lo + off * scale for off in offsets]
    left = cluster.center - span / 2
    return [left + off for off in offsets]


def layout_positions(
    items: list[LayoutItem],
    bounds: PositionBounds | None = None,
    spacing: float = NODE_SPACING,
) -> list[float]:
    """
    Compute one center position per item (same order as `items`) such that no two items
    overlap, left-to-right order of ideal positions is kept and positions stay close to
    their ideals. Bounds that cannot hold the items are reported with a warning and the
    items are compressed into the range.
    """
    if not items:
        return []

    if bounds_problem(items, bounds, spacing) is not None:
        logger.warning(
            "Position bounds %s cannot hold %d labels (total width %.2f); compressing.",
            bounds, len(items), sum(it.width for it in items),
        )
    lo, hi = _effective_range(bounds)

    stack: list[_Cluster] = []
    for idx in _ordered(items):
        cluster = _single(idx, items[idx])
        _place(cluster, spacing, lo, hi)
        stack.append(cluster)
        while len(stack) >= 2 and _overlaps(stack[-2], stack[-1], spacing):
            right = stack.pop()
            merged = _merge(stack.pop(), right)
            _place(merged, spacing, lo, hi)
            stack.append(merged)

    logger.debug("Declumped %d items into %d clusters", len(items), len(stack))

    positions = [0.0] * len(items)
    for cluster in stack:
        for idx, pos in zip(cluster.members, _expand(cluster, spacing, lo, hi)):
            positions[idx] = pos
    return positions
