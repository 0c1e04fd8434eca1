# leaderlabel/core/scoring.py
"""
Quality metrics for a labeling result: how far labels moved from their ideal positions
and how many leaders needed a bend.
"""

from __future__ import annotations

import numpy as np

from leaderlabel.core.types import LabelingResult


def displacements(result: LabelingResult) -> np.ndarray:
    """Absolute horizontal distance of each label center from its feature center."""
    if not result.labels:
        return np.zeros(0)
    centers = np.array([lab.center_x for lab in result.labels], dtype=np.float64)
    ideals = np.array([lab.entity.location.center_x for lab in result.labels], dtype=np.float64)
    return np.abs(centers - ideals)


def displacement_stats(result: LabelingResult) -> dict[str, float | int]:
    """Keys: n_labels, mean_displacement, max_displacement, total_displacement, bent_leaders."""
    d = displacements(result)
    return {
        "n_labels": int(d.size),
        "mean_displacement": float(d.mean()) if d.size else 0.0,
        "max_displacement": float(d.max()) if d.size else 0.0,
        "total_displacement": float(d.sum()),
        "bent_leaders": sum(1 for path in result.leaders if not path.is_straight),
    }
