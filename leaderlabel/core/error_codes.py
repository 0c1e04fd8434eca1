"""
Structured error codes for labeling failures and warnings.
Use these keys in LabelingResult.warnings; map to user-facing messages in the CLI.
"""

from __future__ import annotations

from collections.abc import Iterable

# Known error keys
MISSING_METRICS = "missing_metrics"
INVALID_BOUNDS = "invalid_bounds"
LEADER_OCCLUDES_FEATURE = "leader_occludes_feature"
LABELS_OVERLAP = "labels_overlap"
CANVAS_CLIPS_LABEL = "canvas_clips_label"
RUN_FAILED = "run_failed"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    MISSING_METRICS: "Some label texts have no measured size. Measure every label before layout.",
    INVALID_BOUNDS: "Labels do not fit in the position bounds and were compressed; they may overlap.",
    LEADER_OCCLUDES_FEATURE: "A leader crosses its feature. Check that features lie inside the drawing area.",
    LABELS_OVERLAP: "Two labels in the same band overlap.",
    CANVAS_CLIPS_LABEL: "The canvas does not contain every label.",
    RUN_FAILED: "Run failed. Check entities and inputs.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)


class LabelingError(ValueError):
    """Typed failure raised by the labeling pipeline. `error_key` is one of the keys above."""
    error_key = RUN_FAILED

    def __str__(self) -> str:
        detail = super().__str__()
        return detail or user_message(self.error_key)


class MissingMetricsError(LabelingError):
    """A label text has no entry in the text dimensions mapping."""
    error_key = MISSING_METRICS

    def __init__(self, texts: Iterable[str]) -> None:
        self.texts = tuple(texts)
        listed = ", ".join(repr(t) for t in self.texts)
        super().__init__(f"No text dimensions for label(s): {listed}")
