# tests/test_text_metrics.py
"""
Pillow text measurement: positive sizes, monotone in text length and font size.
"""

from __future__ import annotations

import warnings

from leaderlabel.core.text_metrics import font_for, measure_text, measure_texts


def test_measure_text_positive() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        dims = measure_text("Label", "DejaVu Sans", 12.0)
    assert dims.width > 0
    assert dims.height > 0


def test_longer_text_is_wider() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        short = measure_text("ab", "DejaVu Sans", 12.0)
        long = measure_text("abababab", "DejaVu Sans", 12.0)
    assert long.width > short.width


def test_measure_texts_maps_each_distinct_text_once() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        dims = measure_texts(["x", "yy", "x"], "DejaVu Sans", 10.0)
    assert list(dims) == ["x", "yy"]
    assert dims["yy"].width > dims["x"].width


def test_missing_font_falls_back_with_warning() -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        dims = measure_text("fallback", "No Such Font Family 123", 12.0)
    assert dims.width > 0
    # Warns only when no candidate font file is installed either, and then only once.
    font_warnings = [w for w in caught if "Font not found" in str(w.message)]
    assert len(font_warnings) <= 1
    for w in font_warnings:
        assert "No Such Font Family 123" in str(w.message)


def test_fonts_are_loaded_once_per_family_and_size() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        a = font_for("DejaVu Sans", 12.0)
        b = font_for("DejaVu Sans", 12.2)
        c = font_for("DejaVu Sans", 20.0)
    assert a is b
    assert c is not a


def test_missing_font_warns_once_across_measurements() -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        measure_texts(["a", "b", "c"], "Another Missing Family 456", 9.0)
    font_warnings = [w for w in caught if "Another Missing Family 456" in str(w.message)]
    assert len(font_warnings) <= 1
