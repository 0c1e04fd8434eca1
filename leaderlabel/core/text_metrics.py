# leaderlabel/core/text_metrics.py
"""
Measure label text width/height in pt using Pillow. 1 pt = 1 diagram unit.
Produces the text dimensions mapping consumed by the layout pipeline.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable

from leaderlabel.core.config import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE_PT
from leaderlabel.core.types import Dimensions, TextDimensions

# Loaded fonts keyed by (family, integer pixel size). A diagram measures many labels
# in one font, so each font file is opened once.
_fonts: dict[tuple[str, int], object] = {}


def _font_files(font_family: str) -> list[str]:
    """File names tried for a family, ending with the default family's files."""
    names: list[str] = []
    for family in (font_family, DEFAULT_FONT_FAMILY):
        for name in (family + ".ttf", family.replace(" ", "") + ".ttf"):
            if name not in names:
                names.append(name)
    return names


def font_for(font_family: str, font_size_pt: float):
    """
    Pillow font for a family and size. Falls back to Pillow's built-in font with a
    UserWarning (once per family and size) when no font file is found.
    """
    from PIL import ImageFont

    key = (font_family, max(1, int(round(font_size_pt))))
    if key in _fonts:
        return _fonts[key]
    font = None
    for name in _font_files(font_family):
        try:
            font = ImageFont.truetype(name, size=key[1])
            break
        except OSError:
            continue
    if font is None:
        warnings.warn(f"Font not found: {font_family!r}; using default.", UserWarning)
        font = ImageFont.load_default()
    _fonts[key] = font
    return font


def measure_text(
    text: str,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_pt: float = DEFAULT_FONT_SIZE_PT,
) -> Dimensions:
    """
    Rendered size of text. Width and height are scaled to the requested point size when
    the font in use has another size (the built-in fallback).
    """
    from PIL import Image, ImageDraw

    font = font_for(font_family, font_size_pt)
    draw = ImageDraw.Draw(Image.new("RGB", (1, 1)))
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    scale = font_size_pt / max(1.0, float(getattr(font, "size", font_size_pt)))
    return Dimensions(width=float(right - left) * scale, height=float(bottom - top) * scale)


def measure_texts(
    texts: Iterable[str],
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_pt: float = DEFAULT_FONT_SIZE_PT,
) -> TextDimensions:
    """Text dimensions mapping for every distinct text (each measured once)."""
    out: TextDimensions = {}
    for text in texts:
        if text not in out:
            out[text] = measure_text(text, font_family, font_size_pt)
    return out
