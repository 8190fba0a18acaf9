"""
Metric Reader.

Read-only queries over glyph metrics, used both by the engines and by
the calling UI to report results.

Functions:
    - raw_side_bearings: Unrounded (lsb, rsb) of a glyph
    - read_side_bearings: Rounded (lsb, rsb) of the glyph for a character
    - average_side_bearing: Mean side bearing of all mapped glyphs
    - measure_font_metrics: x-height and cap-height report
    - glyph_display_data: Bounds and SVG path for rendering
"""

from __future__ import annotations

from typing import Any, NamedTuple

from fontTools.pens.svgPathPen import SVGPathPen

from .models import Font, Glyph
from .utils import round_half_up


class SideBearings(NamedTuple):
    """Left and right side bearing of a glyph."""

    lsb: float
    rsb: float


ZERO_SIDE_BEARINGS = SideBearings(0, 0)


def raw_side_bearings(glyph: Glyph | None) -> SideBearings:
    """
    Get the unrounded side bearings of a glyph.

    Empty glyphs report lsb 0 and the whole advance as rsb; a missing
    glyph reports (0, 0).
    """
    if glyph is None:
        return ZERO_SIDE_BEARINGS
    if glyph.is_empty:
        return SideBearings(0, glyph.advance_width)
    bounds = glyph.bounds
    return SideBearings(bounds.x_min, glyph.advance_width - bounds.x_max)


def read_side_bearings(font: Font, char: str) -> SideBearings:
    """
    Get the side bearings of the glyph mapped to a character.

    Values are rounded to whole font units for display.

    Args:
        font: Font to read from.
        char: Single character.

    Returns:
        SideBearings(lsb, rsb); (0, 0) if the character has no glyph.
    """
    lsb, rsb = raw_side_bearings(font.char_to_glyph(char))
    return SideBearings(round_half_up(lsb), round_half_up(rsb))


def average_side_bearing(font: Font) -> int:
    """
    Get the mean side bearing across the font.

    Averages (lsb + rsb) / 2 over every glyph that has a character
    mapping and is not the space glyph.

    Returns:
        Rounded mean, or 0 when no glyph qualifies.
    """
    total = 0.0
    count = 0
    for glyph in font:
        if not glyph.unicodes or font.is_space_glyph(glyph):
            continue
        lsb, rsb = raw_side_bearings(glyph)
        total += lsb + rsb
        count += 1
    if count == 0:
        return 0
    return round_half_up(total / (count * 2))


def _glyph_height(font: Font, char: str) -> float | None:
    glyph = font.char_to_glyph(char)
    if glyph is None or glyph.is_empty:
        return None
    return glyph.bounds.height


def measure_font_metrics(font: Font) -> dict[str, Any]:
    """
    Report the font's vertical reference metrics.

    x-height and cap height come from the font's own values when they
    are set, otherwise from the height of the 'x' and 'H' glyphs.

    Returns:
        Dict with ascender, descender, units_per_em, x_height and
        cap_height (0 when neither source is available).
    """
    x_height = font.x_height or _glyph_height(font, "x") or 0
    cap_height = font.cap_height or _glyph_height(font, "H") or 0
    return {
        "ascender": font.ascender,
        "descender": font.descender,
        "units_per_em": font.units_per_em,
        "x_height": x_height,
        "cap_height": cap_height,
    }


def glyph_display_data(font: Font, char: str) -> dict[str, Any] | None:
    """
    Collect what a renderer needs to draw a glyph with its metrics.

    The vertical extent is the font's ascender/descender so glyphs line
    up; the glyph's own vertical bounds are reported separately.

    Args:
        font: Font to read from.
        char: Single character.

    Returns:
        Dict of metrics plus 'path_data' (SVG path string, empty for
        empty glyphs), or None if the character has no glyph.
    """
    glyph = font.char_to_glyph(char)
    if glyph is None:
        return None

    data = {
        "x_min": 0,
        "x_max": 0,
        "y_min": font.descender,
        "y_max": font.ascender,
        "advance_width": glyph.advance_width,
        "path_data": "",
    }
    if glyph.is_empty:
        return data

    bounds = glyph.bounds
    pen = SVGPathPen(None, ntos=lambda v: f"{v:.2f}".rstrip("0").rstrip("."))
    glyph.draw(pen)
    data.update(
        x_min=bounds.x_min,
        x_max=bounds.x_max,
        glyph_y_min=bounds.y_min,
        glyph_y_max=bounds.y_max,
        path_data=pen.getCommands(),
    )
    return data
