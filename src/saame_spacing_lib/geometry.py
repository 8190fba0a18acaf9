"""
Side Bearing Geometry.

This module holds the only functions that mutate glyph geometry.
Both spacing engines funnel every change through set_side_bearings().

Functions:
    - translate_glyph: Shift an outline horizontally
    - set_side_bearings: Set left/right side bearings of a glyph
    - clean_metrics: Zero every left side bearing and fit advances to ink
"""

from __future__ import annotations

import logging

from .constants import SHIFT_EPSILON
from .models import Font, Glyph

logger = logging.getLogger(__name__)


def translate_glyph(glyph: Glyph, dx: float) -> bool:
    """
    Shift a glyph outline horizontally.

    Args:
        glyph: Glyph to move.
        dx: Horizontal offset in font units.

    Returns:
        True if the outline moved, False if dx was negligible.
    """
    if abs(dx) <= SHIFT_EPSILON:
        return False
    glyph.translate(dx)
    return True


def set_side_bearings(
    glyph: Glyph | None,
    left: float | None,
    right: float | None,
) -> None:
    """
    Set the side bearings of a glyph in place.

    The left side bearing is set by translating the outline; the right
    side bearing by resizing the advance width around the (shifted)
    outline. Either side may be None to leave it unchanged. Calling the
    function twice with the same arguments changes nothing the second
    time.

    For glyphs without an outline the left side is ignored and a given
    right value becomes the whole advance width.

    Advance widths never go below zero.

    Args:
        glyph: Glyph to modify. None is ignored.
        left: Target left side bearing, or None.
        right: Target right side bearing, or None.
    """
    if glyph is None:
        return

    if glyph.is_empty:
        if right is not None:
            glyph.advance_width = max(0, right)
        return

    if left is not None:
        if translate_glyph(glyph, left - glyph.bounds.x_min):
            glyph.left_side_bearing = left

    if right is not None:
        glyph.advance_width = max(0, glyph.bounds.x_max + right)


def clean_metrics(font: Font) -> int:
    """
    Reset glyph metrics to the bare outline.

    Every glyph except the space glyph is moved so that its left side
    bearing is 0, and its advance width is set to its ink width. Empty
    glyphs other than space end up with a zero advance.

    Args:
        font: Font to modify.

    Returns:
        Number of glyphs processed.
    """
    count = 0
    for glyph in font:
        if font.is_space_glyph(glyph):
            continue
        bounds = glyph.bounds
        if translate_glyph(glyph, -bounds.x_min):
            glyph.left_side_bearing = 0
        glyph.advance_width = bounds.width
        count += 1
    logger.debug("clean_metrics: %d glyphs reset", count)
    return count
