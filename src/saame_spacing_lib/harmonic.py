"""
Harmonic Spacing Estimator.

Heuristic side bearing estimate used to seed the editable master values
before the user has tuned anything. It is never called while a spacing
method is applied.

The estimate approximates the glyph's internal counter from its ink
width minus two stems (stem thickness guessed from height and weight
class), then takes a fixed fraction of it as the side bearing:

    stem    = height * 0.16 * (weight_class / 400) ** 0.7
    counter = max(width * 0.15, width - 2 * stem)
    target  = counter * (0.40 uppercase | 0.32 otherwise)

Round shapes get 65% of that.
"""

from __future__ import annotations

from .constants import (
    ARCH_ASYMMETRY,
    BASE_STEM_RATIO,
    FALLBACK_SPACING,
    LOWER_RHYTHM_RATIO,
    MIN_COUNTER_RATIO,
    MIN_SPACING,
    ROUND_CHARS,
    ROUND_FACTOR,
    UPPER_RHYTHM_RATIO,
    WEIGHT_EXPONENT,
)
from .models import Font
from .utils import is_uppercase_char, round_half_up


def estimate_default_spacing(font: Font, char: str) -> int:
    """
    Estimate a default side bearing for a character.

    Args:
        font: Font containing the glyph.
        char: Single character.

    Returns:
        Side bearing in font units, at least 10. Characters without a
        glyph, or with an empty outline, get 40.
    """
    glyph = font.char_to_glyph(char)
    if glyph is None or glyph.is_empty:
        return FALLBACK_SPACING

    bounds = glyph.bounds
    weight_factor = font.weight_class / 400
    estimated_stem = bounds.height * BASE_STEM_RATIO * weight_factor**WEIGHT_EXPONENT
    internal_counter = max(
        bounds.width * MIN_COUNTER_RATIO, bounds.width - 2 * estimated_stem
    )

    ratio = UPPER_RHYTHM_RATIO if is_uppercase_char(char) else LOWER_RHYTHM_RATIO
    target = internal_counter * ratio
    if char in ROUND_CHARS:
        target *= ROUND_FACTOR

    return max(MIN_SPACING, round_half_up(target))


def estimate_master_defaults(font: Font) -> dict[str, tuple[int, int]]:
    """
    Estimate (left, right) pairs for the four master glyphs.

    The 'n' right side is 95% of its left side to account for the arch.

    Returns:
        Dict keyed 'H', 'O', 'n', 'o'.
    """
    n = estimate_default_spacing(font, "n")
    o = estimate_default_spacing(font, "o")
    upper_h = estimate_default_spacing(font, "H")
    upper_o = estimate_default_spacing(font, "O")
    return {
        "H": (upper_h, upper_h),
        "O": (upper_o, upper_o),
        "n": (n, round_half_up(n * ARCH_ASYMMETRY)),
        "o": (o, o),
    }
