"""
Tracy Spacing Method.

Walter Tracy's method spaces every letter from a handful of master
values: the straight and round sides of H and O for capitals, and the
stem, arch and round sides of n and o for lowercase. Each letter takes
a fixed combination of quantities derived from those masters.

Derived quantities:

    Uppercase (from H.left and O.left)
        H       straight side
        O       round side
        moreH   H * 1.15
        lessH   H * 0.85
        minH    max(5, H * 0.25)   open/diagonal sides
        visualH (H + O) / 2

    Lowercase (from n.left, n.right and o.left)
        stem    n.left
        arch    n.right
        round   o.left
        moreN   stem * 1.15
        lessO   round * 0.9
        minN    max(5, stem * 0.25)
        visualN (stem + round) / 2

The master glyphs themselves take their settings values directly.
Overrides replace the rule result side by side.
"""

from __future__ import annotations

import logging

from .constants import MASTER_CHARS
from .geometry import set_side_bearings
from .models import Font
from .settings import SideBearingPair, TracySettings
from .utils import round_half_up

logger = logging.getLogger(__name__)

# Letter -> (left quantity, right quantity)
UPPERCASE_RULES: dict[str, tuple[str, str]] = {
    "A": ("minH", "minH"),
    "B": ("H", "lessH"),
    "C": ("O", "lessH"),
    "D": ("H", "O"),
    "E": ("H", "lessH"),
    "F": ("H", "lessH"),
    "G": ("O", "moreH"),
    "I": ("H", "H"),
    "J": ("minH", "H"),
    "K": ("H", "minH"),
    "L": ("H", "minH"),
    "M": ("moreH", "moreH"),
    "N": ("moreH", "moreH"),
    "P": ("H", "O"),
    "Q": ("O", "O"),
    "R": ("H", "minH"),
    "S": ("visualH", "visualH"),
    "T": ("minH", "minH"),
    "U": ("moreH", "moreH"),
    "V": ("minH", "minH"),
    "W": ("minH", "minH"),
    "X": ("minH", "minH"),
    "Y": ("minH", "minH"),
    "Z": ("lessH", "lessH"),
}

LOWERCASE_RULES: dict[str, tuple[str, str]] = {
    "a": ("round", "stem"),
    "b": ("stem", "round"),
    "c": ("round", "lessO"),
    "d": ("round", "stem"),
    "e": ("round", "lessO"),
    "f": ("stem", "minN"),
    "g": ("round", "visualN"),
    "h": ("moreN", "arch"),
    "i": ("moreN", "stem"),
    "j": ("stem", "stem"),
    "k": ("stem", "minN"),
    "l": ("moreN", "stem"),
    "m": ("stem", "arch"),
    "p": ("moreN", "round"),
    "q": ("round", "stem"),
    "r": ("stem", "minN"),
    "s": ("lessO", "lessO"),
    "t": ("stem", "minN"),
    "u": ("stem", "stem"),
    "v": ("minN", "minN"),
    "w": ("minN", "minN"),
    "x": ("visualN", "visualN"),
    "y": ("minN", "minN"),
    "z": ("visualN", "visualN"),
}


def tracy_quantities(settings: TracySettings) -> dict[str, int | float]:
    """
    Compute the derived quantities used by the letter tables.

    Returns:
        Dict of quantity name to value.
    """
    masters = settings.masters
    upper_h = masters["H"].left
    upper_o = masters["O"].left
    stem = masters["n"].left
    arch = masters["n"].right
    round_ = masters["o"].left
    return {
        "H": upper_h,
        "O": upper_o,
        "moreH": round_half_up(upper_h * 1.15),
        "lessH": round_half_up(upper_h * 0.85),
        "minH": max(5, round_half_up(upper_h * 0.25)),
        "visualH": round_half_up((upper_h + upper_o) / 2),
        "stem": stem,
        "arch": arch,
        "round": round_,
        "moreN": round_half_up(stem * 1.15),
        "lessO": round_half_up(round_ * 0.9),
        "minN": max(5, round_half_up(stem * 0.25)),
        "visualN": round_half_up((stem + round_) / 2),
    }


def compute_tracy_targets(settings: TracySettings) -> dict[str, SideBearingPair]:
    """
    Resolve the final side bearings of every letter handled by the method.

    Masters come first, then uppercase, then lowercase letters. Each
    result already has the character's override applied.

    Args:
        settings: Tracy settings.

    Returns:
        Ordered dict of character to resolved pair.
    """
    quantities = tracy_quantities(settings)

    rules: dict[str, SideBearingPair] = {}
    for char in MASTER_CHARS:
        master = settings.masters[char]
        rules[char] = SideBearingPair(master.left, master.right)
    for table in (UPPERCASE_RULES, LOWERCASE_RULES):
        for char, (left, right) in table.items():
            rules[char] = SideBearingPair(quantities[left], quantities[right])

    targets = {}
    for char, pair in rules.items():
        override = settings.overrides.get(char)
        targets[char] = override.merged_over(pair) if override else pair
    return targets


def apply_tracy_method(font: Font, settings: TracySettings) -> int:
    """
    Space the font with the Tracy method.

    Characters without a glyph in the font are skipped.

    Args:
        font: Font to modify in place.
        settings: Tracy settings.

    Returns:
        Number of glyphs modified.
    """
    count = 0
    for char, pair in compute_tracy_targets(settings).items():
        glyph = font.char_to_glyph(char)
        if glyph is None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("tracy: no glyph for %r, skipped", char)
            continue
        set_side_bearings(glyph, pair.left, pair.right)
        count += 1
    logger.debug("tracy: %d glyphs spaced", count)
    return count
