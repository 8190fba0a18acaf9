"""
Numeric helpers shared by the spacing engines.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves rounding towards +infinity.

    The spacing formulas are defined with this rounding; Python's
    built-in round() would send 57.5 and 58.5 to the same value.

    Example:
        >>> round_half_up(57.5)
        58
        >>> round_half_up(-2.5)
        -2
    """
    return int(math.floor(value + 0.5))


def is_uppercase_char(char: str) -> bool:
    """True for characters that have a distinct lowercase form."""
    return char == char.upper() and char != char.lower()
