"""
Letter Topology Table.

Classifies the left and right edge of each Latin letter as Stem (S),
Arch (A), Round (R) or Visual (V). Visual edges are open or diagonal
and are spaced by eye rather than from a master measurement.

Characters not in the table are treated as Visual on both sides.
"""

from __future__ import annotations

from typing import NamedTuple

from .constants import ARCH, ROUND, STEM, VISUAL


class TopologyEntry(NamedTuple):
    """Edge classes of a letter."""

    left: str
    right: str


DEFAULT_TOPOLOGY = TopologyEntry(VISUAL, VISUAL)

TOPOLOGY: dict[str, TopologyEntry] = {
    # Lowercase
    "a": TopologyEntry(ROUND, STEM),
    "b": TopologyEntry(STEM, ROUND),
    "c": TopologyEntry(ROUND, VISUAL),
    "d": TopologyEntry(ROUND, STEM),
    "e": TopologyEntry(ROUND, VISUAL),
    "f": TopologyEntry(STEM, VISUAL),
    "g": TopologyEntry(ROUND, VISUAL),
    "h": TopologyEntry(STEM, ARCH),
    "i": TopologyEntry(STEM, STEM),
    "j": TopologyEntry(VISUAL, STEM),
    "k": TopologyEntry(STEM, VISUAL),
    "l": TopologyEntry(STEM, STEM),
    "m": TopologyEntry(STEM, ARCH),
    "n": TopologyEntry(STEM, ARCH),
    "o": TopologyEntry(ROUND, ROUND),
    "p": TopologyEntry(STEM, ROUND),
    "q": TopologyEntry(ROUND, STEM),
    "r": TopologyEntry(STEM, VISUAL),
    "s": TopologyEntry(VISUAL, VISUAL),
    "t": TopologyEntry(STEM, VISUAL),
    # u: both verticals are stems, the bowl is at the bottom
    "u": TopologyEntry(STEM, STEM),
    "v": TopologyEntry(VISUAL, VISUAL),
    "w": TopologyEntry(VISUAL, VISUAL),
    "x": TopologyEntry(VISUAL, VISUAL),
    "y": TopologyEntry(VISUAL, VISUAL),
    "z": TopologyEntry(VISUAL, VISUAL),
    # Uppercase
    "A": TopologyEntry(VISUAL, VISUAL),
    "B": TopologyEntry(STEM, ROUND),
    "C": TopologyEntry(ROUND, VISUAL),
    "D": TopologyEntry(STEM, ROUND),
    "E": TopologyEntry(STEM, VISUAL),
    "F": TopologyEntry(STEM, VISUAL),
    "G": TopologyEntry(ROUND, VISUAL),
    "H": TopologyEntry(STEM, STEM),
    "I": TopologyEntry(STEM, STEM),
    "J": TopologyEntry(VISUAL, STEM),
    "K": TopologyEntry(STEM, VISUAL),
    "L": TopologyEntry(STEM, VISUAL),
    "M": TopologyEntry(STEM, STEM),
    "N": TopologyEntry(STEM, STEM),
    "O": TopologyEntry(ROUND, ROUND),
    "P": TopologyEntry(STEM, ROUND),
    "Q": TopologyEntry(ROUND, ROUND),
    "R": TopologyEntry(STEM, VISUAL),
    "S": TopologyEntry(VISUAL, VISUAL),
    "T": TopologyEntry(VISUAL, VISUAL),
    "U": TopologyEntry(STEM, STEM),
    "V": TopologyEntry(VISUAL, VISUAL),
    "W": TopologyEntry(VISUAL, VISUAL),
    "X": TopologyEntry(VISUAL, VISUAL),
    "Y": TopologyEntry(VISUAL, VISUAL),
    "Z": TopologyEntry(VISUAL, VISUAL),
}


def get_topology(char: str) -> TopologyEntry:
    """Get the edge classes of a character; unknown ones are Visual."""
    return TOPOLOGY.get(char, DEFAULT_TOPOLOGY)
