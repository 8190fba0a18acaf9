"""
Sousa Spacing Method.

Miguel Sousa's method assigns letters to three tiers per case and
spaces them from the masters according to the shape of their edges:

    Group 1 (relational)      both sides take the value matching their
                              edge class: Stem -> straight, Round -> round,
                              Arch -> arch, Visual -> visual default
    Group 2 (semi-relational) same for Stem/Round/Arch sides; Visual
                              sides take the visual default
    Group 3 (visual)          both sides take the visual default

Lowercase values come from n and o, uppercase values from H and O.
Uppercase has no separate arch value: it is the straight value.

Groups are processed 1, 2, 3 for lowercase and then for uppercase, so a
character listed in several groups ends with the last group's values.
Overrides are merged on top, one side at a time.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from .constants import (
    ARCH,
    CASE_LOWER,
    CASE_UPPER,
    MASTER_CHARS,
    ROUND,
    STEM,
    TIER_RELATIONAL,
    TIER_VISUAL,
    VISUAL,
)
from .geometry import set_side_bearings
from .models import Font
from .settings import SideBearingPair, SousaSettings
from .topology import get_topology
from .utils import round_half_up

logger = logging.getLogger(__name__)


class SousaScalars(NamedTuple):
    """Side bearing value per edge class for one letter case."""

    straight: float
    round: float
    arch: float
    visual: int

    def for_class(self, edge_class: str) -> float:
        if edge_class == STEM:
            return self.straight
        if edge_class == ROUND:
            return self.round
        if edge_class == ARCH:
            return self.arch
        return self.visual


def sousa_scalars(settings: SousaSettings, case: str) -> SousaScalars:
    """
    Compute the per-class values for a letter case.

    Args:
        settings: Sousa settings.
        case: CASE_LOWER or CASE_UPPER.
    """
    masters = settings.masters
    if case == CASE_LOWER:
        straight = masters["n"].left
        round_ = masters["o"].left
        arch = masters["n"].right
    elif case == CASE_UPPER:
        straight = masters["H"].left
        round_ = masters["O"].left
        arch = straight
    else:
        raise ValueError(f"Unknown case '{case}'")
    return SousaScalars(straight, round_, arch, round_half_up((straight + round_) / 2))


def derive_group_pair(char: str, tier: int, scalars: SousaScalars) -> SideBearingPair:
    """
    Derive a character's side bearings from its group tier and topology.

    Args:
        char: Character to space.
        tier: TIER_RELATIONAL, TIER_SEMI_RELATIONAL or TIER_VISUAL.
        scalars: Values for the character's case.
    """
    if tier == TIER_VISUAL:
        return SideBearingPair(scalars.visual, scalars.visual)

    topology = get_topology(char)
    if tier == TIER_RELATIONAL:
        return SideBearingPair(
            scalars.for_class(topology.left), scalars.for_class(topology.right)
        )

    # Semi-relational: Visual edges resolve to the visual default
    left = scalars.visual if topology.left == VISUAL else scalars.for_class(topology.left)
    right = scalars.visual if topology.right == VISUAL else scalars.for_class(topology.right)
    return SideBearingPair(left, right)


def compute_sousa_targets(settings: SousaSettings) -> dict[str, SideBearingPair]:
    """
    Resolve the side bearings the method gives to grouped and
    overridden characters.

    Masters are not included; apply_sousa_method() sets them first.

    Returns:
        Ordered dict of character to pair. Pairs for characters that
        only appear in the override map may have None sides.
    """
    targets: dict[str, SideBearingPair] = {}
    for case, groups in ((CASE_LOWER, settings.groups.lower),
                         (CASE_UPPER, settings.groups.upper)):
        scalars = sousa_scalars(settings, case)
        for tier, members in enumerate(groups, start=1):
            for char in members:
                targets[char] = derive_group_pair(char, tier, scalars)

    for char, override in settings.overrides.items():
        base = targets.get(char, SideBearingPair())
        targets[char] = override.merged_over(base)
    return targets


def apply_sousa_method(font: Font, settings: SousaSettings) -> int:
    """
    Space the font with the Sousa method.

    Masters are set from their settings first, then every grouped or
    overridden character once. Characters without a glyph are skipped.

    Args:
        font: Font to modify in place.
        settings: Sousa settings.

    Returns:
        Number of glyph updates performed.
    """
    count = 0
    for char in MASTER_CHARS:
        glyph = font.char_to_glyph(char)
        if glyph is not None:
            master = settings.masters[char]
            set_side_bearings(glyph, master.left, master.right)
            count += 1

    for char, pair in compute_sousa_targets(settings).items():
        glyph = font.char_to_glyph(char)
        if glyph is None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("sousa: no glyph for %r, skipped", char)
            continue
        set_side_bearings(glyph, pair.left, pair.right)
        count += 1
    logger.debug("sousa: %d glyph updates", count)
    return count
