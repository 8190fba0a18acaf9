"""
Adhesion proofing text.

Builds short strings that put a letter between its masters and between
random members of its context group, so its spacing can be judged by
eye. The randomness here never touches the spacing engines.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from .constants import LOWER_CONTEXT, UPPER_CONTEXT
from .utils import is_uppercase_char

_random = random.Random()


def generate_adhesion_text(
    target_char: str,
    context_group: Sequence[str] | None = None,
    rng: random.Random | None = None,
) -> str:
    """
    Build a proofing phrase for a character.

    Uppercase targets give "HH?HH OO?OO a?b", lowercase ones
    "nn?nn oo?oo a?b", where a and b are drawn independently (and may
    repeat) from the context group, or from the masters when the group
    is empty.

    Args:
        target_char: Character to proof.
        context_group: Characters to draw the final neighbours from.
        rng: Random generator to use; a module-private one by default.

    Returns:
        The proofing phrase.

    Example:
        >>> generate_adhesion_text('a', ['n'])
        'nnann ooaoo nan'
    """
    rng = rng or _random
    if is_uppercase_char(target_char):
        context = list(context_group) if context_group else list(UPPER_CONTEXT)
        straight, round_ = "HH", "OO"
    else:
        context = list(context_group) if context_group else list(LOWER_CONTEXT)
        straight, round_ = "nn", "oo"

    before = rng.choice(context)
    after = rng.choice(context)
    c = target_char
    return f"{straight}{c}{straight} {round_}{c}{round_} {before}{c}{after}"
