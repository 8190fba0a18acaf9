"""
Spacing Constants.

This module defines constants shared by the spacing engines, the
estimator and the settings layer.
"""

# Sides
SIDE_LEFT = "left"
SIDE_RIGHT = "right"

# Topology classes
STEM = "S"
ARCH = "A"
ROUND = "R"
VISUAL = "V"

TOPOLOGY_CLASSES = (STEM, ARCH, ROUND, VISUAL)

# Sousa group tiers
TIER_RELATIONAL = 1
TIER_SEMI_RELATIONAL = 2
TIER_VISUAL = 3

# Letter case keys
CASE_LOWER = "lc"
CASE_UPPER = "uc"

# Master glyphs, in application order
MASTER_CHARS = ("H", "O", "n", "o")

# Shifts at or below this many units are ignored
SHIFT_EPSILON = 0.001

# Harmonic estimator
FALLBACK_SPACING = 40
MIN_SPACING = 10
DEFAULT_WEIGHT_CLASS = 400
BASE_STEM_RATIO = 0.16
WEIGHT_EXPONENT = 0.7
MIN_COUNTER_RATIO = 0.15
UPPER_RHYTHM_RATIO = 0.40
LOWER_RHYTHM_RATIO = 0.32
ROUND_FACTOR = 0.65
ARCH_ASYMMETRY = 0.95
ROUND_CHARS = frozenset("OoQCGec0")

# Glyph excluded from average spacing
SPACE_GLYPH_NAME = "space"

# Adhesion text default contexts
UPPER_CONTEXT = ("H", "O")
LOWER_CONTEXT = ("n", "o")

# Default Sousa groups
DEFAULT_GROUPS = {
    "group1": "nohmlbdpqiu",
    "group2": "acefgjkrst",
    "group3": "vwxyz",
    "upper_group1": "HODIMNUBPQ",
    "upper_group2": "CEFGJKLRS",
    "upper_group3": "ATVWXYZ",
}
GROUP_KEYS = tuple(DEFAULT_GROUPS)
