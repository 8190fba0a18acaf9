"""
SAAME Spacing Library - Automatic side bearings for outline fonts.

Applies the Tracy and Sousa spacing methods to a font: a few master
side bearings (H, O, n, o) are tuned by the user and every other letter
is spaced from them, either through fixed per-letter formulas (Tracy)
or through letter groups and edge topology (Sousa).

Main Components:
    - Font, Glyph: In-memory font model the engines work on
    - set_side_bearings: The one geometry mutation primitive
    - read_side_bearings, average_side_bearing: Metric queries
    - estimate_default_spacing: Heuristic seed for master values
    - apply_tracy_method, apply_sousa_method: The spacing engines
    - generate_adhesion_text: Proofing strings for visual checks
    - SpacingEditor + commands: Undoable application of the above
    - font_io: fontTools / defcon codec adapter

Quick Start:
    >>> from saame_spacing_lib import font_io, create_sousa_settings, apply_sousa_method
    >>>
    >>> font = font_io.decode(open("MyFont.ttf", "rb").read())
    >>> settings = create_sousa_settings(font)
    >>> apply_sousa_method(font, settings)
    >>> data = font_io.encode(font)

License:
    MIT License
"""

import logging

__version__ = "0.1.0"

from .adhesion import generate_adhesion_text
from .commands.base import Command, CommandResult
from .commands.spacing import (
    ApplySousaCommand,
    ApplyTracyCommand,
    CleanMetricsCommand,
    SetSideBearingsCommand,
)
from .constants import (
    ARCH,
    ROUND,
    SIDE_LEFT,
    SIDE_RIGHT,
    STEM,
    VISUAL,
)
from .editors.spacing import SpacingEditor
from .geometry import clean_metrics, set_side_bearings
from .harmonic import estimate_default_spacing, estimate_master_defaults
from .metrics import (
    SideBearings,
    average_side_bearing,
    glyph_display_data,
    measure_font_metrics,
    raw_side_bearings,
    read_side_bearings,
)
from .models import BoundingBox, Font, FontDataError, Glyph, PathCommand
from .settings import (
    SettingsError,
    SideBearingPair,
    SousaGroups,
    SousaSettings,
    TracySettings,
    clear_override,
    create_sousa_settings,
    create_tracy_settings,
    current_side_bearing,
    parse_group_text,
    set_override,
)
from .sousa import apply_sousa_method, compute_sousa_targets
from .topology import TOPOLOGY, TopologyEntry, get_topology
from .tracy import apply_tracy_method, compute_tracy_targets

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Model
    "Font",
    "Glyph",
    "PathCommand",
    "BoundingBox",
    "FontDataError",
    # Geometry and metrics
    "set_side_bearings",
    "clean_metrics",
    "SideBearings",
    "raw_side_bearings",
    "read_side_bearings",
    "average_side_bearing",
    "measure_font_metrics",
    "glyph_display_data",
    # Estimator
    "estimate_default_spacing",
    "estimate_master_defaults",
    # Settings
    "SideBearingPair",
    "TracySettings",
    "SousaGroups",
    "SousaSettings",
    "SettingsError",
    "create_tracy_settings",
    "create_sousa_settings",
    "parse_group_text",
    "set_override",
    "clear_override",
    "current_side_bearing",
    # Engines
    "TOPOLOGY",
    "TopologyEntry",
    "get_topology",
    "apply_tracy_method",
    "compute_tracy_targets",
    "apply_sousa_method",
    "compute_sousa_targets",
    "generate_adhesion_text",
    # Commands and editor
    "Command",
    "CommandResult",
    "SetSideBearingsCommand",
    "ApplyTracyCommand",
    "ApplySousaCommand",
    "CleanMetricsCommand",
    "SpacingEditor",
    # Constants
    "SIDE_LEFT",
    "SIDE_RIGHT",
    "STEM",
    "ARCH",
    "ROUND",
    "VISUAL",
]
