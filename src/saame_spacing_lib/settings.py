"""
Spacing Settings.

Plain data classes describing the input of the two spacing methods,
plus the factories that build default settings for a font and a few
helpers used by editing UIs.

Both methods are driven by four master pairs (H and O for uppercase,
n and o for lowercase) and a per-character override map. The Sousa
method also carries six character groups.

Settings are persisted by the host application; to_dict()/from_dict()
convert them to and from JSON-ready data.

Example:
    >>> settings = create_tracy_settings(font)
    >>> set_override(settings, 'x', 'left', 42)
    >>> apply_tracy_method(font, settings)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .constants import DEFAULT_GROUPS, MASTER_CHARS, SIDE_LEFT, SIDE_RIGHT
from .harmonic import estimate_master_defaults
from .metrics import read_side_bearings
from .models import Font


class SettingsError(ValueError):
    """Exception raised for malformed settings data."""

    pass


@dataclass
class SideBearingPair:
    """
    Left/right side bearing values.

    Either side may be None, meaning "leave this side unchanged" when
    the pair is used as an override or a partial result.
    """

    left: float | None = None
    right: float | None = None

    def get(self, side: str) -> float | None:
        if side == SIDE_LEFT:
            return self.left
        if side == SIDE_RIGHT:
            return self.right
        raise SettingsError(f"Unknown side '{side}'")

    def merged_over(self, base: SideBearingPair) -> SideBearingPair:
        """Return base with every non-None side of this pair on top."""
        return SideBearingPair(
            self.left if self.left is not None else base.left,
            self.right if self.right is not None else base.right,
        )

    @property
    def is_empty(self) -> bool:
        return self.left is None and self.right is None

    def to_dict(self) -> dict[str, float | None]:
        return {"lsb": self.left, "rsb": self.right}

    @classmethod
    def from_dict(cls, data: Any) -> SideBearingPair:
        if not isinstance(data, dict):
            raise SettingsError(f"Side bearing pair must be a mapping, got {data!r}")
        return cls(_number_or_none(data.get("lsb")), _number_or_none(data.get("rsb")))


def _number_or_none(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SettingsError(f"Side bearing must be a number or null, got {value!r}")
    return value


def _check_masters(masters: dict[str, SideBearingPair]):
    for char in MASTER_CHARS:
        pair = masters.get(char)
        if pair is None or pair.left is None or pair.right is None:
            raise SettingsError(f"Master '{char}' needs both left and right values")


def _check_overrides(overrides: dict[str, SideBearingPair]):
    for char in overrides:
        if not isinstance(char, str) or len(char) != 1:
            raise SettingsError(f"Override key must be a single character: {char!r}")


def _masters_from_dict(data: dict[str, Any]) -> dict[str, SideBearingPair]:
    masters = {}
    for char in MASTER_CHARS:
        if char not in data:
            raise SettingsError(f"Missing master '{char}'")
        masters[char] = SideBearingPair.from_dict(data[char])
    return masters


def _overrides_from_dict(data: Any) -> dict[str, SideBearingPair]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"Overrides must be a mapping, got {data!r}")
    return {char: SideBearingPair.from_dict(pair) for char, pair in data.items()}


@dataclass
class TracySettings:
    """
    Settings of the Tracy method.

    Attributes:
        masters: Pairs for 'H', 'O', 'n', 'o'; both sides required.
        overrides: Per-character partial pairs replacing rule results.
    """

    masters: dict[str, SideBearingPair]
    overrides: dict[str, SideBearingPair] = field(default_factory=dict)

    def __post_init__(self):
        _check_masters(self.masters)
        _check_overrides(self.overrides)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {c: self.masters[c].to_dict() for c in MASTER_CHARS}
        data["overrides"] = {c: p.to_dict() for c, p in self.overrides.items()}
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TracySettings:
        return cls(
            masters=_masters_from_dict(data),
            overrides=_overrides_from_dict(data.get("overrides")),
        )


def parse_group_text(text: str) -> list[str]:
    """
    Turn free text into a group member list.

    Whitespace is dropped and repeated characters are kept once, in
    order of first appearance.

    Example:
        >>> parse_group_text("n o h n")
        ['n', 'o', 'h']
    """
    return list(dict.fromkeys(c for c in text if not c.isspace()))


@dataclass
class SousaGroups:
    """
    Character groups of the Sousa method.

    Group 1 is relational, group 2 semi-relational and group 3 visual;
    each exists for lowercase and for uppercase. Members are unique and
    keep their order. Groups may overlap.
    """

    group1: list[str] = field(default_factory=list)
    group2: list[str] = field(default_factory=list)
    group3: list[str] = field(default_factory=list)
    upper_group1: list[str] = field(default_factory=list)
    upper_group2: list[str] = field(default_factory=list)
    upper_group3: list[str] = field(default_factory=list)

    def __post_init__(self):
        for key in DEFAULT_GROUPS:
            setattr(self, key, parse_group_text("".join(getattr(self, key))))

    @property
    def lower(self) -> tuple[list[str], list[str], list[str]]:
        return self.group1, self.group2, self.group3

    @property
    def upper(self) -> tuple[list[str], list[str], list[str]]:
        return self.upper_group1, self.upper_group2, self.upper_group3

    def to_dict(self) -> dict[str, list[str]]:
        return {key: list(getattr(self, key)) for key in DEFAULT_GROUPS}

    @classmethod
    def from_dict(cls, data: Any) -> SousaGroups:
        if not isinstance(data, dict):
            raise SettingsError(f"Groups must be a mapping, got {data!r}")
        unknown = set(data) - set(DEFAULT_GROUPS)
        if unknown:
            raise SettingsError(f"Unknown groups: {sorted(unknown)}")
        return cls(**{key: list(data.get(key, ())) for key in DEFAULT_GROUPS})

    @classmethod
    def defaults(cls) -> SousaGroups:
        return cls(**{key: list(chars) for key, chars in DEFAULT_GROUPS.items()})


@dataclass
class SousaSettings:
    """
    Settings of the Sousa method.

    Attributes:
        masters: Pairs for 'H', 'O', 'n', 'o'; both sides required.
        groups: The six character groups.
        overrides: Per-character partial pairs applied last.
    """

    masters: dict[str, SideBearingPair]
    groups: SousaGroups = field(default_factory=SousaGroups.defaults)
    overrides: dict[str, SideBearingPair] = field(default_factory=dict)

    def __post_init__(self):
        _check_masters(self.masters)
        _check_overrides(self.overrides)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {c: self.masters[c].to_dict() for c in MASTER_CHARS}
        data["groups"] = self.groups.to_dict()
        data["overrides"] = {c: p.to_dict() for c, p in self.overrides.items()}
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SousaSettings:
        groups = data.get("groups")
        return cls(
            masters=_masters_from_dict(data),
            groups=SousaGroups.from_dict(groups) if groups is not None
            else SousaGroups.defaults(),
            overrides=_overrides_from_dict(data.get("overrides")),
        )


def _default_masters(font: Font) -> dict[str, SideBearingPair]:
    return {
        char: SideBearingPair(left, right)
        for char, (left, right) in estimate_master_defaults(font).items()
    }


def create_tracy_settings(font: Font) -> TracySettings:
    """Build Tracy settings with masters estimated from the font."""
    return TracySettings(masters=_default_masters(font))


def create_sousa_settings(font: Font, groups: SousaGroups | None = None) -> SousaSettings:
    """
    Build Sousa settings with masters estimated from the font.

    Args:
        font: Font to estimate the masters from.
        groups: Groups to use; the default grouping when None.
    """
    return SousaSettings(
        masters=_default_masters(font),
        groups=groups if groups is not None else SousaGroups.defaults(),
    )


def set_override(
    settings: TracySettings | SousaSettings,
    char: str,
    side: str,
    value: float | None,
) -> SideBearingPair:
    """
    Set one side of a character's override, keeping the other side.

    Returns:
        The updated override pair.
    """
    if side not in (SIDE_LEFT, SIDE_RIGHT):
        raise SettingsError(f"Unknown side '{side}'")
    _check_overrides({char: None})
    pair = settings.overrides.get(char, SideBearingPair())
    if side == SIDE_LEFT:
        pair = SideBearingPair(value, pair.right)
    else:
        pair = SideBearingPair(pair.left, value)
    settings.overrides[char] = pair
    return pair


def clear_override(settings: TracySettings | SousaSettings, char: str) -> bool:
    """Remove a character's override. Returns True if one existed."""
    return settings.overrides.pop(char, None) is not None


def current_side_bearing(
    font: Font,
    settings: TracySettings | SousaSettings,
    char: str,
    side: str,
) -> float:
    """
    Value to show in an editor field for one side of a character.

    The override wins when set; otherwise the font's current (rounded)
    side bearing is returned.
    """
    override = settings.overrides.get(char)
    if override is not None and override.get(side) is not None:
        return override.get(side)
    lsb, rsb = read_side_bearings(font, char)
    return lsb if side == SIDE_LEFT else rsb
