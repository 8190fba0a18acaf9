"""
Font Data Model.

In-memory font representation used by the spacing engines. A Font is
normally produced by the codec adapter in font_io, but it can be built
directly from path commands, which is what the tests do.

Outlines are stored in fontTools pen-recording form: a list of
(operator, points) commands where operator is one of 'moveTo', 'lineTo',
'curveTo', 'closePath' or 'endPath'. This makes a glyph drawable into any
fontTools pen with replayRecording().

Bounding boxes are cached behind an explicit dirty flag. Every outline
mutation goes through Glyph methods that mark the cache dirty; the next
read of Glyph.bounds recomputes it with a BoundsPen.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, NamedTuple

from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.recordingPen import replayRecording

from .constants import DEFAULT_WEIGHT_CLASS, SPACE_GLYPH_NAME

PATH_OPERATORS = frozenset(("moveTo", "lineTo", "curveTo", "closePath", "endPath"))


class FontDataError(ValueError):
    """Exception raised for font data the engine cannot work with."""

    pass


class PathCommand(NamedTuple):
    """
    One outline command.

    Attributes:
        operator: Pen method name ('moveTo', 'lineTo', 'curveTo',
            'closePath', 'endPath').
        points: Tuple of (x, y) points; empty for closing commands.
    """

    operator: str
    points: tuple[tuple[float, float], ...] = ()


class BoundingBox(NamedTuple):
    """Glyph bounds in font units."""

    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min


EMPTY_BOUNDS = BoundingBox(0, 0, 0, 0)


class Glyph:
    """
    Glyph with an outline, an advance width and lazily computed bounds.

    Attributes:
        name: Glyph name.
        unicodes: Code points mapped to this glyph.
        advance_width: Horizontal advance in font units.
        left_side_bearing: Last left side bearing recorded by the engine,
            or the value read from the font.
        x_shift: Total horizontal translation applied since the glyph was
            loaded. Used to write changes back into the source font.
    """

    def __init__(
        self,
        name: str,
        commands: Iterable[tuple[str, Iterable[tuple[float, float]]]] = (),
        advance_width: float = 0,
        unicodes: Iterable[int] = (),
    ):
        if advance_width < 0:
            raise FontDataError(
                f"Glyph '{name}' has negative advance width {advance_width}"
            )
        self.name = name
        self.unicodes = list(unicodes)
        self.advance_width = advance_width
        self.commands = [self._make_command(name, c) for c in commands]
        self.x_shift: float = 0
        self._bounds: BoundingBox | None = None
        self._bounds_dirty = True
        self.left_side_bearing = self.bounds.x_min

    @staticmethod
    def _make_command(name: str, command) -> PathCommand:
        operator, points = command
        if operator not in PATH_OPERATORS:
            raise FontDataError(
                f"Glyph '{name}' uses unsupported path operator '{operator}'"
            )
        return PathCommand(operator, tuple((x, y) for x, y in points))

    def __repr__(self) -> str:
        return (
            f"Glyph({self.name!r}, commands={len(self.commands)}, "
            f"advance_width={self.advance_width})"
        )

    @property
    def is_empty(self) -> bool:
        """True if the glyph has no drawable points (e.g. space)."""
        return not any(c.points for c in self.commands)

    @property
    def bounds(self) -> BoundingBox:
        """
        Bounding box of the outline.

        Recomputed on read after any outline mutation. Empty glyphs
        return the degenerate box (0, 0, 0, 0).
        """
        if self._bounds_dirty or self._bounds is None:
            pen = BoundsPen(None)
            self.draw(pen)
            self._bounds = (
                BoundingBox(*pen.bounds) if pen.bounds is not None else EMPTY_BOUNDS
            )
            self._bounds_dirty = False
        return self._bounds

    def invalidate_bounds(self):
        """Mark the cached bounding box as stale."""
        self._bounds_dirty = True

    def draw(self, pen: Any):
        """Draw the outline into a fontTools pen."""
        replayRecording(self.commands, pen)

    def translate(self, dx: float):
        """Move every x coordinate of the outline by dx."""
        self.commands = [
            PathCommand(c.operator, tuple((x + dx, y) for x, y in c.points))
            for c in self.commands
        ]
        self.x_shift += dx
        self.invalidate_bounds()


class Font:
    """
    Mutable collection of glyphs plus the global metrics the engine reads.

    Attributes:
        units_per_em: Design grid size. Must be positive.
        ascender: Typographic ascender.
        descender: Typographic descender (usually negative).
        weight_class: OS/2 weight class, 400 when unknown.
        x_height: x-height from the font tables, if present.
        cap_height: Cap height from the font tables, if present.
        source: Object this font was decoded from (TTFont or defcon Font),
            used by font_io.write_back().

    Example:
        >>> font = Font(units_per_em=1000)
        >>> font.add_glyph(Glyph('H', commands, 700, unicodes=[0x48]))
        >>> font.char_to_glyph('H').advance_width
        700
    """

    def __init__(
        self,
        units_per_em: int = 1000,
        ascender: int = 800,
        descender: int = -200,
        weight_class: int | None = None,
        x_height: int | None = None,
        cap_height: int | None = None,
        glyphs: Iterable[Glyph] = (),
        source: Any = None,
    ):
        if not units_per_em or units_per_em <= 0:
            raise FontDataError(f"unitsPerEm must be positive, got {units_per_em}")
        self.units_per_em = units_per_em
        self.ascender = ascender
        self.descender = descender
        self.weight_class = weight_class or DEFAULT_WEIGHT_CLASS
        self.x_height = x_height
        self.cap_height = cap_height
        self.source = source

        self._glyphs: dict[str, Glyph] = {}
        self._glyph_order: list[str] = []
        self._cmap: dict[int, str] = {}

        for glyph in glyphs:
            self.add_glyph(glyph)

    def add_glyph(self, glyph: Glyph) -> Glyph:
        """Add a glyph and register its code points in the character map."""
        if glyph.name not in self._glyphs:
            self._glyph_order.append(glyph.name)
        self._glyphs[glyph.name] = glyph
        for code in glyph.unicodes:
            self._cmap[code] = glyph.name
        return glyph

    def map_character(self, code: int, glyph_name: str):
        """Point a code point at an existing glyph."""
        if glyph_name not in self._glyphs:
            raise KeyError(f"Glyph '{glyph_name}' not in font")
        self._cmap[code] = glyph_name
        glyph = self._glyphs[glyph_name]
        if code not in glyph.unicodes:
            glyph.unicodes.append(code)

    def __contains__(self, glyph_name: str) -> bool:
        return glyph_name in self._glyphs

    def __getitem__(self, glyph_name: str) -> Glyph:
        return self._glyphs[glyph_name]

    def __iter__(self) -> Iterator[Glyph]:
        return (self._glyphs[name] for name in self._glyph_order)

    def __len__(self) -> int:
        return len(self._glyph_order)

    def __repr__(self) -> str:
        return f"Font(units_per_em={self.units_per_em}, glyphs={len(self)})"

    @property
    def glyph_order(self) -> list[str]:
        return list(self._glyph_order)

    @property
    def cmap(self) -> dict[int, str]:
        return dict(self._cmap)

    def glyph_at(self, index: int) -> Glyph:
        """Get a glyph by its position in the glyph order."""
        return self._glyphs[self._glyph_order[index]]

    def char_to_glyph(self, char: str) -> Glyph | None:
        """
        Look up the glyph mapped to a single character.

        Returns:
            The Glyph, or None if the character is not mapped.
        """
        if not char or len(char) != 1:
            return None
        name = self._cmap.get(ord(char))
        if name is None:
            return None
        return self._glyphs.get(name)

    def is_space_glyph(self, glyph: Glyph) -> bool:
        return glyph.name == SPACE_GLYPH_NAME or ord(" ") in glyph.unicodes
