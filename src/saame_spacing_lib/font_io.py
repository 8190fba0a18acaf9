"""
Font Codec Adapter.

Converts between real font objects and the engine's in-memory Font.

Reading:
    - decode: binary OpenType/TrueType data -> Font
    - from_ttfont: fontTools TTFont -> Font
    - from_ufo: defcon Font -> Font
    - read_ufo: UFO directory on disk -> Font (via defcon)

Quadratic TrueType curves are elevated to cubic and components are
decomposed, so every Glyph holds a flat move/line/cubic outline.

Writing:
    - write_back: push the engine's changes into the source object
    - encode: write_back, then serialize a binary source to bytes

The engine only moves outlines horizontally, so write-back translates
the source outlines by the accumulated Glyph.x_shift rather than
re-encoding the outline. Component offsets are corrected so composites
follow their own shift and not their base glyph's.
"""

from __future__ import annotations

import io
import logging
from typing import Any

import defcon
from fontTools.pens.basePen import BasePen
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.transformPen import TransformPen
from fontTools.ttLib import TTFont

from .models import Font, FontDataError, Glyph
from .utils import round_half_up

logger = logging.getLogger(__name__)


class OutlinePen(BasePen):
    """
    Pen recording a decomposed, all-cubic outline as path commands.
    """

    def __init__(self, glyphSet=None):
        super().__init__(glyphSet)
        self.commands: list[tuple[str, tuple]] = []

    def _moveTo(self, pt):
        self.commands.append(("moveTo", (pt,)))

    def _lineTo(self, pt):
        self.commands.append(("lineTo", (pt,)))

    def _curveToOne(self, pt1, pt2, pt3):
        self.commands.append(("curveTo", (pt1, pt2, pt3)))

    def _closePath(self):
        self.commands.append(("closePath", ()))

    def _endPath(self):
        self.commands.append(("endPath", ()))


def _unicodes_by_glyph(cmap: dict[int, str]) -> dict[str, list[int]]:
    result: dict[str, list[int]] = {}
    for code, name in sorted(cmap.items()):
        result.setdefault(name, []).append(code)
    return result


# -----------------------------------------------------------------------------
# Reading
# -----------------------------------------------------------------------------


def from_ttfont(ttfont: TTFont) -> Font:
    """
    Build a Font from a fontTools TTFont.

    Args:
        ttfont: Loaded font. Kept as Font.source for write-back.

    Returns:
        Font with one Glyph per glyph in the glyph order.
    """
    os2 = ttfont["OS/2"] if "OS/2" in ttfont else None
    hhea = ttfont["hhea"]
    font = Font(
        units_per_em=ttfont["head"].unitsPerEm,
        ascender=hhea.ascent,
        descender=hhea.descent,
        weight_class=getattr(os2, "usWeightClass", None),
        x_height=getattr(os2, "sxHeight", None) or None,
        cap_height=getattr(os2, "sCapHeight", None) or None,
        source=ttfont,
    )

    glyph_set = ttfont.getGlyphSet()
    hmtx = ttfont["hmtx"]
    unicodes = _unicodes_by_glyph(ttfont.getBestCmap() or {})
    for name in ttfont.getGlyphOrder():
        pen = OutlinePen(glyph_set)
        glyph_set[name].draw(pen)
        advance, _ = hmtx[name]
        font.add_glyph(Glyph(name, pen.commands, advance, unicodes.get(name, ())))

    logger.debug("from_ttfont: %d glyphs", len(font))
    return font


def decode(data: bytes) -> Font:
    """Parse binary OpenType/TrueType data into a Font."""
    return from_ttfont(TTFont(io.BytesIO(data)))


def from_ufo(ufo: defcon.Font) -> Font:
    """
    Build a Font from a defcon Font.

    Args:
        ufo: defcon Font. Kept as Font.source for write-back.
    """
    info = ufo.info
    font = Font(
        units_per_em=info.unitsPerEm or 1000,
        ascender=info.ascender or 0,
        descender=info.descender or 0,
        weight_class=info.openTypeOS2WeightClass,
        x_height=info.xHeight,
        cap_height=info.capHeight,
        source=ufo,
    )

    order = list(ufo.glyphOrder or [])
    order += sorted(name for name in ufo.keys() if name not in set(order))
    for name in order:
        if name not in ufo:
            continue
        ufo_glyph = ufo[name]
        pen = OutlinePen(ufo)
        ufo_glyph.draw(pen)
        font.add_glyph(
            Glyph(name, pen.commands, ufo_glyph.width or 0, ufo_glyph.unicodes)
        )

    logger.debug("from_ufo: %d glyphs", len(font))
    return font


def read_ufo(path: str) -> Font:
    """
    Open a UFO directory with defcon and build a Font from it.

    Save the result with font.source.save() after write_back().
    """
    return from_ufo(defcon.Font(path))


# -----------------------------------------------------------------------------
# Writing
# -----------------------------------------------------------------------------


def _write_glyf(font: Font, ttfont: TTFont):
    glyf = ttfont["glyf"]
    hmtx = ttfont["hmtx"]
    shifts = {glyph.name: round_half_up(glyph.x_shift) for glyph in font}

    names = [g.name for g in font if g.name in glyf.glyphs]
    simple = [n for n in names if not glyf[n].isComposite()]
    composite = [n for n in names if glyf[n].isComposite()]

    # Simple glyphs first so composite bounds see the moved bases
    for name in simple + composite:
        tt_glyph = glyf[name]
        dx = shifts[name]
        if tt_glyph.isComposite():
            for component in tt_glyph.components:
                offset = dx - shifts.get(component.glyphName, 0)
                if offset and hasattr(component, "x"):
                    component.x += offset
        elif dx and tt_glyph.numberOfContours > 0:
            tt_glyph.coordinates.translate((dx, 0))
        tt_glyph.recalcBounds(glyf)
        lsb = getattr(tt_glyph, "xMin", 0) if tt_glyph.numberOfContours else 0
        hmtx[name] = (round_half_up(font[name].advance_width), lsb)


def _write_cff(font: Font, ttfont: TTFont):
    top_dict = ttfont["CFF "].cff.topDictIndex[0]
    char_strings = top_dict.CharStrings
    glyph_set = ttfont.getGlyphSet()
    hmtx = ttfont["hmtx"]

    for glyph in font:
        if glyph.name not in char_strings:
            continue
        advance = round_half_up(glyph.advance_width)
        old_advance, _ = hmtx[glyph.name]
        # Charstrings carry their own width, so a new advance means a redraw
        if abs(glyph.x_shift) > 0 or advance != old_advance:
            old = char_strings[glyph.name]
            private = old.private
            width = None
            if advance != getattr(private, "defaultWidthX", 0):
                width = advance - getattr(private, "nominalWidthX", 0)
            pen = T2CharStringPen(width, None)
            glyph_set[glyph.name].draw(
                TransformPen(pen, (1, 0, 0, 1, glyph.x_shift, 0))
            )
            char_strings[glyph.name] = pen.getCharString(
                private=private, globalSubrs=old.globalSubrs
            )
        lsb = 0 if glyph.is_empty else round_half_up(glyph.bounds.x_min)
        hmtx[glyph.name] = (advance, lsb)


def _write_ufo(font: Font, ufo: defcon.Font):
    shifts = {glyph.name: glyph.x_shift for glyph in font}
    for glyph in font:
        if glyph.name not in ufo:
            continue
        ufo_glyph = ufo[glyph.name]
        dx = shifts[glyph.name]
        if dx:
            ufo_glyph.move((dx, 0))
        for component in ufo_glyph.components:
            base_shift = shifts.get(component.baseGlyph, 0)
            if base_shift:
                component.move((-base_shift, 0))
        ufo_glyph.width = glyph.advance_width


def write_back(font: Font) -> Any:
    """
    Apply the Font's metrics and horizontal shifts to its source.

    After a successful write the glyph shifts are reset, so calling
    write_back() again does not move the source twice.

    Args:
        font: Font created by from_ttfont(), decode() or from_ufo().

    Returns:
        The updated source object.

    Raises:
        FontDataError: If the font has no source, the source is neither
            a TTFont nor a defcon Font, or it uses an outline format that
            cannot be written back.
    """
    source = font.source
    if source is None:
        raise FontDataError("Font has no source to write back to")

    if isinstance(source, TTFont):
        if "glyf" in source:
            _write_glyf(font, source)
        elif "CFF " in source:
            _write_cff(font, source)
        else:
            raise FontDataError("Only glyf and CFF outlines can be written back")
    elif isinstance(source, defcon.Font):
        _write_ufo(font, source)
    else:
        raise FontDataError(f"Cannot write back to {type(source).__name__}")

    for glyph in font:
        glyph.x_shift = 0
    logger.debug("write_back: %d glyphs written", len(font))
    return source


def encode(font: Font) -> bytes:
    """
    Write the Font back into its binary source and serialize it.

    Raises:
        FontDataError: If the source is not a TTFont.
    """
    if not isinstance(font.source, TTFont):
        raise FontDataError("encode() needs a font decoded from binary data")
    ttfont = write_back(font)
    buffer = io.BytesIO()
    ttfont.save(buffer)
    return buffer.getvalue()
