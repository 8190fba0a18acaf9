"""
Test Fonts.

Builders for fonts used across the tests.

Functions:
    rect_commands: Rectangle outline
    ellipse_commands: Cubic ellipse outline with on-curve extrema
    create_test_font: In-memory Font with all Latin letters and space
    create_test_ttf: Binary TrueType font built with fontTools
    create_test_otf: Binary CFF font built with fontTools
    create_test_ufo: defcon font with a base glyph and a composite

Glyph geometry in create_test_font():
    - every letter spans x 50..450 with advance 500 (lsb 50, rsb 50)
    - uppercase is 700 units tall, lowercase 500
    - O, Q, C, G, o, e, c are ellipses, everything else rectangles
"""

from __future__ import annotations

import io

from saame_spacing_lib.models import Font, Glyph

# Bezier handle length for a quarter ellipse
KAPPA = 0.5523

ROUND_TEST_CHARS = "OQCGoec"


def rect_commands(x_min, y_min, x_max, y_max):
    return [
        ("moveTo", ((x_min, y_min),)),
        ("lineTo", ((x_max, y_min),)),
        ("lineTo", ((x_max, y_max),)),
        ("lineTo", ((x_min, y_max),)),
        ("closePath", ()),
    ]


def ellipse_commands(x_min, y_min, x_max, y_max):
    cx = (x_min + x_max) / 2
    cy = (y_min + y_max) / 2
    kx = (x_max - x_min) / 2 * KAPPA
    ky = (y_max - y_min) / 2 * KAPPA
    return [
        ("moveTo", ((cx, y_min),)),
        ("curveTo", ((cx + kx, y_min), (x_max, cy - ky), (x_max, cy))),
        ("curveTo", ((x_max, cy + ky), (cx + kx, y_max), (cx, y_max))),
        ("curveTo", ((cx - kx, y_max), (x_min, cy + ky), (x_min, cy))),
        ("curveTo", ((x_min, cy - ky), (cx - kx, y_min), (cx, y_min))),
        ("closePath", ()),
    ]


def make_glyph(char, x_min=50, x_max=450, advance=500, height=None, name=None):
    """Build a glyph mapped to char."""
    if height is None:
        height = 700 if char.isupper() else 500
    build = ellipse_commands if char in ROUND_TEST_CHARS else rect_commands
    return Glyph(
        name or char,
        build(x_min, 0, x_max, height),
        advance,
        unicodes=[ord(char)],
    )


def make_space(advance=250):
    return Glyph("space", [], advance, unicodes=[0x20])


def create_test_font(chars=None, weight_class=400, with_space=True) -> Font:
    """
    Create a font with one glyph per character.

    Args:
        chars: Characters to include; all 52 Latin letters by default.
        weight_class: OS/2 weight class.
        with_space: Add an empty 'space' glyph.
    """
    if chars is None:
        chars = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    font = Font(units_per_em=1000, ascender=800, descender=-200,
                weight_class=weight_class)
    for char in chars:
        font.add_glyph(make_glyph(char))
    if with_space:
        font.add_glyph(make_space())
    return font


def glyph_state(font: Font) -> dict:
    """Snapshot of every glyph's outline and advance for comparisons."""
    return {g.name: (list(g.commands), g.advance_width) for g in font}


# -----------------------------------------------------------------------------
# Real font objects
# -----------------------------------------------------------------------------


def create_test_ttf() -> bytes:
    """
    Build a small TrueType font.

    Glyphs: .notdef, space (empty, advance 250), H (rect 50..650,
    advance 700), n (rect 40..460, advance 500), o (quadratic ellipse
    100..500, advance 600).
    """
    from fontTools.fontBuilder import FontBuilder
    from fontTools.pens.ttGlyphPen import TTGlyphPen

    def draw_rect(pen, x_min, y_min, x_max, y_max):
        pen.moveTo((x_min, y_min))
        pen.lineTo((x_min, y_max))
        pen.lineTo((x_max, y_max))
        pen.lineTo((x_max, y_min))
        pen.closePath()

    glyphs = {}

    pen = TTGlyphPen(None)
    draw_rect(pen, 50, 0, 450, 700)
    glyphs[".notdef"] = pen.glyph()

    glyphs["space"] = TTGlyphPen(None).glyph()

    pen = TTGlyphPen(None)
    draw_rect(pen, 50, 0, 650, 700)
    glyphs["H"] = pen.glyph()

    pen = TTGlyphPen(None)
    draw_rect(pen, 40, 0, 460, 500)
    glyphs["n"] = pen.glyph()

    pen = TTGlyphPen(None)
    pen.moveTo((300, 0))
    pen.qCurveTo((100, 0), (100, 250))
    pen.qCurveTo((100, 500), (300, 500))
    pen.qCurveTo((500, 500), (500, 250))
    pen.qCurveTo((500, 0), (300, 0))
    pen.closePath()
    glyphs["o"] = pen.glyph()

    advances = {".notdef": 500, "space": 250, "H": 700, "n": 500, "o": 600}

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(list(advances))
    fb.setupCharacterMap({0x20: "space", 0x48: "H", 0x6E: "n", 0x6F: "o"})
    fb.setupGlyf(glyphs)
    glyf = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {name: (adv, getattr(glyf[name], "xMin", 0)) for name, adv in advances.items()}
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Spacing Test", "styleName": "Regular"})
    fb.setupOS2(
        sTypoAscender=800,
        sTypoDescender=-200,
        usWinAscent=800,
        usWinDescent=200,
        usWeightClass=700,
        sxHeight=500,
        sCapHeight=700,
    )
    fb.setupPost()

    buffer = io.BytesIO()
    fb.save(buffer)
    return buffer.getvalue()


def create_test_ufo():
    """
    Build a defcon font.

    Glyphs: H (rect 50..650, advance 700) and Hdot, a composite of H
    with no offset plus a dot above, advance 700.
    """
    from defcon import Font as DefconFont

    ufo = DefconFont()
    ufo.info.unitsPerEm = 1000
    ufo.info.ascender = 800
    ufo.info.descender = -200
    ufo.info.capHeight = 700

    glyph = ufo.newGlyph("H")
    glyph.unicodes = [0x48]
    glyph.width = 700
    pen = glyph.getPen()
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((650, 700))
    pen.lineTo((650, 0))
    pen.closePath()

    composite = ufo.newGlyph("Hdot")
    composite.unicodes = [0x1E22]
    composite.width = 700
    pen = composite.getPen()
    pen.addComponent("H", (1, 0, 0, 1, 0, 0))
    pen.moveTo((300, 750))
    pen.lineTo((300, 850))
    pen.lineTo((400, 850))
    pen.lineTo((400, 750))
    pen.closePath()

    return ufo


def create_test_otf() -> bytes:
    """
    Build a small CFF-flavoured OpenType font.

    Glyphs: .notdef, space (empty, advance 250), H (rect 50..650,
    advance 700).
    """
    from fontTools.fontBuilder import FontBuilder
    from fontTools.pens.t2CharStringPen import T2CharStringPen

    advances = {".notdef": 500, "space": 250, "H": 700}
    rects = {".notdef": (50, 0, 450, 700), "H": (50, 0, 650, 700)}

    char_strings = {}
    for name, advance in advances.items():
        pen = T2CharStringPen(advance, None)
        if name in rects:
            x_min, y_min, x_max, y_max = rects[name]
            pen.moveTo((x_min, y_min))
            pen.lineTo((x_min, y_max))
            pen.lineTo((x_max, y_max))
            pen.lineTo((x_max, y_min))
            pen.closePath()
        char_strings[name] = pen.getCharString()

    fb = FontBuilder(1000, isTTF=False)
    fb.setupGlyphOrder(list(advances))
    fb.setupCharacterMap({0x20: "space", 0x48: "H"})
    fb.setupCFF("SpacingTest-Regular", {"FullName": "Spacing Test"}, char_strings, {})
    fb.setupHorizontalMetrics(
        {name: (adv, rects.get(name, (0,))[0]) for name, adv in advances.items()}
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Spacing Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    buffer = io.BytesIO()
    fb.save(buffer)
    return buffer.getvalue()
