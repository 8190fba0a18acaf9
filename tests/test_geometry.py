"""Tests for the side bearing mutation primitive."""

import pytest

from saame_spacing_lib.geometry import clean_metrics, set_side_bearings, translate_glyph
from saame_spacing_lib.metrics import raw_side_bearings
from saame_spacing_lib.models import Glyph

from .mocks import create_test_font, ellipse_commands, make_space, rect_commands


def rect_glyph():
    return Glyph("H", rect_commands(50, 0, 450, 700), 500, unicodes=[0x48])


class TestSetLeft:
    """Setting the left side bearing."""

    def test_shifts_outline(self):
        glyph = rect_glyph()
        set_side_bearings(glyph, 80, None)

        assert glyph.bounds.x_min == 80
        assert glyph.bounds.x_max == 480
        assert glyph.left_side_bearing == 80

    def test_keeps_advance_width(self):
        glyph = rect_glyph()
        set_side_bearings(glyph, 80, None)

        assert glyph.advance_width == 500
        assert raw_side_bearings(glyph) == (80, 20)

    def test_negative_left(self):
        glyph = rect_glyph()
        set_side_bearings(glyph, -20, None)
        assert glyph.bounds.x_min == -20

    def test_negligible_shift_leaves_outline(self):
        glyph = rect_glyph()
        before = list(glyph.commands)

        set_side_bearings(glyph, 50.0005, None)

        assert glyph.commands == before
        assert glyph.x_shift == 0

    def test_every_point_moves(self):
        glyph = Glyph("o", ellipse_commands(100, 0, 500, 500), 600)
        before = [pt for c in glyph.commands for pt in c.points]

        set_side_bearings(glyph, 60, None)

        after = [pt for c in glyph.commands for pt in c.points]
        assert len(after) == len(before)
        for (x0, y0), (x1, y1) in zip(before, after):
            assert x1 == pytest.approx(x0 - 40)
            assert y1 == y0


class TestSetRight:
    """Setting the right side bearing."""

    def test_sets_advance(self):
        glyph = rect_glyph()
        set_side_bearings(glyph, None, 70)

        assert glyph.advance_width == 520
        assert glyph.bounds.x_min == 50

    def test_right_after_left_uses_shifted_bounds(self):
        glyph = rect_glyph()
        set_side_bearings(glyph, 80, 60)

        assert glyph.advance_width == 480 + 60
        assert raw_side_bearings(glyph) == (80, 60)

    def test_advance_never_negative(self):
        glyph = rect_glyph()
        set_side_bearings(glyph, 0, -1000)
        assert glyph.advance_width == 0


class TestSpecialCases:
    """Empty glyphs, missing glyphs and no-op calls."""

    def test_empty_glyph_right_sets_advance(self):
        space = make_space(250)
        set_side_bearings(space, 30, 180)

        assert space.advance_width == 180
        assert space.commands == []
        assert raw_side_bearings(space) == (0, 180)

    def test_empty_glyph_left_is_ignored(self):
        space = make_space(250)
        set_side_bearings(space, 30, None)
        assert space.advance_width == 250

    def test_empty_glyph_advance_never_negative(self):
        space = make_space(250)
        set_side_bearings(space, None, -5)
        assert space.advance_width == 0

    def test_none_glyph_is_ignored(self):
        set_side_bearings(None, 10, 10)

    def test_both_none_is_noop(self):
        glyph = rect_glyph()
        before = (list(glyph.commands), glyph.advance_width)
        set_side_bearings(glyph, None, None)
        assert (glyph.commands, glyph.advance_width) == before


class TestIdempotence:
    """Repeating a call with the same targets changes nothing."""

    @pytest.mark.parametrize("left,right", [(80, 60), (0, 0), (-15, 120), (33.5, 12.25)])
    def test_second_call_is_noop(self, left, right):
        glyph = Glyph("o", ellipse_commands(100, 0, 500, 500), 600)
        set_side_bearings(glyph, left, right)
        bounds = glyph.bounds
        advance = glyph.advance_width

        set_side_bearings(glyph, left, right)

        assert glyph.bounds.x_min == pytest.approx(bounds.x_min, abs=0.001)
        assert glyph.bounds.x_max == pytest.approx(bounds.x_max, abs=0.001)
        assert glyph.advance_width == pytest.approx(advance, abs=0.001)

    def test_only_target_glyph_changes(self):
        font = create_test_font("Hn")
        n_before = list(font["n"].commands)

        set_side_bearings(font["H"], 10, 10)

        assert font["n"].commands == n_before
        assert font["n"].advance_width == 500


class TestTranslateGlyph:
    """The shared translation helper."""

    def test_reports_movement(self):
        glyph = rect_glyph()
        assert translate_glyph(glyph, 5) is True
        assert translate_glyph(glyph, 0.0001) is False
        assert glyph.bounds.x_min == 55


class TestCleanMetrics:
    """Resetting side bearings to the bare outline."""

    def test_zeroes_side_bearings(self):
        font = create_test_font("Hn")
        count = clean_metrics(font)

        assert count == 2
        for name in ("H", "n"):
            lsb, rsb = raw_side_bearings(font[name])
            assert lsb == 0
            assert rsb == 0
            assert font[name].advance_width == 400

    def test_skips_space(self):
        font = create_test_font("H")
        clean_metrics(font)
        assert font["space"].advance_width == 250

    def test_other_empty_glyphs_get_zero_advance(self):
        font = create_test_font("H")
        font.add_glyph(Glyph("blank", [], 300))
        clean_metrics(font)
        assert font["blank"].advance_width == 0
