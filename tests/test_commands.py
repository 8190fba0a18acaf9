"""
Tests for Spacing Commands.

Each command is executed and undone directly against a font.
"""

import unittest

from saame_spacing_lib.commands.base import CommandResult
from saame_spacing_lib.commands.spacing import (
    ApplySousaCommand,
    ApplyTracyCommand,
    CleanMetricsCommand,
    SetSideBearingsCommand,
    _FontSnapshotCommand,
)
from saame_spacing_lib.metrics import read_side_bearings
from saame_spacing_lib.settings import SideBearingPair, SousaGroups, SousaSettings, TracySettings

from .mocks import create_test_font, glyph_state

MASTERS = {
    "H": SideBearingPair(80, 80),
    "O": SideBearingPair(90, 90),
    "n": SideBearingPair(60, 65),
    "o": SideBearingPair(55, 55),
}


class TestCommandResult(unittest.TestCase):

    def test_ok(self):
        result = CommandResult.ok("done", data=3)
        self.assertTrue(result.success)
        self.assertEqual(result.data, 3)

    def test_error(self):
        result = CommandResult.error("failed")
        self.assertFalse(result.success)
        self.assertEqual(result.message, "failed")


class TestSnapshotCommandBase(unittest.TestCase):
    """Whole-font commands must provide _apply()."""

    def test_subclass_without_apply_cannot_be_created(self):
        class Incomplete(_FontSnapshotCommand):
            @property
            def description(self):
                return "Incomplete"

        with self.assertRaises(TypeError):
            Incomplete()

    def test_subclass_with_apply_runs_after_snapshot(self):
        class Widen(_FontSnapshotCommand):
            @property
            def description(self):
                return "Widen"

            def _apply(self, font):
                font["H"].advance_width += 10
                return CommandResult.ok(self.description)

        font = create_test_font("H")
        cmd = Widen()
        cmd.execute(font)
        self.assertEqual(font["H"].advance_width, 510)

        cmd.undo(font)
        self.assertEqual(font["H"].advance_width, 500)


class TestSetSideBearingsCommand(unittest.TestCase):
    """Tests for SetSideBearingsCommand."""

    def setUp(self):
        self.font = create_test_font()

    def test_execute(self):
        cmd = SetSideBearingsCommand("n", left=60, right=65)
        result = cmd.execute(self.font)

        self.assertTrue(result.success)
        self.assertEqual(read_side_bearings(self.font, "n"), (60, 65))

    def test_partial(self):
        SetSideBearingsCommand("n", right=10).execute(self.font)
        self.assertEqual(read_side_bearings(self.font, "n"), (50, 10))

    def test_undo(self):
        before = glyph_state(self.font)
        cmd = SetSideBearingsCommand("n", left=60, right=65)
        cmd.execute(self.font)
        result = cmd.undo(self.font)

        self.assertTrue(result.success)
        self.assertEqual(glyph_state(self.font), before)
        self.assertEqual(read_side_bearings(self.font, "n"), (50, 50))

    def test_missing_glyph(self):
        result = SetSideBearingsCommand("1", 10, 10).execute(self.font)
        self.assertFalse(result.success)

    def test_description(self):
        cmd = SetSideBearingsCommand("n", 60, None)
        self.assertEqual(cmd.description, "Set side bearings n = (60, None)")


class TestApplyTracyCommand(unittest.TestCase):
    """Tests for ApplyTracyCommand."""

    def setUp(self):
        self.font = create_test_font()
        self.settings = TracySettings(masters=dict(MASTERS))

    def test_execute(self):
        result = ApplyTracyCommand(self.settings).execute(self.font)

        self.assertTrue(result.success)
        self.assertEqual(result.data, 52)
        self.assertEqual(read_side_bearings(self.font, "V"), (20, 20))

    def test_undo(self):
        before = glyph_state(self.font)
        cmd = ApplyTracyCommand(self.settings)
        cmd.execute(self.font)
        cmd.undo(self.font)

        self.assertEqual(glyph_state(self.font), before)
        self.assertTrue(all(g.x_shift == 0 for g in self.font))


class TestApplySousaCommand(unittest.TestCase):
    """Tests for ApplySousaCommand."""

    def setUp(self):
        self.font = create_test_font()
        self.settings = SousaSettings(
            masters=dict(MASTERS), groups=SousaGroups(group3=["x"])
        )

    def test_execute(self):
        result = ApplySousaCommand(self.settings).execute(self.font)

        self.assertTrue(result.success)
        self.assertEqual(result.data, 5)
        self.assertEqual(read_side_bearings(self.font, "x"), (58, 58))

    def test_undo(self):
        before = glyph_state(self.font)
        cmd = ApplySousaCommand(self.settings)
        cmd.execute(self.font)
        cmd.undo(self.font)

        self.assertEqual(glyph_state(self.font), before)


class TestCleanMetricsCommand(unittest.TestCase):
    """Tests for CleanMetricsCommand."""

    def setUp(self):
        self.font = create_test_font("Hno")

    def test_execute(self):
        result = CleanMetricsCommand().execute(self.font)

        self.assertEqual(result.data, 3)
        self.assertEqual(read_side_bearings(self.font, "H"), (0, 0))
        self.assertEqual(self.font["H"].advance_width, 400)
        self.assertEqual(self.font["space"].advance_width, 250)

    def test_undo(self):
        before = glyph_state(self.font)
        cmd = CleanMetricsCommand()
        cmd.execute(self.font)
        cmd.undo(self.font)

        self.assertEqual(glyph_state(self.font), before)


if __name__ == '__main__':
    unittest.main()
