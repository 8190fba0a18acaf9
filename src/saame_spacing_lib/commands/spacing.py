"""
Spacing Commands.

Undoable wrappers around the spacing operations.

Commands:
    - SetSideBearingsCommand: Set one character's side bearings
    - ApplyTracyCommand: Space the font with the Tracy method
    - ApplySousaCommand: Space the font with the Sousa method
    - CleanMetricsCommand: Reset side bearings to the bare outlines

Undo restores a snapshot of the outline and metrics of every glyph the
command could touch, taken in execute().

Example:
    >>> from saame_spacing_lib import SpacingEditor, ApplyTracyCommand
    >>>
    >>> editor = SpacingEditor(font)
    >>> editor.execute(ApplyTracyCommand(settings))
    >>> editor.undo()
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, field

from ..geometry import clean_metrics, set_side_bearings
from ..models import Font, Glyph
from ..settings import SousaSettings, TracySettings
from ..sousa import apply_sousa_method
from ..tracy import apply_tracy_method
from .base import Command, CommandResult


def _save_glyph_state(glyph: Glyph) -> dict:
    """Save the current state of a glyph for undo."""
    return {
        'commands': list(glyph.commands),
        'advance_width': glyph.advance_width,
        'left_side_bearing': glyph.left_side_bearing,
        'x_shift': glyph.x_shift,
    }


def _restore_glyph_state(glyph: Glyph, state: dict):
    """Restore a glyph to a previous state."""
    glyph.commands = list(state['commands'])
    glyph.advance_width = state['advance_width']
    glyph.left_side_bearing = state['left_side_bearing']
    glyph.x_shift = state['x_shift']
    glyph.invalidate_bounds()


class _FontSnapshotCommand(Command):
    """
    Command that snapshots every glyph before running.

    Subclasses implement _apply().
    """

    _previous_state: dict[str, dict]

    @abstractmethod
    def _apply(self, font: Font) -> CommandResult:
        """Run the operation after the snapshot has been taken."""

    def execute(self, font: Font) -> CommandResult:
        self._previous_state = {g.name: _save_glyph_state(g) for g in font}
        return self._apply(font)

    def undo(self, font: Font) -> CommandResult:
        for name, state in self._previous_state.items():
            if name in font:
                _restore_glyph_state(font[name], state)
        return CommandResult.ok(f"Undid: {self.description}")


@dataclass
class SetSideBearingsCommand(Command):
    """
    Command to set the side bearings of one character's glyph.

    Attributes:
        char: Character whose glyph is modified.
        left: Target left side bearing, or None to keep it.
        right: Target right side bearing, or None to keep it.

    Example:
        >>> cmd = SetSideBearingsCommand('n', left=60, right=65)
        >>> editor.execute(cmd)
    """

    char: str
    left: float | None = None
    right: float | None = None
    _previous_state: dict = field(default_factory=dict, repr=False, compare=False)

    @property
    def description(self) -> str:
        return f"Set side bearings {self.char} = ({self.left}, {self.right})"

    def execute(self, font: Font) -> CommandResult:
        """
        Set the side bearings and remember the glyph for undo.

        Args:
            font: Font holding the character's glyph.

        Returns:
            CommandResult; an error result when the character has no
            glyph, in which case nothing is changed.
        """
        glyph = font.char_to_glyph(self.char)
        if glyph is None:
            return CommandResult.error(f"No glyph for '{self.char}'")
        self._previous_state = _save_glyph_state(glyph)
        set_side_bearings(glyph, self.left, self.right)
        return CommandResult.ok(self.description)

    def undo(self, font: Font) -> CommandResult:
        """Restore the glyph's outline, advance and shift."""
        glyph = font.char_to_glyph(self.char)
        if glyph is not None and self._previous_state:
            _restore_glyph_state(glyph, self._previous_state)
        return CommandResult.ok(f"Undid: {self.description}")


@dataclass
class ApplyTracyCommand(_FontSnapshotCommand):
    """
    Command to apply the Tracy method.

    Every glyph is snapshotted first, so undo() also reverts letters
    that an override moved.

    Attributes:
        settings: Masters and overrides to space with.

    Example:
        >>> settings = create_tracy_settings(font)
        >>> result = editor.execute(ApplyTracyCommand(settings))
        >>> result.data
        52

    The result data is the number of glyphs modified.
    """

    settings: TracySettings
    _previous_state: dict[str, dict] = field(
        default_factory=dict, repr=False, compare=False
    )

    @property
    def description(self) -> str:
        return "Apply Tracy spacing"

    def _apply(self, font: Font) -> CommandResult:
        count = apply_tracy_method(font, self.settings)
        return CommandResult.ok(f"{self.description}: {count} glyphs", data=count)


@dataclass
class ApplySousaCommand(_FontSnapshotCommand):
    """
    Command to apply the Sousa method.

    Attributes:
        settings: Masters, groups and overrides to space with.

    Example:
        >>> settings = create_sousa_settings(font)
        >>> editor.execute(ApplySousaCommand(settings))

    The result data is the number of glyph updates performed; a
    master that is also grouped counts twice.
    """

    settings: SousaSettings
    _previous_state: dict[str, dict] = field(
        default_factory=dict, repr=False, compare=False
    )

    @property
    def description(self) -> str:
        return "Apply Sousa spacing"

    def _apply(self, font: Font) -> CommandResult:
        count = apply_sousa_method(font, self.settings)
        return CommandResult.ok(f"{self.description}: {count} glyphs", data=count)


@dataclass
class CleanMetricsCommand(_FontSnapshotCommand):
    """
    Command to reset every glyph to zero side bearings.

    The space glyph keeps its advance. The result data is the number
    of glyphs reset.
    """

    _previous_state: dict[str, dict] = field(
        default_factory=dict, repr=False, compare=False
    )

    @property
    def description(self) -> str:
        return "Clean metrics"

    def _apply(self, font: Font) -> CommandResult:
        count = clean_metrics(font)
        return CommandResult.ok(f"{self.description}: {count} glyphs", data=count)
