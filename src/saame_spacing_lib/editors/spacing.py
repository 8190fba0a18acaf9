"""
Spacing Editor.

This module provides the SpacingEditor class, which runs spacing
commands against one font and keeps an undo/redo history.

Example:
    >>> from saame_spacing_lib import SpacingEditor, ApplySousaCommand
    >>>
    >>> editor = SpacingEditor(font)
    >>> editor.execute(ApplySousaCommand(settings))
    >>> editor.undo_description
    'Apply Sousa spacing'
    >>> editor.undo()

Callbacks:
    >>> def on_change(command, result):
    ...     refresh_preview()
    >>>
    >>> editor.on_change = on_change
    >>> editor.on_undo = on_change
    >>> editor.on_redo = on_change
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..commands.base import Command, CommandResult
from ..models import Font

logger = logging.getLogger(__name__)


class SpacingEditor:
    """
    Editor for spacing operations with undo/redo support.

    The editor is bound to a single Font. Every command passed to
    execute() runs against it, and successful commands are kept so
    they can be undone and redone in order.

    Attributes:
        font: Font all commands run against.
        on_change: Optional callback called after successful execute().
            Signature: (command: Command, result: CommandResult) -> None
        on_undo: Optional callback called after undo().
        on_redo: Optional callback called after redo().

    Example:
        Spacing a font and stepping back:

        >>> editor = SpacingEditor(font)
        >>>
        >>> # Space with the Tracy method, then tweak one letter
        >>> editor.execute(ApplyTracyCommand(settings))
        >>> editor.execute(SetSideBearingsCommand('a', left=52))
        >>>
        >>> # Back to the plain Tracy result
        >>> editor.undo()

    Note:
        Whole-font commands snapshot every glyph, so a long history of
        them holds several copies of the outlines.
    """

    def __init__(self, font: Font):
        """
        Initialize the SpacingEditor.

        Args:
            font: Font the editor will modify.
        """
        self.font = font

        # Executed commands, oldest first, and undone ones
        self._history: list[Command] = []
        self._redo_stack: list[Command] = []

        # Listeners
        self.on_change: Callable[[Command, CommandResult], None] | None = None
        self.on_undo: Callable[[Command, CommandResult], None] | None = None
        self.on_redo: Callable[[Command, CommandResult], None] | None = None

    def execute(self, command: Command) -> CommandResult:
        """
        Run a command against the font and record it.

        On success the command joins the undo history, the redo stack
        is cleared and on_change is notified.

        Args:
            command: The command to execute.

        Returns:
            CommandResult from the command execution.

        Example:
            >>> result = editor.execute(SetSideBearingsCommand('n', 60, 65))
            >>> result.success
            True

        Note:
            Failed commands are not added to history and leave the redo
            stack untouched.
        """
        result = command.execute(self.font)

        if result.success:
            self._history.append(command)
            self._redo_stack.clear()
            logger.debug("executed: %s", command.description)
            if self.on_change:
                self.on_change(command, result)
        else:
            logger.debug("failed: %s (%s)", command.description, result.message)

        return result

    def undo(self) -> CommandResult | None:
        """
        Reverse the most recent command.

        The command's undo() restores the font and the command moves to
        the redo stack.

        Returns:
            CommandResult from the undo, or None if history is empty.

        Example:
            >>> if editor.can_undo:
            ...     editor.undo()
        """
        if not self._history:
            return None

        command = self._history.pop()
        result = command.undo(self.font)
        self._redo_stack.append(command)

        if self.on_undo:
            self.on_undo(command, result)
        return result

    def redo(self) -> CommandResult | None:
        """
        Run the most recently undone command again.

        Returns:
            CommandResult from the re-execution, or None if there is
            nothing to redo.

        Example:
            >>> if editor.can_redo:
            ...     editor.redo()
        """
        if not self._redo_stack:
            return None

        command = self._redo_stack.pop()
        result = command.execute(self.font)
        self._history.append(command)

        if self.on_redo:
            self.on_redo(command, result)
        return result

    @property
    def can_undo(self) -> bool:
        """True if there is a command to undo."""
        return len(self._history) > 0

    @property
    def can_redo(self) -> bool:
        """True if there is an undone command to redo."""
        return len(self._redo_stack) > 0

    @property
    def undo_description(self) -> str | None:
        """
        Description of the command undo() would reverse.

        Example:
            >>> menu_item.title = f"Undo {editor.undo_description}"
        """
        if self._history:
            return self._history[-1].description
        return None

    @property
    def redo_description(self) -> str | None:
        """Description of the command redo() would repeat."""
        if self._redo_stack:
            return self._redo_stack[-1].description
        return None

    @property
    def history_count(self) -> int:
        return len(self._history)

    @property
    def redo_count(self) -> int:
        return len(self._redo_stack)

    def clear_history(self):
        """
        Clear all undo/redo history.

        The font keeps its current state. Use after saving or loading
        a different font.
        """
        self._history.clear()
        self._redo_stack.clear()

    def get_history(self) -> list[str]:
        """
        Descriptions of all commands in history, oldest first.

        Returns:
            List of description strings.
        """
        return [cmd.description for cmd in self._history]

    def __repr__(self) -> str:
        return (
            f"SpacingEditor(history={len(self._history)}, "
            f"redo={len(self._redo_stack)})"
        )
