"""
Command Base.

Abstract Command and the CommandResult value every command returns.

A command captures one spacing operation together with what it needs
to reverse it, so the editor can keep an undo history of font changes.

Notes:
    - Parameters are fixed when the command is built; only the undo
      snapshot changes afterwards.
    - The Font is passed to execute() and undo() rather than stored.
    - execute() may run again on the same font for redo.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ..models import Font


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of execute() or undo().

    Attributes:
        success: False when the command could not run.
        message: Text for a status bar or log line.
        data: Command specific payload, such as a glyph count.

    Example:
        >>> result = SetSideBearingsCommand('n', 60, 65).execute(font)
        >>> result.success
        True
    """

    success: bool
    message: str = ""
    data: Any | None = None

    @classmethod
    def ok(cls, message: str = "", data: Any = None) -> CommandResult:
        return cls(True, message, data)

    @classmethod
    def error(cls, message: str, data: Any = None) -> CommandResult:
        return cls(False, message, data)


class Command(ABC):
    """
    Undoable operation on a Font.

    Concrete commands provide description, execute() and undo().
    """

    @property
    @abstractmethod
    def description(self) -> str:
        """Short label shown in undo/redo menus."""

    @abstractmethod
    def execute(self, font: Font) -> CommandResult:
        """
        Run the command, recording the state undo() will restore.

        Args:
            font: Font to modify in place.
        """

    @abstractmethod
    def undo(self, font: Font) -> CommandResult:
        """
        Put the font back as it was before the last execute().

        Args:
            font: The font passed to execute().
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description})"
