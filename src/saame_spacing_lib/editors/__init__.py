"""
Editors Package.

Editor classes that run commands and keep undo/redo history.

Example:
    >>> from saame_spacing_lib.editors import SpacingEditor
    >>>
    >>> editor = SpacingEditor(font)
    >>> editor.execute(command)
    >>> editor.undo()
    >>> editor.redo()
"""

from .spacing import SpacingEditor

__all__ = [
    "SpacingEditor",
]
