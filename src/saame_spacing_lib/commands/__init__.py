"""
Commands Package.

Undoable spacing operations.

Commands follow the Command Pattern, providing:
- execute(): Perform the operation
- undo(): Reverse the operation
- description: Human-readable description for UI

Available Commands:
    - SetSideBearingsCommand: Set one character's side bearings
    - ApplyTracyCommand: Apply the Tracy method
    - ApplySousaCommand: Apply the Sousa method
    - CleanMetricsCommand: Reset side bearings to the bare outlines
"""

from .base import Command, CommandResult
from .spacing import (
    ApplySousaCommand,
    ApplyTracyCommand,
    CleanMetricsCommand,
    SetSideBearingsCommand,
)

__all__ = [
    # Base
    "Command",
    "CommandResult",
    # Spacing
    "SetSideBearingsCommand",
    "ApplyTracyCommand",
    "ApplySousaCommand",
    "CleanMetricsCommand",
]
