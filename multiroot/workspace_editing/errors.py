"""Domain exceptions raised by workspace editing.

An unsupported operation (single-folder workspace open, or a release channel
without multi-root support) is not an error: the editing service returns
without doing anything.  Everything below propagates to the caller with the
collaborator's original exception chained as ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path


class WorkspaceEditingError(RuntimeError):
    """Base class for failures while editing workspace roots."""


class PersistenceError(WorkspaceEditingError):
    """Writing the ``folders`` of an existing configuration failed."""

    def __init__(self, target: Path) -> None:
        super().__init__(f"Failed to update workspace configuration '{target}'")
        self.target = target


class PromptCancelledError(WorkspaceEditingError):
    """The create-workspace confirmation was dismissed or failed."""

    def __init__(self) -> None:
        super().__init__("Creating a new workspace was cancelled")


class MaterializationError(WorkspaceEditingError):
    """A new workspace configuration could not be created."""

    def __init__(self, target: Path) -> None:
        super().__init__(f"Failed to create workspace configuration '{target}'")
        self.target = target


class WindowOpenError(WorkspaceEditingError):
    """The new workspace configuration was written but could not be opened."""

    def __init__(self, target: Path) -> None:
        super().__init__(f"Failed to open workspace '{target}'")
        self.target = target
