"""Collaborator interfaces consumed by the editing service.

The editing service decides *what* should happen to the root set; these
protocols do the actual work: reading the current workspace, writing JSON,
asking the user, and opening a window.  Hosts provide implementations; the
local ones live in ``host.local`` and ``host.console``.

Every method that may suspend on I/O or on the user is async.  Context reads
are synchronous -- the provider is expected to answer from state it already
holds (or a cheap local read).
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from multiroot.workspace_editing.models.enums import Severity
from multiroot.workspace_editing.models.workspace import JSONEdit, Workspace


@runtime_checkable
class WorkspaceContextProvider(Protocol):
    """Current workspace state of the running application."""

    def has_workspace(self) -> bool:
        """Whether a single-folder workspace is open."""
        ...

    def get_workspace(self) -> Workspace:
        """Current roots and, if materialized, the configuration file."""
        ...


@runtime_checkable
class EnvironmentProvider(Protocol):
    """Application environment: release channel and settings directory."""

    app_quality: str
    app_settings_home: Path


@runtime_checkable
class JSONConfigurationWriter(Protocol):
    """Applies edits to JSON configuration files."""

    async def write(self, target: Path, edit: JSONEdit, create_if_missing: bool) -> None:
        """Apply ``edit`` to ``target``.

        An empty ``edit.key`` replaces the whole document.  Raises
        ``FileNotFoundError`` if ``target`` is missing and
        ``create_if_missing`` is false.
        """
        ...


@runtime_checkable
class ChoicePrompt(Protocol):
    """Asks the user to pick one of several options."""

    async def choose(
        self,
        severity: Severity,
        message: str,
        options: Sequence[str],
        default_index: int,
    ) -> int | None:
        """Return the chosen option index, or ``None`` if dismissed."""
        ...


@runtime_checkable
class WindowOpener(Protocol):
    """Opens a new application window for workspace configurations."""

    async def open_window(self, configurations: Sequence[Path]) -> None: ...
