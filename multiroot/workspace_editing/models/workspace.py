"""Workspace data models.

A workspace configuration is a small JSON document listing the folders of a
multi-root workspace -- analogous to a VS Code ``.code-workspace`` file::

    {
      "id": "5f0c...",
      "folders": ["file:///home/user/a", "file:///home/user/b"]
    }

Only ``folders`` is managed here; any other keys a user adds are preserved
by keyed edits.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from multiroot.workspace_editing.models.roots import Root

FOLDERS_KEY = "folders"
"""Top-level key holding the ordered list of canonical root strings."""


class Workspace(BaseModel):
    """Snapshot of the current workspace as seen by the context provider."""

    roots: list[Root] = Field(default_factory=list)
    configuration: Path | None = None
    """Path of the workspace configuration file, if one is materialized."""


class WorkspaceConfiguration(BaseModel):
    """Workspace configuration file payload."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    folders: list[str] = Field(default_factory=list, description="Canonical roots, order-preserving, unique")


class JSONEdit(BaseModel):
    """A single edit applied to a JSON document.

    An empty ``key`` replaces the whole document with ``value``; otherwise
    only the top-level ``key`` is replaced.
    """

    key: str = ""
    value: Any = None

    @property
    def replaces_document(self) -> bool:
        return not self.key
