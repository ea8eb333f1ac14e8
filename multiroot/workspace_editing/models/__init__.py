"""Data models for workspace editing."""

from multiroot.workspace_editing.models.enums import AppQuality, Severity
from multiroot.workspace_editing.models.roots import Root
from multiroot.workspace_editing.models.workspace import (
    FOLDERS_KEY,
    JSONEdit,
    Workspace,
    WorkspaceConfiguration,
)

__all__ = [
    "FOLDERS_KEY",
    # Enums
    "AppQuality",
    "JSONEdit",
    # Roots
    "Root",
    "Severity",
    # Workspace
    "Workspace",
    "WorkspaceConfiguration",
]
