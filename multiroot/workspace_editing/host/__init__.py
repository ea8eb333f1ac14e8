"""Collaborator interfaces and their local implementations."""

from multiroot.workspace_editing.host.base import (
    ChoicePrompt,
    EnvironmentProvider,
    JSONConfigurationWriter,
    WindowOpener,
    WorkspaceContextProvider,
)
from multiroot.workspace_editing.host.console import CommandWindowOpener, ConsoleChoicePrompt
from multiroot.workspace_editing.host.local import InvalidWorkspaceFileError, LocalJSONWriter, LocalWorkspaceContext

__all__ = [
    "ChoicePrompt",
    "CommandWindowOpener",
    "ConsoleChoicePrompt",
    "EnvironmentProvider",
    "InvalidWorkspaceFileError",
    "JSONConfigurationWriter",
    "LocalJSONWriter",
    "LocalWorkspaceContext",
    "WindowOpener",
    "WorkspaceContextProvider",
]
