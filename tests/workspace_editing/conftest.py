"""Shared fixtures for workspace editing tests.

Collaborators are small fakes (context, environment) or ``AsyncMock``s
(writer, prompt, opener) so each test can assert exactly which
collaborator calls happened.
"""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from multiroot.workspace_editing.managers.applicator import WorkspaceCreator
from multiroot.workspace_editing.managers.editing import WorkspaceEditingService
from multiroot.workspace_editing.managers.materializer import WorkspaceMaterializer
from multiroot.workspace_editing.models.roots import Root
from multiroot.workspace_editing.models.workspace import Workspace


class FakeContext:
    """In-memory context provider that records every call."""

    def __init__(
        self,
        roots: list[Root] | None = None,
        configuration: Path | None = None,
        *,
        single_folder: bool = False,
    ) -> None:
        self.roots = list(roots or [])
        self.configuration = configuration
        self.single_folder = single_folder
        self.calls: list[str] = []

    def has_workspace(self) -> bool:
        self.calls.append("has_workspace")
        return self.single_folder

    def get_workspace(self) -> Workspace:
        self.calls.append("get_workspace")
        return Workspace(roots=list(self.roots), configuration=self.configuration)


@pytest.fixture
def make_context():
    """Factory for ``FakeContext`` instances."""
    return FakeContext


@pytest.fixture
def environment(tmp_path: Path) -> SimpleNamespace:
    return SimpleNamespace(app_quality="insider", app_settings_home=tmp_path / "settings")


@pytest.fixture
def writer() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def prompt() -> AsyncMock:
    """Prompt that answers "No" (the default option)."""
    return AsyncMock(return_value=1)


@pytest.fixture
def opener() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def make_service(environment: SimpleNamespace, writer: AsyncMock, prompt: AsyncMock, opener: AsyncMock):
    """Factory building a service around a given context."""

    def _make(context: FakeContext) -> WorkspaceEditingService:
        materializer = WorkspaceMaterializer(environment=environment, writer=SimpleNamespace(write=writer))
        creator = WorkspaceCreator(
            prompt=SimpleNamespace(choose=prompt),
            materializer=materializer,
            opener=SimpleNamespace(open_window=opener),
        )
        return WorkspaceEditingService(
            context=context,
            environment=environment,
            writer=SimpleNamespace(write=writer),
            creator=creator,
        )

    return _make
