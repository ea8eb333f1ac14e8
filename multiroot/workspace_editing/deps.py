"""Service wiring.

Builds a ``WorkspaceEditingService`` from settings plus the collaborators a
host wants to supply.  Anything not supplied falls back to the local
implementation::

    service = create_editing_service(
        get_settings(),
        context=LocalWorkspaceContext(configuration=Path("team.code-workspace")),
    )
    await service.add_roots([Root.file("/srv/shared-lib")])
"""

from __future__ import annotations

from multiroot.workspace_editing.host.base import (
    ChoicePrompt,
    EnvironmentProvider,
    JSONConfigurationWriter,
    WindowOpener,
    WorkspaceContextProvider,
)
from multiroot.workspace_editing.host.console import CommandWindowOpener, ConsoleChoicePrompt
from multiroot.workspace_editing.host.local import LocalJSONWriter
from multiroot.workspace_editing.managers.applicator import WorkspaceCreator
from multiroot.workspace_editing.managers.editing import WorkspaceEditingService
from multiroot.workspace_editing.managers.materializer import WorkspaceMaterializer
from multiroot.workspace_editing.settings import MultirootSettings


def create_editing_service(
    settings: MultirootSettings,
    *,
    context: WorkspaceContextProvider,
    environment: EnvironmentProvider | None = None,
    writer: JSONConfigurationWriter | None = None,
    prompt: ChoicePrompt | None = None,
    opener: WindowOpener | None = None,
) -> WorkspaceEditingService:
    """Wire the editing service.  ``settings`` is the default environment."""
    environment = environment or settings
    writer = writer or LocalJSONWriter()

    materializer = WorkspaceMaterializer(
        environment=environment,
        writer=writer,
        extension=settings.workspace_extension,
    )
    creator = WorkspaceCreator(
        prompt=prompt or ConsoleChoicePrompt(),
        materializer=materializer,
        opener=opener or CommandWindowOpener(settings.open_command),
    )
    return WorkspaceEditingService(
        context=context,
        environment=environment,
        writer=writer,
        creator=creator,
    )
