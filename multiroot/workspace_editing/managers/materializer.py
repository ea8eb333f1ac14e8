"""Creation of new workspace configuration files.

A new configuration gets a fresh UUID and lives in the application settings
directory::

    {app_settings_home}/{id}.{extension}

Its initial content is ``{"id": ..., "folders": [...]}``, written as a whole
document (never patched into an existing file).
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from multiroot.workspace_editing.errors import MaterializationError
from multiroot.workspace_editing.host.base import EnvironmentProvider, JSONConfigurationWriter
from multiroot.workspace_editing.models.workspace import JSONEdit, WorkspaceConfiguration

DEFAULT_WORKSPACE_EXTENSION = "code-workspace"


class WorkspaceMaterializer:
    def __init__(
        self,
        *,
        environment: EnvironmentProvider,
        writer: JSONConfigurationWriter,
        extension: str = DEFAULT_WORKSPACE_EXTENSION,
    ) -> None:
        self._environment = environment
        self._writer = writer
        self._extension = extension.lstrip(".")

    def configuration_path(self, workspace_id: str) -> Path:
        return Path(self._environment.app_settings_home) / f"{workspace_id}.{self._extension}"

    async def materialize(self, folders: Sequence[str]) -> Path:
        """Create a new workspace configuration and return its path.

        Raises ``MaterializationError`` if the file could not be written.
        """
        workspace_id = str(uuid.uuid4())
        target = self.configuration_path(workspace_id)
        payload = WorkspaceConfiguration(id=workspace_id, folders=list(folders))

        try:
            await self._writer.write(
                target,
                JSONEdit(key="", value=payload.model_dump(mode="json")),
                create_if_missing=True,
            )
        except Exception as exc:
            raise MaterializationError(target) from exc

        logger.info("Created workspace configuration {} with {} folder(s)", target, len(payload.folders))
        return target
