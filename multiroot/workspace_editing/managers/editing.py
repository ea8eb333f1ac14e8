"""Root-set reconciliation for multi-root workspaces.

``add_roots`` / ``remove_roots`` compute the desired root set and hand it to
one reconcile step:

1. Read the current roots from the context provider.
2. Canonicalize and deduplicate the desired roots (``validate_roots``).
3. Same as current (order-sensitive): nothing to do.
4. Non-empty and a configuration exists: replace its ``folders``.
5. Non-empty and no configuration yet: create a new workspace (prompt,
   materialize, open window).
6. Empty: nothing is written.  Removing every root has no defined policy
   yet (delete the file, keep an empty list, or fall back to single-folder
   mode), so it is left to the host.

No locking happens here.  Between reading the current roots and writing
new ones another reconciliation may run; hosts that allow concurrent calls
must serialize them per workspace.
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from multiroot.workspace_editing.errors import PersistenceError
from multiroot.workspace_editing.host.base import (
    EnvironmentProvider,
    JSONConfigurationWriter,
    WorkspaceContextProvider,
)
from multiroot.workspace_editing.managers.applicator import WorkspaceCreator
from multiroot.workspace_editing.managers.validator import validate_roots
from multiroot.workspace_editing.models.enums import AppQuality
from multiroot.workspace_editing.models.roots import Root
from multiroot.workspace_editing.models.workspace import FOLDERS_KEY, JSONEdit


class WorkspaceEditingService:
    """Adds and removes workspace roots and persists the result."""

    def __init__(
        self,
        *,
        context: WorkspaceContextProvider,
        environment: EnvironmentProvider,
        writer: JSONConfigurationWriter,
        creator: WorkspaceCreator,
    ) -> None:
        self._context = context
        self._environment = environment
        self._writer = writer
        self._creator = creator

    def supported(self) -> bool:
        """Whether roots can be edited right now.

        Evaluated on every call: both the open workspace and the release
        channel may change during the lifetime of the service.
        """
        if self._context.has_workspace():
            return False  # single-folder workspace already open
        return self._environment.app_quality != AppQuality.STABLE

    async def add_roots(self, roots_to_add: Sequence[Root]) -> None:
        if not self.supported():
            logger.debug("Root editing not supported, ignoring add of {} root(s)", len(roots_to_add))
            return

        roots = self._context.get_workspace().roots
        await self._reconcile([*roots, *roots_to_add])

    async def remove_roots(self, roots_to_remove: Sequence[Root]) -> None:
        if not self.supported():
            logger.debug("Root editing not supported, ignoring removal of {} root(s)", len(roots_to_remove))
            return

        roots = self._context.get_workspace().roots
        removed = {root.canonical() for root in roots_to_remove}
        await self._reconcile([root for root in roots if root.canonical() not in removed])

    async def _reconcile(self, new_roots: Sequence[Root]) -> None:
        workspace = self._context.get_workspace()
        current = [root.canonical() for root in workspace.roots]
        folders = validate_roots(new_roots)

        if folders == current:
            logger.debug("Workspace roots unchanged")
            return

        if not folders:
            logger.info("All workspace roots removed, leaving configuration untouched")
            return

        if workspace.configuration is None:
            logger.info("No workspace configuration yet, creating one for {} root(s)", len(folders))
            await self._creator.create_workspace(folders)
            return

        try:
            await self._writer.write(
                workspace.configuration,
                JSONEdit(key=FOLDERS_KEY, value=folders),
                create_if_missing=True,
            )
        except Exception as exc:
            raise PersistenceError(workspace.configuration) from exc
        logger.info("Updated {} ({} root(s))", workspace.configuration, len(folders))
