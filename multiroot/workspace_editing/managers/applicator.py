"""Create-new-workspace flow: confirm, materialize, open.

Runs when roots change while no workspace configuration exists yet.  The
user is asked whether settings should be copied from the current window;
the answer is recorded but copying is not implemented, so both answers
lead to the same steps.  Only dismissing the prompt stops the flow.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from multiroot.workspace_editing.errors import PromptCancelledError, WindowOpenError
from multiroot.workspace_editing.host.base import ChoicePrompt, WindowOpener
from multiroot.workspace_editing.managers.materializer import WorkspaceMaterializer
from multiroot.workspace_editing.models.enums import Severity

CREATE_WORKSPACE_MESSAGE = (
    "This action will create a new workspace. Would you like to copy settings from current workspace?"
)
CREATE_WORKSPACE_OPTIONS = ("Yes", "No")
COPY_SETTINGS_INDEX = 0
DEFAULT_CHOICE_INDEX = 1  # "No"


class WorkspaceCreator:
    """Orchestrates the confirmation prompt, materialization and window opening."""

    def __init__(
        self,
        *,
        prompt: ChoicePrompt,
        materializer: WorkspaceMaterializer,
        opener: WindowOpener,
    ) -> None:
        self._prompt = prompt
        self._materializer = materializer
        self._opener = opener

    async def create_workspace(self, folders: Sequence[str]) -> Path:
        """Create a workspace holding ``folders`` and open it.

        Returns the new configuration path.

        Raises
        ------
        PromptCancelledError:
            The prompt was dismissed or failed.  Nothing was written.
        MaterializationError:
            The configuration could not be written.  No window was opened.
        WindowOpenError:
            The configuration exists but opening it failed.
        """
        choice = await self._confirm()

        # TODO: copy settings from the current window when the user asks for it.
        logger.debug("Create workspace confirmed (copy_settings={})", choice == COPY_SETTINGS_INDEX)

        configuration = await self._materializer.materialize(folders)

        try:
            await self._opener.open_window([configuration])
        except Exception as exc:
            raise WindowOpenError(configuration) from exc
        return configuration

    async def _confirm(self) -> int:
        try:
            choice = await self._prompt.choose(
                Severity.INFO,
                CREATE_WORKSPACE_MESSAGE,
                list(CREATE_WORKSPACE_OPTIONS),
                DEFAULT_CHOICE_INDEX,
            )
        except Exception as exc:
            raise PromptCancelledError from exc

        if choice is None or not 0 <= choice < len(CREATE_WORKSPACE_OPTIONS):
            logger.info("Create workspace prompt dismissed")
            raise PromptCancelledError
        return choice
