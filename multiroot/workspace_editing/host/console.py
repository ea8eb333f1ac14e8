"""Console collaborators: a click-based choice prompt and a window opener.

The prompt blocks on stdin, so it runs in a worker thread.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from functools import partial
from pathlib import Path

import anyio
import click
from anyio import to_thread
from loguru import logger

from multiroot.workspace_editing.models.enums import Severity


class ConsoleChoicePrompt:
    """Asks on the terminal.  Ctrl-C / EOF count as dismissing the prompt."""

    async def choose(
        self,
        severity: Severity,
        message: str,
        options: Sequence[str],
        default_index: int,
    ) -> int | None:
        return await to_thread.run_sync(partial(_ask, severity, message, list(options), default_index))


class CommandWindowOpener:
    """Opens workspaces by running an external command.

    With ``command="code --new-window"`` a new configuration ``/x/y.code-workspace``
    is opened with ``code --new-window /x/y.code-workspace``.  Without a command
    the paths are echoed so the user can open them.
    """

    def __init__(self, command: str | None = None) -> None:
        self._command = command

    async def open_window(self, configurations: Sequence[Path]) -> None:
        paths = [str(path) for path in configurations]
        if not self._command:
            for path in paths:
                click.echo(f"Open workspace: {path}")
            return

        argv = [*shlex.split(self._command), *paths]
        logger.info("Opening workspace window: {}", argv)
        await anyio.run_process(argv, stdout=None, stderr=None)


def _ask(severity: Severity, message: str, options: list[str], default_index: int) -> int | None:
    """Blocking prompt.  Returns the chosen index, or ``None`` on abort."""
    click.echo(f"[{severity.upper()}] {message}", err=True)
    try:
        answer = click.prompt(
            "/".join(options),
            type=click.Choice(options, case_sensitive=False),
            default=options[default_index],
            err=True,
        )
    except click.Abort:
        return None
    lowered = [option.lower() for option in options]
    return lowered.index(answer.lower())
