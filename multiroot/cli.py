"""Command line host for multi-root workspace editing."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from multiroot.workspace_editing.errors import WorkspaceEditingError
from multiroot.workspace_editing.host.local import InvalidWorkspaceFileError, LocalWorkspaceContext
from multiroot.workspace_editing.models.roots import Root


def _workspace_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options selecting the workspace the command operates on."""
    func = click.option(
        "--folder",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Single folder currently open (root editing is disabled in this mode).",
    )(func)
    func = click.option(
        "--workspace",
        "configuration",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Workspace configuration file currently open.",
    )(func)
    return func


def _context(configuration: Path | None, folder: Path | None) -> LocalWorkspaceContext:
    if configuration is not None and folder is not None:
        msg = "--workspace and --folder are mutually exclusive."
        raise click.UsageError(msg)
    return LocalWorkspaceContext(
        configuration=configuration.expanduser().resolve() if configuration else None,
        folder=folder.expanduser().resolve() if folder else None,
    )


def _parse_root(text: str) -> Root:
    """URIs are parsed as-is; anything else is a path relative to the CWD."""
    try:
        if "://" in text:
            return Root.parse(text)
        return Root.file(Path(text).expanduser().resolve())
    except ValueError as exc:
        msg = f"Invalid root {text!r}: {exc}"
        raise click.BadParameter(msg) from None


def _run(configuration: Path | None, folder: Path | None, action: str, roots: tuple[str, ...]) -> None:
    from multiroot.workspace_editing.deps import create_editing_service
    from multiroot.workspace_editing.settings import get_settings

    service = create_editing_service(get_settings(), context=_context(configuration, folder))
    parsed = [_parse_root(text) for text in roots]
    method = service.add_roots if action == "add" else service.remove_roots

    try:
        asyncio.run(method(parsed))
    except WorkspaceEditingError as exc:
        cause = f": {exc.__cause__}" if exc.__cause__ else ""
        raise click.ClickException(f"{exc}{cause}") from exc
    except InvalidWorkspaceFileError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
def main() -> None:
    """Multiroot - manage the root folders of a multi-root workspace."""
    from multiroot.workspace_editing.log import setup_logging
    from multiroot.workspace_editing.settings import get_settings

    setup_logging(get_settings().log_level)


@main.command()
@_workspace_options
@click.argument("roots", nargs=-1, required=True)
def add(configuration: Path | None, folder: Path | None, roots: tuple[str, ...]) -> None:
    """Add ROOTS to the workspace."""
    _run(configuration, folder, "add", roots)


@main.command()
@_workspace_options
@click.argument("roots", nargs=-1, required=True)
def remove(configuration: Path | None, folder: Path | None, roots: tuple[str, ...]) -> None:
    """Remove ROOTS from the workspace."""
    _run(configuration, folder, "remove", roots)


@main.command()
@_workspace_options
def show(configuration: Path | None, folder: Path | None) -> None:
    """Print the roots of the workspace, one per line."""
    try:
        workspace = _context(configuration, folder).get_workspace()
    except InvalidWorkspaceFileError as exc:
        raise click.ClickException(str(exc)) from exc
    if workspace.configuration is not None:
        click.echo(f"# {workspace.configuration}", err=True)
    for root in workspace.roots:
        click.echo(root.canonical())


if __name__ == "__main__":
    main()
