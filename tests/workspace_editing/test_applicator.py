"""Unit tests for the create-workspace flow (WorkspaceCreator)."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from multiroot.workspace_editing.errors import (
    MaterializationError,
    PromptCancelledError,
    WindowOpenError,
)
from multiroot.workspace_editing.managers.applicator import (
    CREATE_WORKSPACE_MESSAGE,
    CREATE_WORKSPACE_OPTIONS,
    DEFAULT_CHOICE_INDEX,
    WorkspaceCreator,
)
from multiroot.workspace_editing.models.enums import Severity

NEW_CONFIG = Path("/home/.multiroot/workspaces/new.code-workspace")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _creator(
    *,
    choice: int | None = 1,
    prompt_error: Exception | None = None,
    materialize_error: Exception | None = None,
    open_error: Exception | None = None,
) -> tuple[WorkspaceCreator, AsyncMock, MagicMock, AsyncMock]:
    choose = AsyncMock(return_value=choice, side_effect=prompt_error)
    materializer = MagicMock()
    materializer.materialize = AsyncMock(return_value=NEW_CONFIG, side_effect=materialize_error)
    open_window = AsyncMock(side_effect=open_error)
    creator = WorkspaceCreator(
        prompt=SimpleNamespace(choose=choose),
        materializer=materializer,
        opener=SimpleNamespace(open_window=open_window),
    )
    return creator, choose, materializer, open_window


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


async def test_prompt_materialize_open() -> None:
    creator, choose, materializer, open_window = _creator()

    result = await creator.create_workspace(["file:///a"])

    assert result == NEW_CONFIG
    choose.assert_awaited_once_with(
        Severity.INFO,
        CREATE_WORKSPACE_MESSAGE,
        list(CREATE_WORKSPACE_OPTIONS),
        DEFAULT_CHOICE_INDEX,
    )
    materializer.materialize.assert_awaited_once_with(["file:///a"])
    open_window.assert_awaited_once_with([NEW_CONFIG])


def test_default_choice_is_no() -> None:
    assert CREATE_WORKSPACE_OPTIONS[DEFAULT_CHOICE_INDEX] == "No"


@pytest.mark.parametrize("choice", [0, 1])
async def test_answer_does_not_branch(choice: int) -> None:
    creator, _, materializer, open_window = _creator(choice=choice)

    await creator.create_workspace(["file:///a"])

    materializer.materialize.assert_awaited_once()
    open_window.assert_awaited_once()


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


async def test_dismissed_prompt() -> None:
    creator, _, materializer, open_window = _creator(choice=None)

    with pytest.raises(PromptCancelledError):
        await creator.create_workspace(["file:///a"])

    materializer.materialize.assert_not_awaited()
    open_window.assert_not_awaited()


async def test_out_of_range_answer_is_cancellation() -> None:
    creator, _, materializer, _ = _creator(choice=5)

    with pytest.raises(PromptCancelledError):
        await creator.create_workspace(["file:///a"])

    materializer.materialize.assert_not_awaited()


async def test_prompt_failure_is_cancellation() -> None:
    creator, _, materializer, open_window = _creator(prompt_error=RuntimeError("no tty"))

    with pytest.raises(PromptCancelledError) as exc_info:
        await creator.create_workspace(["file:///a"])

    assert isinstance(exc_info.value.__cause__, RuntimeError)
    materializer.materialize.assert_not_awaited()
    open_window.assert_not_awaited()


async def test_materialization_failure_skips_open() -> None:
    creator, _, _, open_window = _creator(materialize_error=MaterializationError(NEW_CONFIG))

    with pytest.raises(MaterializationError):
        await creator.create_workspace(["file:///a"])

    open_window.assert_not_awaited()


async def test_open_failure() -> None:
    creator, *_ = _creator(open_error=OSError("no display"))

    with pytest.raises(WindowOpenError) as exc_info:
        await creator.create_workspace(["file:///a"])

    assert exc_info.value.target == NEW_CONFIG
