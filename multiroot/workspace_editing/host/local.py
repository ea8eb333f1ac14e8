"""Local filesystem collaborators.

``LocalJSONWriter`` applies ``JSONEdit``s to JSON files on disk and
``LocalWorkspaceContext`` describes a workspace backed by such a file.

File I/O runs through ``anyio.to_thread.run_sync`` so the event loop is never
blocked.  Writes are atomic: data is written to a temporary file in the same
directory, then renamed to the target path.  A crash mid-write never leaves a
truncated workspace configuration behind.
"""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
from functools import partial
from pathlib import Path
from typing import Any

from anyio import to_thread
from loguru import logger
from pydantic import ValidationError

from multiroot.workspace_editing.models.roots import Root
from multiroot.workspace_editing.models.workspace import JSONEdit, Workspace, WorkspaceConfiguration


class InvalidWorkspaceFileError(ValueError):
    """A workspace configuration file exists but cannot be read."""

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Invalid workspace configuration '{path}': {reason}")
        self.path = path


class LocalJSONWriter:
    """Local filesystem implementation of the JSONConfigurationWriter protocol.

    Keyed edits replace one top-level key and keep the rest of the document.
    Whole-document edits (empty key) overwrite the file.
    """

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    async def write(self, target: Path, edit: JSONEdit, create_if_missing: bool) -> None:
        await to_thread.run_sync(partial(self._write_sync, Path(target), edit, create_if_missing))

    def _write_sync(self, target: Path, edit: JSONEdit, create_if_missing: bool) -> None:
        exists = target.exists()
        if not exists and not create_if_missing:
            raise FileNotFoundError(target)

        if edit.replaces_document:
            document: Any = edit.value
        else:
            document = _read_json(target) if exists else {}
            if not isinstance(document, dict):
                msg = f"Cannot set key '{edit.key}': {target} does not hold a JSON object"
                raise ValueError(msg)
            document[edit.key] = edit.value

        data = json.dumps(document, indent=self._indent, ensure_ascii=False) + "\n"
        _atomic_write(target, data)
        logger.debug("Wrote {} (key={!r})", target, edit.key)


class LocalWorkspaceContext:
    """Workspace context backed by the local filesystem.

    - ``folder`` set: a single-folder workspace is open.
    - ``configuration`` set: a multi-root workspace; roots are read from the
      file's ``folders`` on every call, so writes are observed on next read.
    - Neither: an empty window with no workspace.

    A configuration path whose file does not exist yet yields no roots.
    Relative ``folders`` entries resolve against the file's directory.  A file
    that cannot be parsed raises ``InvalidWorkspaceFileError``.
    """

    def __init__(self, configuration: Path | None = None, folder: Path | None = None) -> None:
        if configuration is not None and folder is not None:
            msg = "configuration and folder are mutually exclusive"
            raise ValueError(msg)
        self._configuration = Path(configuration) if configuration is not None else None
        self._folder = Path(folder) if folder is not None else None

    def has_workspace(self) -> bool:
        return self._folder is not None

    def get_workspace(self) -> Workspace:
        if self._folder is not None:
            return Workspace(roots=[Root.file(self._folder)])
        if self._configuration is None:
            return Workspace()
        return Workspace(roots=self._read_roots(self._configuration), configuration=self._configuration)

    def _read_roots(self, configuration: Path) -> list[Root]:
        if not configuration.exists():
            return []
        try:
            payload = WorkspaceConfiguration.model_validate_json(configuration.read_text(encoding="utf-8"))
            return [_folder_root(configuration, entry) for entry in payload.folders]
        except ValidationError as exc:
            raise InvalidWorkspaceFileError(configuration, exc) from exc


def _folder_root(configuration: Path, entry: str) -> Root:
    """Stored canonical form, bare absolute path, or path relative to the file."""
    if "://" in entry:
        return Root.from_canonical(entry)
    if entry.startswith("/"):
        return Root.file(entry)
    return Root.file(configuration.parent / entry)


# -- Sync helpers (run in thread pool) -----------------------------------------


def _atomic_write(path: Path, data: str) -> None:
    """Write data atomically: temp file + rename."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(data)
        os.replace(tmp_path, path)
    except BaseException:
        # Clean up temp file on any failure.
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise


def _read_json(path: Path) -> Any:
    """Read and decode a JSON file.  Raises ``FileNotFoundError`` if missing."""
    return json.loads(path.read_text(encoding="utf-8"))
