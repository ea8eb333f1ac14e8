"""Root value type.

A root is one top-level folder of a workspace, addressed by a URI-like
identifier (``scheme``, ``authority``, ``path``).  Roots compare and hash by
their canonical string form::

    file:///home/user/project
    vscode-remote://ssh-host/srv/app

The canonical form keeps the path raw (percent-decoded), so
``file:///a%20b`` and ``file:///a b`` denote the same root.  Every place that
needs to compare roots -- validation, removal, comparing against the current
set -- goes through ``Root.canonical``.  Schemes are lowercase RFC 3986
schemes and authorities never contain ``/``, so two roots have equal fields
exactly when their canonical forms are equal.

Workspace files store canonical forms; ``Root.from_canonical`` reads them
back verbatim.  ``Root.parse`` is for user-supplied URIs only.
"""

from __future__ import annotations

import re
from pathlib import Path, PurePosixPath
from urllib.parse import unquote, urlsplit

from pydantic import BaseModel, ConfigDict, field_validator

FILE_SCHEME = "file"

_SCHEME_RE = re.compile(r"[a-z][a-z0-9+.-]*")


class Root(BaseModel):
    """Immutable, canonicalized workspace root."""

    model_config = ConfigDict(frozen=True)

    scheme: str = FILE_SCHEME
    authority: str = ""
    path: str

    @field_validator("scheme")
    @classmethod
    def _lower_scheme(cls, value: str) -> str:
        value = value.lower()
        if not _SCHEME_RE.fullmatch(value):
            msg = f"Invalid root scheme: {value!r}"
            raise ValueError(msg)
        return value

    @field_validator("authority")
    @classmethod
    def _plain_authority(cls, value: str) -> str:
        if "/" in value:
            msg = f"Root authority must not contain '/': {value!r}"
            raise ValueError(msg)
        return value

    @field_validator("path")
    @classmethod
    def _absolute_path(cls, value: str) -> str:
        if not value.startswith("/"):
            msg = f"Root path must be absolute: {value!r}"
            raise ValueError(msg)
        return str(PurePosixPath(value))

    # -- Constructors ----------------------------------------------------------

    @classmethod
    def file(cls, path: str | Path) -> Root:
        """Build a ``file`` root from a filesystem path (taken literally)."""
        return cls(scheme=FILE_SCHEME, path=PurePosixPath(path).as_posix())

    @classmethod
    def parse(cls, text: str) -> Root:
        """Parse a URI string or a bare absolute path.

        URI paths are percent-decoded; bare paths are taken literally.
        Query and fragment components are discarded.
        """
        if "://" not in text:
            return cls.file(text)
        parts = urlsplit(text)
        return cls(scheme=parts.scheme, authority=parts.netloc, path=unquote(parts.path) or "/")

    @classmethod
    def from_canonical(cls, text: str) -> Root:
        """Inverse of ``canonical``: ``Root.from_canonical(r.canonical()) == r``.

        Nothing is decoded and ``#`` / ``?`` are plain path characters, so
        stored roots read back exactly as they were written.
        """
        scheme, sep, rest = text.partition("://")
        if not sep:
            msg = f"Not a canonical root: {text!r}"
            raise ValueError(msg)
        authority, slash, path = rest.partition("/")
        return cls(scheme=scheme, authority=authority, path=slash + path or "/")

    # -- Accessors -------------------------------------------------------------

    def canonical(self) -> str:
        """Canonical string form used for equality everywhere."""
        return f"{self.scheme}://{self.authority}{self.path}"

    @property
    def fs_path(self) -> Path:
        """Filesystem path of the root (meaningful for ``file`` roots)."""
        return Path(self.path)

    def __str__(self) -> str:
        return self.canonical()
