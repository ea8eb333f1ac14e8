"""Root validation: canonicalize and drop duplicates."""

from __future__ import annotations

from collections.abc import Sequence

from multiroot.workspace_editing.models.roots import Root


def validate_roots(roots: Sequence[Root] | None) -> list[str]:
    """Return the canonical forms of ``roots``, first occurrence wins.

    ``None`` yields an empty list.
    """
    if not roots:
        return []
    return list(dict.fromkeys(root.canonical() for root in roots))
