"""Workspace editing managers.

Each module holds one step of root-set reconciliation.  Managers receive
their collaborators through the constructor and raise domain exceptions from
``multiroot.workspace_editing.errors``, never host-specific ones -- that
translation is the host's responsibility.
"""

from multiroot.workspace_editing.managers.applicator import WorkspaceCreator
from multiroot.workspace_editing.managers.editing import WorkspaceEditingService
from multiroot.workspace_editing.managers.materializer import WorkspaceMaterializer
from multiroot.workspace_editing.managers.validator import validate_roots

__all__ = [
    "WorkspaceCreator",
    "WorkspaceEditingService",
    "WorkspaceMaterializer",
    "validate_roots",
]
