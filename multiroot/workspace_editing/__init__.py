"""Multi-root workspace editing.

This package contains the reconciliation core and its host pieces:

- **models**: ``Root`` value type, workspace snapshot and configuration payload
- **managers**: validator, reconciler (``WorkspaceEditingService``),
  materializer and the create-workspace flow
- **host**: collaborator protocols and local implementations
- **settings** / **log** / **deps**: configuration, logging and wiring
"""
