"""Shared enumerations used across workspace editing."""

from __future__ import annotations

from enum import StrEnum

# -- Prompt ------------------------------------------------------------------


class Severity(StrEnum):
    """Severity attached to a user choice prompt."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


# -- Environment -------------------------------------------------------------


class AppQuality(StrEnum):
    """Release channel of the running application build."""

    STABLE = "stable"
    INSIDER = "insider"
