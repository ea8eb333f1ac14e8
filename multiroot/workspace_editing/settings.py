"""Host configuration loaded from MULTIROOT_* environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from multiroot.workspace_editing.models.enums import AppQuality


def _default_settings_home() -> Path:
    return Path.home() / ".multiroot" / "workspaces"


class MultirootSettings(BaseSettings):
    """Multiroot settings.

    All fields are read from environment variables with the ``MULTIROOT_``
    prefix.  For example, ``MULTIROOT_LOG_LEVEL=DEBUG`` maps to ``log_level``.

    The settings object doubles as the environment provider consumed by the
    editing service (``app_quality`` and ``app_settings_home``).
    """

    model_config = SettingsConfigDict(
        env_prefix="MULTIROOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "INFO"

    # -- Environment -----------------------------------------------------------
    app_quality: str = AppQuality.INSIDER
    """Release channel.  Multi-root editing is disabled on ``stable``."""

    app_settings_home: Path = Field(default_factory=_default_settings_home)
    """Directory where new workspace configuration files are created."""

    # -- Workspace files -------------------------------------------------------
    workspace_extension: str = "code-workspace"
    """File extension of generated workspace configurations (without dot)."""

    # -- Window opening --------------------------------------------------------
    open_command: str | None = None
    """Command used to open a workspace, e.g. ``code``.

    The configuration path is appended as the last argument.  When unset the
    path is only printed.
    """


def get_settings() -> MultirootSettings:
    """Return a cached settings instance.

    Reads from environment variables and ``.env`` on first call, then returns
    the same object.  Call ``_get_settings_cached.cache_clear()`` in tests to
    force a re-read after overriding env vars.
    """
    return _get_settings_cached()


def _get_settings_cached() -> MultirootSettings:
    """Inner function wrapped by lru_cache (allows type-safe cache_clear)."""
    return MultirootSettings()


# Apply lru_cache at runtime so the function is only called once.
from functools import lru_cache  # noqa: E402

_get_settings_cached = lru_cache(maxsize=1)(_get_settings_cached)
