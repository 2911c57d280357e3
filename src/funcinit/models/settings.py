"""Local settings model for ``local.settings.json``.

The file written by ``funcinit init`` is read back on later runs to find
out whether a project already has a worker runtime configured.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from funcinit.models.runtime import WorkerRuntime, normalize_worker_runtime

LOCAL_SETTINGS_FILE = "local.settings.json"
FUNCTIONS_WORKER_RUNTIME = "FUNCTIONS_WORKER_RUNTIME"
AZURE_WEB_JOBS_STORAGE = "AzureWebJobsStorage"
STORAGE_EMULATOR_CONNECTION_STRING = "UseDevelopmentStorage=true"


class LocalSettings(BaseModel):
    """Key/value document holding local app settings and connection strings."""

    model_config = {"populate_by_name": True}

    is_encrypted: bool = Field(default=False, alias="IsEncrypted")
    values: dict[str, Any] = Field(default_factory=dict, alias="Values")
    connection_strings: dict[str, Any] = Field(
        default_factory=dict, alias="ConnectionStrings"
    )

    @property
    def worker_runtime(self) -> WorkerRuntime:
        """Configured runtime, or the ``none`` sentinel when unset or unknown."""
        raw = self.values.get(FUNCTIONS_WORKER_RUNTIME)
        if not isinstance(raw, str):
            return WorkerRuntime.none
        return normalize_worker_runtime(raw) or WorkerRuntime.none


def load_local_settings(project_root: Path) -> LocalSettings:
    """Load local.settings.json. Returns empty settings if missing or invalid.

    Args:
        project_root: Directory expected to contain local.settings.json.

    Returns:
        Parsed LocalSettings instance.
    """
    settings_path = project_root / LOCAL_SETTINGS_FILE
    if not settings_path.is_file():
        return LocalSettings()
    try:
        return LocalSettings.model_validate_json(
            settings_path.read_text(encoding="utf-8-sig")
        )
    except (ValidationError, UnicodeDecodeError):
        return LocalSettings()


def get_current_worker_runtime(project_root: Path) -> WorkerRuntime:
    """Return the runtime configured for the project at project_root."""
    return load_local_settings(project_root).worker_runtime
