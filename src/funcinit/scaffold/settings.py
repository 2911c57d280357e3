"""Composition of local.settings.json content."""

from __future__ import annotations

import sys

from funcinit.models.runtime import WorkerRuntime
from funcinit.models.settings import (
    AZURE_WEB_JOBS_STORAGE,
    FUNCTIONS_WORKER_RUNTIME,
    STORAGE_EMULATOR_CONNECTION_STRING,
)

RUNTIME_PLACEHOLDER = "{" + FUNCTIONS_WORKER_RUNTIME + "}"
STORAGE_PLACEHOLDER = "{" + AZURE_WEB_JOBS_STORAGE + "}"


def compose_local_settings(
    template: str,
    runtime: WorkerRuntime,
    *,
    is_windows: bool | None = None,
) -> str:
    """Fill the runtime and storage placeholders of a settings template.

    The storage emulator only runs on Windows, so the connection string is
    the emulator's there and empty on every other host, whatever the runtime.

    Args:
        template: local.settings.json template text.
        runtime: Resolved worker runtime; its value is written verbatim.
        is_windows: Host platform override. Defaults to the current host.

    Returns:
        Template text with both placeholders replaced.
    """
    if is_windows is None:
        is_windows = sys.platform == "win32"
    storage = STORAGE_EMULATOR_CONNECTION_STRING if is_windows else ""
    return template.replace(RUNTIME_PLACEHOLDER, runtime.value).replace(
        STORAGE_PLACEHOLDER, storage
    )
