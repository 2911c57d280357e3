"""Dockerfile selection by worker runtime."""

from __future__ import annotations

from funcinit.models.runtime import WorkerRuntime
from funcinit.models.workflow import FileSpec
from funcinit.scaffold.errors import (
    UnresolvedRuntimeError,
    UnsupportedRuntimeForContainerError,
)
from funcinit.scaffold.templates import template_provider

DOCKERFILE = "Dockerfile"

_DOCKERFILE_TEMPLATES: dict[WorkerRuntime, str] = {
    WorkerRuntime.dotnet: "dockerfile_dotnet",
    WorkerRuntime.node: "dockerfile_node",
    WorkerRuntime.python: "dockerfile_python",
    WorkerRuntime.powershell: "dockerfile_powershell",
}


def dockerfile_spec(runtime: WorkerRuntime) -> FileSpec:
    """Return the Dockerfile FileSpec for runtime.

    Raises:
        UnresolvedRuntimeError: If runtime is the ``none`` sentinel.
        UnsupportedRuntimeForContainerError: If no template exists for runtime.
    """
    if runtime == WorkerRuntime.none:
        raise UnresolvedRuntimeError()
    if runtime not in _DOCKERFILE_TEMPLATES:
        raise UnsupportedRuntimeForContainerError(runtime.value)
    return FileSpec(DOCKERFILE, template_provider(_DOCKERFILE_TEMPLATES[runtime]))
