"""Tests for Dockerfile selection."""

from __future__ import annotations

import pytest

from funcinit.models.runtime import WorkerRuntime
from funcinit.scaffold.docker import dockerfile_spec
from funcinit.scaffold.errors import (
    UnresolvedRuntimeError,
    UnsupportedRuntimeForContainerError,
    UserInputError,
)
from funcinit.scaffold.templates import get_template


class TestDockerfileSpec:
    @pytest.mark.parametrize(
        "runtime,purpose",
        [
            (WorkerRuntime.dotnet, "dockerfile_dotnet"),
            (WorkerRuntime.node, "dockerfile_node"),
            (WorkerRuntime.python, "dockerfile_python"),
            (WorkerRuntime.powershell, "dockerfile_powershell"),
        ],
    )
    def test_supported_runtimes(self, runtime: WorkerRuntime, purpose: str) -> None:
        spec = dockerfile_spec(runtime)
        assert spec.path == "Dockerfile"
        assert spec.content() == get_template(purpose)

    def test_sentinel_rejected(self) -> None:
        with pytest.raises(UnresolvedRuntimeError) as exc_info:
            dockerfile_spec(WorkerRuntime.none)
        assert not isinstance(exc_info.value, UserInputError)

    def test_java_has_no_template(self) -> None:
        with pytest.raises(UnsupportedRuntimeForContainerError):
            dockerfile_spec(WorkerRuntime.java)
