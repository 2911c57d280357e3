"""Init workflow data models.

InitOptions carries the user's intent as parsed from the command line.
FileSpec pairs a target path with a lazy content provider, and
WorkflowResult records the ordered per-file outcomes of one invocation.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field, model_validator

from funcinit.models.runtime import WorkerRuntime


class InitOptions(BaseModel):
    """Flags and arguments accepted by ``funcinit init``."""

    model_config = {"extra": "forbid"}

    folder: str = ""
    source_control: bool = False
    source_control_system: str = "git"
    worker_runtime: str | None = None
    language: str | None = None
    docker: bool = False
    docker_only: bool = False
    csx: bool = False

    @model_validator(mode="after")
    def _docker_only_implies_docker(self) -> InitOptions:
        if self.docker_only:
            self.docker = True
        return self


@dataclass(frozen=True)
class FileSpec:
    """A file to write: relative target path plus deferred content.

    ``content`` is only called when the file does not exist yet.
    """

    path: str
    content: Callable[[], str]


class WriteOutcome(str, Enum):
    """Result of a single idempotent file write."""

    written = "written"
    skipped = "skipped"


class SourceControlStatus(str, Enum):
    """Result of ensuring a repository exists in the project directory."""

    already_present = "already_present"
    initialized = "initialized"
    tool_unavailable = "tool_unavailable"
    init_failed = "init_failed"


class WorkflowStatus(str, Enum):
    completed = "completed"
    aborted = "aborted"


class FileOutcome(BaseModel):
    """Outcome of one file in the workflow log."""

    model_config = {"extra": "forbid"}

    path: str
    outcome: WriteOutcome


class WorkflowResult(BaseModel):
    """Ordered record of what one init invocation did."""

    model_config = {"extra": "forbid"}

    status: WorkflowStatus = WorkflowStatus.completed
    reason: str | None = None
    worker_runtime: WorkerRuntime = WorkerRuntime.none
    language: str = ""
    files: list[FileOutcome] = Field(default_factory=list)
    source_control: SourceControlStatus | None = None

    @property
    def written(self) -> list[str]:
        return [f.path for f in self.files if f.outcome == WriteOutcome.written]

    @property
    def skipped(self) -> list[str]:
        return [f.path for f in self.files if f.outcome == WriteOutcome.skipped]
