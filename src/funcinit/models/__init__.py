"""Data models for runtimes, local settings, and init workflow results."""

from funcinit.models.runtime import WorkerRuntime
from funcinit.models.settings import LocalSettings
from funcinit.models.workflow import (
    FileOutcome,
    FileSpec,
    InitOptions,
    SourceControlStatus,
    WorkflowResult,
    WorkflowStatus,
    WriteOutcome,
)

__all__ = [
    "FileOutcome",
    "FileSpec",
    "InitOptions",
    "LocalSettings",
    "SourceControlStatus",
    "WorkerRuntime",
    "WorkflowResult",
    "WorkflowStatus",
    "WriteOutcome",
]
