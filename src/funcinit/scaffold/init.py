"""Project scaffolding for `funcinit init`.

Resolves the worker runtime, then writes the project files, local
settings, editor recommendations, an optional Dockerfile, and optionally
initializes git. Files that already exist are skipped, so re-running
init in the same folder is safe.

All paths are addressed relative to the project root; the process
working directory is never changed.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from rich.console import Console

from funcinit.models.runtime import WorkerRuntime
from funcinit.models.settings import LOCAL_SETTINGS_FILE, get_current_worker_runtime
from funcinit.models.workflow import (
    FileOutcome,
    FileSpec,
    InitOptions,
    WorkflowResult,
    WorkflowStatus,
)
from funcinit.scaffold.docker import dockerfile_spec
from funcinit.scaffold.errors import FuncInitError
from funcinit.scaffold.planner import (
    base_files,
    plan_language_artifacts,
    vscode_extensions_file,
)
from funcinit.scaffold.resolver import Selector, resolve_worker_runtime_and_language
from funcinit.scaffold.settings import compose_local_settings
from funcinit.scaffold.source_control import GitInitializer, check_source_control_system
from funcinit.scaffold.templates import get_template
from funcinit.scaffold.writer import FileWriter


class InitWorkflow:
    """One invocation of ``funcinit init``.

    Args:
        options: Parsed command-line intent.
        selector: Interactive single-choice collaborator used when no
            --worker-runtime is given.
        base_dir: Directory the optional folder argument is relative to.
        console: Rich console for progress output.
        git_factory: Builds the source-control initializer for a project root.
        is_windows: Host platform override for local settings composition.
    """

    def __init__(
        self,
        options: InitOptions,
        selector: Selector,
        base_dir: Path | None = None,
        console: Console | None = None,
        git_factory: Callable[[Path], GitInitializer] | None = None,
        is_windows: bool | None = None,
    ) -> None:
        self.options = options
        self.selector = selector
        self.console = console or Console()
        base = (base_dir or Path.cwd()).resolve()
        self.project_root = base / options.folder if options.folder else base
        self.git_factory = git_factory or (
            lambda root: GitInitializer(root, console=self.console)
        )
        self.is_windows = is_windows
        self.result = WorkflowResult()
        self._writer = FileWriter(self.project_root, console=self.console)

    def run(self) -> WorkflowResult:
        """Run the workflow selected by the options.

        Raises:
            FuncInitError: On bad input or an unusable runtime. The result
                is marked aborted before the error propagates; files
                written so far are left in place.
        """
        try:
            if self.options.source_control:
                check_source_control_system(self.options.source_control_system)
            if self.options.docker_only:
                self.init_dockerfile_only()
            else:
                self.init_function_app_project()
        except FuncInitError as e:
            self.result.status = WorkflowStatus.aborted
            self.result.reason = str(e)
            raise
        return self.result

    def init_dockerfile_only(self) -> None:
        """Add a Dockerfile to an existing (or new) project.

        Uses the runtime from local.settings.json when set, otherwise
        resolves it from flags or a single runtime prompt. A runtime
        resolved here is not written back to local settings.
        """
        runtime = get_current_worker_runtime(self.project_root)
        if runtime == WorkerRuntime.none:
            runtime, _ = resolve_worker_runtime_and_language(
                self.options.worker_runtime,
                None,
                selector=self.selector,
                select_language=False,
                console=self.console,
            )
        self.result.worker_runtime = runtime
        spec = dockerfile_spec(runtime)
        self._ensure_project_root()
        self._write(spec)

    def init_function_app_project(self) -> None:
        """Scaffold a full function app project."""
        if self.options.csx:
            runtime, language = WorkerRuntime.dotnet, ""
            planned: list[FileSpec] = []
        else:
            runtime, language = resolve_worker_runtime_and_language(
                self.options.worker_runtime,
                self.options.language,
                selector=self.selector,
                console=self.console,
            )
            planned = plan_language_artifacts(
                runtime, language, project_name=self.project_root.name
            )
        self.result.worker_runtime = runtime
        self.result.language = language

        self._ensure_project_root()
        for spec in planned:
            self._write(spec)
        for spec in base_files():
            self._write(spec)
        self._write(self._local_settings_file(runtime))
        self._write(vscode_extensions_file())

        if self.options.source_control:
            git = self.git_factory(self.project_root)
            self.result.source_control = git.ensure_repo()
        if self.options.docker:
            self._write(dockerfile_spec(runtime))

    def _local_settings_file(self, runtime: WorkerRuntime) -> FileSpec:
        def content() -> str:
            return compose_local_settings(
                get_template("local_settings_json"), runtime, is_windows=self.is_windows
            )

        return FileSpec(LOCAL_SETTINGS_FILE, content)

    def _ensure_project_root(self) -> None:
        self.project_root.mkdir(parents=True, exist_ok=True)

    def _write(self, spec: FileSpec) -> None:
        outcome = self._writer.write(spec)
        self.result.files.append(FileOutcome(path=spec.path, outcome=outcome))
