"""Git repository initialization for new projects.

``git rev-parse --git-dir`` exits non-zero when the directory is NOT
inside a repository and zero when it is. A non-zero probe is the normal
"go ahead and init" case, not a failure.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path

from rich.console import Console

from funcinit.models.workflow import SourceControlStatus
from funcinit.scaffold.errors import UnsupportedSourceControlError

SUPPORTED_SOURCE_CONTROL = "git"

PROBE_ARGS = ["rev-parse", "--git-dir"]
INIT_ARGS = ["init"]


def check_source_control_system(system: str) -> None:
    """Raise UnsupportedSourceControlError unless system is git."""
    if system.lower() != SUPPORTED_SOURCE_CONTROL:
        raise UnsupportedSourceControlError(system)


class GitInitializer:
    """Ensure a git repository exists in a project directory.

    Args:
        project_root: Directory git commands run in.
        console: Rich console for streamed output and warnings.
        executable: Name or path of the git binary.
    """

    def __init__(
        self,
        project_root: Path,
        console: Console | None = None,
        executable: str = "git",
    ) -> None:
        self.project_root = project_root
        self.console = console or Console()
        self.err_console = Console(stderr=True)
        self.executable = executable

    def ensure_repo(self) -> SourceControlStatus:
        """Probe for a repository and run ``git init`` if there is none.

        A missing git executable only produces a warning.
        """
        return asyncio.run(self._ensure_repo_async())

    async def _ensure_repo_async(self) -> SourceControlStatus:
        try:
            probe_exit = await self._run(PROBE_ARGS)
            # Non-zero means no repository here.
            if probe_exit == 0:
                self.console.print("Directory already a git repository.")
                return SourceControlStatus.already_present
            init_exit = await self._run(
                INIT_ARGS,
                on_stdout=lambda line: self.console.print(line, markup=False, highlight=False),
                on_stderr=lambda line: self.err_console.print(line, markup=False, highlight=False),
            )
            if init_exit != 0:
                self.console.print(
                    f"[yellow]git init exited with code {init_exit}; no repository was created[/yellow]"
                )
                return SourceControlStatus.init_failed
        except FileNotFoundError:
            self.console.print(f"[yellow]unable to find {self.executable} on the path[/yellow]")
            return SourceControlStatus.tool_unavailable
        return SourceControlStatus.initialized

    async def _run(
        self,
        args: list[str],
        on_stdout: Callable[[str], object] | None = None,
        on_stderr: Callable[[str], object] | None = None,
    ) -> int:
        """Run git with args, streaming output lines to the callbacks."""
        process = await asyncio.create_subprocess_exec(
            self.executable,
            *args,
            cwd=self.project_root,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        await asyncio.gather(
            _pump(process.stdout, on_stdout),
            _pump(process.stderr, on_stderr),
        )
        return await process.wait()


async def _pump(
    stream: asyncio.StreamReader | None,
    callback: Callable[[str], object] | None,
) -> None:
    if stream is None:
        return
    while True:
        line_bytes = await stream.readline()
        if not line_bytes:
            break
        if callback is not None:
            callback(line_bytes.decode(errors="replace").rstrip("\n"))
