"""Idempotent file writing for project scaffolding.

Existing files are never overwritten. Content is staged in a temporary
sibling and hard-linked into place, so the existence check and the
write happen in one filesystem operation and no partial file is ever
visible under the target name.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from rich.console import Console

from funcinit.models.workflow import FileSpec, WriteOutcome


class FileWriter:
    """Write FileSpecs under a project root, skipping files that exist.

    Every call prints exactly one notice: ``Writing <path>`` or
    ``<path> already exists. Skipped!``.

    Args:
        root: Project directory that relative FileSpec paths resolve against.
        console: Rich console for progress notices.
    """

    def __init__(self, root: Path, console: Console | None = None) -> None:
        self.root = root
        self.console = console or Console()

    def write(self, spec: FileSpec) -> WriteOutcome:
        """Write spec unless its target exists.

        The content provider is only called when the file is written.
        """
        target = self.root / spec.path
        if target.exists():
            return self._skipped(spec.path)

        target.parent.mkdir(exist_ok=True)
        content = spec.content()

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        tmp_file = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
                fh.write(content)
            if not _link_exclusive(tmp_file, target):
                return self._skipped(spec.path)
        finally:
            tmp_file.unlink(missing_ok=True)

        self.console.print(f"Writing {spec.path}")
        return WriteOutcome.written

    def _skipped(self, path: str) -> WriteOutcome:
        self.console.print(f"[yellow]{path} already exists. Skipped![/yellow]")
        return WriteOutcome.skipped


def _link_exclusive(source: Path, target: Path) -> bool:
    """Place source at target unless target exists. Returns False if it does."""
    try:
        os.link(source, target)
    except FileExistsError:
        return False
    except OSError:
        # Filesystem without hard links: last writer wins on a race.
        if target.exists():
            return False
        os.replace(source, target)
    return True
