"""Tests for idempotent file writing."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from conftest import console_output
from funcinit.models.workflow import FileSpec, WriteOutcome
from funcinit.scaffold.writer import FileWriter


class TestFileWriter:
    def test_writes_new_file(self, tmp_path: Path, console: Console) -> None:
        writer = FileWriter(tmp_path, console=console)
        outcome = writer.write(FileSpec("host.json", lambda: '{"version": "2.0"}'))
        assert outcome == WriteOutcome.written
        assert (tmp_path / "host.json").read_text(encoding="utf-8") == '{"version": "2.0"}'
        assert "Writing host.json" in console_output(console)

    def test_skips_existing_file(self, tmp_path: Path, console: Console) -> None:
        (tmp_path / ".gitignore").write_text("custom\n", encoding="utf-8")
        writer = FileWriter(tmp_path, console=console)
        outcome = writer.write(FileSpec(".gitignore", lambda: "generated\n"))
        assert outcome == WriteOutcome.skipped
        assert (tmp_path / ".gitignore").read_text(encoding="utf-8") == "custom\n"
        assert ".gitignore already exists. Skipped!" in console_output(console)

    def test_content_not_evaluated_when_skipped(self, tmp_path: Path, console: Console) -> None:
        (tmp_path / "host.json").write_text("{}", encoding="utf-8")
        calls: list[int] = []

        def provider() -> str:
            calls.append(1)
            return "x"

        FileWriter(tmp_path, console=console).write(FileSpec("host.json", provider))
        assert calls == []

    def test_creates_immediate_parent(self, tmp_path: Path, console: Console) -> None:
        writer = FileWriter(tmp_path, console=console)
        writer.write(FileSpec(".vscode/extensions.json", lambda: "{}"))
        assert (tmp_path / ".vscode" / "extensions.json").is_file()

    def test_no_temporary_files_left(self, tmp_path: Path, console: Console) -> None:
        writer = FileWriter(tmp_path, console=console)
        writer.write(FileSpec("a.txt", lambda: "a"))
        (tmp_path / "b.txt").write_text("b", encoding="utf-8")
        writer.write(FileSpec("b.txt", lambda: "B"))
        assert sorted(p.name for p in tmp_path.iterdir()) == ["a.txt", "b.txt"]

    def test_provider_error_leaves_no_file(self, tmp_path: Path, console: Console) -> None:
        def provider() -> str:
            raise RuntimeError("template unavailable")

        writer = FileWriter(tmp_path, console=console)
        try:
            writer.write(FileSpec("host.json", provider))
        except RuntimeError:
            pass
        assert list(tmp_path.iterdir()) == []
