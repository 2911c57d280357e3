"""Tests for the funcinit init CLI command."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest
from typer.testing import CliRunner

from funcinit.cli.main import app

runner = CliRunner()


class TestInitCLI:
    def test_init_with_runtime(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["init", str(tmp_path), "--worker-runtime", "node"])
        assert result.exit_code == 0
        assert "Writing host.json" in result.output
        assert (tmp_path / "local.settings.json").exists()
        assert (tmp_path / ".vscode" / "extensions.json").exists()

    def test_init_twice_skips(self, tmp_path: Path) -> None:
        runner.invoke(app, ["init", str(tmp_path), "--worker-runtime", "node"])
        result = runner.invoke(app, ["init", str(tmp_path), "--worker-runtime", "node"])
        assert result.exit_code == 0
        assert "host.json already exists. Skipped!" in result.output

    def test_bogus_runtime_exits_one(self, tmp_path: Path) -> None:
        target = tmp_path / "app"
        result = runner.invoke(app, ["init", str(target), "--worker-runtime", "bogus"])
        assert result.exit_code == 1
        assert "Options are dotnet, node, python, java, powershell" in result.output
        assert not target.exists()

    def test_docker_only_java_exits_two(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["init", str(tmp_path), "--docker-only", "--worker-runtime", "java"]
        )
        assert result.exit_code == 2
        assert not (tmp_path / "Dockerfile").exists()

    def test_prompts_when_runtime_missing(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        prompts: list[str] = []

        def fake_select(prompt_text: str, options: Sequence[str]) -> str:
            prompts.append(prompt_text)
            return "python"

        monkeypatch.setattr("funcinit.cli.init_cmd.select_with_arrows", fake_select)
        result = runner.invoke(app, ["init", str(tmp_path), "--docker-only"])
        assert result.exit_code == 0
        assert prompts == ["Select a worker runtime"]
        assert [p.name for p in tmp_path.iterdir()] == ["Dockerfile"]

    def test_init_help(self) -> None:
        result = runner.invoke(app, ["init", "--help"])
        assert result.exit_code == 0
        assert "--worker-runtime" in result.output

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "funcinit" in result.output
