"""Artifact planning for a resolved runtime and language.

Runtime rules contribute a single bootstrap file; language rules add the
ecosystem manifests for that language. Rules only ever add files.
"""

from __future__ import annotations

import re

from funcinit.models.runtime import Languages, WorkerRuntime
from funcinit.models.workflow import FileSpec
from funcinit.scaffold.templates import template_provider

VSCODE_EXTENSIONS_PATH = ".vscode/extensions.json"

# Runtime -> (target path, template purpose). Paths may contain {project_name}.
_RUNTIME_FILES: dict[WorkerRuntime, tuple[str, str]] = {
    WorkerRuntime.python: ("requirements.txt", "python_requirements"),
    WorkerRuntime.powershell: ("profile.ps1", "powershell_profile"),
    WorkerRuntime.dotnet: ("{project_name}.csproj", "dotnet_csproj"),
}

_LANGUAGE_FILES: dict[str, list[tuple[str, str]]] = {
    Languages.TYPESCRIPT: [
        (".funcignore", "funcignore"),
        ("package.json", "package_json"),
        ("tsconfig.json", "tsconfig_json"),
    ],
}

_BASE_FILES: list[tuple[str, str]] = [
    (".gitignore", "gitignore"),
    ("host.json", "host_json"),
]


def sanitize_project_name(name: str) -> str:
    """Keep ASCII letters, digits and '-' from a folder name."""
    sanitized = re.sub(r"[^A-Za-z0-9-]", "", name)
    return sanitized or "FunctionApp"


def plan_language_artifacts(
    runtime: WorkerRuntime,
    language: str,
    *,
    project_name: str = "FunctionApp",
) -> list[FileSpec]:
    """Return the runtime- and language-specific files for a project.

    Args:
        runtime: Resolved worker runtime.
        language: Resolved language qualifier, '' if none.
        project_name: Name used for files named after the project.

    Returns:
        FileSpecs in write order, with unique target paths.

    Raises:
        ValueError: If two rules target the same path.
    """
    entries: list[tuple[str, str]] = []
    if runtime in _RUNTIME_FILES:
        path, purpose = _RUNTIME_FILES[runtime]
        entries.append((path.format(project_name=sanitize_project_name(project_name)), purpose))
    entries.extend(_LANGUAGE_FILES.get(language, []))
    return _to_specs(entries)


def base_files() -> list[FileSpec]:
    """Files every full init writes before local settings."""
    return _to_specs(_BASE_FILES)


def vscode_extensions_file() -> FileSpec:
    return FileSpec(VSCODE_EXTENSIONS_PATH, template_provider("vscode_extensions_json"))


def _to_specs(entries: list[tuple[str, str]]) -> list[FileSpec]:
    seen: set[str] = set()
    specs: list[FileSpec] = []
    for path, purpose in entries:
        if path in seen:
            raise ValueError(f"Duplicate planned file: {path}")
        seen.add(path)
        specs.append(FileSpec(path, template_provider(purpose)))
    return specs
