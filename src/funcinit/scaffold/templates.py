"""Static template content for generated project files.

Templates ship as plain files in the package's ``templates`` directory
and are only read when a file actually has to be written.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from pathlib import Path

# File purpose -> template file name
TEMPLATES: dict[str, str] = {
    "gitignore": "gitignore",
    "host_json": "host.json",
    "local_settings_json": "local.settings.json",
    "vscode_extensions_json": "extensions.json",
    "funcignore": "funcignore",
    "package_json": "package.json",
    "tsconfig_json": "tsconfig.json",
    "powershell_profile": "profile.ps1",
    "python_requirements": "requirements.txt",
    "dotnet_csproj": "project.csproj",
    "dockerfile_dotnet": "Dockerfile.dotnet",
    "dockerfile_node": "Dockerfile.node",
    "dockerfile_python": "Dockerfile.python",
    "dockerfile_powershell": "Dockerfile.powershell",
}


def _get_templates_dir() -> Path:
    """Return the path to the templates directory within the package."""
    return Path(__file__).parent / "templates"


def get_template(purpose: str) -> str:
    """Return the template text for a file purpose.

    Raises:
        KeyError: If no template is registered for purpose.
    """
    template_file = _get_templates_dir() / TEMPLATES[purpose]
    return template_file.read_text(encoding="utf-8")


def template_provider(purpose: str) -> Callable[[], str]:
    """Return a zero-argument callable that reads the template on demand."""
    if purpose not in TEMPLATES:
        raise KeyError(purpose)
    return partial(get_template, purpose)
