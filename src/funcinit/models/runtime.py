"""Worker runtime identities and the lookup tables that describe them.

WorkerRuntime is a closed set plus the ``none`` sentinel, which marks a
project whose runtime has not been determined yet. The tables below are
the single source for display strings, accepted aliases, and the
languages a runtime can be written in.
"""

from __future__ import annotations

from enum import Enum


class WorkerRuntime(str, Enum):
    """Execution platform a scaffolded project targets."""

    none = "none"
    dotnet = "dotnet"
    node = "node"
    python = "python"
    java = "java"
    powershell = "powershell"


class Languages:
    """Language qualifiers for multi-language runtimes."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"


# Interactive menu text per runtime; order is menu order.
WORKER_TO_DISPLAY_STRINGS: dict[WorkerRuntime, str] = {
    WorkerRuntime.dotnet: "dotnet",
    WorkerRuntime.node: "node",
    WorkerRuntime.python: "python",
    WorkerRuntime.java: "java",
    WorkerRuntime.powershell: "powershell (preview)",
}

# Lowercase alias -> runtime. The sentinel is intentionally absent.
_RUNTIME_ALIASES: dict[str, WorkerRuntime] = {
    "dotnet": WorkerRuntime.dotnet,
    "csharp": WorkerRuntime.dotnet,
    "c#": WorkerRuntime.dotnet,
    "fsharp": WorkerRuntime.dotnet,
    "f#": WorkerRuntime.dotnet,
    "node": WorkerRuntime.node,
    "javascript": WorkerRuntime.node,
    "js": WorkerRuntime.node,
    "typescript": WorkerRuntime.node,
    "ts": WorkerRuntime.node,
    "python": WorkerRuntime.python,
    "py": WorkerRuntime.python,
    "java": WorkerRuntime.java,
    "powershell": WorkerRuntime.powershell,
    "pwsh": WorkerRuntime.powershell,
}

_LANGUAGE_ALIASES: dict[str, str] = {
    "javascript": Languages.JAVASCRIPT,
    "js": Languages.JAVASCRIPT,
    "typescript": Languages.TYPESCRIPT,
    "ts": Languages.TYPESCRIPT,
}

WORKER_TO_SUPPORTED_LANGUAGES: dict[WorkerRuntime, list[str]] = {
    WorkerRuntime.node: [Languages.JAVASCRIPT, Languages.TYPESCRIPT],
}


def available_worker_runtimes() -> list[WorkerRuntime]:
    """Return every selectable runtime, excluding the sentinel."""
    return list(WORKER_TO_DISPLAY_STRINGS)


def available_worker_runtimes_string() -> str:
    """Comma-separated canonical runtime names for help and error text."""
    return ", ".join(r.value for r in available_worker_runtimes())


def normalize_worker_runtime(value: str) -> WorkerRuntime | None:
    """Fold case and aliases; return None when nothing matches."""
    return _RUNTIME_ALIASES.get(value.strip().lower())


def normalize_language(value: str) -> str:
    """Return the language a runtime or language string encodes, or ''."""
    return _LANGUAGE_ALIASES.get(value.strip().lower(), "")


def supported_languages(runtime: WorkerRuntime) -> list[str]:
    return WORKER_TO_SUPPORTED_LANGUAGES.get(runtime, [])


def runtime_from_display_string(display: str) -> WorkerRuntime:
    """Map a menu string back to its runtime by exact match.

    Raises:
        LookupError: If the string is not in the display table. The menu
            only offers table values, so this signals a programming error.
    """
    for runtime, text in WORKER_TO_DISPLAY_STRINGS.items():
        if text == display:
            return runtime
    raise LookupError(f"No worker runtime is displayed as '{display}'")
