"""Worker runtime and language resolution.

Turns the --worker-runtime/--language flags into a concrete
(WorkerRuntime, language) pair, falling back to interactive selection
when no runtime was given. The ``none`` sentinel is never returned.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from rich.console import Console

from funcinit.models.runtime import (
    WORKER_TO_DISPLAY_STRINGS,
    WorkerRuntime,
    available_worker_runtimes,
    normalize_language,
    normalize_worker_runtime,
    runtime_from_display_string,
    supported_languages,
)
from funcinit.scaffold.errors import UnknownLanguageError, UnknownRuntimeError

# (prompt text, options) -> chosen option
Selector = Callable[[str, Sequence[str]], str]


def resolve_worker_runtime_and_language(
    worker_runtime: str | None,
    language: str | None,
    *,
    selector: Selector,
    select_language: bool = True,
    console: Console | None = None,
) -> tuple[WorkerRuntime, str]:
    """Resolve explicit or interactive input into a runtime and language.

    Args:
        worker_runtime: Value of --worker-runtime, or None/'' to prompt.
        language: Value of --language, or None.
        selector: Interactive single-choice collaborator.
        select_language: If False, the language is neither prompted for nor
            validated (used when only the runtime matters, e.g.
            Dockerfile-only init).
        console: Rich console for echoed choices and warnings.

    Returns:
        Tuple of (runtime, language). Language is '' when no qualifier applies.

    Raises:
        UnknownRuntimeError: If worker_runtime matches no known runtime.
        UnknownLanguageError: If language is not valid for the runtime.
    """
    console = console or Console()
    if not select_language:
        language = None

    if not worker_runtime:
        runtime = _select_worker_runtime(selector, console)
        resolved_language = ""
        if select_language:
            resolved_language = _select_language_if_relevant(runtime, selector, console)
        return runtime, resolved_language

    runtime = normalize_worker_runtime(worker_runtime)
    if runtime is None:
        allowed = [r.value for r in available_worker_runtimes()]
        raise UnknownRuntimeError(worker_runtime, allowed)

    if language is None:
        return runtime, normalize_language(worker_runtime)
    return runtime, _validate_language(runtime, language, console)


def _select_worker_runtime(selector: Selector, console: Console) -> WorkerRuntime:
    choice = selector("Select a worker runtime", list(WORKER_TO_DISPLAY_STRINGS.values()))
    runtime = runtime_from_display_string(choice)
    console.print(f"[bold cyan]{runtime.value}[/bold cyan]")
    return runtime


def _select_language_if_relevant(
    runtime: WorkerRuntime, selector: Selector, console: Console
) -> str:
    languages = supported_languages(runtime)
    if not languages:
        return ""
    choice = selector("Select a language", languages)
    console.print(f"[bold cyan]{choice}[/bold cyan]")
    return choice


def _validate_language(runtime: WorkerRuntime, language: str, console: Console) -> str:
    allowed = supported_languages(runtime)
    if not allowed:
        console.print(
            f"[yellow]--language is ignored for worker runtime '{runtime.value}'[/yellow]"
        )
        return ""
    normalized = normalize_language(language)
    if normalized not in allowed:
        raise UnknownLanguageError(language, runtime.value, allowed)
    return normalized
