"""Errors raised by the init workflow.

UserInputError covers bad flags and is reported without a traceback.
UnresolvedRuntimeError means a step ran before the runtime was known,
which is a workflow-ordering defect rather than bad input.
"""

from __future__ import annotations


class FuncInitError(Exception):
    """Base class for errors that abort ``funcinit init``."""


class UserInputError(FuncInitError):
    """Raised when a flag or prompt answer cannot be used."""


class UnknownRuntimeError(UserInputError):
    """Raised when --worker-runtime matches no known runtime."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Worker runtime '{value}' is not a valid option. "
            f"Options are {', '.join(allowed)}"
        )


class UnknownLanguageError(UserInputError):
    """Raised when --language is not one of the runtime's languages."""

    def __init__(self, value: str, runtime: str, allowed: list[str]) -> None:
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Language '{value}' is not supported for worker runtime '{runtime}'. "
            f"Options are {', '.join(allowed)}"
        )


class UnsupportedSourceControlError(UserInputError):
    """Raised when a version control system other than git is requested."""

    def __init__(self, system: str) -> None:
        self.system = system
        super().__init__(f"Only git is supported for source control, got '{system}'")


class UnresolvedRuntimeError(FuncInitError):
    """Raised when a Dockerfile is requested for the ``none`` runtime."""

    def __init__(self) -> None:
        super().__init__("Can't create a Dockerfile for worker runtime 'none'")


class UnsupportedRuntimeForContainerError(FuncInitError):
    """Raised when no Dockerfile template exists for a runtime."""

    def __init__(self, runtime: str) -> None:
        self.runtime = runtime
        super().__init__(f"No Dockerfile template is available for worker runtime '{runtime}'")
