"""Shared fixtures for funcinit tests."""

from __future__ import annotations

import io
from collections.abc import Sequence

import pytest
from rich.console import Console


class FakeSelector:
    """Selector that answers prompts from a queue and records each prompt."""

    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.prompts: list[tuple[str, list[str]]] = []

    def __call__(self, prompt_text: str, options: Sequence[str]) -> str:
        self.prompts.append((prompt_text, list(options)))
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt_text}")
        answer = self.answers.pop(0)
        assert answer in options
        return answer


@pytest.fixture
def no_prompt() -> FakeSelector:
    """Selector that fails the test if it is ever asked anything."""
    return FakeSelector()


@pytest.fixture
def console() -> Console:
    """Console writing plain text into a buffer, readable via console.file."""
    return Console(file=io.StringIO(), width=200, color_system=None)


def console_output(console: Console) -> str:
    return console.file.getvalue()
