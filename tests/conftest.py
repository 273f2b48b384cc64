"""Pytest configuration and shared fakes.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
on the import path. The fakes below stand in for git, the package managers
and the keyboard so no test ever spawns a real process.
"""

from collections.abc import Iterable, Sequence
from typing import Optional

import pytest

from create_next_elysia.domain.entities import StepResult


class RecordingRunner:
    """CommandRunnerProtocol fake: records every call, returns scripted exit codes."""

    def __init__(
        self,
        returncodes: Optional[dict[str, int]] = None,
        errors: Optional[dict[str, OSError]] = None,
    ) -> None:
        self.returncodes = returncodes or {}
        self.errors = errors or {}
        self.calls: list[tuple[list[str], str, str]] = []

    def run(self, args: Sequence[str], cwd: str, step: str) -> StepResult:
        self.calls.append((list(args), cwd, step))
        if step in self.errors:
            raise self.errors[step]
        return StepResult(step=step, returncode=self.returncodes.get(step, 0))

    @property
    def steps(self) -> list[str]:
        return [step for _, _, step in self.calls]

    @property
    def argvs(self) -> list[list[str]]:
        return [args for args, _, _ in self.calls]


class ScriptedPrompter:
    """PromptProtocol fake: answers in order, then empty strings (like a closed stdin)."""

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self._answers = list(answers)
        self.questions: list[str] = []

    def ask(self, question: str) -> str:
        self.questions.append(question)
        if self._answers:
            return self._answers.pop(0)
        return ""


@pytest.fixture
def make_runner():
    """Factory for RecordingRunner instances."""
    return RecordingRunner


@pytest.fixture
def make_prompter():
    """Factory for ScriptedPrompter instances."""
    return ScriptedPrompter
