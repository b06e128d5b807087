"""Test doubles for the command runner and confirmation capabilities."""

from __future__ import annotations

from collections.abc import Sequence

from result import Err, Ok, Result

from sitemanager.vhost import CommandOutcome, ProcessError


class FakeRunner:
    def __init__(self, exit_code: int = 0, missing: bool = False) -> None:
        self.exit_code = exit_code
        self.missing = missing
        self.calls: list[list[str]] = []

    def run(self, command: Sequence[str]) -> Result[CommandOutcome, ProcessError]:
        argv = list(command)
        self.calls.append(argv)
        if self.missing:
            return Err(ProcessError(command=argv, message=f"{argv[0]} command not found"))
        return Ok(CommandOutcome(command=argv, exit_code=self.exit_code, stderr="boom" if self.exit_code else ""))


class RecordingConfirm:
    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.answer
