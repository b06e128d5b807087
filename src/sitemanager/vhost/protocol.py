"""Capabilities the workflows need from the outside world."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from result import Result

from .models import ProcessError
from .process import CommandOutcome


class CommandRunner(Protocol):
    """Runs an external command to completion."""

    def run(self, command: Sequence[str]) -> Result[CommandOutcome, ProcessError]: ...


class Confirm(Protocol):
    """Asks the user a yes/no question."""

    def __call__(self, prompt: str) -> bool: ...
