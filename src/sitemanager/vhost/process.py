"""Subprocess-backed command runner."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from pydantic import BaseModel
from result import Err, Ok, Result

from sitemanager.common import create_logger

from .models import ProcessError

logger = create_logger("process")


class CommandOutcome(BaseModel):
    command: list[str]
    exit_code: int
    stdout: str = ""
    stderr: str = ""


class SubprocessRunner:
    """Runs commands with subprocess.run and reports their exit status.

    A non-zero exit is still ``Ok``; deciding whether that is fatal belongs to
    the caller. Only a command that cannot be started is an ``Err``.
    """

    def run(self, command: Sequence[str]) -> Result[CommandOutcome, ProcessError]:
        argv = list(command)
        logger.debug("Running command", command=argv)
        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            return Err(ProcessError(command=argv, message=f"{argv[0]} command not found"))
        except OSError as e:
            return Err(ProcessError(command=argv, message=f"Failed to run {argv[0]}: {e}"))

        logger.debug("Command finished", command=argv, exit_code=completed.returncode)
        return Ok(
            CommandOutcome(
                command=argv,
                exit_code=completed.returncode,
                stdout=completed.stdout or "",
                stderr=completed.stderr or "",
            )
        )
