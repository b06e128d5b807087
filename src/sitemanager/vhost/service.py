"""Web server restart."""

from __future__ import annotations

from collections.abc import Sequence

from result import Err, Ok, Result, is_err

from sitemanager.common import create_logger

from .models import ProcessError, SiteError, SiteStep, StepReport, StepStatus
from .protocol import CommandRunner

logger = create_logger("service")


def restart_web_server(runner: CommandRunner, command: Sequence[str]) -> Result[StepReport, SiteError]:
    result = runner.run(command)
    if is_err(result):
        error = result.unwrap_err()
        logger.error("Restart command could not run", command=error.command, error=error.message)
        return Err(ProcessError(command=error.command, message=f"Failed to restart Nginx: {error.message}"))

    outcome = result.unwrap()
    if outcome.exit_code != 0:
        logger.error(
            "Restart command failed",
            command=outcome.command,
            exit_code=outcome.exit_code,
            stderr=outcome.stderr.strip(),
        )
        return Err(
            ProcessError(
                command=outcome.command,
                exit_code=outcome.exit_code,
                message=f"Failed to restart Nginx (exit status {outcome.exit_code})",
            )
        )

    logger.info("Web server restarted", command=outcome.command)
    return Ok(
        StepReport(
            step=SiteStep.RESTART,
            status=StepStatus.RESTARTED,
            message="Nginx restarted successfully",
        )
    )
