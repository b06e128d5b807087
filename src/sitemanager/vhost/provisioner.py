"""Create and delete workflows for one local site."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from result import Ok, Result, is_err

from sitemanager.common import create_logger

from .hosts import add_host_entry, remove_host_entry
from .models import SiteConfig, SiteError, SiteStep, StepReport, StepStatus
from .nginx import disable_site, enable_site, remove_server_block, write_server_block
from .protocol import CommandRunner, Confirm
from .service import restart_web_server

logger = create_logger("provisioner")

type Step = Callable[[], Result[StepReport, SiteError]]
type StepCallback = Callable[[StepReport], None]


class SiteProvisioner:
    """Runs the create/delete workflows for a site.

    Steps run in order and the first error stops the workflow. Nothing done
    by earlier steps is rolled back. ``on_step`` sees each report as soon as
    its step finishes, so progress is visible even when a later step fails.
    """

    def __init__(
        self,
        site: SiteConfig,
        runner: CommandRunner,
        confirm: Confirm,
        restart_command: Sequence[str],
        on_step: StepCallback | None = None,
    ) -> None:
        self._site = site
        self._runner = runner
        self._confirm = confirm
        self._restart_command = list(restart_command)
        self._on_step = on_step or (lambda _report: None)

    @property
    def site(self) -> SiteConfig:
        return self._site

    def create(self) -> Result[list[StepReport], SiteError]:
        logger.info("Creating site", domain=self._site.domain)
        return self._run_steps(
            [
                lambda: write_server_block(self._site),
                lambda: enable_site(self._site),
                lambda: add_host_entry(self._site),
                self._restart,
            ]
        )

    def delete(self) -> Result[list[StepReport], SiteError]:
        prompt = f"Are you sure you want to delete the configuration for {self._site.domain}?"
        if not self._confirm(prompt):
            logger.info("Deletion declined", domain=self._site.domain)
            report = StepReport(step=SiteStep.CONFIRM, status=StepStatus.CANCELLED, message="Deletion canceled.")
            self._on_step(report)
            return Ok([report])

        logger.info("Deleting site", domain=self._site.domain)
        return self._run_steps(
            [
                lambda: remove_server_block(self._site),
                lambda: disable_site(self._site),
                lambda: remove_host_entry(self._site),
                self._restart,
            ]
        )

    def _restart(self) -> Result[StepReport, SiteError]:
        return restart_web_server(self._runner, self._restart_command)

    def _run_steps(self, steps: list[Step]) -> Result[list[StepReport], SiteError]:
        reports: list[StepReport] = []
        for step in steps:
            result = step()
            if is_err(result):
                return result
            report = result.unwrap()
            logger.debug("Step finished", step=report.step.value, status=report.status.value)
            reports.append(report)
            self._on_step(report)
        return Ok(reports)
