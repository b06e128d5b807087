from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from result import Err, Ok

from sitemanager.common import create_logger, resolve_working_directory, setup_cli_logging
from sitemanager.config import ConfigError, FileConfigStore, SiteManagerConfig
from sitemanager.settings import settings
from sitemanager.vhost import SiteConfig, SiteError, SiteProvisioner, StepReport, StepStatus, SubprocessRunner

logger = create_logger("cli")

ACTIONS = {
    "create": "Create a new domain configuration",
    "delete": "Delete domain configuration",
}

app = typer.Typer(
    help="Provision a local nginx site named after the current directory.",
    add_completion=False,
)


@app.command()
def run() -> None:
    """Create or delete the <folder>.test site for the current directory."""
    config = _load_config()
    _setup_logging(config)

    site = _resolve_site(config)
    action = _select_action()
    logger.debug("Action selected", action=action, domain=site.domain)

    provisioner = SiteProvisioner(
        site=site,
        runner=SubprocessRunner(),
        confirm=_confirm,
        restart_command=config.service.restart_command,
        on_step=_echo_step,
    )
    result = provisioner.create() if action == "create" else provisioner.delete()

    match result:
        case Ok(_):
            logger.info("Action completed", action=action, domain=site.domain)
        case Err(error):
            _handle_site_error(error)
            raise typer.Exit(code=1)


def _load_config() -> SiteManagerConfig:
    store = FileConfigStore(
        directories=settings.to_app_directories(),
        filename=settings.paths.config_filename,
    )
    match store.load():
        case Ok(config):
            return config
        case Err(error):
            _handle_config_error(error)
            raise typer.Exit(code=1)


def _setup_logging(config: SiteManagerConfig) -> None:
    if config.logging.enabled:
        setup_cli_logging(
            app_info=settings.app,
            config=config.logging,
            directories=settings.to_app_directories(),
            paths=settings.paths,
        )
        logger.debug("CLI logging initialized", config=config.logging.model_dump())


def _resolve_site(config: SiteManagerConfig) -> SiteConfig:
    working_dir = resolve_working_directory(Path.cwd())
    try:
        return SiteConfig.from_directory(working_dir, config)
    except ValidationError:
        typer.secho(f"Cannot derive a site name from {working_dir}", fg=typer.colors.RED)
        raise typer.Exit(code=1)


def _select_action() -> str:
    for name, description in ACTIONS.items():
        typer.echo(f"  {name:<8} {description}")
    choices = ", ".join(ACTIONS)
    while True:
        action = typer.prompt(f"Select action ({choices})").strip().lower()
        if action in ACTIONS:
            return action
        typer.secho(f"'{action}' is not one of: {choices}", fg=typer.colors.RED)


def _confirm(prompt: str) -> bool:
    return typer.confirm(prompt, default=True)


def _echo_step(report: StepReport) -> None:
    color = typer.colors.YELLOW if report.status in (StepStatus.NOT_FOUND, StepStatus.CANCELLED) else None
    typer.secho(report.message, fg=color)


def _handle_site_error(error: SiteError) -> None:
    logger.error("Action failed", error=error.message, kind=type(error).__name__)
    typer.secho(error.message, fg=typer.colors.RED)


def _handle_config_error(error: ConfigError) -> None:
    message = f"{error.message} ({error.path})"
    line = getattr(error, "line", None)
    field = getattr(error, "field", None)
    if line is not None:
        message = f"{message} at line {line}"
    elif field is not None:
        message = f"{message} [field: {field}]"

    typer.secho(message, fg=typer.colors.RED)


def main() -> None:
    """Entrypoint for the sitemanager CLI."""
    app()
