"""nginx server block rendering and sites-available/sites-enabled management.

Only nginx files live here; the hosts file is handled in hosts.py.
"""

from __future__ import annotations

from result import Err, Ok, Result

from sitemanager.common import create_logger

from .models import LinkError, SiteConfig, SiteError, SiteStep, StepReport, StepStatus, WriteError

logger = create_logger("nginx")

SERVER_BLOCK_TEMPLATE = """server {{
    listen 80;
    server_name {domain};
    root {document_root};

    index index.php index.html index.htm;

    location / {{
        try_files $uri $uri/ /index.php?$query_string;
    }}

    location ~ \\.php$ {{
        include snippets/fastcgi-php.conf;
        fastcgi_pass {php_fpm_socket};
        fastcgi_param SCRIPT_FILENAME $document_root$fastcgi_script_name;
        include fastcgi_params;
    }}

    location ~ /\\.ht {{
        deny all;
    }}
}}"""


def render_server_block(site: SiteConfig) -> str:
    return SERVER_BLOCK_TEMPLATE.format(
        domain=site.domain,
        document_root=site.document_root,
        php_fpm_socket=site.php_fpm_socket,
    )


def write_server_block(site: SiteConfig) -> Result[StepReport, SiteError]:
    """Write the server block to sites-available, replacing any existing file."""
    try:
        site.config_path.write_text(render_server_block(site), encoding="utf-8")
    except OSError as e:
        logger.error("Config write failed", path=str(site.config_path), error=str(e))
        return Err(
            WriteError(
                path=site.config_path,
                message=f"Failed to create Nginx config file in sites-available: {e}",
            )
        )

    logger.info("Config written", path=str(site.config_path))
    return Ok(
        StepReport(
            step=SiteStep.CONFIG,
            status=StepStatus.CREATED,
            message=f"Nginx config created: {site.config_path}",
        )
    )


def remove_server_block(site: SiteConfig) -> Result[StepReport, SiteError]:
    if not site.config_path.exists():
        logger.info("Config not found (skip)", path=str(site.config_path))
        return Ok(
            StepReport(
                step=SiteStep.CONFIG,
                status=StepStatus.NOT_FOUND,
                message=f"Nginx config not found: {site.config_path}",
            )
        )

    try:
        site.config_path.unlink()
    except OSError as e:
        logger.error("Config delete failed", path=str(site.config_path), error=str(e))
        return Err(WriteError(path=site.config_path, message=f"Failed to delete Nginx config: {e}"))

    logger.info("Config deleted", path=str(site.config_path))
    return Ok(
        StepReport(
            step=SiteStep.CONFIG,
            status=StepStatus.REMOVED,
            message=f"Nginx config deleted: {site.config_path}",
        )
    )


def enable_site(site: SiteConfig) -> Result[StepReport, SiteError]:
    """Symlink sites-enabled/<domain> to the config; an existing link is left as is."""
    link = site.enabled_link_path
    if link.is_symlink():
        logger.info("Symlink exists (skip)", link=str(link))
        return Ok(
            StepReport(
                step=SiteStep.SYMLINK,
                status=StepStatus.SKIPPED,
                message=f"Symlink already exists: {link}",
            )
        )

    try:
        link.symlink_to(site.config_path)
    except OSError as e:
        logger.error("Symlink create failed", link=str(link), target=str(site.config_path), error=str(e))
        return Err(
            LinkError(
                link_path=link,
                target=site.config_path,
                message=f"Failed to create symlink in sites-enabled: {e}",
            )
        )

    logger.info("Symlink created", link=str(link), target=str(site.config_path))
    return Ok(
        StepReport(
            step=SiteStep.SYMLINK,
            status=StepStatus.CREATED,
            message=f"Symlink created: {link}",
        )
    )


def disable_site(site: SiteConfig) -> Result[StepReport, SiteError]:
    link = site.enabled_link_path
    if not link.is_symlink():
        logger.info("Symlink not found (skip)", link=str(link))
        return Ok(
            StepReport(
                step=SiteStep.SYMLINK,
                status=StepStatus.NOT_FOUND,
                message=f"Symlink not found: {link}",
            )
        )

    try:
        link.unlink()
    except OSError as e:
        logger.error("Symlink delete failed", link=str(link), error=str(e))
        return Err(
            LinkError(
                link_path=link,
                target=site.config_path,
                message=f"Failed to delete symlink in sites-enabled: {e}",
            )
        )

    logger.info("Symlink deleted", link=str(link))
    return Ok(
        StepReport(
            step=SiteStep.SYMLINK,
            status=StepStatus.REMOVED,
            message=f"Symlink deleted: {link}",
        )
    )
