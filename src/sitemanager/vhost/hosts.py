"""Loopback entries for local domains in the system hosts file.

Appending takes an exclusive flock. Updating or removing an existing entry is
an unlocked read-modify-write of the whole file, so a concurrent editor of the
hosts file can lose changes.
"""

from __future__ import annotations

import fcntl
import re
from pathlib import Path

from result import Err, Ok, Result, is_err

from sitemanager.common import create_logger

from .models import ReadError, SiteConfig, SiteError, SiteStep, StepReport, StepStatus, WriteError

logger = create_logger("hosts")

# Undecodable bytes and CRLF line endings must survive a rewrite untouched.
HOSTS_ENCODING = "utf-8"
HOSTS_ERRORS = "surrogateescape"


def _line_pattern(domain: str) -> re.Pattern[str]:
    return re.compile(rf"^[^\r\n]*{re.escape(domain)}[^\r\n]*", re.MULTILINE)


def replace_entry_lines(contents: str, domain: str, entry: str) -> str:
    """Replace every whole line mentioning ``domain`` with ``entry``."""
    return _line_pattern(domain).sub(lambda _: entry, contents)


def blank_entry_lines(contents: str, domain: str) -> str:
    """Empty every line mentioning ``domain``; the line breaks stay behind."""
    return _line_pattern(domain).sub("", contents)


def read_hosts(path: Path) -> Result[str, SiteError]:
    try:
        with path.open(encoding=HOSTS_ENCODING, errors=HOSTS_ERRORS, newline="") as handle:
            return Ok(handle.read())
    except FileNotFoundError:
        return Ok("")
    except OSError as e:
        logger.error("Hosts file read failed", path=str(path), error=str(e))
        return Err(ReadError(path=path, message=f"Failed to read {path}: {e}"))


def _write_hosts(path: Path, contents: str) -> None:
    path.write_text(contents, encoding=HOSTS_ENCODING, errors=HOSTS_ERRORS, newline="")


def _append_locked(path: Path, line: str) -> None:
    with path.open("a", encoding=HOSTS_ENCODING, errors=HOSTS_ERRORS, newline="") as handle:
        fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
        try:
            handle.write(line)
            handle.flush()
        finally:
            fcntl.flock(handle.fileno(), fcntl.LOCK_UN)


def add_host_entry(site: SiteConfig) -> Result[StepReport, SiteError]:
    """Point the site's domain at the loopback address.

    Lines already mentioning the domain are normalized in place; otherwise the
    entry is appended.
    """
    path = site.hosts_file
    read = read_hosts(path)
    if is_err(read):
        return read
    contents = read.unwrap()

    if site.domain in contents:
        try:
            _write_hosts(path, replace_entry_lines(contents, site.domain, site.hosts_entry))
        except OSError as e:
            logger.error("Hosts entry update failed", path=str(path), domain=site.domain, error=str(e))
            return Err(WriteError(path=path, message=f"Failed to update entry in {path}: {e}"))

        logger.info("Hosts entry updated", path=str(path), domain=site.domain)
        return Ok(
            StepReport(
                step=SiteStep.HOSTS,
                status=StepStatus.UPDATED,
                message=f"Hosts file entry updated: {site.domain}",
            )
        )

    try:
        _append_locked(path, f"{site.hosts_entry}\n")
    except OSError as e:
        logger.error("Hosts entry append failed", path=str(path), domain=site.domain, error=str(e))
        return Err(WriteError(path=path, message=f"Failed to add entry to {path}: {e}"))

    logger.info("Hosts entry added", path=str(path), domain=site.domain)
    return Ok(
        StepReport(
            step=SiteStep.HOSTS,
            status=StepStatus.ADDED,
            message=f"Entry added to {path}: {site.domain}",
        )
    )


def remove_host_entry(site: SiteConfig) -> Result[StepReport, SiteError]:
    path = site.hosts_file
    read = read_hosts(path)
    if is_err(read):
        return read
    contents = read.unwrap()

    if site.domain not in contents:
        logger.info("Hosts entry not found (skip)", path=str(path), domain=site.domain)
        return Ok(
            StepReport(
                step=SiteStep.HOSTS,
                status=StepStatus.NOT_FOUND,
                message=f"Domain not found in {path}: {site.domain}",
            )
        )

    try:
        _write_hosts(path, blank_entry_lines(contents, site.domain))
    except OSError as e:
        logger.error("Hosts entry removal failed", path=str(path), domain=site.domain, error=str(e))
        return Err(WriteError(path=path, message=f"Failed to update {path}: {e}"))

    logger.info("Hosts entry removed", path=str(path), domain=site.domain)
    return Ok(
        StepReport(
            step=SiteStep.HOSTS,
            status=StepStatus.REMOVED,
            message=f"Entry removed from {path}: {site.domain}",
        )
    )
