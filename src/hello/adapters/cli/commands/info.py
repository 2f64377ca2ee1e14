"""``hello info`` and ``hello fail``."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from hello import __init__conf__

logger = logging.getLogger(__name__)


@click.command("info")
def cli_info() -> None:
    """Show the installed name, version and config slug."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.debug("Printing package metadata")
        __init__conf__.print_info()


@click.command("fail")
def cli_fail() -> None:
    """Raise RuntimeError to check error reporting and exit codes."""
    with lib_log_rich.runtime.bind(job_id="cli-fail", extra={"command": "fail"}):
        logger.warning("Failing on request")
        raise RuntimeError("I should fail")


__all__ = ["cli_fail", "cli_info"]
