"""``hello config``: print the merged configuration of this run."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import OutputFormat, display_config

from ..exit_codes import ExitCode
from ..session import Session

logger = logging.getLogger(__name__)


@click.command("config")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["human", "json"], case_sensitive=False),
    default="human",
    help="human: TOML-like with provenance comments; json: machine readable",
)
@click.option("--section", default=None, help="Only this top-level table, e.g. 'lib_log_rich'")
@click.pass_obj
def cli_config(session: Session, output_format: str, section: str | None) -> None:
    """Show the configuration after every layer and ``--set`` override.

    Precedence, lowest first: defaults, app, host, user, .env, environment.
    Use the root ``--profile`` option to look at another profile.
    """
    extra = {"command": "config", "format": output_format, "profile": session.profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.debug("Displaying configuration section %s", section or "<all>")
        # queued log lines must not land in the middle of the dump
        lib_log_rich.runtime.flush()
        try:
            display_config(
                session.config,
                output_format=OutputFormat(output_format.lower()),
                section=section,
                profile=session.profile,
            )
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
