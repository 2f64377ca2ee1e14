"""The ``hello`` command group.

Every run loads configuration (``--profile``, ``--set``), starts logging
from it and records ``--traceback`` for the error handler in
:mod:`hello.adapters.cli.main`, before any subcommand executes.
"""

from __future__ import annotations

import lib_cli_exit_tools
import rich_click as click

from hello import __init__conf__
from hello.adapters.config.loader import get_config
from hello.adapters.config.overrides import apply_overrides
from hello.adapters.logging.setup import init_logging
from hello.domain.errors import ConfigurationError

from .commands import cli_config, cli_fail, cli_info, cli_world
from .exit_codes import ExitCode
from .session import Session


@click.group(
    help=__init__conf__.title,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
)
@click.version_option(
    __init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message="%(prog)s version %(version)s",
)
@click.option("--traceback/--no-traceback", default=False, help="Show the full Python traceback on errors")
@click.option("--profile", default=None, help="Read configuration from a named profile, e.g. 'test'")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value for this run (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Prepare the run and store a :class:`~hello.adapters.cli.session.Session` in ``ctx.obj``.

    Example:
        >>> from click.testing import CliRunner
        >>> CliRunner().invoke(cli, ["world", "42"]).stdout
        'Hello World: 42\\n'
    """
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    try:
        config = get_config(profile=profile)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    try:
        config = apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--set'") from exc

    init_logging(config)
    ctx.obj = Session(config=config, profile=profile)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in (cli_world, cli_info, cli_config, cli_fail):
    cli.add_command(_command)


__all__ = ["cli"]
