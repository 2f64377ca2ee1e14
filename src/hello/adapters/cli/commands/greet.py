"""``hello world VALUE``: the greeter on the command line."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from hello.adapters.config.overrides import coerce_value
from hello.application.greeter import world

logger = logging.getLogger(__name__)


# Unknown options pass through as VALUE, so negative numbers need no "--".
@click.command("world", context_settings={"ignore_unknown_options": True})
@click.argument("value")
@click.option("--text", "as_text", is_flag=True, help="Greet VALUE as typed, without JSON parsing")
def cli_world(value: str, as_text: bool) -> None:
    """Print ``Hello World: VALUE``.

    VALUE is read as JSON when it parses, so ``42`` and ``-5`` greet numbers,
    ``'""'`` the empty string and ``'[1,2]'`` a list. Anything else is
    greeted as text.
    """
    greeted = value if as_text else coerce_value(value)
    with lib_log_rich.runtime.bind(job_id="cli-world", extra={"command": "world"}):
        logger.info("Greeting a %s", type(greeted).__name__)
        world(greeted)


__all__ = ["cli_world"]
