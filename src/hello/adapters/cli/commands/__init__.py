"""Subcommands of the ``hello`` group."""

from __future__ import annotations

from .config import cli_config
from .greet import cli_world
from .info import cli_fail, cli_info

__all__ = ["cli_config", "cli_fail", "cli_info", "cli_world"]
