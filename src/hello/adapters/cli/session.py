"""State the root group leaves in ``ctx.obj`` for its subcommands."""

from __future__ import annotations

from dataclasses import dataclass

from lib_layered_config import Config


@dataclass(frozen=True)
class Session:
    """Configuration of the current run, ``--set`` overrides already merged in."""

    config: Config
    profile: str | None = None


__all__ = ["Session"]
