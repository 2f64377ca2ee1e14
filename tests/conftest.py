"""Fixtures shared by the CLI, config and entry-point tests."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from hello.adapters.cli import root
from hello.adapters.config.loader import clear_config_cache

ANSI_ESCAPE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


@pytest.fixture
def cli_runner() -> CliRunner:
    """A CliRunner; compare ``result.stdout`` exactly, log lines go to stderr."""
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    return lambda text: ANSI_ESCAPE.sub("", text)


@pytest.fixture
def clean_traceback_flags() -> Iterator[None]:
    """Start with tracebacks off and put the previous flags back afterwards."""
    saved = (lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color)
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    yield
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = saved


@pytest.fixture
def fresh_config() -> Iterator[None]:
    """Make ``get_config`` read from disk, and leave no cached result behind."""
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def use_config(monkeypatch: pytest.MonkeyPatch) -> Callable[[dict[str, Any]], list[str | None]]:
    """Make the root group load *data* instead of the files on this machine.

    Returns the list the profiles the group asked for are appended to.

    Example:
        def test_x(cli_runner, use_config):
            profiles = use_config({"lib_log_rich": {"environment": "test"}})
            cli_runner.invoke(cli, ["--profile", "p", "config"])
            assert profiles == ["p"]
    """

    def _install(data: dict[str, Any]) -> list[str | None]:
        requested: list[str | None] = []

        def _fake_get_config(*, profile: str | None = None, **_: Any) -> Config:
            requested.append(profile)
            return Config(data, {})

        monkeypatch.setattr(root, "get_config", _fake_get_config)
        return requested

    return _install
