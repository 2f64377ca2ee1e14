"""``hello config`` and the root ``--profile``/``--set`` options."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner

from hello.adapters.cli import ExitCode, cli

UseConfig = Callable[[dict[str, Any]], list[str | None]]


@pytest.mark.os_agnostic
def test_config_shows_the_files_on_this_machine(cli_runner: CliRunner, fresh_config: None) -> None:
    assert cli_runner.invoke(cli, ["config"]).exit_code == 0


@pytest.mark.os_agnostic
def test_config_shows_loaded_sections(cli_runner: CliRunner, use_config: UseConfig) -> None:
    use_config({"lib_log_rich": {"environment": "staging"}})

    result = cli_runner.invoke(cli, ["config"])

    assert result.exit_code == 0
    assert "lib_log_rich" in result.stdout
    assert "staging" in result.stdout


@pytest.mark.os_agnostic
def test_config_json_for_one_section(cli_runner: CliRunner, use_config: UseConfig) -> None:
    use_config({"lib_log_rich": {"environment": "staging"}, "other": {"x": 1}})

    result = cli_runner.invoke(cli, ["config", "--format", "JSON", "--section", "lib_log_rich"])

    assert result.exit_code == 0
    assert '"environment": "staging"' in result.stdout
    assert "other" not in result.stdout


@pytest.mark.os_agnostic
def test_unknown_section_exits_with_invalid_argument(cli_runner: CliRunner, use_config: UseConfig) -> None:
    use_config({"lib_log_rich": {}})

    result = cli_runner.invoke(cli, ["config", "--section", "missing"])

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "Error:" in result.stderr


@pytest.mark.os_agnostic
def test_set_override_shows_up_in_config(cli_runner: CliRunner, use_config: UseConfig) -> None:
    use_config({"lib_log_rich": {"environment": "prod"}})

    result = cli_runner.invoke(cli, ["--set", "lib_log_rich.environment=canary", "config"])

    assert result.exit_code == 0
    assert "canary" in result.stdout


@pytest.mark.os_agnostic
@pytest.mark.parametrize("bad", ["no_dot=1", "a.b", "a..b=1"])
def test_malformed_set_is_a_usage_error(bad: str, cli_runner: CliRunner, use_config: UseConfig) -> None:
    use_config({})

    result = cli_runner.invoke(cli, ["--set", bad, "world", "42"])

    assert result.exit_code == 2
    assert "--set" in result.output
    assert "Hello World" not in result.stdout


@pytest.mark.os_agnostic
def test_profile_is_handed_to_the_loader(cli_runner: CliRunner, use_config: UseConfig) -> None:
    requested = use_config({})

    result = cli_runner.invoke(cli, ["--profile", "staging", "world", "42"])

    assert result.exit_code == 0
    assert requested == ["staging"]


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["../etc", "foo/bar"])
def test_unusable_profile_exits_with_config_error(profile: str, cli_runner: CliRunner, fresh_config: None) -> None:
    result = cli_runner.invoke(cli, ["--profile", profile, "world", "42"])

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Invalid profile" in result.stderr
    assert result.stdout == ""
