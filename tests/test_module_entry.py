"""``python -m hello`` and the ``hello`` console script share ``main``."""

from __future__ import annotations

import runpy
import subprocess
import sys
from collections.abc import Callable

import pytest

from hello import __init__conf__


def _run_module(monkeypatch: pytest.MonkeyPatch, *args: str) -> int | str | None:
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, *args])
    with pytest.raises(SystemExit) as exc:
        runpy.run_module("hello.__main__", run_name="__main__")
    return exc.value.code


@pytest.mark.os_agnostic
def test_run_module_greets(
    monkeypatch: pytest.MonkeyPatch,
    clean_traceback_flags: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert _run_module(monkeypatch, "world", "42") == 0
    assert capsys.readouterr().out == "Hello World: 42\n"


@pytest.mark.os_agnostic
def test_run_module_reports_failures(
    monkeypatch: pytest.MonkeyPatch,
    clean_traceback_flags: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    assert _run_module(monkeypatch, "fail") != 0
    assert "I should fail" in strip_ansi(capsys.readouterr().err)


def _python_m_hello(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(  # noqa: S603
        [sys.executable, "-m", "hello", *args],
        capture_output=True,
        timeout=60,
        check=False,
        encoding="utf-8",
        errors="replace",
    )


@pytest.mark.os_agnostic
def test_subprocess_prints_only_the_greeting_on_stdout() -> None:
    result = _python_m_hello("world", '""')

    assert result.returncode == 0
    assert result.stdout == 'Hello World: ""\n'


@pytest.mark.os_agnostic
def test_subprocess_config_error_exit_code() -> None:
    result = _python_m_hello("--profile", "../x", "world", "1")

    assert result.returncode == 78
    assert "Invalid profile" in result.stderr
