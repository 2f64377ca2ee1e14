"""Run the ``hello`` group and turn its outcome into a process exit code."""

from __future__ import annotations

import threading
from collections.abc import Sequence

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from hello import __init__conf__

from .exit_codes import ExitCode
from .root import cli

#: Characters of traceback text printed without and with ``--traceback``.
SUMMARY_LIMIT = 500
VERBOSE_LIMIT = 10_000


def _report(exc: BaseException) -> int:
    verbose = bool(lib_cli_exit_tools.config.traceback)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=VERBOSE_LIMIT if verbose else SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``hello`` with *argv* (default ``sys.argv[1:]``) and return the exit code.

    Click usage errors are printed the click way; any other exception is
    summarised by ``lib_cli_exit_tools``, in full with ``--traceback``. The
    traceback flags a run sets are undone afterwards, and logging is shut
    down when this is the main thread.

    Example:
        >>> main(["world", "42"])  # doctest: +SKIP
        Hello World: 42
        0
    """
    saved = (lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color)
    try:
        outcome = cli.main(
            args=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
            standalone_mode=False,
        )
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # raised by commands that already printed their own message
        return exc.code if isinstance(exc.code, int) else lib_cli_exit_tools.get_system_exit_code(exc)
    except BaseException as exc:
        return _report(exc)
    finally:
        lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = saved
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()
    # non-standalone click returns the code of ctx.exit() and --help/--version
    return outcome if isinstance(outcome, int) else ExitCode.SUCCESS


__all__ = ["SUMMARY_LIMIT", "VERBOSE_LIMIT", "main"]
