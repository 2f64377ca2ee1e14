"""Exit codes the ``hello`` command returns on its own account.

Exceptions escaping a command are mapped by ``lib_cli_exit_tools`` instead.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """errno (22 = EINVAL) and sysexits.h (78 = EX_CONFIG) values.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
