"""The ``hello`` command-line interface."""

from __future__ import annotations

from .exit_codes import ExitCode
from .main import main
from .root import cli
from .session import Session

__all__ = ["ExitCode", "Session", "cli", "main"]
