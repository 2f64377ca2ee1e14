"""Domain layer: value rendering and the greeting text, free of I/O."""

from __future__ import annotations

from .behaviors import GREETING_PREFIX, MAX_DEPTH, format_greeting, render
from .enums import Status
from .errors import ConfigurationError

__all__ = [
    "GREETING_PREFIX",
    "MAX_DEPTH",
    "ConfigurationError",
    "Status",
    "format_greeting",
    "render",
]
