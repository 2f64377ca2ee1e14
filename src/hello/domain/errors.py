"""Domain exceptions."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A configuration request that cannot be honoured, e.g. an unusable profile name.

    The CLI turns it into exit code 78 (EX_CONFIG).
    """


__all__ = ["ConfigurationError"]
