"""Static package metadata surfaced to CLI commands and documentation.

Values here are kept in sync with ``pyproject.toml``; the version line is
the single field patched on release.
"""

from __future__ import annotations

#: Distribution name.
name = "hello"
#: One-line description shown as the CLI help header.
title = "Print a greeting for any value and report success"
#: Package version.
version = "1.0.0"
#: Console script name.
shell_command = "hello"

#: lib_layered_config identifiers controlling platform-specific config paths.
LAYEREDCONF_VENDOR = "hello"
LAYEREDCONF_APP = "hello"
LAYEREDCONF_SLUG = "hello"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for hello:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
        ("config_slug", LAYEREDCONF_SLUG),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
