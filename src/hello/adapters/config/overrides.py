"""Turn raw command-line text into configuration values.

:func:`coerce_value` reads a string as JSON when it can; the ``world``
command uses it for VALUE and :func:`apply_overrides` for the right-hand
side of every ``--set SECTION.KEY=VALUE``.
"""

from __future__ import annotations

from typing import Any

import orjson
from lib_layered_config import Config


def coerce_value(raw: str) -> Any:
    """Return the JSON value *raw* spells, or *raw* itself when it is not JSON.

    Examples:
        >>> coerce_value("42")
        42
        >>> coerce_value('[1,"a"]')
        [1, 'a']
        >>> coerce_value('""')
        ''
        >>> coerce_value("null") is None
        True
        >>> coerce_value("world")
        'world'
    """
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def split_override(raw: str) -> tuple[list[str], Any]:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into its dotted path and value.

    Only the first ``=`` separates path from value.

    Raises:
        ValueError: No ``=``, no dot in the path, or an empty path segment.

    Examples:
        >>> split_override("lib_log_rich.console_level=DEBUG")
        (['lib_log_rich', 'console_level'], 'DEBUG')
        >>> split_override("a.b.c=x=1")
        (['a', 'b', 'c'], 'x=1')
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"{raw!r} has no '=' (expected SECTION.KEY=VALUE)")
    keys = path.split(".")
    if len(keys) < 2:
        raise ValueError(f"{raw!r} names no key (expected SECTION.KEY=VALUE)")
    if "" in keys:
        raise ValueError(f"{raw!r} has an empty name in {path!r}")
    return keys, coerce_value(value)


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return *config* with each ``--set`` string merged in, later ones winning.

    Raises:
        ValueError: A string is malformed, or one override uses a key as a
            table that another already set to a plain value.

    Examples:
        >>> cfg = Config({"s": {"k": 1}}, {})
        >>> merged = apply_overrides(cfg, ("s.k=2", "s.t.u=true"))
        >>> merged["s"]["k"], merged["s"]["t"]["u"]
        (2, True)
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    merged: dict[str, Any] = {}
    for raw in raw_overrides:
        keys, value = split_override(raw)
        table = merged
        for key in keys[:-1]:
            table = table.setdefault(key, {})
            if not isinstance(table, dict):
                raise ValueError(f"{raw!r} treats {key!r} as a table, but it was already set to a value")
        table[keys[-1]] = value
    return config.with_overrides(merged)


__all__ = [
    "apply_overrides",
    "coerce_value",
    "split_override",
]
