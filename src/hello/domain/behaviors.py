"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

import decimal
import re
from collections.abc import Mapping
from typing import Any

GREETING_PREFIX = "Hello World: "

_BARE_WORD = re.compile(r"[a-z][A-Za-z0-9_@]*")
_NAMED_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\v": "\\v",
    "\f": "\\f",
    "\r": "\\r",
    "\x1b": "\\e",
    "\x7f": "\\d",
}
# C0 and C1 controls plus U+2028/U+2029: everything str.splitlines() breaks on.
_LINE_BREAKING = re.compile(r"[\x00-\x1f\x7f-\x9f\u2028\u2029]")
_QUOTED = re.compile(r"[\\\"\x00-\x1f\x7f-\x9f\u2028\u2029]")
_ELLIPSIS = "..."
MAX_DEPTH = 100


def _escape_char(match: re.Match[str]) -> str:
    char = match.group()
    return _NAMED_ESCAPES.get(char) or f"\\x{{{ord(char):X}}}"


def _escape(text: str) -> str:
    return _QUOTED.sub(_escape_char, text)


def _quote(text: str) -> str:
    return f'"{_escape(text)}"'


def _render_int(number: int) -> str:
    try:
        return repr(number)
    except ValueError:
        # longer than sys.get_int_max_str_digits()
        return str(decimal.Decimal(number))


def _render_bytes(data: bytes | bytearray) -> str:
    if data and all(0x20 <= byte < 0x7F for byte in data):
        return f"<<{_quote(data.decode('ascii'))}>>"
    return "<<" + ",".join(map(str, data)) + ">>"


def _render_other(value: Any) -> str:
    try:
        text = repr(value)
    except Exception:
        return f"<{type(value).__name__}>"
    return _LINE_BREAKING.sub(_escape_char, text)


def _render(value: Any, active: set[int], depth: int) -> str:
    if isinstance(value, str):
        return value if _BARE_WORD.fullmatch(value) else _quote(value)
    # bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "undefined"
    if isinstance(value, int):
        return _render_int(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, bytes | bytearray):
        return _render_bytes(value)
    if not isinstance(value, list | tuple | set | frozenset | Mapping):
        return _render_other(value)

    if depth >= MAX_DEPTH or id(value) in active:
        return _ELLIPSIS
    active.add(id(value))
    depth += 1
    try:
        if isinstance(value, Mapping):
            pairs = [f"{_render(k, active, depth)} => {_render(v, active, depth)}" for k, v in value.items()]
            return "#{" + ",".join(pairs) + "}"
        parts = [_render(item, active, depth) for item in value]
        if isinstance(value, tuple):
            return "{" + ",".join(parts) + "}"
        if isinstance(value, set | frozenset):
            parts.sort()
        return "[" + ",".join(parts) + "]"
    finally:
        active.discard(id(value))


def render(value: Any) -> str:
    r"""Return the human-readable rendering of an arbitrary value.

    Text that reads as a plain lowercase word is printed bare; any other
    text (including the empty string) is double-quoted, with every control
    character escaped so the result never spans more than one line.
    Containers render recursively in term notation: lists as ``[...]``,
    tuples as ``{...}``, mappings as ``#{k => v}``. Other objects fall back
    to their ``repr``.

    Never raises. A container met again inside itself, or nested deeper
    than :data:`MAX_DEPTH`, renders as ``...``.

    Example:
        >>> render("world")
        'world'
        >>> render("")
        '""'
        >>> render(42)
        '42'
        >>> render([1, "two words", (None, True)])
        '[1,"two words",{undefined,true}]'
        >>> render({"a": b"hi"})
        '#{a => <<"hi">>}'
        >>> print(render("tab\there\vand\x1cthere"))
        "tab\there\vand\x{1C}there"
    """
    return _render(value, set(), 0)


def format_greeting(value: Any) -> str:
    r"""Return the greeting line for *value*, including the line terminator.

    Example:
        >>> format_greeting("world")
        'Hello World: world\n'
        >>> format_greeting(42)
        'Hello World: 42\n'
    """
    return f"{GREETING_PREFIX}{render(value)}\n"


__all__ = [
    "GREETING_PREFIX",
    "MAX_DEPTH",
    "format_greeting",
    "render",
]
