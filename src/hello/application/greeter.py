"""The greeter: print ``Hello World: <value>`` and report success."""

from __future__ import annotations

import logging
import sys
from typing import Any

from ..domain.behaviors import format_greeting
from ..domain.enums import Status

logger = logging.getLogger(__name__)


def world(value: Any) -> Status:
    r"""Write the greeting for *value* to standard output and return ``Status.OK``.

    The line is ``Hello World: `` + :func:`~hello.domain.behaviors.render` of
    *value* + ``\n``, written with one ``write`` call to whatever
    ``sys.stdout`` is at call time. Rendering never fails, so only errors of
    the stream itself reach the caller.

    Example:
        >>> world("world")
        Hello World: world
        <Status.OK: 'ok'>
        >>> world("") == "ok"
        Hello World: ""
        True
    """
    line = format_greeting(value)
    sys.stdout.write(line)
    logger.debug("Wrote greeting of %d characters", len(line))
    return Status.OK


__all__ = ["world"]
