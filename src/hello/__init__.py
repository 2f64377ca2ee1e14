"""Print ``Hello World: <value>`` for any Python value.

>>> import hello
>>> hello.world("world")
Hello World: world
<Status.OK: 'ok'>
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .application.greeter import world
from .domain.behaviors import GREETING_PREFIX, format_greeting, render
from .domain.enums import Status

__all__ = [
    "GREETING_PREFIX",
    "Status",
    "format_greeting",
    "print_info",
    "render",
    "world",
]
