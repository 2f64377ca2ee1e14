"""The greeter's success marker."""

from __future__ import annotations

from enum import Enum


class Status(str, Enum):
    """What :func:`hello.world` returns. It always succeeds, so ``OK`` is the only member.

    Example:
        >>> Status.OK == "ok"
        True
    """

    OK = "ok"


__all__ = ["Status"]
