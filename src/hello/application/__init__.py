"""Application layer: the ``world`` use case."""

from __future__ import annotations

from .greeter import world

__all__ = ["world"]
