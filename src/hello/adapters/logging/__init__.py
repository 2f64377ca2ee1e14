"""Logging adapter: lib_log_rich runtime setup."""

from __future__ import annotations

from .setup import LogSection, init_logging, runtime_config

__all__ = ["LogSection", "init_logging", "runtime_config"]
