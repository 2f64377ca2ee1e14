"""Configuration adapter: lib_layered_config loading and ``--set`` overrides."""

from __future__ import annotations

from .loader import DEFAULT_CONFIG_FILE, check_profile, clear_config_cache, get_config
from .overrides import apply_overrides, coerce_value, split_override

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "apply_overrides",
    "check_profile",
    "clear_config_cache",
    "coerce_value",
    "get_config",
    "split_override",
]
