"""Layered configuration for the ``hello`` command.

Files are looked up under the ``hello`` vendor/app/slug directories of every
layer, on top of the ``defaultconfig.toml`` bundled next to this module.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from hello import __init__conf__
from hello.domain.errors import ConfigurationError

DEFAULT_CONFIG_FILE = Path(__file__).with_name("defaultconfig.toml")


def check_profile(profile: str) -> str:
    """Return *profile* unchanged if it may be used as a config path segment.

    Raises:
        ConfigurationError: Names ``lib_layered_config`` refuses (too long,
            reserved, path separators, ``..``).

    Examples:
        >>> check_profile("staging-v2")
        'staging-v2'
        >>> check_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        hello.domain.errors.ConfigurationError: Invalid profile '../etc': ...
    """
    try:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid profile {profile!r}: {exc}") from exc
    return profile


@lru_cache(maxsize=4)
def _read(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_FILE,
        start_dir=start_dir,
    )


def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the merged configuration, once per ``(profile, start_dir)``.

    Precedence, lowest first: defaults, app, host, user, ``.env``,
    environment variables.

    Raises:
        ConfigurationError: *profile* is not a usable profile name.

    Example:
        >>> get_config().get("no_such_section", default="fallback")
        'fallback'
    """
    if profile is not None:
        check_profile(profile)
    return _read(profile, start_dir)


def clear_config_cache() -> None:
    """Forget loaded configurations; the next :func:`get_config` reads from disk."""
    _read.cache_clear()


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "check_profile",
    "clear_config_cache",
    "get_config",
]
