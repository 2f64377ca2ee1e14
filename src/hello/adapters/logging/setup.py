"""Start the lib_log_rich runtime from the ``[lib_log_rich]`` config section.

Log events go to stderr. The greeting on stdout is written directly by
:func:`hello.application.greeter.world` and never passes through here.
"""

from __future__ import annotations

from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from hello import __init__conf__


class LogSection(BaseModel):
    """The ``[lib_log_rich]`` table; keys beyond these two pass through untouched.

    Example:
        >>> LogSection().service, LogSection().environment
        ('hello', 'prod')
        >>> LogSection.model_validate({"console_level": "DEBUG"}).model_dump()["console_level"]
        'DEBUG'
    """

    model_config = ConfigDict(extra="allow")

    service: str = __init__conf__.name
    environment: str = "prod"


def runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Build the ``RuntimeConfig`` that :func:`init_logging` starts the runtime with."""
    section: Any = config.get("lib_log_rich", default=None) or {}
    settings = LogSection.model_validate(dict(section))
    return lib_log_rich.runtime.RuntimeConfig(**settings.model_dump())


def init_logging(config: Config) -> bool:
    """Start logging for this process unless it is already running.

    Loads ``.env`` first so ``LOG_*`` variables take effect, then routes
    stdlib ``logging`` into the runtime.

    Returns:
        ``True`` if this call started the runtime, ``False`` if it was running.
    """
    if lib_log_rich.runtime.is_initialised():
        return False
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()
    return True


__all__ = [
    "LogSection",
    "init_logging",
    "runtime_config",
]
