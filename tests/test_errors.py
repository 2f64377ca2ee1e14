"""Domain exceptions."""

from __future__ import annotations

import pytest

from hello.domain.errors import ConfigurationError


@pytest.mark.os_agnostic
def test_configuration_error_is_caught_as_value_error() -> None:
    with pytest.raises(ValueError, match="bad profile"):
        raise ConfigurationError("bad profile")
