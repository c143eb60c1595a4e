"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import ConfigurationError, MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence


def optional_env_var(name: str) -> str | None:
    """Return an environment variable stripped of whitespace; blank counts as unset."""

    value = os.getenv(name, "").strip()
    return value or None


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return every named variable, or raise naming all of the missing ones at once."""

    values = {name: optional_env_var(name) for name in names}
    missing = [name for name, value in values.items() if value is None]
    if missing:
        raise MissingConfigurationError(missing)
    return {name: value for name, value in values.items() if value is not None}


def optional_float_env_var(name: str) -> float | None:
    value = optional_env_var(name)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError as err:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from err
