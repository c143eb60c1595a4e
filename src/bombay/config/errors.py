"""Configuration errors, rooted in the package error hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import BombayError

if TYPE_CHECKING:
    from collections.abc import Sequence


class ConfigurationError(BombayError):
    """An environment value is present but unusable (e.g. a non-numeric timeout)."""


class MissingConfigurationError(ConfigurationError):
    """Required environment variables are unset or blank."""

    def __init__(self, names: Sequence[str]) -> None:
        self.names = tuple(sorted(names))
        super().__init__(f"Set these environment variables for bombay: {', '.join(self.names)}")
