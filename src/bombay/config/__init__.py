"""Configuration helpers."""

from __future__ import annotations

from .account import AccountConfig, get_account_config
from .client import ClientConfig, get_client_config
from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging

__all__ = [
    "AccountConfig",
    "ClientConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "configure_logging",
    "get_account_config",
    "get_client_config",
    "optional_env_var",
    "require_env_vars",
]
