"""HTTP client configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING, Final

from .env import optional_env_var, optional_float_env_var

if TYPE_CHECKING:
    from collections.abc import Mapping

PLAYER_API_URL: Final[str] = "https://player.monstercat.app/api"
WWW_URL: Final[str] = "https://www.monstercat.com/"
SESSION_COOKIE: Final[str] = "cid"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0


def _package_version() -> str:
    try:
        return version("bombay")
    except PackageNotFoundError:
        return "0.0.0"


USER_AGENT: Final[str] = f"bombay v{_package_version()}"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Where and how the client talks to the player API."""

    player_api_url: str = PLAYER_API_URL
    www_url: str = WWW_URL
    user_agent: str = USER_AGENT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    session_cookie: str = SESSION_COOKIE
    default_headers: Mapping[str, str] = field(default_factory=dict)


def get_client_config() -> ClientConfig:
    """Build the client configuration, honouring optional environment overrides."""

    timeout = optional_float_env_var("BOMBAY_TIMEOUT_SECONDS")
    return ClientConfig(
        player_api_url=optional_env_var("BOMBAY_PLAYER_API_URL") or PLAYER_API_URL,
        www_url=optional_env_var("BOMBAY_WWW_URL") or WWW_URL,
        timeout_seconds=timeout if timeout is not None else DEFAULT_TIMEOUT_SECONDS,
    )
