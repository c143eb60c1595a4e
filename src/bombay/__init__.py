from __future__ import annotations

from importlib import metadata

from .auth import (
    Authenticated,
    AuthenticationFlow,
    Credentials,
    EmailLinkProof,
    SecondFactorChallenge,
    SecondFactorMethod,
    SecondFactorRequired,
    SignInState,
    TotpProof,
)
from .client import Client
from .config import ClientConfig, configure_logging, get_client_config
from .errors import (
    ApiError,
    AuthenticationFailed,
    AuthorizationExpired,
    BombayError,
    InvalidParameterError,
    MalformedResponse,
    SessionRequiredError,
    TransportError,
    UnsupportedMethod,
)
from .request import (
    PaginationParameters,
    PlaylistItemOperation,
    PlaylistItemsOperation,
    RequestParameters,
    TargetApi,
)
from .session import Session, SessionStore

try:
    __version__ = metadata.version("bombay")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "ApiError",
    "Authenticated",
    "AuthenticationFailed",
    "AuthenticationFlow",
    "AuthorizationExpired",
    "BombayError",
    "Client",
    "ClientConfig",
    "Credentials",
    "EmailLinkProof",
    "InvalidParameterError",
    "MalformedResponse",
    "PaginationParameters",
    "PlaylistItemOperation",
    "PlaylistItemsOperation",
    "RequestParameters",
    "SecondFactorChallenge",
    "SecondFactorMethod",
    "SecondFactorRequired",
    "Session",
    "SessionRequiredError",
    "SessionStore",
    "SignInState",
    "TargetApi",
    "TotpProof",
    "TransportError",
    "UnsupportedMethod",
    "configure_logging",
    "get_client_config",
]
