"""Exceptions raised by the bombay client."""

from __future__ import annotations


class BombayError(Exception):
    """Base class for every error raised by this package."""


class TransportError(BombayError):
    """Raised when the request never produced an HTTP response."""


class AuthenticationFailed(BombayError):
    """Raised when credentials or a second-factor proof are rejected."""


class UnsupportedMethod(BombayError):
    """Raised when a second-factor channel is not offered by the challenge."""

    def __init__(self, method: str, offered: tuple[str, ...]) -> None:
        offered_list = ", ".join(offered) or "none"
        super().__init__(f"Second factor {method!r} is not offered (offered: {offered_list})")
        self.method = method
        self.offered = offered


class MalformedResponse(BombayError):
    """Raised when a payload cannot be mapped onto its response model."""

    def __init__(
        self,
        *,
        field: str,
        expected: str,
        actual: str,
        model: str | None = None,
        detail: str | None = None,
    ) -> None:
        where = f"{model}.{field}" if model else field
        message = f"Malformed response at {where}: expected {expected}, got {actual}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.field = field
        self.expected = expected
        self.actual = actual
        self.model = model


class AuthorizationExpired(BombayError):
    """Raised when the API rejects a call made with the current session."""

    def __init__(self, message: str, *, status: int) -> None:
        super().__init__(message)
        self.status = status


class SessionRequiredError(BombayError):
    """Raised before any I/O when a signed-in endpoint is used without a session."""


class ApiError(BombayError):
    """Raised for non-success responses that have no more specific meaning."""

    def __init__(self, message: str, *, status: int, body: str | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class InvalidParameterError(BombayError, ValueError):
    """Raised when a caller-supplied value fails a local check."""


__all__ = [
    "ApiError",
    "AuthenticationFailed",
    "AuthorizationExpired",
    "BombayError",
    "InvalidParameterError",
    "MalformedResponse",
    "SessionRequiredError",
    "TransportError",
    "UnsupportedMethod",
]
