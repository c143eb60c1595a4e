"""Signed-in session state."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING

from .errors import SessionRequiredError

if TYPE_CHECKING:
    from collections.abc import Mapping

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Session:
    """Opaque credentials returned by a successful sign-in.

    ``cookies`` holds whatever the API set during sign-in (at least the session
    cookie); ``token`` is sent as a bearer token when the API hands one out.
    """

    cookies: Mapping[str, str] = field(repr=False)
    token: str | None = field(default=None, repr=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        object.__setattr__(self, "cookies", MappingProxyType(dict(self.cookies)))

    def headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.cookies:
            headers["Cookie"] = "; ".join(
                f"{name}={value}" for name, value in sorted(self.cookies.items())
            )
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers


class SessionStore:
    """Holds the session of one client.

    Written by the authentication flow and cleared when the API rejects the
    session; every request reads it. No locking is done.
    """

    def __init__(self, session: Session | None = None) -> None:
        self._session = session

    @property
    def current(self) -> Session | None:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    def set(self, session: Session) -> None:
        self._session = session
        log.debug("Session stored")

    def clear(self) -> None:
        if self._session is not None:
            log.debug("Session cleared")
        self._session = None

    def require(self, *, operation: str) -> Session:
        if self._session is None:
            raise SessionRequiredError(f"{operation} requires a signed-in client")
        return self._session
