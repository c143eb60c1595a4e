"""HTTP transport adapter over httpx."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import httpx

from .config.client import ClientConfig
from .errors import TransportError
from .request import TargetApi

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from .request import ApiRequest

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RawResponse:
    """Status, headers, body and cookies of one HTTP exchange."""

    status: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)
    cookies: Mapping[str, str] = field(default_factory=dict, repr=False)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


@runtime_checkable
class HttpTransport(Protocol):
    """Sends a request descriptor and returns the raw response."""

    def send(self, request: ApiRequest) -> RawResponse:
        ...

    def close(self) -> None:
        ...


class HttpxTransport:
    """Default transport backed by a synchronous ``httpx.Client``.

    Cookies set by responses are returned in ``RawResponse.cookies`` and then
    dropped from the underlying client, so the only credentials ever sent are
    the ones carried by the request descriptor.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self._client = client or httpx.Client(timeout=self.config.timeout_seconds)
        self._default_headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
            **self.config.default_headers,
        }

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def url_for(self, request: ApiRequest) -> str:
        base = (
            self.config.player_api_url
            if request.target is TargetApi.PLAYER
            else self.config.www_url
        )
        return f"{base.rstrip('/')}/{request.path.lstrip('/')}"

    def send(self, request: ApiRequest) -> RawResponse:
        url = self.url_for(request)
        headers = {**self._default_headers, **dict(request.headers)}
        log.debug("%s %s", request.method, url)
        try:
            response = self._client.request(
                request.method,
                url,
                params=list(request.params) or None,
                headers=headers,
                json=request.body,
            )
        except httpx.TransportError as err:
            raise TransportError(f"{request.method} {url} failed: {err}") from err

        cookies = {
            cookie.name: cookie.value
            for cookie in response.cookies.jar
            if cookie.value is not None
        }
        self._client.cookies.clear()
        log.debug("%s %s -> %s", request.method, url, response.status_code)
        return RawResponse(
            status=response.status_code,
            body=response.content,
            headers=dict(response.headers),
            cookies=cookies,
        )
