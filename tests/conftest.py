from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx
import pytest

from bombay.client import Client
from bombay.config import ClientConfig
from bombay.request import TargetApi
from bombay.session import Session
from bombay.transport import HttpxTransport

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

FIXTURES = Path(__file__).resolve().parent / "data" / "monstercat"
TEST_CONFIG = ClientConfig(
    player_api_url="https://player.test/api",
    www_url="https://www.test/",
    user_agent="bombay-tests",
)
SESSION_COOKIE_VALUE = "session-123"


def load_fixture(name: str) -> Any:
    return json.loads((FIXTURES / name).read_text())


def _url(path: str, target: TargetApi) -> str:
    base = TEST_CONFIG.player_api_url if target is TargetApi.PLAYER else TEST_CONFIG.www_url
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


class FakeApi:
    """Canned responses keyed by method and URL; every request is recorded."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def on(
        self,
        method: str,
        path: str,
        *,
        target: TargetApi = TargetApi.PLAYER,
        status: int = 200,
        json: object = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            del request
            if content is not None:
                return httpx.Response(status, content=content, headers=headers)
            if json is not None:
                return httpx.Response(status, json=json, headers=headers)
            return httpx.Response(status, headers=headers)

        self._routes[(method, _url(path, target))] = respond

    def route(
        self,
        method: str,
        path: str,
        responder: Callable[[httpx.Request], httpx.Response],
        *,
        target: TargetApi = TargetApi.PLAYER,
    ) -> None:
        self._routes[(method, _url(path, target))] = responder

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, str(request.url.copy_with(query=None)))
        route = self._routes.get(key)
        if route is None:
            return httpx.Response(404, json={"Message": "No route"})
        return route(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def body_of(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def payload() -> Callable[[str], Any]:
    """Loader for the JSON payloads under ``tests/data/monstercat``."""

    return load_fixture


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def transport(fake_api: FakeApi) -> Iterator[HttpxTransport]:
    http_client = httpx.Client(transport=httpx.MockTransport(fake_api.handle))
    with HttpxTransport(TEST_CONFIG, client=http_client) as transport:
        yield transport


@pytest.fixture
def client(transport: HttpxTransport) -> Client:
    return Client(TEST_CONFIG, transport=transport)


@pytest.fixture
def signed_in_client(client: Client) -> Client:
    client.sessions.set(Session(cookies={"cid": SESSION_COOKIE_VALUE}))
    return client
