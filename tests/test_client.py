from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import httpx
import pytest

from bombay.auth import Authenticated, Credentials, SecondFactorMethod, SecondFactorRequired
from bombay.client import Client
from bombay.errors import (
    ApiError,
    AuthenticationFailed,
    AuthorizationExpired,
    SessionRequiredError,
)
from bombay.request import RequestParameters, TargetApi
from bombay.schema.mood import Mood
from bombay.session import Session
from bombay.transport import HttpxTransport

if TYPE_CHECKING:
    from collections.abc import Callable

    from conftest import FakeApi

CREDENTIALS = Credentials(email="listener@example.com", password="hunter2")


def test_sign_in_stores_the_session(client: Client, fake_api: FakeApi) -> None:
    fake_api.on("POST", "/sign-in", json={}, headers={"Set-Cookie": "cid=fresh; Path=/"})

    outcome = client.sign_in(CREDENTIALS)

    assert isinstance(outcome, Authenticated)
    assert client.is_signed_in
    assert client.sessions.current is outcome.session


def test_failed_second_factor_keeps_the_stored_session(
    signed_in_client: Client, fake_api: FakeApi, payload: Callable[[str], Any]
) -> None:
    previous = signed_in_client.sessions.current

    def sign_in(request: httpx.Request) -> httpx.Response:
        if "Auth" in json.loads(request.content):
            return httpx.Response(400, json={"Message": "Invalid code"})
        return httpx.Response(200, json=payload("sign_in_totp.json"))

    fake_api.route("POST", "/sign-in", sign_in)

    outcome = signed_in_client.sign_in(CREDENTIALS)
    assert isinstance(outcome, SecondFactorRequired)
    assert signed_in_client.sessions.current is previous

    with pytest.raises(AuthenticationFailed):
        signed_in_client.complete_second_factor(
            outcome.challenge, SecondFactorMethod.TOTP, "000000"
        )

    assert signed_in_client.sessions.current is previous


def test_complete_second_factor_stores_the_session(
    client: Client, fake_api: FakeApi, payload: Callable[[str], Any]
) -> None:
    def sign_in(request: httpx.Request) -> httpx.Response:
        if "Auth" in json.loads(request.content):
            return httpx.Response(200, headers={"Set-Cookie": "cid=after-totp; Path=/"})
        return httpx.Response(200, json=payload("sign_in_totp.json"))

    fake_api.route("POST", "/sign-in", sign_in)

    outcome = client.sign_in(CREDENTIALS)
    assert isinstance(outcome, SecondFactorRequired)
    assert not client.is_signed_in

    client.complete_second_factor(outcome.challenge, SecondFactorMethod.TOTP, "123456")

    assert client.sessions.current is not None
    assert client.sessions.current.cookies["cid"] == "after-totp"


def test_signed_in_requests_carry_the_session_cookie(
    signed_in_client: Client, fake_api: FakeApi
) -> None:
    fake_api.on("GET", "/me/player-code", json={"PlayerCode": "abc"})

    signed_in_client.user.get_player_code()

    assert fake_api.last.headers["Cookie"] == "cid=session-123"


def test_session_only_endpoint_without_session_sends_nothing(
    client: Client, fake_api: FakeApi
) -> None:
    with pytest.raises(SessionRequiredError):
        client.user.get_info()

    assert fake_api.requests == []


@pytest.mark.parametrize("status", [401, 403])
def test_rejected_session_is_cleared(
    signed_in_client: Client, fake_api: FakeApi, status: int
) -> None:
    fake_api.on("GET", "/me", status=status, json={"Message": "Unauthorized"})

    with pytest.raises(AuthorizationExpired) as exc:
        signed_in_client.user.get_info()

    assert exc.value.status == status
    assert not signed_in_client.is_signed_in


def test_other_errors_keep_the_session(signed_in_client: Client, fake_api: FakeApi) -> None:
    fake_api.on("GET", "/me", status=500, content=b"boom")

    with pytest.raises(ApiError) as exc:
        signed_in_client.user.get_info()

    assert exc.value.status == 500
    assert exc.value.body == "boom"
    assert signed_in_client.is_signed_in


def test_unauthorized_without_session_is_an_api_error(client: Client, fake_api: FakeApi) -> None:
    fake_api.on("GET", "/moods", status=401, json={"Message": "Unauthorized"})

    with pytest.raises(ApiError):
        client.mood.get_all()


def test_sign_out_forgets_the_session(signed_in_client: Client, fake_api: FakeApi) -> None:
    signed_in_client.sign_out()

    assert not signed_in_client.is_signed_in
    assert fake_api.requests == []


def test_generic_get_and_post(
    client: Client, fake_api: FakeApi, payload: Callable[[str], Any]
) -> None:
    mood_payload = payload("mood.json")["Mood"]
    fake_api.on("GET", "/mood/chill", json=mood_payload)
    fake_api.on("POST", "/echo", json=mood_payload)
    fake_api.on("POST", "/noop", status=204)
    fake_api.on("GET", "img/logo.png", target=TargetApi.WWW, content=b"\x89PNG")

    mood = client.get(TargetApi.PLAYER, "/mood/chill", Mood, RequestParameters())
    echoed = client.post(TargetApi.PLAYER, "/echo", Mood, body={"Name": "Chill"})
    client.post_empty(TargetApi.PLAYER, "/noop", (("type", "x"),))
    image = client.get_bytes(TargetApi.WWW, "img/logo.png")

    assert mood.name == "Chill"
    assert echoed == mood
    assert fake_api.requests[0].url.params["limit"] == "3"
    assert fake_api.requests[2].url.params["type"] == "x"
    assert image == b"\x89PNG"


def test_client_closes_its_transport(fake_api: FakeApi) -> None:
    http_client = httpx.Client(transport=httpx.MockTransport(fake_api.handle))
    with Client(transport=HttpxTransport(client=http_client)) as client:
        client.sessions.set(Session(cookies={"cid": "x"}))

    assert http_client.is_closed
