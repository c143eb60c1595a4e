"""Client entry point tying transport, session and endpoint groups together."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from .auth import (
    Authenticated,
    AuthenticationFlow,
    Credentials,
    SecondFactorChallenge,
    SecondFactorMethod,
    SignInOutcome,
)
from .config.client import ClientConfig
from .decoder import decode, parse_json
from .endpoints import (
    ArtistEndpoints,
    MoodEndpoints,
    PlaylistEndpoints,
    ReleaseEndpoints,
    UserEndpoints,
)
from .errors import ApiError, AuthorizationExpired
from .request import (
    ApiRequest,
    RequestParameters,
    ResponseKind,
    TargetApi,
    prepare_request,
    query_for,
)
from .session import SessionStore
from .transport import HttpxTransport

if TYPE_CHECKING:
    from types import TracebackType

    from .request import QueryItems
    from .transport import HttpTransport, RawResponse

log = getLogger(__name__)

_EXPIRED_STATUSES = frozenset({401, 403})


class Client:
    """Synchronous client for the player API.

    Signed-out clients can browse the public catalog. ``sign_in`` (plus
    ``complete_second_factor`` when the account asks for it) stores a session
    that every later request carries. When the API rejects that session the
    client forgets it and raises ``AuthorizationExpired``; it never signs in
    again on its own.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: HttpTransport | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self._transport = transport or HttpxTransport(self.config)
        self.sessions = SessionStore()
        self.auth = AuthenticationFlow(self._transport, self.config)

        self.artist = ArtistEndpoints(self)
        self.mood = MoodEndpoints(self)
        self.playlist = PlaylistEndpoints(self)
        self.release = ReleaseEndpoints(self)
        self.user = UserEndpoints(self)

    def __enter__(self) -> Client:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    @property
    def is_signed_in(self) -> bool:
        return self.sessions.is_authenticated

    # Authentication

    def sign_in(self, credentials: Credentials) -> SignInOutcome:
        outcome = self.auth.sign_in(credentials)
        if isinstance(outcome, Authenticated):
            self.sessions.set(outcome.session)
        return outcome

    def complete_second_factor(
        self,
        challenge: SecondFactorChallenge,
        method: SecondFactorMethod | str,
        code: str | None = None,
    ) -> Authenticated:
        outcome = self.auth.complete_second_factor(challenge, method, code)
        self.sessions.set(outcome.session)
        return outcome

    def request_email_link(self, credentials: Credentials) -> SecondFactorChallenge:
        return self.auth.request_email_link(credentials)

    def sign_out(self) -> None:
        """Forget the session locally; nothing is sent to the API."""

        self.sessions.clear()

    # Request execution

    def send(self, request: ApiRequest) -> RawResponse:
        """Send a request with the session attached and check the status."""

        session = (
            self.sessions.require(operation=request.operation)
            if request.requires_session
            else self.sessions.current
        )
        response = self._transport.send(prepare_request(request, session))
        if response.status in _EXPIRED_STATUSES and session is not None:
            self.sessions.clear()
            log.warning(
                "%s answered HTTP %s; the session was dropped", request.operation, response.status
            )
            raise AuthorizationExpired(
                f"{request.operation} was refused (HTTP {response.status}); sign in again",
                status=response.status,
            )
        if not response.ok:
            raise ApiError(
                f"{request.operation} failed with HTTP {response.status}",
                status=response.status,
                body=response.text(),
            )
        return response

    def call(self, request: ApiRequest) -> Any:
        response = self.send(request)
        match request.expects:
            case ResponseKind.JSON:
                return parse_json(response.body)
            case ResponseKind.BYTES:
                return response.body
            case ResponseKind.EMPTY:
                return None

    # Generic access for paths no endpoint group covers

    def get[T](
        self,
        target: TargetApi,
        path: str,
        model: type[T] | Any,
        params: RequestParameters | QueryItems | None = None,
    ) -> T:
        request = ApiRequest(method="GET", path=path, target=target, params=_params(params))
        return decode(self.call(request), model)

    def post[T](
        self,
        target: TargetApi,
        path: str,
        model: type[T] | Any,
        params: RequestParameters | QueryItems | None = None,
        body: object | None = None,
    ) -> T:
        request = ApiRequest(
            method="POST", path=path, target=target, params=_params(params), body=body
        )
        return decode(self.call(request), model)

    def post_empty(
        self,
        target: TargetApi,
        path: str,
        params: RequestParameters | QueryItems | None = None,
        body: object | None = None,
    ) -> None:
        request = ApiRequest(
            method="POST",
            path=path,
            target=target,
            params=_params(params),
            body=body,
            expects=ResponseKind.EMPTY,
        )
        self.call(request)

    def get_bytes(
        self,
        target: TargetApi,
        path: str,
        params: RequestParameters | QueryItems | None = None,
    ) -> bytes:
        request = ApiRequest(
            method="GET",
            path=path,
            target=target,
            params=_params(params),
            expects=ResponseKind.BYTES,
        )
        return self.call(request)


def _params(params: RequestParameters | QueryItems | None) -> QueryItems:
    if isinstance(params, RequestParameters) or params is None:
        return query_for(params)
    return tuple(params)
