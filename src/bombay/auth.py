"""Sign-in with optional second-factor confirmation.

The API answers a sign-in in one of two ways: it sets the session cookie
right away, or it replies ``Needs2FA`` together with the second-factor
channels the account has (an email confirmation link and/or a TOTP app). In
the second case the credentials are submitted again together with a proof
for one of those channels.

The session cookie is the only success signal. A successful sign-in without
second factor is sometimes answered with HTTP 400, so the status code alone
says nothing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from .config.client import ClientConfig
from .decoder import decode, decode_json, json_shape, parse_json
from .errors import (
    ApiError,
    AuthenticationFailed,
    InvalidParameterError,
    MalformedResponse,
    TransportError,
    UnsupportedMethod,
)
from .request import ApiRequest
from .schema.auth import AuthDataEmail, AuthProofBody, AuthReply, SignInBody
from .session import Session

if TYPE_CHECKING:
    from .config.account import AccountConfig
    from .transport import HttpTransport, RawResponse

log = getLogger(__name__)

SIGN_IN_PATH = "/sign-in"
RESEND_EMAIL_PATH = "/me/two-factor/resend-email"


@dataclass(frozen=True, slots=True)
class Credentials:
    email: str
    password: str = field(repr=False)
    totp_code: str | None = field(default=None, repr=False)

    @classmethod
    def from_account(cls, account: AccountConfig, *, totp_code: str | None = None) -> Credentials:
        return cls(email=account.email, password=account.password, totp_code=totp_code)

    def check(self) -> None:
        if not self.email.strip():
            raise InvalidParameterError("Email must not be empty")
        if not self.password:
            raise InvalidParameterError("Password must not be empty")

    def body(self, proof: SecondFactorProof | None = None) -> SignInBody:
        return SignInBody(
            email=self.email,
            password=self.password,
            auth=proof.body() if proof is not None else None,
        )


class SecondFactorMethod(StrEnum):
    """Second-factor channels, valued by their name on the wire."""

    EMAIL_LINK = "Email"
    TOTP = "TOTP"

    @classmethod
    def parse(cls, text: str | None) -> SecondFactorMethod | None:
        if text is None:
            return None
        lowered = text.strip().lower()
        for method in cls:
            if lowered in {method.value.lower(), method.name.lower()}:
                return method
        return None


@dataclass(frozen=True, slots=True)
class SecondFactorChallenge:
    """Pending sign-in waiting for a second-factor proof."""

    methods: tuple[SecondFactorMethod, ...]
    default_method: SecondFactorMethod
    credentials: Credentials = field(repr=False)
    email_id: str | None = None

    def offers(self, method: SecondFactorMethod) -> bool:
        return method in self.methods


@dataclass(frozen=True, slots=True)
class EmailLinkProof:
    """Proof that the confirmation link mailed for ``email_id`` was followed."""

    email_id: str

    def body(self) -> AuthProofBody:
        return AuthProofBody(email_id=self.email_id)

    def payload(self) -> dict[str, str]:
        return self.body().to_payload()


@dataclass(frozen=True, slots=True)
class TotpProof:
    code: str = field(repr=False)

    def body(self) -> AuthProofBody:
        return AuthProofBody(totp=self.code)

    def payload(self) -> dict[str, str]:
        return self.body().to_payload()


type SecondFactorProof = EmailLinkProof | TotpProof


@dataclass(frozen=True, slots=True)
class Authenticated:
    session: Session


@dataclass(frozen=True, slots=True)
class SecondFactorRequired:
    challenge: SecondFactorChallenge


type SignInOutcome = Authenticated | SecondFactorRequired


class SignInState(StrEnum):
    UNAUTHENTICATED = "unauthenticated"
    CREDENTIALS_SUBMITTED = "credentials_submitted"
    SECOND_FACTOR_REQUIRED = "second_factor_required"
    AUTHENTICATED = "authenticated"
    FAILED = "failed"


def _proof_for(
    challenge: SecondFactorChallenge, method: SecondFactorMethod, code: str | None
) -> SecondFactorProof:
    match method:
        case SecondFactorMethod.EMAIL_LINK:
            if not challenge.email_id:
                raise InvalidParameterError("Challenge carries no email confirmation id")
            return EmailLinkProof(email_id=challenge.email_id)
        case SecondFactorMethod.TOTP:
            if code is None or not code.strip():
                raise InvalidParameterError("A TOTP code is required")
            return TotpProof(code=code.strip())


class AuthenticationFlow:
    """Drives one sign-in attempt over a transport.

    The flow never touches a client's session store; callers keep the
    ``Session`` of an ``Authenticated`` outcome themselves.
    """

    def __init__(self, transport: HttpTransport, config: ClientConfig | None = None) -> None:
        self._transport = transport
        self.config = config or ClientConfig()
        self.state = SignInState.UNAUTHENTICATED

    def sign_in(self, credentials: Credentials) -> SignInOutcome:
        credentials.check()
        self.state = SignInState.CREDENTIALS_SUBMITTED
        log.info("Submitting sign-in credentials")
        response = self._post(SIGN_IN_PATH, credentials.body())

        reply = self._read_reply(response)
        if reply is not None and reply.needs_2fa:
            challenge = self._challenge_from(reply, credentials)
            if credentials.totp_code and challenge.offers(SecondFactorMethod.TOTP):
                return self.complete_second_factor(
                    challenge, SecondFactorMethod.TOTP, credentials.totp_code
                )
            self.state = SignInState.SECOND_FACTOR_REQUIRED
            log.info(
                "Sign-in needs a second factor (offered: %s)",
                ", ".join(method.value for method in challenge.methods),
            )
            return SecondFactorRequired(challenge)

        return Authenticated(self._session_from(response, step="Sign-in"))

    def complete_second_factor(
        self,
        challenge: SecondFactorChallenge,
        method: SecondFactorMethod | str,
        code: str | None = None,
    ) -> Authenticated:
        chosen = (
            method if isinstance(method, SecondFactorMethod) else SecondFactorMethod.parse(method)
        )
        if chosen is None or not challenge.offers(chosen):
            raise UnsupportedMethod(str(method), tuple(m.value for m in challenge.methods))
        proof = _proof_for(challenge, chosen, code)
        return self.submit_proof(challenge.credentials, proof)

    def submit_proof(self, credentials: Credentials, proof: SecondFactorProof) -> Authenticated:
        log.info("Submitting %s second factor", type(proof).__name__)
        response = self._post(SIGN_IN_PATH, credentials.body(proof))
        return Authenticated(self._session_from(response, step="Second-factor confirmation"))

    def request_email_link(self, credentials: Credentials) -> SecondFactorChallenge:
        """Have a confirmation link mailed, even when TOTP is the default channel."""

        credentials.check()
        self.state = SignInState.CREDENTIALS_SUBMITTED
        response = self._post(RESEND_EMAIL_PATH, credentials.body())
        if not response.ok:
            self.state = SignInState.FAILED
            msg = f"Email confirmation request rejected (HTTP {response.status})"
            raise AuthenticationFailed(msg)

        reply = decode_json(response.body, AuthDataEmail)
        if not reply.id:
            raise MalformedResponse(
                field="Id",
                expected="string",
                actual="null" if reply.id is None else json_shape(reply.id),
                model="AuthDataEmail",
            )
        self.state = SignInState.SECOND_FACTOR_REQUIRED
        log.info("Email confirmation link requested")
        return SecondFactorChallenge(
            methods=(SecondFactorMethod.EMAIL_LINK,),
            default_method=SecondFactorMethod.EMAIL_LINK,
            credentials=credentials,
            email_id=reply.id,
        )

    def _post(self, path: str, body: SignInBody) -> RawResponse:
        request = ApiRequest(method="POST", path=path, body=body.to_payload())
        try:
            response = self._transport.send(request)
        except TransportError:
            self.state = SignInState.FAILED
            raise
        if response.status >= 500:
            self.state = SignInState.FAILED
            raise ApiError(
                f"{request.operation} failed with HTTP {response.status}",
                status=response.status,
                body=response.text(),
            )
        return response

    def _read_reply(self, response: RawResponse) -> AuthReply | None:
        if not response.ok or not response.body:
            return None
        try:
            payload = parse_json(response.body)
        except MalformedResponse:
            log.debug("Sign-in reply is not JSON; relying on the session cookie")
            return None
        try:
            return decode(payload, AuthReply)
        except MalformedResponse as err:
            log.debug("Sign-in reply is not an auth reply (%s); relying on the session cookie", err)
            return None

    def _challenge_from(self, reply: AuthReply, credentials: Credentials) -> SecondFactorChallenge:
        data = reply.auth_data
        email_id = data.email.id if data is not None and data.email is not None else None
        methods: list[SecondFactorMethod] = []
        if email_id:
            methods.append(SecondFactorMethod.EMAIL_LINK)
        if data is not None and data.totp is not None:
            methods.append(SecondFactorMethod.TOTP)

        default = SecondFactorMethod.parse(reply.default_auth_type)
        if default is None:
            raise MalformedResponse(
                field="DefaultAuthType",
                expected="Email or TOTP",
                actual="absent" if reply.default_auth_type is None else "string",
                model="AuthReply",
            )
        if default not in methods:
            missing = (
                "AuthData.Email.Id"
                if default is SecondFactorMethod.EMAIL_LINK
                else "AuthData.TOTP"
            )
            raise MalformedResponse(
                field=missing, expected="value", actual="absent", model="AuthReply"
            )
        return SecondFactorChallenge(
            methods=tuple(methods),
            default_method=default,
            credentials=credentials,
            email_id=email_id,
        )

    def _session_from(self, response: RawResponse, *, step: str) -> Session:
        cookie_name = self.config.session_cookie
        if not response.cookies.get(cookie_name):
            self.state = SignInState.FAILED
            log.info("%s failed (HTTP %s)", step, response.status)
            msg = f"{step} rejected (HTTP {response.status}): no session cookie was set"
            raise AuthenticationFailed(msg)
        self.state = SignInState.AUTHENTICATED
        log.info("Signed in")
        return Session(cookies=dict(response.cookies))
