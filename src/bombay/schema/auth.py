"""Wire shapes of the sign-in exchange."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import ApiModel, either_case


class AuthProofBody(ApiModel):
    """Second-factor proof; exactly one of the two keys is sent."""

    email_id: str | None = Field(default=None, alias="Email")
    totp: str | None = Field(default=None, alias="TOTP", repr=False)


class SignInBody(ApiModel):
    email: str
    password: str = Field(repr=False)
    auth: AuthProofBody | None = None


class AuthDataEmail(ApiModel):
    id: str | None = None
    email: str | None = None


class AuthData(ApiModel):
    email: AuthDataEmail | None = Field(default=None, alias="Email")
    totp: Any = Field(default=None, alias="TOTP")


class AuthReply(ApiModel):
    needs_2fa: bool = either_case("Needs2FA", "Needs2fa", "Needs2Fa", default=False)
    default_auth_type: str | None = None
    auth_data: AuthData | None = None
