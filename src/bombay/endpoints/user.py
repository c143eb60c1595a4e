"""Account endpoints; every one of them needs a signed-in client."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..decoder import decode, decode_wrapped
from ..request import ApiRequest, RequestParameters, ResponseKind, query_for
from ..schema.response import Paginated
from ..schema.user import (
    EditableSettings,
    EditableUserInfo,
    NewEmail,
    NewPassword,
    PlayerCode,
    Settings,
    ShopCode,
    User,
)
from ..schema.util import ClaimVideoId, License
from .base import EndpointGroup

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..request import HttpMethod
    from ..schema.ids import LicenseId
    from ..schema.user import NotificationInterest


def _account_request(
    method: HttpMethod,
    path: str,
    *,
    body: object | None = None,
    expects: ResponseKind = ResponseKind.EMPTY,
    params: tuple[tuple[str, str], ...] = (),
) -> ApiRequest:
    return ApiRequest(
        method=method,
        path=path,
        params=params,
        body=body,
        requires_session=True,
        expects=expects,
    )


def user_info() -> ApiRequest:
    return _account_request("GET", "/me", expects=ResponseKind.JSON)


def set_user_info(info: EditableUserInfo) -> ApiRequest:
    return _account_request("POST", "/me", body=info.to_payload())


def set_user_settings(settings: EditableSettings) -> ApiRequest:
    return _account_request("POST", "/me/settings", body=settings.to_payload())


def player_code() -> ApiRequest:
    return _account_request("GET", "/me/player-code", expects=ResponseKind.JSON)


def generate_player_code() -> ApiRequest:
    return _account_request("POST", "/me/player-code")


def set_email(new_email: str) -> ApiRequest:
    return _account_request("POST", "/me/email", body=NewEmail(new_email=new_email).to_payload())


def set_password(old_password: str, new_password: str) -> ApiRequest:
    body = NewPassword(old_password=old_password, new_password=new_password)
    return _account_request("POST", "/me/password", body=body.to_payload())


def two_factor_toggle(action: str, channel: str) -> ApiRequest:
    """``POST /me/two-factor/{enable,disable}-{totp,email}``."""

    return _account_request("POST", f"/me/two-factor/{action}-{channel}")


def totp_qr_code() -> ApiRequest:
    return _account_request("GET", "/me/two-factor/totp-qr", expects=ResponseKind.BYTES)


def set_notification_interests(interests: Iterable[NotificationInterest]) -> ApiRequest:
    return _account_request(
        "POST", "/me/notifications", body=[str(interest) for interest in interests]
    )


def licenses(parameters: RequestParameters | None = None) -> ApiRequest:
    return _account_request(
        "GET", "/self/licenses", params=query_for(parameters), expects=ResponseKind.JSON
    )


def remove_license(license_id: LicenseId) -> ApiRequest:
    return _account_request("POST", f"/self/license/{license_id}/delete")


def remove_video_claim(video_id: str) -> ApiRequest:
    body = ClaimVideoId(video_id=video_id)
    return _account_request("POST", "/me/remove-claims", body=body.to_payload())


def shop_discount_code() -> ApiRequest:
    return _account_request("POST", "/me/benefits/shop-code", expects=ResponseKind.JSON)


class UserEndpoints(EndpointGroup):
    def get_info(self) -> tuple[Settings, User]:
        payload = self._executor.call(user_info())
        return decode_wrapped(payload, "Settings", Settings), decode_wrapped(payload, "User", User)

    def set_info(self, info: EditableUserInfo) -> None:
        self._executor.call(set_user_info(info))

    def set_settings(self, settings: EditableSettings) -> None:
        self._executor.call(set_user_settings(settings))

    def get_player_code(self) -> str:
        """Code identifying the account's stream player (used for streamer whitelisting)."""

        return decode(self._executor.call(player_code()), PlayerCode).player_code

    def generate_player_code(self) -> None:
        self._executor.call(generate_player_code())

    def set_email(self, new_email: str) -> None:
        self._executor.call(set_email(new_email))

    def set_password(self, old_password: str, new_password: str) -> None:
        self._executor.call(set_password(old_password, new_password))

    def enable_totp(self) -> None:
        self._executor.call(two_factor_toggle("enable", "totp"))

    def disable_totp(self) -> None:
        self._executor.call(two_factor_toggle("disable", "totp"))

    def enable_email_2fa(self) -> None:
        self._executor.call(two_factor_toggle("enable", "email"))

    def disable_email_2fa(self) -> None:
        self._executor.call(two_factor_toggle("disable", "email"))

    def get_totp_qr_code(self) -> bytes:
        return self._executor.call(totp_qr_code())

    def set_notification_interests(self, interests: Iterable[NotificationInterest]) -> None:
        self._executor.call(set_notification_interests(interests))

    def get_licenses(self, parameters: RequestParameters | None = None) -> Paginated[License]:
        payload = self._executor.call(licenses(parameters))
        return decode_wrapped(payload, "Licenses", Paginated[License])

    def remove_license(self, license_id: LicenseId) -> None:
        self._executor.call(remove_license(license_id))

    def remove_video_claim(self, video_id: str) -> None:
        self._executor.call(remove_video_claim(video_id))

    def generate_shop_discount_code(self) -> ShopCode:
        payload = self._executor.call(shop_discount_code())
        return decode_wrapped(payload, "ShopCode", ShopCode)
