"""Account information, settings and the bodies that change them."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from enum import StrEnum
from typing import Any

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from .base import ApiModel
from .ids import ShopCodeId, UserId  # noqa: TC001
from .util import Codec, LenientCodec  # noqa: TC001


class NotificationInterest(StrEnum):
    NEWS = "news"
    EVENTS = "events"
    MERCH = "merch"
    GOLD_PERKS = "goldPerks"
    RELICS = "relics"


class Attributes(ApiModel):
    """Email notification preferences; unlike the rest of the API these keys are camelCase."""

    model_config = ConfigDict(alias_generator=to_camel)

    events: bool | None = None
    gold_perks: bool | None = None
    merch: bool | None = None
    news: bool | None = None
    relics: bool | None = None


class Settings(ApiModel):
    auto_enable_streamer_mode: bool | None = None
    auto_say_song: bool | None = None
    block_unlicensable_tracks: bool | None = None
    hide_unlicensable_tracks: bool | None = None
    playlist_public_default: bool | None = None
    preferred_format: LenientCodec | None = None
    say_song: bool | None = None
    streamer_mode: bool | None = None


class User(ApiModel):
    id: UserId
    email: str
    archived: bool | None = None
    attributes: Attributes | None = None
    auto_say_song: bool | None = None
    birthday: str | None = None
    city: str | None = None
    continent: str | None = None
    country: str | None = None
    created_at: datetime | None = None
    email_verification_status: str | None = None
    features: list[Any] | None = None
    first_name: str | None = None
    free_gold: bool | None = None
    free_gold_at: datetime | None = None
    free_gold_reason: str | None = None
    given_download_access: bool | None = None
    google_maps_place_id: str | None = None
    has_download: bool | None = None
    has_gold: bool | None = None
    has_password: bool | None = None
    last_name: str | None = None
    last_seen: datetime | None = None
    last_update_benefits_gold: bool | None = None
    location_lat: float | None = None
    location_lng: float | None = None
    max_licenses: int | None = None
    my_library: str | None = None
    place_name: str | None = None
    place_name_full: str | None = None
    player_uuid: str | None = Field(default=None, alias="PlayerUUID")
    pronouns: str | None = None
    prov_st: str | None = None
    province_state: str | None = None
    say_song: bool | None = None
    score: Any = None
    settings: Settings | None = None
    two_factor_id: str | None = None
    two_factor_pending_id: str | None = None
    updated_at: datetime | None = None
    username: str | None = None


class EditableUserInfo(ApiModel):
    """Profile fields accepted by ``POST /me``; unset fields are left unchanged."""

    birthday: datetime | None = None
    google_maps_place_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    pronouns: str | None = None


class EditableSettings(ApiModel):
    """Settings accepted by ``POST /me/settings``.

    ``auto_say_song`` requires ``say_song``; both need a connected Twitch account.
    """

    playlist_public_default: bool | None = None
    preferred_format: Codec | None = None
    say_song: bool | None = None
    auto_say_song: bool | None = None


class PlayerCode(ApiModel):
    player_code: str


class ShopCode(ApiModel):
    """Discount code for the label's shop."""

    id: ShopCodeId
    code: str
    create_date: datetime | None = None
    expire_date: datetime | None = None
    reward_description: str | None = None
    updated_at: datetime | None = None
    user_id: UserId | None = None
    value: str | None = None
    value_type: str | None = None


class NewEmail(ApiModel):
    new_email: str


class NewPassword(ApiModel):
    old_password: str = Field(repr=False)
    new_password: str = Field(repr=False)
