"""Small shared models: codecs, links, licenses."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from enum import StrEnum
from typing import Annotated, Any
from uuid import UUID  # noqa: TC003

from pydantic import Field, PlainValidator

from .base import ApiModel, either_case
from .ids import LicenseId, UserId  # noqa: TC001


def _normalize(text: str) -> str:
    return "".join(text.lower().split())


class Codec(StrEnum):
    """Audio formats offered for downloads."""

    MP3 = "mp3_320"
    FLAC = "flac"
    WAV = "wav"

    @classmethod
    def parse(cls, text: str) -> Codec:
        """Lenient lookup; anything unrecognised falls back to MP3."""

        normalized = _normalize(text)
        for codec in cls:
            if codec.value == normalized or codec.name.lower() == normalized:
                return codec
        return cls.MP3


def _lenient_codec(value: object) -> Codec:
    if not isinstance(value, str):
        raise ValueError("expected a codec name")
    return Codec.parse(value)


# Codec read from the API; unrecognised names become MP3 instead of failing.
LenientCodec = Annotated[Codec, PlainValidator(_lenient_codec)]


class Platform(StrEnum):
    """Platforms a link can point to, by display name."""

    AMAZON = "Amazon"
    APPLE_MUSIC = "Apple Music"
    AUDIOMACK = "Audiomack"
    AUDIUS = "Audius"
    BANDCAMP = "Bandcamp"
    DEEZER = "Deezer"
    FACEBOOK = "Facebook"
    GOOGLE_PLAY = "Google Play"
    INSTAGRAM = "Instagram"
    PATREON = "Patreon"
    SOUNDCLOUD = "SoundCloud"
    SPOTIFY = "Spotify"
    TIDAL = "Tidal"
    TIKTOK = "TikTok"
    TWITCH = "Twitch"
    TWITTER = "Twitter"
    WEBSITE = "Website"
    YOUTUBE = "YouTube"
    OTHER = "Other"

    @classmethod
    def parse(cls, text: str) -> Platform:
        normalized = _normalize(text)
        if normalized == "ig":
            return cls.INSTAGRAM
        for platform in cls:
            if _normalize(platform.value) == normalized:
                return platform
        return cls.OTHER


class Link(ApiModel):
    """Link to an artist or release on another platform."""

    platform_name: str = Field(alias="Platform")
    url: str = either_case("Url", "URL", default=...)

    @property
    def platform(self) -> Platform:
        return Platform.parse(self.platform_name)


class LicenseActiveTime(ApiModel):
    """Time range during which a license is active."""

    id: UUID
    license_id: LicenseId
    start: datetime
    finish: datetime | None = None
    created_at: datetime | None = None
    gold_time_range_id: UUID | None = None
    source: str | None = None


class License(ApiModel):
    """License letting a creator use the catalog in published content."""

    id: LicenseId
    identity: str
    state: str | None = None
    vendor_name: str | None = Field(default=None, alias="Vendor")
    active_times: list[LicenseActiveTime] | None = None
    allow_listed: Any = None
    archived: bool | None = None
    created_at: datetime | None = None
    free: bool | None = None
    free_at: datetime | None = None
    free_reason: str | None = None
    has_active_period: bool | None = None
    invalid: bool | None = None
    last_sync: datetime | None = None
    notes: str | None = None
    oauth_id: UUID | None = Field(default=None, alias="OAuthId")
    sanitized: bool | None = None
    scheduled_sync: datetime | None = None
    sync_failures: int | None = None
    sync_state: str | None = None
    updated_at: datetime | None = None
    user_archived: bool | None = None
    user_email: str | None = None
    user_id: UserId | None = None
    whitelisted: bool | None = None
    youtube_stats_date: datetime | None = Field(default=None, alias="YouTubeStatsDate")
    youtube_subscribers: int | None = Field(default=None, alias="YouTubeSubscribers")
    youtube_title: str | None = Field(default=None, alias="YouTubeTitle")
    youtube_url: str | None = Field(default=None, alias="YouTubeUrl")
    youtube_views: int | None = Field(default=None, alias="YouTubeViews")

    @property
    def vendor(self) -> Platform | None:
        return Platform.parse(self.vendor_name) if self.vendor_name else None


class ClaimVideoId(ApiModel):
    video_id: str
