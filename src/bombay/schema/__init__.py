"""Pydantic models for the API's JSON payloads."""

from .artist import AlbumArtist, AnyArtist, Artist, ArtistDetails, ReleaseArtist
from .base import ApiModel, CacheDetails, CachedModel
from .ids import (
    ArtistId,
    CatalogId,
    LicenseId,
    MoodId,
    PlaylistId,
    ReleaseId,
    ShopCodeId,
    TrackId,
    UserId,
)
from .label import Brand
from .mood import Mood, MoodParam, MoodParamConfig
from .playlist import (
    TOP_30_PLAYLIST_ID,
    Playlist,
    PlaylistDraft,
    PlaylistItem,
    PlaylistItemMod,
    PlaylistItemsMod,
)
from .release import AnyRelease, Release, ReleaseSummary, Track
from .response import Paginated
from .user import (
    Attributes,
    EditableSettings,
    EditableUserInfo,
    NewEmail,
    NewPassword,
    NotificationInterest,
    PlayerCode,
    Settings,
    ShopCode,
    User,
)
from .util import ClaimVideoId, Codec, License, LicenseActiveTime, Link, Platform

__all__ = [
    "TOP_30_PLAYLIST_ID",
    "AlbumArtist",
    "AnyArtist",
    "AnyRelease",
    "ApiModel",
    "Artist",
    "ArtistDetails",
    "ArtistId",
    "Attributes",
    "Brand",
    "CacheDetails",
    "CachedModel",
    "CatalogId",
    "ClaimVideoId",
    "Codec",
    "EditableSettings",
    "EditableUserInfo",
    "License",
    "LicenseActiveTime",
    "LicenseId",
    "Link",
    "Mood",
    "MoodId",
    "MoodParam",
    "MoodParamConfig",
    "NewEmail",
    "NewPassword",
    "NotificationInterest",
    "Paginated",
    "Platform",
    "PlayerCode",
    "Playlist",
    "PlaylistDraft",
    "PlaylistId",
    "PlaylistItem",
    "PlaylistItemMod",
    "PlaylistItemsMod",
    "Release",
    "ReleaseArtist",
    "ReleaseId",
    "ReleaseSummary",
    "Settings",
    "ShopCode",
    "ShopCodeId",
    "Track",
    "TrackId",
    "User",
    "UserId",
]
