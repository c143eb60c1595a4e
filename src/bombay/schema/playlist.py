"""Playlists and the bodies used to edit them."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from typing import Final
from uuid import UUID

from .base import ApiModel
from .ids import PlaylistId, ReleaseId, TrackId, UserId  # noqa: TC001

TOP_30_PLAYLIST_ID: Final = PlaylistId(UUID("991334fb-ca5e-48c6-bc73-cb83c364357d"))


class PlaylistItem(ApiModel):
    """Track placed in a playlist; ``sort`` is its index."""

    playlist_id: PlaylistId
    release_id: ReleaseId
    sort: int
    track_id: TrackId


class Playlist(ApiModel):
    id: PlaylistId
    title: str
    archived: bool | None = None
    background_file_id: UUID | None = None
    created_at: datetime | None = None
    description: str | None = None
    is_public: bool | None = None
    items: list[PlaylistItem] | None = None
    my_library: bool | None = None
    num_records: int | None = None
    tile_file_id: UUID | None = None
    updated_at: datetime | None = None
    user_id: UserId | None = None


class PlaylistDraft(ApiModel):
    """Body for creating a playlist; the API assigns the id."""

    title: str
    description: str | None = None
    is_public: bool | None = None
    archived: bool | None = None


class PlaylistItemMod(ApiModel):
    move_to: int | None = None
    record: PlaylistItem


class PlaylistItemsMod(ApiModel):
    records: list[PlaylistItem]
