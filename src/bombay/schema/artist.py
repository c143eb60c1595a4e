"""Artist payloads.

The API returns three artist shapes: the full profile (``Artist``), the artist
credit on an album (``AlbumArtist``) and the artist credit on a release record
(``ReleaseArtist``). ``AnyArtist`` picks the right one from the keys present.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated
from uuid import UUID  # noqa: TC003

from pydantic import Discriminator, Tag

from .base import ApiModel, CachedModel, either_case, uri_field
from .ids import ArtistId, ReleaseId  # noqa: TC001
from .util import Link  # noqa: TC001


class ArtistDetails(ApiModel):
    """Free-form profile details; the API capitalizes these keys inconsistently."""

    about: str | None = either_case("About", "about")
    bookings: str | None = either_case("Bookings", "bookings")
    management: str | None = either_case("Management", "management")
    management_details: str | None = either_case("ManagementDetails", "managementDetails")
    show_events: str | None = either_case("ShowEvents", "showEvents")


class Artist(CachedModel):
    id: ArtistId
    name: str
    uri: str = uri_field()
    about: str | None = None
    active_years: list[int] | None = None
    details: ArtistDetails | None = None
    featured_release_cover_file_id: str | None = None
    featured_release_id: str | None = None
    featured_video_url: str | None = None
    landscape_file_id: str | None = None
    links: list[Link] | None = None
    logo_file_id: str | None = None
    portrait_file_id: str | None = None
    profile_file_id: UUID | None = None
    public: bool | None = None
    show_event: bool | None = None
    square_file_id: str | None = None
    tags: list[str] | None = None


class AlbumArtist(ApiModel):
    artist_id: ArtistId
    artist_number: int
    name: str
    release_id: ReleaseId
    role: str
    uri: str = uri_field()
    platform: str | None = None
    profile_file_id: UUID | None = None
    public: bool | None = None
    square_file_id: str | None = None


class ReleaseArtist(ApiModel):
    catalog_record_id: str
    id: ArtistId
    name: str
    role: str
    uri: str = uri_field()
    profile_file_id: UUID | None = None
    public: bool | None = None


def _artist_shape(value: object) -> str:
    if isinstance(value, ApiModel):
        return type(value).__name__
    if isinstance(value, Mapping):
        if "CatalogRecordId" in value or "catalog_record_id" in value:
            return "ReleaseArtist"
        if "ArtistId" in value or "artist_id" in value:
            return "AlbumArtist"
    return "Artist"


AnyArtist = Annotated[
    Annotated[Artist, Tag("Artist")]
    | Annotated[AlbumArtist, Tag("AlbumArtist")]
    | Annotated[ReleaseArtist, Tag("ReleaseArtist")],
    Discriminator(_artist_shape),
]
