"""Release and track payloads."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime  # noqa: TC003
from typing import Annotated

from pydantic import Discriminator, Field, Tag

from .artist import AnyArtist  # noqa: TC001
from .base import ApiModel, CachedModel, either_case
from .ids import CatalogId, ReleaseId, TrackId  # noqa: TC001
from .label import Brand
from .util import Link  # noqa: TC001


class ReleaseSummary(ApiModel):
    """Release fields embedded in each track."""

    id: ReleaseId
    title: str
    artists_title: str
    catalog_id: CatalogId
    release_date: datetime
    kind: str = Field(alias="Type")
    copyright_p_line: str | None = None
    description: str | None = None
    release_date_timezone: str | None = None
    tags: list[str] | None = None
    upc: str | None = either_case("UPC", "Upc")
    version: str | None = None


class Track(ApiModel):
    id: TrackId
    title: str
    artists_title: str
    release: ReleaseSummary
    artists: list[AnyArtist] | None = None
    bpm: int | None = either_case("BPM", "Bpm")
    brand: str | None = None
    brand_id: int | None = None
    creator_friendly: bool | None = None
    debut_date: datetime | None = None
    downloadable: bool | None = None
    duration: int | None = None
    explicit: bool | None = None
    genre_primary: str | None = None
    genre_secondary: str | None = None
    isrc: str | None = either_case("ISRC", "Isrc")
    in_early_access: bool | None = None
    lock_status: str | None = None
    public: bool | None = None
    playlist_sort: int | None = None
    streamable: bool | None = None
    tags: list[str] | None = None
    track_number: int | None = None
    version: str | None = None

    @property
    def kind(self) -> str:
        return "Track"

    @property
    def release_id(self) -> ReleaseId:
        return self.release.id

    @property
    def date(self) -> datetime:
        return self.release.release_date


class Release(CachedModel):
    id: ReleaseId
    title: str
    artists_title: str
    catalog_id: CatalogId
    release_date: datetime
    kind: str = Field(alias="Type")
    album_notes: str | None = None
    artists: list[AnyArtist] | None = None
    brand_id: int | None = None
    brand_title: str | None = None
    copyright_p_line: str | None = None
    cover_file_id: str | None = None
    description: str | None = None
    downloadable: bool | None = None
    featured_artists_title: str | None = None
    grid: str | None = either_case("GRid", "Grid")
    genre_primary: str | None = None
    genre_secondary: str | None = None
    in_early_access: bool | None = None
    links: list[Link] | None = None
    prerelease_date: datetime | None = None
    presave_date: datetime | None = None
    release_date_timezone: str | None = None
    spotify_id: str | None = None
    streamable: bool | None = None
    tags: list[str] | None = None
    tracks: list[Track] | None = None
    upc: str | None = either_case("UPC", "Upc")
    version: str | None = None
    youtube_url: str | None = either_case("YouTubeUrl", "YoutubeUrl")

    @property
    def release_id(self) -> ReleaseId:
        return self.id

    @property
    def date(self) -> datetime:
        return self.release_date

    @property
    def brand(self) -> Brand | None:
        return Brand.from_id(self.brand_id)


def _release_shape(value: object) -> str:
    if isinstance(value, ApiModel):
        return type(value).__name__
    if isinstance(value, Mapping) and ("Release" in value or "release" in value):
        return "Track"
    return "Release"


# Catalog listings mix whole releases and single tracks; a nested "Release"
# object marks a track.
AnyRelease = Annotated[
    Annotated[Release, Tag("Release")] | Annotated[Track, Tag("Track")],
    Discriminator(_release_shape),
]
