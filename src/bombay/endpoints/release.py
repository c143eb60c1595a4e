"""Release and track endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..decoder import decode, decode_wrapped
from ..request import (
    ApiRequest,
    RequestParameters,
    ResponseKind,
    TargetApi,
    query_for,
)
from ..schema.release import AnyRelease, Release, Track
from ..schema.response import Paginated
from ..schema.util import Codec
from .base import EndpointGroup, segment

if TYPE_CHECKING:
    from ..schema.ids import CatalogId, ReleaseId, TrackId


def all_releases(parameters: RequestParameters | None = None) -> ApiRequest:
    return ApiRequest(method="GET", path="/releases", params=query_for(parameters))


def latest_releases(parameters: RequestParameters | None = None) -> ApiRequest:
    # This endpoint always gets a page window, even when the caller passes none.
    return ApiRequest(
        method="GET",
        path="/catalog/latest-releases",
        params=(parameters or RequestParameters()).to_query(),
    )


def releases_by_artist_name_uri(
    artist_name_uri: str, parameters: RequestParameters | None = None
) -> ApiRequest:
    return ApiRequest(
        method="GET",
        path=f"/artist/{segment(artist_name_uri)}/releases",
        params=query_for(parameters),
    )


def release_by_catalog_id(catalog_id: CatalogId | str) -> ApiRequest:
    return ApiRequest(
        method="GET",
        path=f"/catalog/release/{segment(catalog_id)}",
        params=(("idType", "catalogId"),),
    )


def release_cover_art(catalog_id: CatalogId | str) -> ApiRequest:
    return ApiRequest(
        method="GET",
        path=f"release/{segment(catalog_id)}/cover",
        target=TargetApi.WWW,
        expects=ResponseKind.BYTES,
    )


def related_releases(
    release_id: ReleaseId, parameters: RequestParameters | None = None
) -> ApiRequest:
    return ApiRequest(
        method="GET", path=f"/related-releases/{release_id}", params=query_for(parameters)
    )


def track_stream(release_id: ReleaseId, track_id: TrackId) -> ApiRequest:
    return ApiRequest(
        method="GET",
        path=f"/release/{release_id}/track-stream/{track_id}",
        expects=ResponseKind.BYTES,
    )


def track_download(
    release_id: ReleaseId, track_id: TrackId, codec: Codec | None = None
) -> ApiRequest:
    return ApiRequest(
        method="GET",
        path=f"/release/{release_id}/track-download/{track_id}",
        params=RequestParameters.from_codec(codec or Codec.MP3).to_query(),
        requires_session=True,
        expects=ResponseKind.BYTES,
    )


class ReleaseEndpoints(EndpointGroup):
    def get_all(self, parameters: RequestParameters | None = None) -> Paginated[AnyRelease]:
        payload = self._executor.call(all_releases(parameters))
        return decode_wrapped(payload, "Releases", Paginated[AnyRelease])

    def get_latest(self, parameters: RequestParameters | None = None) -> Paginated[AnyRelease]:
        return decode(self._executor.call(latest_releases(parameters)), Paginated[AnyRelease])

    def get_by_artist_name_uri(
        self, artist_name_uri: str, parameters: RequestParameters | None = None
    ) -> Paginated[AnyRelease]:
        payload = self._executor.call(releases_by_artist_name_uri(artist_name_uri, parameters))
        return decode_wrapped(payload, "Releases", Paginated[AnyRelease])

    def get_by_catalog_id(
        self, catalog_id: CatalogId | str
    ) -> tuple[Release | Track, list[Track]]:
        """Fetch a release by catalog number together with its tracks."""

        payload = self._executor.call(release_by_catalog_id(catalog_id))
        release = decode_wrapped(payload, "Release", AnyRelease)
        tracks = decode_wrapped(payload, "Tracks", list[Track])
        return release, tracks

    def get_cover_art(self, catalog_id: CatalogId | str) -> bytes:
        return self._executor.call(release_cover_art(catalog_id))

    def get_related_by_id(
        self, release_id: ReleaseId, parameters: RequestParameters | None = None
    ) -> Paginated[AnyRelease]:
        payload = self._executor.call(related_releases(release_id, parameters))
        return decode(payload, Paginated[AnyRelease])

    def stream(self, release_id: ReleaseId, track_id: TrackId) -> bytes:
        return self._executor.call(track_stream(release_id, track_id))

    def download(
        self, release_id: ReleaseId, track_id: TrackId, codec: Codec | None = None
    ) -> bytes:
        """Download a track file; needs a signed-in client. MP3 unless ``codec`` says otherwise."""

        return self._executor.call(track_download(release_id, track_id, codec))
