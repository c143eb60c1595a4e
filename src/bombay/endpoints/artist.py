"""Artist endpoints."""

from __future__ import annotations

from ..decoder import decode, decode_wrapped
from ..request import ApiRequest, RequestParameters, ResponseKind, TargetApi, query_for
from ..schema.artist import Artist
from ..schema.response import Paginated
from .base import EndpointGroup, segment


def all_artists(parameters: RequestParameters | None = None) -> ApiRequest:
    return ApiRequest(method="GET", path="/artists", params=query_for(parameters))


def artist_by_name_uri(artist_name_uri: str) -> ApiRequest:
    return ApiRequest(method="GET", path=f"/artist/{segment(artist_name_uri)}")


def latest_artists(parameters: RequestParameters | None = None) -> ApiRequest:
    return ApiRequest(method="GET", path="/latest-artists", params=query_for(parameters))


def artist_photo(artist_name_uri: str) -> ApiRequest:
    return ApiRequest(
        method="GET",
        path=f"artist/{segment(artist_name_uri)}/photo",
        target=TargetApi.WWW,
        expects=ResponseKind.BYTES,
    )


class ArtistEndpoints(EndpointGroup):
    def get_all(self, parameters: RequestParameters | None = None) -> Paginated[Artist]:
        payload = self._executor.call(all_artists(parameters))
        return decode_wrapped(payload, "Artists", Paginated[Artist])

    def get_by_name_uri(self, artist_name_uri: str) -> Artist:
        """Fetch one artist by the slug used in its profile URL."""

        return decode(self._executor.call(artist_by_name_uri(artist_name_uri)), Artist)

    def get_latest(self, parameters: RequestParameters | None = None) -> Paginated[Artist]:
        payload = self._executor.call(latest_artists(parameters))
        return decode_wrapped(payload, "LatestArtists", Paginated[Artist])

    def get_photo(self, artist_name_uri: str) -> bytes:
        return self._executor.call(artist_photo(artist_name_uri))
