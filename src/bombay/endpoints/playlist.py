"""Playlist endpoints.

Reading a playlist by id works signed out; listing, creating and changing
playlists needs a session.
"""

from __future__ import annotations

from ..decoder import decode, decode_wrapped
from ..errors import InvalidParameterError
from ..request import (
    ApiRequest,
    PlaylistItemOperation,
    PlaylistItemsOperation,
    ResponseKind,
)
from ..schema.ids import PlaylistId
from ..schema.playlist import (
    TOP_30_PLAYLIST_ID,
    Playlist,
    PlaylistDraft,
    PlaylistItemMod,
    PlaylistItemsMod,
)
from ..schema.release import AnyRelease
from ..schema.response import Paginated
from .base import EndpointGroup


def playlist_by_id(playlist_id: PlaylistId) -> ApiRequest:
    return ApiRequest(method="GET", path=f"/playlist/{playlist_id}")


def playlist_tracks(playlist_id: PlaylistId) -> ApiRequest:
    return ApiRequest(method="GET", path=f"/playlist/{playlist_id}/catalog")


def playlist_tile_image(playlist_id: PlaylistId) -> ApiRequest:
    return ApiRequest(
        method="GET", path=f"/playlist/{playlist_id}/tile", expects=ResponseKind.BYTES
    )


def playlist_background_image(playlist_id: PlaylistId) -> ApiRequest:
    return ApiRequest(
        method="GET", path=f"/playlist/{playlist_id}/background", expects=ResponseKind.BYTES
    )


def all_playlists() -> ApiRequest:
    return ApiRequest(method="GET", path="/playlists", requires_session=True)


def create_playlist(playlist: PlaylistDraft | Playlist) -> ApiRequest:
    return ApiRequest(
        method="POST", path="/playlist", body=playlist.to_payload(), requires_session=True
    )


def edit_playlist(playlist: Playlist) -> ApiRequest:
    return ApiRequest(
        method="POST",
        path=f"/playlist/{playlist.id}",
        body=playlist.to_payload(),
        requires_session=True,
    )


def modify_playlist_item(
    playlist_id: PlaylistId, operation: PlaylistItemOperation, item_mod: PlaylistItemMod
) -> ApiRequest:
    if operation is PlaylistItemOperation.TO and item_mod.move_to is None:
        raise InvalidParameterError("Moving a playlist item requires a move_to index")
    return ApiRequest(
        method="POST",
        path=f"/playlist/{playlist_id}/modify-item",
        params=operation.to_query(),
        body=item_mod.to_payload(),
        requires_session=True,
        expects=ResponseKind.EMPTY,
    )


def modify_playlist_items(
    playlist_id: PlaylistId, operation: PlaylistItemsOperation, items_mod: PlaylistItemsMod
) -> ApiRequest:
    return ApiRequest(
        method="POST",
        path=f"/playlist/{playlist_id}/modify-items",
        params=operation.to_query(),
        body=items_mod.to_payload(),
        requires_session=True,
        expects=ResponseKind.EMPTY,
    )


def delete_playlist(playlist_id: PlaylistId) -> ApiRequest:
    return ApiRequest(
        method="POST",
        path=f"/playlist/{playlist_id}/delete",
        requires_session=True,
        expects=ResponseKind.EMPTY,
    )


class PlaylistEndpoints(EndpointGroup):
    TOP_30_PLAYLIST_ID = TOP_30_PLAYLIST_ID

    def get_by_id(self, playlist_id: PlaylistId) -> Playlist:
        payload = self._executor.call(playlist_by_id(playlist_id))
        return decode_wrapped(payload, "Playlist", Playlist)

    def get_tracks(self, playlist_id: PlaylistId) -> Paginated[AnyRelease]:
        return decode(self._executor.call(playlist_tracks(playlist_id)), Paginated[AnyRelease])

    def get_tile_image(self, playlist_id: PlaylistId) -> bytes:
        return self._executor.call(playlist_tile_image(playlist_id))

    def get_background_image(self, playlist_id: PlaylistId) -> bytes:
        return self._executor.call(playlist_background_image(playlist_id))

    def get_all(self) -> Paginated[Playlist]:
        payload = self._executor.call(all_playlists())
        return decode_wrapped(payload, "Playlists", Paginated[Playlist])

    def create(self, playlist: PlaylistDraft | Playlist) -> PlaylistId:
        """Create a playlist and return the id the API assigned to it."""

        payload = self._executor.call(create_playlist(playlist))
        return decode_wrapped(payload, "Id", PlaylistId)

    def edit(self, playlist: Playlist) -> Playlist:
        return decode(self._executor.call(edit_playlist(playlist)), Playlist)

    def modify_item(
        self,
        playlist_id: PlaylistId,
        operation: PlaylistItemOperation,
        item_mod: PlaylistItemMod,
    ) -> None:
        self._executor.call(modify_playlist_item(playlist_id, operation, item_mod))

    def modify_items(
        self,
        playlist_id: PlaylistId,
        operation: PlaylistItemsOperation,
        items_mod: PlaylistItemsMod,
    ) -> None:
        self._executor.call(modify_playlist_items(playlist_id, operation, items_mod))

    def delete(self, playlist_id: PlaylistId) -> None:
        self._executor.call(delete_playlist(playlist_id))
