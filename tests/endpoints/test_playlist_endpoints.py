from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import UUID

import pytest

from bombay.decoder import decode
from bombay.endpoints.playlist import modify_playlist_item, playlist_by_id
from bombay.errors import InvalidParameterError, SessionRequiredError
from bombay.request import PlaylistItemOperation, PlaylistItemsOperation, ResponseKind
from bombay.schema.ids import PlaylistId, ReleaseId, TrackId
from bombay.schema.playlist import (
    TOP_30_PLAYLIST_ID,
    Playlist,
    PlaylistDraft,
    PlaylistItem,
    PlaylistItemMod,
    PlaylistItemsMod,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from bombay.client import Client
    from conftest import FakeApi

MY_PLAYLIST = PlaylistId(UUID("c17f8a6e-f392-4048-97ea-d6e7f8091a2b"))
ITEM = PlaylistItem(
    playlist_id=MY_PLAYLIST,
    release_id=ReleaseId(UUID("0b5f6f4e-3f7c-4a8d-9b8e-1a2b3c4d5e6f")),
    track_id=TrackId(UUID("1c6a7b5f-4e8d-4b9e-8c9f-2b3c4d5e6f70")),
    sort=2,
)


def test_top_30_id(client: Client) -> None:
    assert str(client.playlist.TOP_30_PLAYLIST_ID) == "991334fb-ca5e-48c6-bc73-cb83c364357d"
    assert playlist_by_id(TOP_30_PLAYLIST_ID).path == f"/playlist/{TOP_30_PLAYLIST_ID}"


def test_get_by_id_works_signed_out(
    client: Client, fake_api: FakeApi, payload: Callable[[str], Any]
) -> None:
    fake_api.on("GET", f"/playlist/{TOP_30_PLAYLIST_ID}", json=payload("playlist.json"))

    playlist = client.playlist.get_by_id(TOP_30_PLAYLIST_ID)

    assert playlist.title == "Top 30"
    assert playlist.user_id is None
    assert playlist.items is not None
    assert playlist.items[0].sort == 0


def test_images_and_tracks(
    client: Client, fake_api: FakeApi, payload: Callable[[str], Any]
) -> None:
    fake_api.on("GET", f"/playlist/{MY_PLAYLIST}/tile", content=b"tile")
    fake_api.on("GET", f"/playlist/{MY_PLAYLIST}/background", content=b"bg")
    fake_api.on(
        "GET", f"/playlist/{MY_PLAYLIST}/catalog", json=payload("releases_page.json")["Releases"]
    )

    assert client.playlist.get_tile_image(MY_PLAYLIST) == b"tile"
    assert client.playlist.get_background_image(MY_PLAYLIST) == b"bg"
    assert client.playlist.get_tracks(MY_PLAYLIST).total == 40


def test_get_all_needs_session(client: Client) -> None:
    with pytest.raises(SessionRequiredError):
        client.playlist.get_all()


def test_get_all(
    signed_in_client: Client, fake_api: FakeApi, payload: Callable[[str], Any]
) -> None:
    playlist = payload("playlist.json")["Playlist"]
    fake_api.on(
        "GET",
        "/playlists",
        json={"Playlists": {"Data": [playlist], "Total": 1, "Limit": 3, "Offset": 0}},
    )

    page = signed_in_client.playlist.get_all()

    assert page.records[0].id == TOP_30_PLAYLIST_ID


def test_create_returns_new_id(signed_in_client: Client, fake_api: FakeApi) -> None:
    fake_api.on("POST", "/playlist", json={"Id": str(MY_PLAYLIST)})

    new_id = signed_in_client.playlist.create(PlaylistDraft(title="Focus", is_public=False))

    assert new_id == MY_PLAYLIST
    assert fake_api.body_of() == {"Title": "Focus", "IsPublic": False}


def test_edit_posts_the_playlist(
    signed_in_client: Client, fake_api: FakeApi, payload: Callable[[str], Any]
) -> None:
    fake_api.on(
        "POST", f"/playlist/{TOP_30_PLAYLIST_ID}", json=payload("playlist.json")["Playlist"]
    )
    playlist = decode(payload("playlist.json")["Playlist"], Playlist)

    edited = signed_in_client.playlist.edit(playlist.model_copy(update={"title": "Top 30!"}))

    assert edited.title == "Top 30"
    assert fake_api.body_of()["Title"] == "Top 30!"
    assert fake_api.body_of()["Items"][0]["TrackId"] == "1c6a7b5f-4e8d-4b9e-8c9f-2b3c4d5e6f70"


def test_modify_item_to_requires_move_to(signed_in_client: Client, fake_api: FakeApi) -> None:
    with pytest.raises(InvalidParameterError):
        signed_in_client.playlist.modify_item(
            MY_PLAYLIST, PlaylistItemOperation.TO, PlaylistItemMod(record=ITEM)
        )

    assert fake_api.requests == []


def test_modify_item(signed_in_client: Client, fake_api: FakeApi) -> None:
    fake_api.on("POST", f"/playlist/{MY_PLAYLIST}/modify-item")

    signed_in_client.playlist.modify_item(
        MY_PLAYLIST, PlaylistItemOperation.TO, PlaylistItemMod(move_to=0, record=ITEM)
    )

    assert fake_api.last.url.params["type"] == "to"
    assert fake_api.body_of() == {
        "MoveTo": 0,
        "Record": {
            "PlaylistId": str(MY_PLAYLIST),
            "ReleaseId": "0b5f6f4e-3f7c-4a8d-9b8e-1a2b3c4d5e6f",
            "TrackId": "1c6a7b5f-4e8d-4b9e-8c9f-2b3c4d5e6f70",
            "Sort": 2,
        },
    }


def test_modify_items_and_delete(signed_in_client: Client, fake_api: FakeApi) -> None:
    fake_api.on("POST", f"/playlist/{MY_PLAYLIST}/modify-items")
    fake_api.on("POST", f"/playlist/{MY_PLAYLIST}/delete")

    signed_in_client.playlist.modify_items(
        MY_PLAYLIST, PlaylistItemsOperation.ADD, PlaylistItemsMod(records=[ITEM])
    )
    assert fake_api.last.url.params["type"] == "add"
    assert len(fake_api.body_of()["Records"]) == 1

    signed_in_client.playlist.delete(MY_PLAYLIST)
    assert fake_api.last.url.path.endswith("/delete")


def test_modify_item_builder_is_empty_response() -> None:
    request = modify_playlist_item(
        MY_PLAYLIST, PlaylistItemOperation.UP, PlaylistItemMod(record=ITEM)
    )

    assert request.expects is ResponseKind.EMPTY
    assert request.requires_session
