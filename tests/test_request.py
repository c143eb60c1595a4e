from __future__ import annotations

import pytest

from bombay.request import (
    ApiRequest,
    PaginationParameters,
    PlaylistItemOperation,
    PlaylistItemsOperation,
    RequestParameters,
    prepare_request,
    query_for,
)
from bombay.schema.util import Codec
from bombay.session import Session


def test_default_parameters_only_carry_the_page_window() -> None:
    assert RequestParameters().to_query() == (("limit", "3"), ("offset", "0"))


def test_query_keys_follow_a_fixed_order() -> None:
    parameters = RequestParameters(
        filters={"type": "Single", "brand": "1"},
        codec=Codec.FLAC,
        search="aether",
        sort="-date",
        creator_friendly=True,
        no_gold=False,
        pagination=PaginationParameters(limit=10, offset=20),
    )

    assert parameters.to_query() == (
        ("format", "flac"),
        ("search", "aether"),
        ("sort", "-date"),
        ("creatorfriendly", "true"),
        ("nogold", "false"),
        ("brand", "1"),
        ("type", "Single"),
        ("limit", "10"),
        ("offset", "20"),
    )


def test_equal_inputs_encode_to_equal_query_strings() -> None:
    first = RequestParameters.from_search("pegboard").with_pagination(
        PaginationParameters(limit=5)
    )
    second = RequestParameters(search="pegboard", pagination=PaginationParameters(5, 0))

    first_request = ApiRequest(method="GET", path="/artists", params=first.to_query())
    second_request = ApiRequest(method="GET", path="/artists", params=second.to_query())

    assert first_request.query_string() == second_request.query_string()


def test_pagination_first_then_search() -> None:
    parameters = RequestParameters.from_pagination(PaginationParameters(limit=10, offset=20))

    assert parameters.with_search("aether").to_query() == (
        ("search", "aether"),
        ("limit", "10"),
        ("offset", "20"),
    )
    assert first_request.query_string() == "search=pegboard&limit=5&offset=0"


def test_codec_parameters_have_no_page_window() -> None:
    assert RequestParameters.from_codec(Codec.WAV).to_query() == (("format", "wav"),)


def test_query_for_none_is_empty() -> None:
    assert query_for(None) == ()


def test_negative_pagination_is_rejected() -> None:
    with pytest.raises(ValueError, match="negative"):
        PaginationParameters(limit=-1)


def test_playlist_operations_encode_as_type_parameter() -> None:
    assert PlaylistItemOperation.TO.to_query() == (("type", "to"),)
    assert PlaylistItemsOperation.REMOVE.to_query() == (("type", "remove"),)


def test_prepare_request_attaches_session_headers_without_mutating() -> None:
    request = ApiRequest(method="GET", path="/me", requires_session=True)
    session = Session(cookies={"cid": "abc", "theme": "dark"}, token="tok")

    prepared = prepare_request(request, session)

    assert request.headers == ()
    assert dict(prepared.headers) == {
        "Cookie": "cid=abc; theme=dark",
        "Authorization": "Bearer tok",
    }


def test_prepare_request_without_session_is_identity() -> None:
    request = ApiRequest(method="GET", path="/moods")

    assert prepare_request(request, None) is request
