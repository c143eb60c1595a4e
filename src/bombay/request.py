"""Request descriptors and query-parameter mapping."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

import httpx

from .schema.util import Codec

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .session import Session

type QueryItems = tuple[tuple[str, str], ...]
type HttpMethod = Literal["GET", "POST"]

DEFAULT_LIMIT = 3
DEFAULT_OFFSET = 0


class TargetApi(StrEnum):
    """The two hosts the API is spread over."""

    PLAYER = "player"
    WWW = "www"


class ResponseKind(StrEnum):
    JSON = "json"
    BYTES = "bytes"
    EMPTY = "empty"


@dataclass(frozen=True, slots=True)
class ApiRequest:
    """Everything needed to perform one API call, without performing it."""

    method: HttpMethod
    path: str
    target: TargetApi = TargetApi.PLAYER
    params: QueryItems = ()
    body: object | None = None
    headers: tuple[tuple[str, str], ...] = ()
    requires_session: bool = False
    expects: ResponseKind = ResponseKind.JSON

    @property
    def operation(self) -> str:
        return f"{self.method} {self.path}"

    def query_string(self) -> str:
        return str(httpx.QueryParams(list(self.params)))


def prepare_request(request: ApiRequest, session: Session | None) -> ApiRequest:
    """Attach session headers to a request.

    Pure: the original descriptor is left untouched. Without a session the
    request is returned as-is.
    """

    if session is None:
        return request
    return replace(request, headers=request.headers + tuple(session.headers().items()))


def _encode_bool(value: bool) -> str:  # noqa: FBT001
    return "true" if value else "false"


@dataclass(frozen=True, slots=True)
class PaginationParameters:
    """Page window for list endpoints."""

    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    def __post_init__(self) -> None:
        if self.limit < 0 or self.offset < 0:
            msg = "Pagination limit and offset must not be negative"
            raise ValueError(msg)

    def to_query(self) -> QueryItems:
        return (("limit", str(self.limit)), ("offset", str(self.offset)))


@dataclass(frozen=True, slots=True)
class RequestParameters:
    """Optional query inputs shared by list endpoints.

    ``to_query`` emits keys in a fixed order (format, search, sort,
    creatorfriendly, nogold, filters sorted by key, limit, offset), so equal
    parameters always encode to the same query string.
    """

    filters: Mapping[str, str] | None = None
    codec: Codec | None = None
    search: str | None = None
    sort: str | None = None
    creator_friendly: bool | None = None
    no_gold: bool | None = None
    pagination: PaginationParameters | None = field(default_factory=PaginationParameters)

    @classmethod
    def from_pagination(cls, pagination: PaginationParameters) -> RequestParameters:
        return cls(pagination=pagination)

    @classmethod
    def from_search(cls, search_term: str) -> RequestParameters:
        return cls(search=search_term)

    @classmethod
    def from_codec(cls, codec: Codec) -> RequestParameters:
        return cls(codec=codec, pagination=None)

    def with_pagination(self, pagination: PaginationParameters) -> RequestParameters:
        return replace(self, pagination=pagination)

    def with_search(self, search_term: str) -> RequestParameters:
        return replace(self, search=search_term)

    def to_query(self) -> QueryItems:
        items: list[tuple[str, str]] = []
        if self.codec is not None:
            items.append(("format", str(self.codec)))
        if self.search is not None:
            items.append(("search", self.search))
        if self.sort is not None:
            items.append(("sort", self.sort))
        if self.creator_friendly is not None:
            items.append(("creatorfriendly", _encode_bool(self.creator_friendly)))
        if self.no_gold is not None:
            items.append(("nogold", _encode_bool(self.no_gold)))
        if self.filters:
            items.extend((key, self.filters[key]) for key in sorted(self.filters))
        if self.pagination is not None:
            items.extend(self.pagination.to_query())
        return tuple(items)


def query_for(parameters: RequestParameters | None) -> QueryItems:
    return parameters.to_query() if parameters is not None else ()


class PlaylistItemOperation(StrEnum):
    """Operations on a single playlist item."""

    ADD = "add"
    REMOVE = "remove"
    UP = "up"
    DOWN = "down"
    TO = "to"

    def to_query(self) -> QueryItems:
        return (("type", self.value),)


class PlaylistItemsOperation(StrEnum):
    """Operations on several playlist items at once."""

    ADD = "add"
    REMOVE = "remove"

    def to_query(self) -> QueryItems:
        return (("type", self.value),)
