"""Generic response envelopes."""

from __future__ import annotations

from typing import Generic, TypeVar

from .base import ApiModel

T = TypeVar("T")


class Paginated(ApiModel, Generic[T]):
    """One page of a listing.

    ``data`` is ``None`` when the API omits it (e.g. an empty search).
    """

    total: int
    limit: int
    offset: int
    data: list[T] | None = None
    not_found: bool | None = None

    @property
    def records(self) -> list[T]:
        return list(self.data or ())
