"""Shared plumbing for endpoint groups."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol
from urllib.parse import quote

if TYPE_CHECKING:
    from ..request import ApiRequest


class RequestExecutor(Protocol):
    """Sends a request descriptor and returns its decoded body.

    JSON responses come back parsed, byte responses as ``bytes`` and empty
    responses as ``None``.
    """

    def call(self, request: ApiRequest) -> Any: ...


class EndpointGroup:
    """Endpoints of one API area; each method builds a request and executes it."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor


def segment(value: object) -> str:
    """Format one path segment, escaping anything that would change the path."""

    return quote(str(value), safe="")
