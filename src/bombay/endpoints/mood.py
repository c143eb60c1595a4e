"""Mood endpoints."""

from __future__ import annotations

from ..decoder import decode_wrapped
from ..request import ApiRequest, RequestParameters, query_for
from ..schema.mood import Mood
from ..schema.response import Paginated
from .base import EndpointGroup, segment


def all_moods(parameters: RequestParameters | None = None) -> ApiRequest:
    return ApiRequest(method="GET", path="/moods", params=query_for(parameters))


def mood_by_name_uri(mood_name_uri: str) -> ApiRequest:
    return ApiRequest(method="GET", path=f"/mood/{segment(mood_name_uri)}")


class MoodEndpoints(EndpointGroup):
    def get_all(self, parameters: RequestParameters | None = None) -> Paginated[Mood]:
        payload = self._executor.call(all_moods(parameters))
        return decode_wrapped(payload, "Moods", Paginated[Mood])

    def get_by_name_uri(self, mood_name_uri: str) -> Mood:
        payload = self._executor.call(mood_by_name_uri(mood_name_uri))
        return decode_wrapped(payload, "Mood", Mood)
