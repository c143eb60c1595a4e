"""Moods group tracks by audio features."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from enum import StrEnum
from typing import Any
from uuid import UUID  # noqa: TC003

from .base import ApiModel, uri_field
from .ids import MoodId  # noqa: TC001


class MoodParam(StrEnum):
    ACOUSTICNESS = "acousticness"
    DANCEABILITY = "danceability"
    ENERGY = "energy"
    INSTRUMENTALNESS = "instrumentalness"
    LIVENESS = "liveness"
    LOUDNESS = "loudness"
    SPEECHINESS = "speechiness"
    VALENCE = "valence"


class MoodParamConfig(ApiModel):
    """Range of one audio feature selected by a mood."""

    mood_id: MoodId
    param: MoodParam
    min: float
    max: float


class Mood(ApiModel):
    id: MoodId
    name: str
    uri: str = uri_field()
    description: str | None = None
    omitted_genres: Any = None
    start_date: datetime | None = None
    timezone: str | None = None
    params: list[MoodParamConfig] | None = None
    omitted_songs: Any = None
    tile_file_id: UUID | None = None
    background_file_id: UUID | None = None
