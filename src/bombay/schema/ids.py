"""Typed identifiers."""

from __future__ import annotations

from typing import NewType
from uuid import UUID

ArtistId = NewType("ArtistId", UUID)
ReleaseId = NewType("ReleaseId", UUID)
TrackId = NewType("TrackId", UUID)
PlaylistId = NewType("PlaylistId", UUID)
UserId = NewType("UserId", UUID)
LicenseId = NewType("LicenseId", UUID)
ShopCodeId = NewType("ShopCodeId", UUID)
MoodId = NewType("MoodId", UUID)

# Catalog ids are label catalog numbers (e.g. "MCS1186") or UPCs, not UUIDs.
CatalogId = NewType("CatalogId", str)
