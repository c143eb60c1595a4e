"""Label brands."""

from __future__ import annotations

from enum import IntEnum


class Brand(IntEnum):
    UNCAGED = 1
    INSTINCT = 2
    CALL_OF_THE_WILD = 3
    SILK = 4
    SILK_SHOWCASE = 5

    @classmethod
    def from_id(cls, brand_id: int | None) -> Brand | None:
        if brand_id is None:
            return None
        try:
            return cls(brand_id)
        except ValueError:
            return None
