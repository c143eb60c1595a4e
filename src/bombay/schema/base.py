"""Base model and field helpers shared by the API schemas."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime  # noqa: TC003
from functools import cache
from logging import getLogger
from typing import Any, ClassVar, cast

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_pascal

log = getLogger(__name__)


@cache
def _accepted_keys(model: type[BaseModel]) -> frozenset[str]:
    keys: set[str] = set()
    for name, info in model.model_fields.items():
        keys.add(name)
        if info.alias:
            keys.add(info.alias)
        alias = info.validation_alias
        if isinstance(alias, str):
            keys.add(alias)
        elif isinstance(alias, AliasChoices):
            keys.update(choice for choice in alias.choices if isinstance(choice, str))
    return frozenset(keys)


class ApiModel(BaseModel):
    """Immutable view of a JSON object sent by the API.

    Keys are PascalCase on the wire. Keys the model does not declare are
    dropped; each one is logged once per model at DEBUG level.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        alias_generator=to_pascal,
    )
    _logged_unknown_keys: ClassVar[set[tuple[str, str]]] = set()

    @model_validator(mode="before")
    @classmethod
    def _note_unknown_keys(cls, value: object) -> object:
        if not isinstance(value, Mapping):
            return value
        mapping_value = cast(Mapping[str, object], value)
        unknown = {(cls.__name__, key) for key in mapping_value} - {
            (cls.__name__, key) for key in _accepted_keys(cls)
        }
        new_keys = unknown - ApiModel._logged_unknown_keys
        if new_keys:
            ApiModel._logged_unknown_keys.update(new_keys)
            log.debug(
                "%s: ignoring unmodeled keys: %s",
                cls.__name__,
                ", ".join(sorted(key for _, key in new_keys)),
            )
        return value

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a request body: wire names, ``None`` fields left out."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def uri_field() -> Any:
    return Field(validation_alias=AliasChoices("URI", "Uri", "uri"), serialization_alias="Uri")


def either_case(pascal: str, *others: str, default: object = None) -> Any:
    """Accept a key under its PascalCase name or any of the observed variants."""

    return Field(
        default=default,
        validation_alias=AliasChoices(pascal, *others),
        serialization_alias=pascal,
    )


class CacheDetails(ApiModel):
    """Cache bookkeeping the API attaches to some objects."""

    cache_time: datetime
    cache_status: str | None = None
    cache_status_detail: str | None = None


class CachedModel(ApiModel):
    """Model whose payload carries flattened cache bookkeeping keys."""

    cache_time: datetime | None = None
    cache_status: str | None = None
    cache_status_detail: str | None = None

    @property
    def cache_details(self) -> CacheDetails | None:
        if self.cache_time is None:
            return None
        return CacheDetails(
            cache_time=self.cache_time,
            cache_status=self.cache_status,
            cache_status_detail=self.cache_status_detail,
        )
