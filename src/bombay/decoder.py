"""Turn raw JSON bodies into response models.

Every decode either returns a fully validated value or raises
``MalformedResponse``; nothing partially populated escapes. Unknown keys are
dropped by the models themselves (see ``schema.base.ApiModel``).
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from functools import cache
from logging import getLogger
from typing import TYPE_CHECKING, Any, cast

from pydantic import TypeAdapter, ValidationError

from .errors import MalformedResponse

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

log = getLogger(__name__)

BODY_FIELD = "<body>"
ROOT_FIELD = "<root>"

_EXPECTED_BY_ERROR_TYPE = {
    "string_type": "string",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "float_type": "number",
    "float_parsing": "number",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "list_type": "array",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
    "uuid_type": "uuid",
    "uuid_parsing": "uuid",
    "datetime_type": "datetime",
    "datetime_parsing": "datetime",
    "datetime_from_date_parsing": "datetime",
    "enum": "known enum value",
    "union_tag_invalid": "known variant",
}


def json_shape(value: object) -> str:
    """Name the JSON type of a decoded value."""

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


@cache
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def _shape_name(shape: object) -> str:
    return getattr(shape, "__name__", None) or repr(shape)


def _field_path(prefix: str | None, loc: tuple[str | int, ...]) -> str:
    parts = [str(part) for part in loc]
    if prefix:
        parts.insert(0, prefix)
    return ".".join(parts) or ROOT_FIELD


def _to_malformed(
    err: ValidationError, *, shape: object, path: str | None
) -> MalformedResponse:
    errors = err.errors(include_url=False)
    first: ErrorDetails = errors[0]
    if first["type"] == "missing":
        actual = "absent"
        expected = "a value"
    else:
        actual = json_shape(first["input"])
        expected = _EXPECTED_BY_ERROR_TYPE.get(first["type"], first["msg"])
    detail = f"{len(errors)} validation errors" if len(errors) > 1 else None
    return MalformedResponse(
        field=_field_path(path, first["loc"]),
        expected=expected,
        actual=actual,
        model=_shape_name(shape),
        detail=detail,
    )


def decode[T](payload: object, shape: type[T] | Any, *, path: str | None = None) -> T:
    """Validate an already parsed JSON value against ``shape``.

    ``shape`` is a model class or any type pydantic can validate
    (``list[Artist]``, ``Paginated[AnyRelease]``...). ``path`` prefixes the
    field named in errors, for values pulled out of an envelope.

    Validation is strict JSON: a number sent as a string, or a boolean sent
    where an integer belongs, is rejected. Datetimes and UUIDs are still read
    from their string forms.
    """

    try:
        return cast("T", _adapter(shape).validate_json(json.dumps(payload), strict=True))
    except ValidationError as err:
        malformed = _to_malformed(err, shape=shape, path=path)
        log.debug("Rejected %s payload: %s", _shape_name(shape), malformed)
        raise malformed from err


def parse_json(body: bytes | str) -> object:
    """Parse a response body; anything that is not JSON is malformed."""

    if not body:
        raise MalformedResponse(field=BODY_FIELD, expected="JSON", actual="empty body")
    try:
        return json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as err:
        raise MalformedResponse(
            field=BODY_FIELD, expected="JSON", actual="invalid JSON", detail=str(err)
        ) from err


def decode_json[T](body: bytes | str, shape: type[T] | Any) -> T:
    return decode(parse_json(body), shape)


def unwrap(payload: object, key: str) -> object:
    """Return ``payload[key]`` from an envelope such as ``{"Artists": {...}}``."""

    if not isinstance(payload, Mapping):
        raise MalformedResponse(field=ROOT_FIELD, expected="object", actual=json_shape(payload))
    envelope = cast("Mapping[str, object]", payload)
    if key not in envelope:
        raise MalformedResponse(field=key, expected="object", actual="absent")
    return envelope[key]


def decode_wrapped[T](payload: object, key: str, shape: type[T] | Any) -> T:
    return decode(unwrap(payload, key), shape, path=key)
