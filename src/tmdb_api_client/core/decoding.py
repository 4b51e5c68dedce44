"""Typed readers over decoded JSON objects.

Every reader raises :class:`TmdbDecodeError` when a field is missing or has
the wrong type, so a malformed success body never turns into a silent
default. Readers that accept a ``default`` return it only when the field is
absent or ``null``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, TypeVar

from .errors import TmdbDecodeError

JsonObject = Mapping[str, Any]

T = TypeVar("T")
EnumT = TypeVar("EnumT", bound=Enum)

_MISSING: Any = object()


def _missing(key: str) -> TmdbDecodeError:
    return TmdbDecodeError(f"missing field {key!r}")


def _invalid(key: str, expected: str, value: object) -> TmdbDecodeError:
    return TmdbDecodeError(
        f"field {key!r} must be {expected}, got {type(value).__name__}"
    )


def _read(item: JsonObject, key: str, default: Any) -> Any:
    value = item.get(key)
    if value is None:
        if default is _MISSING:
            raise _missing(key)
        return default
    return value


def as_object(value: object, what: str = "response") -> JsonObject:
    if not isinstance(value, Mapping):
        raise TmdbDecodeError(f"{what} must be a JSON object")
    return value


def as_list(value: object, what: str = "response") -> list[Any]:
    if not isinstance(value, list):
        raise TmdbDecodeError(f"{what} must be a JSON array")
    return value


def req_int(item: JsonObject, key: str, *, default: Any = _MISSING) -> int:
    value = _read(item, key, default)
    if value is None:
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise _invalid(key, "an integer", value)
    return value


def opt_int(item: JsonObject, key: str) -> int | None:
    return req_int(item, key, default=None)


def req_float(item: JsonObject, key: str, *, default: Any = _MISSING) -> float:
    value = _read(item, key, default)
    if value is None:
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _invalid(key, "a number", value)
    return float(value)


def opt_float(item: JsonObject, key: str) -> float | None:
    return req_float(item, key, default=None)


def req_bool(item: JsonObject, key: str, *, default: Any = _MISSING) -> bool:
    value = _read(item, key, default)
    if value is None:
        return value
    if not isinstance(value, bool):
        raise _invalid(key, "a boolean", value)
    return value


def req_str(item: JsonObject, key: str, *, default: Any = _MISSING) -> str:
    value = _read(item, key, default)
    if value is None:
        return value
    if not isinstance(value, str):
        raise _invalid(key, "a string", value)
    return value


def opt_str(item: JsonObject, key: str) -> str | None:
    return req_str(item, key, default=None)


def empty_str(item: JsonObject, key: str) -> str | None:
    """Like :func:`opt_str`, but a blank string also reads as ``None``."""

    value = opt_str(item, key)
    return value or None


def _parse_date(key: str, value: object) -> date:
    if not isinstance(value, str):
        raise _invalid(key, "a YYYY-MM-DD string", value)
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise TmdbDecodeError(f"field {key!r} is not a YYYY-MM-DD date: {value!r}") from exc


def req_date(item: JsonObject, key: str) -> date:
    return _parse_date(key, _read(item, key, _MISSING))


def opt_date(item: JsonObject, key: str) -> date | None:
    """Missing, ``null`` and ``""`` all read as ``None``."""

    value = item.get(key)
    if value is None or value == "":
        return None
    return _parse_date(key, value)


def _parse_datetime(key: str, value: object) -> datetime:
    if not isinstance(value, str):
        raise _invalid(key, "an ISO-8601 timestamp", value)
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise TmdbDecodeError(f"field {key!r} is not an ISO-8601 timestamp: {value!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def req_datetime(item: JsonObject, key: str) -> datetime:
    return _parse_datetime(key, _read(item, key, _MISSING))


def opt_datetime(item: JsonObject, key: str) -> datetime | None:
    value = item.get(key)
    if value is None or value == "":
        return None
    return _parse_datetime(key, value)


def req_enum(item: JsonObject, key: str, enum_type: type[EnumT]) -> EnumT:
    value = _read(item, key, _MISSING)
    try:
        return enum_type(value)
    except ValueError as exc:
        raise TmdbDecodeError(
            f"field {key!r} has unknown {enum_type.__name__} value {value!r}"
        ) from exc


def int_list(item: JsonObject, key: str, *, default: Any = _MISSING) -> tuple[int, ...]:
    values = as_list(_read(item, key, default), f"field {key!r}")
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _invalid(key, "a list of integers", value)
    return tuple(values)


def str_list(item: JsonObject, key: str, *, default: Any = _MISSING) -> tuple[str, ...]:
    values = as_list(_read(item, key, default), f"field {key!r}")
    for value in values:
        if not isinstance(value, str):
            raise _invalid(key, "a list of strings", value)
    return tuple(values)


def object_list(
    item: JsonObject,
    key: str,
    parse: Callable[[JsonObject], T],
    *,
    default: Any = _MISSING,
) -> tuple[T, ...]:
    values = as_list(_read(item, key, default), f"field {key!r}")
    return tuple(parse(as_object(value, f"element of {key!r}")) for value in values)


def req_object(item: JsonObject, key: str, parse: Callable[[JsonObject], T]) -> T:
    return parse(as_object(_read(item, key, _MISSING), f"field {key!r}"))


def opt_object(item: JsonObject, key: str, parse: Callable[[JsonObject], T]) -> T | None:
    value = item.get(key)
    if value is None:
        return None
    return parse(as_object(value, f"field {key!r}"))


def object_map(
    item: JsonObject,
    key: str,
    parse: Callable[[JsonObject], T],
) -> dict[str, T]:
    raw = as_object(_read(item, key, _MISSING), f"field {key!r}")
    return {
        str(name): parse(as_object(value, f"entry {name!r} of {key!r}"))
        for name, value in raw.items()
    }


def parse_list(payload: object, parse: Callable[[JsonObject], T]) -> tuple[T, ...]:
    """Decode a JSON array root into a tuple of records."""

    return tuple(parse(as_object(value, "array element")) for value in as_list(payload))


__all__ = [
    "JsonObject",
    "as_object",
    "as_list",
    "req_int",
    "opt_int",
    "req_float",
    "opt_float",
    "req_bool",
    "req_str",
    "opt_str",
    "empty_str",
    "req_date",
    "opt_date",
    "req_datetime",
    "opt_datetime",
    "req_enum",
    "int_list",
    "str_list",
    "object_list",
    "req_object",
    "opt_object",
    "object_map",
    "parse_list",
]
