"""Parsers for the watch provider catalogue."""

from __future__ import annotations

from ..core.decoding import JsonObject, as_object, object_list, req_int, req_str
from ..core.errors import TmdbDecodeError
from .models import WatchProviderDetail


def _priorities(item: JsonObject) -> dict[str, int]:
    raw = item.get("display_priorities")
    if raw is None:
        return {}
    priorities = as_object(raw, "field 'display_priorities'")
    result: dict[str, int] = {}
    for country, value in priorities.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise TmdbDecodeError(f"display priority of {country!r} must be an integer")
        result[str(country)] = value
    return result


def parse_watch_provider_detail(item: JsonObject) -> WatchProviderDetail:
    return WatchProviderDetail(
        provider_id=req_int(item, "provider_id"),
        provider_name=req_str(item, "provider_name"),
        display_priority=req_int(item, "display_priority", default=0),
        logo_path=req_str(item, "logo_path"),
        display_priorities=_priorities(item),
    )


def parse_watch_provider_details(payload: object) -> tuple[WatchProviderDetail, ...]:
    """Unwrap ``{"results": [...]}``."""

    return object_list(as_object(payload), "results", parse_watch_provider_detail)


__all__ = [
    "parse_watch_provider_detail",
    "parse_watch_provider_details",
]
