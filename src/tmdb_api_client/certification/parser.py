"""Parsers for certification payloads."""

from __future__ import annotations

from ..core.decoding import JsonObject, as_list, as_object, req_int, req_str
from .models import Certification


def parse_certification(item: JsonObject) -> Certification:
    return Certification(
        certification=req_str(item, "certification"),
        meaning=req_str(item, "meaning"),
        order=req_int(item, "order"),
    )


def parse_certification_map(payload: object) -> dict[str, tuple[Certification, ...]]:
    """Unwrap ``{"certifications": {country: [...]}}``."""

    raw = as_object(as_object(payload).get("certifications"), "field 'certifications'")
    return {
        str(country): tuple(
            parse_certification(as_object(entry, f"certification of {country!r}"))
            for entry in as_list(entries, f"certifications of {country!r}")
        )
        for country, entries in raw.items()
    }


__all__ = [
    "parse_certification",
    "parse_certification_map",
]
