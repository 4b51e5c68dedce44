"""Parsers for collection payloads."""

from __future__ import annotations

from ..core.decoding import (
    JsonObject,
    as_object,
    int_list,
    object_list,
    opt_date,
    opt_str,
    req_bool,
    req_enum,
    req_float,
    req_int,
    req_str,
)
from .models import Collection, CollectionPart, MediaType


def parse_collection_part(item: JsonObject) -> CollectionPart:
    return CollectionPart(
        id=req_int(item, "id"),
        media_type=req_enum(item, "media_type", MediaType),
        title=req_str(item, "title"),
        original_language=req_str(item, "original_language"),
        original_title=req_str(item, "original_title"),
        overview=req_str(item, "overview"),
        poster_path=opt_str(item, "poster_path"),
        backdrop_path=opt_str(item, "backdrop_path"),
        release_date=opt_date(item, "release_date"),
        genre_ids=int_list(item, "genre_ids", default=[]),
        popularity=req_float(item, "popularity", default=0.0),
        adult=req_bool(item, "adult", default=False),
        video=req_bool(item, "video", default=False),
        vote_average=req_float(item, "vote_average", default=0.0),
        vote_count=req_int(item, "vote_count", default=0),
    )


def parse_collection(payload: object) -> Collection:
    item = as_object(payload)
    return Collection(
        id=req_int(item, "id"),
        name=req_str(item, "name"),
        overview=opt_str(item, "overview"),
        poster_path=opt_str(item, "poster_path"),
        backdrop_path=opt_str(item, "backdrop_path"),
        parts=object_list(item, "parts", parse_collection_part),
    )


__all__ = [
    "parse_collection_part",
    "parse_collection",
]
