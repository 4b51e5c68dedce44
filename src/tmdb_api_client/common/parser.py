"""Parsers for the shared response shapes."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from ..core.decoding import (
    JsonObject,
    as_object,
    empty_str,
    object_list,
    object_map,
    opt_int,
    opt_str,
    req_bool,
    req_datetime,
    req_enum,
    req_float,
    req_int,
    req_str,
)
from .models import (
    Cast,
    CompanyShort,
    Country,
    Crew,
    Genre,
    Image,
    Keyword,
    Language,
    LocatedReleaseDates,
    LocatedWatchProvider,
    PaginatedResult,
    PersonShort,
    ReleaseDate,
    ReleaseDateKind,
    Video,
    WatchProvider,
    WatchProviderResult,
)

T = TypeVar("T")


def parse_paginated(
    payload: object,
    parse: Callable[[JsonObject], T],
) -> PaginatedResult[T]:
    item = as_object(payload)
    return PaginatedResult(
        page=req_int(item, "page"),
        total_results=req_int(item, "total_results"),
        total_pages=req_int(item, "total_pages"),
        results=object_list(item, "results", parse),
    )


def parse_genre(item: JsonObject) -> Genre:
    return Genre(id=req_int(item, "id"), name=req_str(item, "name"))


def parse_keyword(item: JsonObject) -> Keyword:
    return Keyword(id=req_int(item, "id"), name=req_str(item, "name"))


def parse_country(item: JsonObject) -> Country:
    return Country(iso_3166_1=req_str(item, "iso_3166_1"), name=req_str(item, "name"))


def parse_language(item: JsonObject) -> Language:
    # name can be blank for languages without a native name
    return Language(
        iso_639_1=req_str(item, "iso_639_1"),
        name=req_str(item, "name", default=""),
        english_name=opt_str(item, "english_name"),
    )


def parse_company_short(item: JsonObject) -> CompanyShort:
    return CompanyShort(
        id=req_int(item, "id"),
        name=req_str(item, "name"),
        logo_path=opt_str(item, "logo_path"),
        origin_country=empty_str(item, "origin_country"),
    )


def parse_person_short(item: JsonObject) -> PersonShort:
    return PersonShort(
        id=req_int(item, "id"),
        name=req_str(item, "name"),
        credit_id=opt_str(item, "credit_id"),
        gender=opt_int(item, "gender"),
        profile_path=opt_str(item, "profile_path"),
    )


def _credit_fields(item: JsonObject) -> dict[str, object]:
    return {
        "id": req_int(item, "id"),
        "name": req_str(item, "name"),
        "credit_id": req_str(item, "credit_id"),
        "adult": req_bool(item, "adult"),
        "known_for_department": opt_str(item, "known_for_department"),
        "original_name": req_str(item, "original_name"),
        "popularity": req_float(item, "popularity"),
        "gender": opt_int(item, "gender"),
        "profile_path": opt_str(item, "profile_path"),
    }


def parse_cast(item: JsonObject) -> Cast:
    return Cast(
        **_credit_fields(item),
        cast_id=req_int(item, "cast_id"),
        character=req_str(item, "character"),
        order=req_int(item, "order"),
    )


def parse_crew(item: JsonObject) -> Crew:
    return Crew(
        **_credit_fields(item),
        department=req_str(item, "department"),
        job=req_str(item, "job"),
    )


def parse_image(item: JsonObject) -> Image:
    return Image(
        aspect_ratio=req_float(item, "aspect_ratio"),
        file_path=req_str(item, "file_path"),
        height=req_int(item, "height"),
        width=req_int(item, "width"),
        iso_639_1=opt_str(item, "iso_639_1"),
        vote_average=req_float(item, "vote_average"),
        vote_count=req_int(item, "vote_count"),
    )


def parse_video(item: JsonObject) -> Video:
    return Video(
        id=req_str(item, "id"),
        name=req_str(item, "name"),
        kind=req_str(item, "type"),
        site=req_str(item, "site"),
        key=req_str(item, "key"),
        published_at=req_datetime(item, "published_at"),
        size=req_int(item, "size"),
        iso_639_1=req_str(item, "iso_639_1"),
        iso_3166_1=req_str(item, "iso_3166_1"),
    )


def parse_release_date(item: JsonObject) -> ReleaseDate:
    return ReleaseDate(
        certification=empty_str(item, "certification"),
        iso_639_1=empty_str(item, "iso_639_1"),
        note=empty_str(item, "note"),
        release_date=req_datetime(item, "release_date"),
        kind=req_enum(item, "type", ReleaseDateKind),
    )


def parse_located_release_dates(item: JsonObject) -> LocatedReleaseDates:
    return LocatedReleaseDates(
        iso_3166_1=req_str(item, "iso_3166_1"),
        release_dates=object_list(item, "release_dates", parse_release_date),
    )


def parse_watch_provider(item: JsonObject) -> WatchProvider:
    return WatchProvider(
        provider_id=req_int(item, "provider_id"),
        provider_name=req_str(item, "provider_name"),
        display_priority=req_int(item, "display_priority"),
        logo_path=req_str(item, "logo_path"),
    )


def parse_located_watch_provider(item: JsonObject) -> LocatedWatchProvider:
    return LocatedWatchProvider(
        link=req_str(item, "link"),
        flatrate=object_list(item, "flatrate", parse_watch_provider, default=[]),
        rent=object_list(item, "rent", parse_watch_provider, default=[]),
        buy=object_list(item, "buy", parse_watch_provider, default=[]),
    )


def parse_watch_provider_result(payload: object) -> WatchProviderResult:
    item = as_object(payload)
    return WatchProviderResult(
        id=req_int(item, "id"),
        results=object_map(item, "results", parse_located_watch_provider),
    )


__all__ = [
    "parse_paginated",
    "parse_genre",
    "parse_keyword",
    "parse_country",
    "parse_language",
    "parse_company_short",
    "parse_person_short",
    "parse_cast",
    "parse_crew",
    "parse_image",
    "parse_video",
    "parse_release_date",
    "parse_located_release_dates",
    "parse_watch_provider",
    "parse_located_watch_provider",
    "parse_watch_provider_result",
]
