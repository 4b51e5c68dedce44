"""Parsers from TMDB TV payloads into typed response objects."""

from __future__ import annotations

from ..common.models import Keyword, PaginatedResult
from ..common.parser import (
    parse_company_short,
    parse_country,
    parse_genre,
    parse_image,
    parse_keyword,
    parse_language,
    parse_paginated,
    parse_person_short,
)
from ..core.decoding import (
    JsonObject,
    as_object,
    empty_str,
    int_list,
    object_list,
    opt_date,
    opt_int,
    opt_object,
    opt_str,
    req_bool,
    req_float,
    req_int,
    req_str,
    str_list,
)
from .models import (
    AggregateCast,
    AggregateCrew,
    ContentRating,
    CrewJob,
    Episode,
    EpisodeShort,
    Role,
    Season,
    SeasonShort,
    TVShow,
    TVShowAggregateCreditsResult,
    TVShowExternalIdsResult,
    TVShowImagesResult,
    TVShowShort,
)


def _show_base(item: JsonObject) -> dict[str, object]:
    return {
        "id": req_int(item, "id"),
        "name": req_str(item, "name"),
        "original_name": req_str(item, "original_name"),
        "original_language": req_str(item, "original_language"),
        "origin_country": str_list(item, "origin_country", default=[]),
        "overview": empty_str(item, "overview"),
        "first_air_date": opt_date(item, "first_air_date"),
        "poster_path": opt_str(item, "poster_path"),
        "backdrop_path": opt_str(item, "backdrop_path"),
        "popularity": req_float(item, "popularity"),
        "vote_count": req_int(item, "vote_count"),
        "vote_average": req_float(item, "vote_average"),
        "adult": req_bool(item, "adult", default=False),
    }


def parse_tvshow_short(item: JsonObject) -> TVShowShort:
    return TVShowShort(**_show_base(item), genre_ids=int_list(item, "genre_ids", default=[]))


def parse_tvshow_page(payload: object) -> PaginatedResult[TVShowShort]:
    return parse_paginated(payload, parse_tvshow_short)


def _episode_base(item: JsonObject) -> dict[str, object]:
    return {
        "id": req_int(item, "id"),
        "name": req_str(item, "name"),
        "air_date": opt_date(item, "air_date"),
        "episode_number": req_int(item, "episode_number"),
        "season_number": req_int(item, "season_number"),
        "overview": empty_str(item, "overview"),
        "production_code": req_str(item, "production_code", default=""),
        "still_path": opt_str(item, "still_path"),
        "vote_average": req_float(item, "vote_average"),
        "vote_count": req_int(item, "vote_count"),
    }


def parse_episode_short(item: JsonObject) -> EpisodeShort:
    return EpisodeShort(**_episode_base(item))


def parse_episode(payload: object) -> Episode:
    item = as_object(payload)
    return Episode(
        **_episode_base(item),
        crew=object_list(item, "crew", parse_person_short, default=[]),
        guest_stars=object_list(item, "guest_stars", parse_person_short, default=[]),
    )


def parse_season_short(item: JsonObject) -> SeasonShort:
    return SeasonShort(
        id=req_int(item, "id"),
        name=req_str(item, "name"),
        air_date=opt_date(item, "air_date"),
        overview=empty_str(item, "overview"),
        poster_path=opt_str(item, "poster_path"),
        season_number=req_int(item, "season_number"),
        episode_count=req_int(item, "episode_count", default=0),
    )


def parse_season(payload: object) -> Season:
    item = as_object(payload)
    return Season(
        id=req_int(item, "id"),
        name=req_str(item, "name"),
        air_date=opt_date(item, "air_date"),
        overview=empty_str(item, "overview"),
        poster_path=opt_str(item, "poster_path"),
        season_number=req_int(item, "season_number"),
        episodes=object_list(item, "episodes", parse_episode),
        object_id=opt_str(item, "_id"),
    )


def parse_tvshow(payload: object) -> TVShow:
    item = as_object(payload)
    return TVShow(
        **_show_base(item),
        created_by=object_list(item, "created_by", parse_person_short),
        episode_run_time=int_list(item, "episode_run_time", default=[]),
        genres=object_list(item, "genres", parse_genre),
        homepage=req_str(item, "homepage", default=""),
        in_production=req_bool(item, "in_production"),
        languages=str_list(item, "languages", default=[]),
        last_air_date=opt_date(item, "last_air_date"),
        last_episode_to_air=opt_object(item, "last_episode_to_air", parse_episode_short),
        next_episode_to_air=opt_object(item, "next_episode_to_air", parse_episode_short),
        networks=object_list(item, "networks", parse_company_short),
        number_of_episodes=opt_int(item, "number_of_episodes"),
        number_of_seasons=req_int(item, "number_of_seasons"),
        production_companies=object_list(item, "production_companies", parse_company_short),
        production_countries=object_list(item, "production_countries", parse_country),
        seasons=object_list(item, "seasons", parse_season_short),
        spoken_languages=object_list(item, "spoken_languages", parse_language),
        status=req_str(item, "status"),
        tagline=empty_str(item, "tagline"),
        kind=req_str(item, "type"),
    )


def _aggregate_person(item: JsonObject) -> dict[str, object]:
    return {
        "id": req_int(item, "id"),
        "name": req_str(item, "name"),
        "original_name": req_str(item, "original_name"),
        "adult": req_bool(item, "adult"),
        "gender": opt_int(item, "gender"),
        "known_for_department": opt_str(item, "known_for_department"),
        "popularity": req_float(item, "popularity"),
        "profile_path": opt_str(item, "profile_path"),
        "total_episode_count": req_int(item, "total_episode_count"),
    }


def _parse_role(item: JsonObject) -> Role:
    return Role(
        credit_id=req_str(item, "credit_id"),
        character=req_str(item, "character"),
        episode_count=req_int(item, "episode_count"),
    )


def _parse_crew_job(item: JsonObject) -> CrewJob:
    return CrewJob(
        credit_id=req_str(item, "credit_id"),
        job=req_str(item, "job"),
        episode_count=req_int(item, "episode_count"),
    )


def _parse_aggregate_cast(item: JsonObject) -> AggregateCast:
    return AggregateCast(
        **_aggregate_person(item),
        roles=object_list(item, "roles", _parse_role),
        order=req_int(item, "order"),
    )


def _parse_aggregate_crew(item: JsonObject) -> AggregateCrew:
    return AggregateCrew(
        **_aggregate_person(item),
        jobs=object_list(item, "jobs", _parse_crew_job),
        department=req_str(item, "department"),
    )


def parse_aggregate_credits(payload: object) -> TVShowAggregateCreditsResult:
    item = as_object(payload)
    return TVShowAggregateCreditsResult(
        id=req_int(item, "id"),
        cast=object_list(item, "cast", _parse_aggregate_cast),
        crew=object_list(item, "crew", _parse_aggregate_crew),
    )


def _parse_content_rating(item: JsonObject) -> ContentRating:
    return ContentRating(
        iso_3166_1=req_str(item, "iso_3166_1"),
        rating=req_str(item, "rating"),
        descriptors=str_list(item, "descriptors", default=[]),
    )


def parse_content_ratings(payload: object) -> tuple[ContentRating, ...]:
    """Unwrap ``{"id": ..., "results": [...]}``."""

    return object_list(as_object(payload), "results", _parse_content_rating)


def parse_tvshow_keywords(payload: object) -> tuple[Keyword, ...]:
    """Unwrap ``{"id": ..., "results": [...]}``."""

    return object_list(as_object(payload), "results", parse_keyword)


def parse_external_ids(payload: object) -> TVShowExternalIdsResult:
    item = as_object(payload)
    return TVShowExternalIdsResult(
        id=req_int(item, "id"),
        imdb_id=empty_str(item, "imdb_id"),
        freebase_mid=empty_str(item, "freebase_mid"),
        freebase_id=empty_str(item, "freebase_id"),
        tvdb_id=opt_int(item, "tvdb_id"),
        tvrage_id=opt_int(item, "tvrage_id"),
        wikidata_id=empty_str(item, "wikidata_id"),
        facebook_id=empty_str(item, "facebook_id"),
        instagram_id=empty_str(item, "instagram_id"),
        twitter_id=empty_str(item, "twitter_id"),
    )


def parse_images(payload: object) -> TVShowImagesResult:
    item = as_object(payload)
    return TVShowImagesResult(
        id=req_int(item, "id"),
        backdrops=object_list(item, "backdrops", parse_image),
        posters=object_list(item, "posters", parse_image),
        logos=object_list(item, "logos", parse_image, default=[]),
    )


__all__ = [
    "parse_tvshow_short",
    "parse_tvshow_page",
    "parse_episode_short",
    "parse_episode",
    "parse_season_short",
    "parse_season",
    "parse_tvshow",
    "parse_aggregate_credits",
    "parse_content_ratings",
    "parse_tvshow_keywords",
    "parse_external_ids",
    "parse_images",
]
