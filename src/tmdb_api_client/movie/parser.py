"""Parsers from TMDB movie payloads into typed response objects."""

from __future__ import annotations

from ..common.models import PaginatedResult, Status
from ..common.parser import (
    parse_cast,
    parse_company_short,
    parse_country,
    parse_crew,
    parse_genre,
    parse_image,
    parse_keyword,
    parse_language,
    parse_located_release_dates,
    parse_paginated,
    parse_video,
)
from ..core.decoding import (
    JsonObject,
    as_object,
    empty_str,
    int_list,
    object_list,
    opt_date,
    opt_float,
    opt_int,
    opt_object,
    opt_str,
    req_bool,
    req_datetime,
    req_enum,
    req_float,
    req_int,
    req_object,
    req_str,
)
from .models import (
    AuthorDetails,
    DateRange,
    Movie,
    MovieAlternativeTitle,
    MovieAlternativeTitlesResult,
    MovieChange,
    MovieChangeItem,
    MovieCreditsResult,
    MovieDatedPage,
    MovieExternalIdsResult,
    MovieImagesResult,
    MovieKeywordsResult,
    MovieList,
    MovieReleaseDatesResult,
    MovieReview,
    MovieShort,
    MovieTranslationsResult,
    MovieVideosResult,
    Translation,
    TranslationData,
)


def _movie_base(item: JsonObject) -> dict[str, object]:
    return {
        "id": req_int(item, "id"),
        "title": req_str(item, "title"),
        "original_title": req_str(item, "original_title"),
        "original_language": req_str(item, "original_language"),
        "overview": req_str(item, "overview", default=""),
        "release_date": opt_date(item, "release_date"),
        "poster_path": opt_str(item, "poster_path"),
        "backdrop_path": opt_str(item, "backdrop_path"),
        "adult": req_bool(item, "adult"),
        "popularity": req_float(item, "popularity"),
        "vote_count": req_int(item, "vote_count"),
        "vote_average": req_float(item, "vote_average"),
        "video": req_bool(item, "video", default=False),
    }


def parse_movie_short(item: JsonObject) -> MovieShort:
    return MovieShort(**_movie_base(item), genre_ids=int_list(item, "genre_ids", default=[]))


def parse_movie(payload: object) -> Movie:
    item = as_object(payload)
    return Movie(
        **_movie_base(item),
        budget=req_int(item, "budget"),
        genres=object_list(item, "genres", parse_genre),
        homepage=empty_str(item, "homepage"),
        imdb_id=empty_str(item, "imdb_id"),
        production_companies=object_list(item, "production_companies", parse_company_short),
        production_countries=object_list(item, "production_countries", parse_country),
        revenue=req_int(item, "revenue"),
        runtime=opt_int(item, "runtime"),
        spoken_languages=object_list(item, "spoken_languages", parse_language),
        status=req_enum(item, "status", Status),
        tagline=empty_str(item, "tagline"),
    )


def parse_movie_page(payload: object) -> PaginatedResult[MovieShort]:
    return parse_paginated(payload, parse_movie_short)


def _parse_date_range(item: JsonObject) -> DateRange:
    return DateRange(maximum=opt_date(item, "maximum"), minimum=opt_date(item, "minimum"))


def parse_movie_dated_page(payload: object) -> MovieDatedPage:
    page = parse_movie_page(payload)
    return MovieDatedPage(
        page=page.page,
        total_results=page.total_results,
        total_pages=page.total_pages,
        results=page.results,
        dates=opt_object(as_object(payload), "dates", _parse_date_range),
    )


def _parse_alternative_title(item: JsonObject) -> MovieAlternativeTitle:
    return MovieAlternativeTitle(
        iso_3166_1=req_str(item, "iso_3166_1"),
        title=req_str(item, "title"),
        kind=empty_str(item, "type"),
    )


def parse_alternative_titles(payload: object) -> MovieAlternativeTitlesResult:
    item = as_object(payload)
    return MovieAlternativeTitlesResult(
        id=req_int(item, "id"),
        titles=object_list(item, "titles", _parse_alternative_title),
    )


def _parse_change_item(item: JsonObject) -> MovieChangeItem:
    return MovieChangeItem(
        id=req_str(item, "id"),
        action=req_str(item, "action"),
        time=req_datetime(item, "time"),
        iso_639_1=req_str(item, "iso_639_1", default=""),
        iso_3166_1=req_str(item, "iso_3166_1", default=""),
    )


def _parse_change(item: JsonObject) -> MovieChange:
    return MovieChange(
        key=req_str(item, "key"),
        items=object_list(item, "items", _parse_change_item),
    )


def parse_movie_changes(payload: object) -> tuple[MovieChange, ...]:
    """Unwrap ``{"changes": [...]}``."""

    return object_list(as_object(payload), "changes", _parse_change)


def parse_credits(payload: object) -> MovieCreditsResult:
    item = as_object(payload)
    return MovieCreditsResult(
        id=req_int(item, "id"),
        cast=object_list(item, "cast", parse_cast),
        crew=object_list(item, "crew", parse_crew),
    )


def parse_external_ids(payload: object) -> MovieExternalIdsResult:
    item = as_object(payload)
    return MovieExternalIdsResult(
        id=req_int(item, "id"),
        imdb_id=empty_str(item, "imdb_id"),
        facebook_id=empty_str(item, "facebook_id"),
        instagram_id=empty_str(item, "instagram_id"),
        twitter_id=empty_str(item, "twitter_id"),
        wikidata_id=empty_str(item, "wikidata_id"),
    )


def parse_images(payload: object) -> MovieImagesResult:
    item = as_object(payload)
    return MovieImagesResult(
        id=req_int(item, "id"),
        backdrops=object_list(item, "backdrops", parse_image),
        posters=object_list(item, "posters", parse_image),
        logos=object_list(item, "logos", parse_image, default=[]),
    )


def parse_keywords(payload: object) -> MovieKeywordsResult:
    item = as_object(payload)
    return MovieKeywordsResult(
        id=req_int(item, "id"),
        keywords=object_list(item, "keywords", parse_keyword),
    )


def parse_movie_list(item: JsonObject) -> MovieList:
    return MovieList(
        id=req_int(item, "id"),
        name=req_str(item, "name"),
        description=empty_str(item, "description"),
        list_type=req_str(item, "list_type"),
        poster_path=empty_str(item, "poster_path"),
        iso_639_1=req_str(item, "iso_639_1"),
        item_count=req_int(item, "item_count"),
        favorite_count=req_int(item, "favorite_count"),
    )


def parse_release_dates(payload: object) -> MovieReleaseDatesResult:
    item = as_object(payload)
    return MovieReleaseDatesResult(
        id=req_int(item, "id"),
        results=object_list(item, "results", parse_located_release_dates),
    )


def _parse_author_details(item: JsonObject) -> AuthorDetails:
    return AuthorDetails(
        name=req_str(item, "name", default=""),
        username=req_str(item, "username"),
        avatar_path=opt_str(item, "avatar_path"),
        rating=opt_float(item, "rating"),
    )


def parse_review(item: JsonObject) -> MovieReview:
    return MovieReview(
        id=req_str(item, "id"),
        author=req_str(item, "author"),
        author_details=req_object(item, "author_details", _parse_author_details),
        content=req_str(item, "content"),
        url=req_str(item, "url"),
        created_at=req_datetime(item, "created_at"),
        updated_at=req_datetime(item, "updated_at"),
    )


def _parse_translation_data(item: JsonObject) -> TranslationData:
    return TranslationData(
        title=empty_str(item, "title"),
        overview=empty_str(item, "overview"),
        homepage=empty_str(item, "homepage"),
    )


def _parse_translation(item: JsonObject) -> Translation:
    return Translation(
        iso_3166_1=req_str(item, "iso_3166_1"),
        iso_639_1=req_str(item, "iso_639_1"),
        name=req_str(item, "name", default=""),
        english_name=req_str(item, "english_name"),
        data=req_object(item, "data", _parse_translation_data),
    )


def parse_translations(payload: object) -> MovieTranslationsResult:
    item = as_object(payload)
    return MovieTranslationsResult(
        id=req_int(item, "id"),
        translations=object_list(item, "translations", _parse_translation),
    )


def parse_videos(payload: object) -> MovieVideosResult:
    item = as_object(payload)
    return MovieVideosResult(
        id=req_int(item, "id"),
        results=object_list(item, "results", parse_video),
    )


__all__ = [
    "parse_movie_short",
    "parse_movie",
    "parse_movie_page",
    "parse_movie_dated_page",
    "parse_alternative_titles",
    "parse_movie_changes",
    "parse_credits",
    "parse_external_ids",
    "parse_images",
    "parse_keywords",
    "parse_movie_list",
    "parse_release_dates",
    "parse_review",
    "parse_translations",
    "parse_videos",
]
