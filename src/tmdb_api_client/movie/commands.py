"""Movie commands."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date

from ..common.models import PaginatedResult, WatchProviderResult
from ..common.parser import parse_paginated, parse_watch_provider_result
from ..core.command import (
    Command,
    DateRangeOption,
    LanguageOption,
    PageOption,
    RegionOption,
    append_flag,
    append_param,
)
from .models import (
    Movie,
    MovieAlternativeTitlesResult,
    MovieChange,
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
)
from .parser import (
    parse_alternative_titles,
    parse_credits,
    parse_external_ids,
    parse_images,
    parse_keywords,
    parse_movie,
    parse_movie_changes,
    parse_movie_dated_page,
    parse_movie_list,
    parse_movie_page,
    parse_release_dates,
    parse_review,
    parse_translations,
    parse_videos,
)


def _listing_params(
    language: str | None,
    page: int | None,
    region: str | None = None,
) -> list[tuple[str, str]]:
    params: list[tuple[str, str]] = []
    append_param(params, "language", language)
    append_param(params, "page", page)
    append_param(params, "region", region)
    return params


@dataclass(slots=True, frozen=True)
class MovieDetails(LanguageOption, Command[Movie]):
    movie_id: int
    language: str | None = None

    def path(self) -> str:
        return f"/movie/{self.movie_id}"

    def params(self) -> list[tuple[str, str]]:
        return _listing_params(self.language, None)

    def decode(self, payload: object) -> Movie:
        return parse_movie(payload)


@dataclass(slots=True, frozen=True)
class MovieSearch(
    LanguageOption,
    PageOption,
    RegionOption,
    Command[PaginatedResult[MovieShort]],
):
    """Search movies by title.

    ``year`` filters on any release, ``primary_release_year`` on the primary
    one. ``include_adult`` is sent only when enabled.
    """

    query: str
    language: str | None = None
    page: int | None = None
    include_adult: bool = False
    region: str | None = None
    year: int | None = None
    primary_release_year: int | None = None

    def with_include_adult(self, value: bool) -> "MovieSearch":
        return replace(self, include_adult=value)

    def with_year(self, value: int | None) -> "MovieSearch":
        return replace(self, year=value)

    def with_primary_release_year(self, value: int | None) -> "MovieSearch":
        return replace(self, primary_release_year=value)

    def path(self) -> str:
        return "/search/movie"

    def params(self) -> list[tuple[str, str]]:
        params = [("query", self.query)]
        append_param(params, "language", self.language)
        append_param(params, "page", self.page)
        append_flag(params, "include_adult", self.include_adult)
        append_param(params, "region", self.region)
        append_param(params, "year", self.year)
        append_param(params, "primary_release_year", self.primary_release_year)
        return params

    def decode(self, payload: object) -> PaginatedResult[MovieShort]:
        return parse_movie_page(payload)


@dataclass(slots=True, frozen=True)
class MovieAlternativeTitles(Command[MovieAlternativeTitlesResult]):
    movie_id: int
    country: str | None = None

    def with_country(self, value: str | None) -> "MovieAlternativeTitles":
        return replace(self, country=value)

    def path(self) -> str:
        return f"/movie/{self.movie_id}/alternative_titles"

    def params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        append_param(params, "country", self.country)
        return params

    def decode(self, payload: object) -> MovieAlternativeTitlesResult:
        return parse_alternative_titles(payload)


@dataclass(slots=True, frozen=True)
class MovieChanges(DateRangeOption, PageOption, Command[tuple[MovieChange, ...]]):
    movie_id: int
    start_date: date | None = None
    end_date: date | None = None
    page: int | None = None

    def path(self) -> str:
        return f"/movie/{self.movie_id}/changes"

    def params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        append_param(params, "start_date", self.start_date)
        append_param(params, "end_date", self.end_date)
        append_param(params, "page", self.page)
        return params

    def decode(self, payload: object) -> tuple[MovieChange, ...]:
        return parse_movie_changes(payload)


@dataclass(slots=True, frozen=True)
class MovieCredits(LanguageOption, Command[MovieCreditsResult]):
    movie_id: int
    language: str | None = None

    def path(self) -> str:
        return f"/movie/{self.movie_id}/credits"

    def params(self) -> list[tuple[str, str]]:
        return _listing_params(self.language, None)

    def decode(self, payload: object) -> MovieCreditsResult:
        return parse_credits(payload)


@dataclass(slots=True, frozen=True)
class MovieExternalIds(Command[MovieExternalIdsResult]):
    movie_id: int

    def path(self) -> str:
        return f"/movie/{self.movie_id}/external_ids"

    def decode(self, payload: object) -> MovieExternalIdsResult:
        return parse_external_ids(payload)


@dataclass(slots=True, frozen=True)
class MovieImages(LanguageOption, Command[MovieImagesResult]):
    movie_id: int
    language: str | None = None

    def path(self) -> str:
        return f"/movie/{self.movie_id}/images"

    def params(self) -> list[tuple[str, str]]:
        return _listing_params(self.language, None)

    def decode(self, payload: object) -> MovieImagesResult:
        return parse_images(payload)


@dataclass(slots=True, frozen=True)
class MovieKeywords(Command[MovieKeywordsResult]):
    movie_id: int

    def path(self) -> str:
        return f"/movie/{self.movie_id}/keywords"

    def decode(self, payload: object) -> MovieKeywordsResult:
        return parse_keywords(payload)


@dataclass(slots=True, frozen=True)
class MovieLatest(LanguageOption, Command[Movie]):
    language: str | None = None

    def path(self) -> str:
        return "/movie/latest"

    def params(self) -> list[tuple[str, str]]:
        return _listing_params(self.language, None)

    def decode(self, payload: object) -> Movie:
        return parse_movie(payload)


@dataclass(slots=True, frozen=True)
class MovieLists(LanguageOption, PageOption, Command[PaginatedResult[MovieList]]):
    """User lists that contain a movie."""

    movie_id: int
    language: str | None = None
    page: int | None = None

    def path(self) -> str:
        return f"/movie/{self.movie_id}/lists"

    def params(self) -> list[tuple[str, str]]:
        return _listing_params(self.language, self.page)

    def decode(self, payload: object) -> PaginatedResult[MovieList]:
        return parse_paginated(payload, parse_movie_list)


@dataclass(slots=True, frozen=True)
class MovieNowPlaying(LanguageOption, PageOption, RegionOption, Command[MovieDatedPage]):
    language: str | None = None
    page: int | None = None
    region: str | None = None

    def path(self) -> str:
        return "/movie/now_playing"

    def params(self) -> list[tuple[str, str]]:
        return _listing_params(self.language, self.page, self.region)

    def decode(self, payload: object) -> MovieDatedPage:
        return parse_movie_dated_page(payload)


@dataclass(slots=True, frozen=True)
class MovieUpcoming(LanguageOption, PageOption, RegionOption, Command[MovieDatedPage]):
    language: str | None = None
    page: int | None = None
    region: str | None = None

    def path(self) -> str:
        return "/movie/upcoming"

    def params(self) -> list[tuple[str, str]]:
        return _listing_params(self.language, self.page, self.region)

    def decode(self, payload: object) -> MovieDatedPage:
        return parse_movie_dated_page(payload)


@dataclass(slots=True, frozen=True)
class MoviePopular(
    LanguageOption,
    PageOption,
    RegionOption,
    Command[PaginatedResult[MovieShort]],
):
    language: str | None = None
    page: int | None = None
    region: str | None = None

    def path(self) -> str:
        return "/movie/popular"

    def params(self) -> list[tuple[str, str]]:
        return _listing_params(self.language, self.page, self.region)

    def decode(self, payload: object) -> PaginatedResult[MovieShort]:
        return parse_movie_page(payload)


@dataclass(slots=True, frozen=True)
class MovieTopRated(
    LanguageOption,
    PageOption,
    RegionOption,
    Command[PaginatedResult[MovieShort]],
):
    language: str | None = None
    page: int | None = None
    region: str | None = None

    def path(self) -> str:
        return "/movie/top_rated"

    def params(self) -> list[tuple[str, str]]:
        return _listing_params(self.language, self.page, self.region)

    def decode(self, payload: object) -> PaginatedResult[MovieShort]:
        return parse_movie_page(payload)


@dataclass(slots=True, frozen=True)
class MovieRecommendations(LanguageOption, PageOption, Command[PaginatedResult[MovieShort]]):
    movie_id: int
    language: str | None = None
    page: int | None = None

    def path(self) -> str:
        return f"/movie/{self.movie_id}/recommendations"

    def params(self) -> list[tuple[str, str]]:
        return _listing_params(self.language, self.page)

    def decode(self, payload: object) -> PaginatedResult[MovieShort]:
        return parse_movie_page(payload)


@dataclass(slots=True, frozen=True)
class MovieSimilar(LanguageOption, PageOption, Command[PaginatedResult[MovieShort]]):
    movie_id: int
    language: str | None = None
    page: int | None = None

    def path(self) -> str:
        return f"/movie/{self.movie_id}/similar"

    def params(self) -> list[tuple[str, str]]:
        return _listing_params(self.language, self.page)

    def decode(self, payload: object) -> PaginatedResult[MovieShort]:
        return parse_movie_page(payload)


@dataclass(slots=True, frozen=True)
class MovieReleaseDates(Command[MovieReleaseDatesResult]):
    movie_id: int

    def path(self) -> str:
        return f"/movie/{self.movie_id}/release_dates"

    def decode(self, payload: object) -> MovieReleaseDatesResult:
        return parse_release_dates(payload)


@dataclass(slots=True, frozen=True)
class MovieReviews(LanguageOption, PageOption, Command[PaginatedResult[MovieReview]]):
    movie_id: int
    language: str | None = None
    page: int | None = None

    def path(self) -> str:
        return f"/movie/{self.movie_id}/reviews"

    def params(self) -> list[tuple[str, str]]:
        return _listing_params(self.language, self.page)

    def decode(self, payload: object) -> PaginatedResult[MovieReview]:
        return parse_paginated(payload, parse_review)


@dataclass(slots=True, frozen=True)
class MovieTranslations(Command[MovieTranslationsResult]):
    movie_id: int

    def path(self) -> str:
        return f"/movie/{self.movie_id}/translations"

    def decode(self, payload: object) -> MovieTranslationsResult:
        return parse_translations(payload)


@dataclass(slots=True, frozen=True)
class MovieVideos(LanguageOption, Command[MovieVideosResult]):
    movie_id: int
    language: str | None = None

    def path(self) -> str:
        return f"/movie/{self.movie_id}/videos"

    def params(self) -> list[tuple[str, str]]:
        return _listing_params(self.language, None)

    def decode(self, payload: object) -> MovieVideosResult:
        return parse_videos(payload)


@dataclass(slots=True, frozen=True)
class MovieWatchProviders(Command[WatchProviderResult]):
    movie_id: int

    def path(self) -> str:
        return f"/movie/{self.movie_id}/watch/providers"

    def decode(self, payload: object) -> WatchProviderResult:
        return parse_watch_provider_result(payload)


__all__ = [
    "MovieDetails",
    "MovieSearch",
    "MovieAlternativeTitles",
    "MovieChanges",
    "MovieCredits",
    "MovieExternalIds",
    "MovieImages",
    "MovieKeywords",
    "MovieLatest",
    "MovieLists",
    "MovieNowPlaying",
    "MovieUpcoming",
    "MoviePopular",
    "MovieTopRated",
    "MovieRecommendations",
    "MovieSimilar",
    "MovieReleaseDates",
    "MovieReviews",
    "MovieTranslations",
    "MovieVideos",
    "MovieWatchProviders",
]
