"""TV show, season and episode commands."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..common.models import Keyword, PaginatedResult, WatchProviderResult
from ..common.parser import parse_watch_provider_result
from ..core.command import (
    Command,
    LanguageOption,
    PageOption,
    RegionOption,
    append_flag,
    append_param,
)
from .models import (
    ContentRating,
    Episode,
    Season,
    TVShow,
    TVShowAggregateCreditsResult,
    TVShowExternalIdsResult,
    TVShowImagesResult,
    TVShowShort,
)
from .parser import (
    parse_aggregate_credits,
    parse_content_ratings,
    parse_episode,
    parse_external_ids,
    parse_images,
    parse_season,
    parse_tvshow,
    parse_tvshow_keywords,
    parse_tvshow_page,
)


def _language_params(language: str | None, page: int | None = None) -> list[tuple[str, str]]:
    params: list[tuple[str, str]] = []
    append_param(params, "language", language)
    append_param(params, "page", page)
    return params


@dataclass(slots=True, frozen=True)
class TVShowDetails(LanguageOption, Command[TVShow]):
    tv_id: int
    language: str | None = None

    def path(self) -> str:
        return f"/tv/{self.tv_id}"

    def params(self) -> list[tuple[str, str]]:
        return _language_params(self.language)

    def decode(self, payload: object) -> TVShow:
        return parse_tvshow(payload)


@dataclass(slots=True, frozen=True)
class TVShowSearch(
    LanguageOption,
    PageOption,
    RegionOption,
    Command[PaginatedResult[TVShowShort]],
):
    query: str
    language: str | None = None
    page: int | None = None
    include_adult: bool = False
    region: str | None = None
    year: int | None = None
    first_air_date_year: int | None = None

    def with_include_adult(self, value: bool) -> "TVShowSearch":
        return replace(self, include_adult=value)

    def with_year(self, value: int | None) -> "TVShowSearch":
        return replace(self, year=value)

    def with_first_air_date_year(self, value: int | None) -> "TVShowSearch":
        return replace(self, first_air_date_year=value)

    def path(self) -> str:
        return "/search/tv"

    def params(self) -> list[tuple[str, str]]:
        params = [("query", self.query)]
        append_param(params, "language", self.language)
        append_param(params, "page", self.page)
        append_flag(params, "include_adult", self.include_adult)
        append_param(params, "region", self.region)
        append_param(params, "year", self.year)
        append_param(params, "first_air_date_year", self.first_air_date_year)
        return params

    def decode(self, payload: object) -> PaginatedResult[TVShowShort]:
        return parse_tvshow_page(payload)


@dataclass(slots=True, frozen=True)
class TVShowAggregateCredits(LanguageOption, Command[TVShowAggregateCreditsResult]):
    """Cast and crew summed over every season of a show."""

    tv_id: int
    language: str | None = None

    def path(self) -> str:
        return f"/tv/{self.tv_id}/aggregate_credits"

    def params(self) -> list[tuple[str, str]]:
        return _language_params(self.language)

    def decode(self, payload: object) -> TVShowAggregateCreditsResult:
        return parse_aggregate_credits(payload)


@dataclass(slots=True, frozen=True)
class TVShowContentRatings(Command[tuple[ContentRating, ...]]):
    tv_id: int

    def path(self) -> str:
        return f"/tv/{self.tv_id}/content_ratings"

    def decode(self, payload: object) -> tuple[ContentRating, ...]:
        return parse_content_ratings(payload)


@dataclass(slots=True, frozen=True)
class TVShowExternalIds(Command[TVShowExternalIdsResult]):
    tv_id: int

    def path(self) -> str:
        return f"/tv/{self.tv_id}/external_ids"

    def decode(self, payload: object) -> TVShowExternalIdsResult:
        return parse_external_ids(payload)


@dataclass(slots=True, frozen=True)
class TVShowImages(LanguageOption, Command[TVShowImagesResult]):
    tv_id: int
    language: str | None = None

    def path(self) -> str:
        return f"/tv/{self.tv_id}/images"

    def params(self) -> list[tuple[str, str]]:
        return _language_params(self.language)

    def decode(self, payload: object) -> TVShowImagesResult:
        return parse_images(payload)


@dataclass(slots=True, frozen=True)
class TVShowKeywords(Command[tuple[Keyword, ...]]):
    tv_id: int

    def path(self) -> str:
        return f"/tv/{self.tv_id}/keywords"

    def decode(self, payload: object) -> tuple[Keyword, ...]:
        return parse_tvshow_keywords(payload)


@dataclass(slots=True, frozen=True)
class TVShowLatest(LanguageOption, Command[TVShow]):
    language: str | None = None

    def path(self) -> str:
        return "/tv/latest"

    def params(self) -> list[tuple[str, str]]:
        return _language_params(self.language)

    def decode(self, payload: object) -> TVShow:
        return parse_tvshow(payload)


@dataclass(slots=True, frozen=True)
class TVShowSimilar(LanguageOption, PageOption, Command[PaginatedResult[TVShowShort]]):
    tv_id: int
    language: str | None = None
    page: int | None = None

    def path(self) -> str:
        return f"/tv/{self.tv_id}/similar"

    def params(self) -> list[tuple[str, str]]:
        return _language_params(self.language, self.page)

    def decode(self, payload: object) -> PaginatedResult[TVShowShort]:
        return parse_tvshow_page(payload)


@dataclass(slots=True, frozen=True)
class TVShowWatchProviders(Command[WatchProviderResult]):
    tv_id: int

    def path(self) -> str:
        return f"/tv/{self.tv_id}/watch/providers"

    def decode(self, payload: object) -> WatchProviderResult:
        return parse_watch_provider_result(payload)


@dataclass(slots=True, frozen=True)
class SeasonDetails(LanguageOption, Command[Season]):
    tv_id: int
    season_number: int
    language: str | None = None

    def path(self) -> str:
        return f"/tv/{self.tv_id}/season/{self.season_number}"

    def params(self) -> list[tuple[str, str]]:
        return _language_params(self.language)

    def decode(self, payload: object) -> Season:
        return parse_season(payload)


@dataclass(slots=True, frozen=True)
class EpisodeDetails(LanguageOption, Command[Episode]):
    tv_id: int
    season_number: int
    episode_number: int
    language: str | None = None

    def path(self) -> str:
        return (
            f"/tv/{self.tv_id}/season/{self.season_number}"
            f"/episode/{self.episode_number}"
        )

    def params(self) -> list[tuple[str, str]]:
        return _language_params(self.language)

    def decode(self, payload: object) -> Episode:
        return parse_episode(payload)


__all__ = [
    "TVShowDetails",
    "TVShowSearch",
    "TVShowAggregateCredits",
    "TVShowContentRatings",
    "TVShowExternalIds",
    "TVShowImages",
    "TVShowKeywords",
    "TVShowLatest",
    "TVShowSimilar",
    "TVShowWatchProviders",
    "SeasonDetails",
    "EpisodeDetails",
]
