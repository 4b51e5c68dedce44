from __future__ import annotations

from datetime import date

import pytest

from tmdb_api_client.certification import CertificationList
from tmdb_api_client.changes import ChangeList
from tmdb_api_client.collection import CollectionDetails
from tmdb_api_client.company import CompanyAlternativeNames, CompanyDetails, CompanyImages
from tmdb_api_client.configuration import CountryList, JobList, LanguageList
from tmdb_api_client.core.command import Command, format_param
from tmdb_api_client.find import ExternalIdSource, FindById
from tmdb_api_client.genre import GenreList
from tmdb_api_client.movie import (
    MovieAlternativeTitles,
    MovieChanges,
    MovieCredits,
    MovieDetails,
    MovieExternalIds,
    MovieImages,
    MovieKeywords,
    MovieLatest,
    MovieLists,
    MovieNowPlaying,
    MoviePopular,
    MovieRecommendations,
    MovieReleaseDates,
    MovieReviews,
    MovieSearch,
    MovieSimilar,
    MovieTopRated,
    MovieTranslations,
    MovieUpcoming,
    MovieVideos,
    MovieWatchProviders,
)
from tmdb_api_client.people import PersonDetails
from tmdb_api_client.tvshow import (
    EpisodeDetails,
    SeasonDetails,
    TVShowAggregateCredits,
    TVShowContentRatings,
    TVShowDetails,
    TVShowExternalIds,
    TVShowImages,
    TVShowKeywords,
    TVShowLatest,
    TVShowSearch,
    TVShowSimilar,
    TVShowWatchProviders,
)
from tmdb_api_client.watch_provider import WatchProviderList

BARE_COMMANDS: list[tuple[Command, str]] = [
    (CertificationList.movie(), "/certification/movie/list"),
    (CertificationList.tv(), "/certification/tv/list"),
    (ChangeList.movie(), "/movie/changes"),
    (ChangeList.tv(), "/tv/changes"),
    (ChangeList.person(), "/person/changes"),
    (CollectionDetails(10), "/collection/10"),
    (CompanyDetails(1), "/company/1"),
    (CompanyAlternativeNames(1), "/company/1/alternative_names"),
    (CompanyImages(1), "/company/1/images"),
    (CountryList(), "/configuration/countries"),
    (JobList(), "/configuration/jobs"),
    (LanguageList(), "/configuration/languages"),
    (GenreList.movie(), "/genre/movie/list"),
    (GenreList.tv(), "/genre/tv/list"),
    (MovieDetails(550), "/movie/550"),
    (MovieAlternativeTitles(550), "/movie/550/alternative_titles"),
    (MovieChanges(550), "/movie/550/changes"),
    (MovieCredits(550), "/movie/550/credits"),
    (MovieExternalIds(550), "/movie/550/external_ids"),
    (MovieImages(550), "/movie/550/images"),
    (MovieKeywords(550), "/movie/550/keywords"),
    (MovieLatest(), "/movie/latest"),
    (MovieLists(550), "/movie/550/lists"),
    (MovieNowPlaying(), "/movie/now_playing"),
    (MoviePopular(), "/movie/popular"),
    (MovieTopRated(), "/movie/top_rated"),
    (MovieUpcoming(), "/movie/upcoming"),
    (MovieRecommendations(550), "/movie/550/recommendations"),
    (MovieSimilar(550), "/movie/550/similar"),
    (MovieReleaseDates(550), "/movie/550/release_dates"),
    (MovieReviews(550), "/movie/550/reviews"),
    (MovieTranslations(550), "/movie/550/translations"),
    (MovieVideos(550), "/movie/550/videos"),
    (MovieWatchProviders(550), "/movie/550/watch/providers"),
    (PersonDetails(287), "/person/287"),
    (TVShowDetails(1396), "/tv/1396"),
    (TVShowAggregateCredits(1396), "/tv/1396/aggregate_credits"),
    (TVShowContentRatings(1396), "/tv/1396/content_ratings"),
    (TVShowExternalIds(1396), "/tv/1396/external_ids"),
    (TVShowImages(1396), "/tv/1396/images"),
    (TVShowKeywords(1396), "/tv/1396/keywords"),
    (TVShowLatest(), "/tv/latest"),
    (TVShowSimilar(1396), "/tv/1396/similar"),
    (TVShowWatchProviders(1396), "/tv/1396/watch/providers"),
    (SeasonDetails(1396, 1), "/tv/1396/season/1"),
    (EpisodeDetails(1396, 1, 2), "/tv/1396/season/1/episode/2"),
    (WatchProviderList.movie(), "/watch/providers/movie"),
    (WatchProviderList.tv(), "/watch/providers/tv"),
]


@pytest.mark.parametrize(
    ("command", "expected_path"),
    BARE_COMMANDS,
    ids=[path for _, path in BARE_COMMANDS],
)
def test_command_path_and_unset_fields_are_omitted(command, expected_path):
    assert command.path() == expected_path
    assert command.params() == []


@pytest.mark.parametrize(
    ("command", "expected_params"),
    [
        (MovieDetails(550).with_language("fr-FR"), [("language", "fr-FR")]),
        (
            MovieSearch("alien")
            .with_language("en-US")
            .with_page(3)
            .with_include_adult(True)
            .with_region("US")
            .with_year(1979)
            .with_primary_release_year(1979),
            [
                ("query", "alien"),
                ("language", "en-US"),
                ("page", "3"),
                ("include_adult", "true"),
                ("region", "US"),
                ("year", "1979"),
                ("primary_release_year", "1979"),
            ],
        ),
        (
            TVShowSearch("breaking").with_first_air_date_year(2008),
            [("query", "breaking"), ("first_air_date_year", "2008")],
        ),
        (
            ChangeList.movie()
            .with_start_date(date(2024, 1, 1))
            .with_end_date(date(2024, 1, 10))
            .with_page(2),
            [("start_date", "2024-01-01"), ("end_date", "2024-01-10"), ("page", "2")],
        ),
        (MovieAlternativeTitles(550).with_country("DE"), [("country", "DE")]),
        (
            MoviePopular().with_region("JP").with_page(4),
            [("page", "4"), ("region", "JP")],
        ),
        (
            FindById("tt0137523", ExternalIdSource.IMDB).with_language("de"),
            [("external_source", "imdb_id"), ("language", "de")],
        ),
        (
            WatchProviderList.tv().with_watch_region("US").with_language("en"),
            [("watch_region", "US"), ("language", "en")],
        ),
        (EpisodeDetails(1396, 1, 2, language="es"), [("language", "es")]),
    ],
    ids=[
        "movie-details",
        "movie-search-all-fields",
        "tv-search-year",
        "changes-date-range",
        "alternative-titles-country",
        "popular-region",
        "find-by-imdb",
        "watch-provider-region",
        "episode-language",
    ],
)
def test_command_params_are_ordered_and_formatted(command, expected_params):
    assert command.params() == expected_params


def test_search_without_include_adult_omits_flag():
    params = MovieSearch("alien").with_include_adult(False).params()
    assert params == [("query", "alien")]


def test_search_keeps_empty_query():
    assert MovieSearch("").params() == [("query", "")]


@pytest.mark.parametrize(("command", "_path"), BARE_COMMANDS, ids=[p for _, p in BARE_COMMANDS])
def test_commands_never_emit_api_key(command, _path):
    assert all(key != "api_key" for key, _ in command.params())


def test_building_same_command_twice_is_deterministic():
    first = MovieSearch("alien", page=2, region="US")
    second = MovieSearch("alien", page=2, region="US")
    assert first == second
    assert first.path() == second.path()
    assert first.params() == second.params()
    assert first.params() == first.params()


def test_with_methods_return_new_values():
    base = MovieDetails(550)
    localized = base.with_language("it")
    assert base.language is None
    assert localized.language == "it"
    assert localized is not base


def test_find_by_id_accepts_source_value():
    command = FindById("tt0137523", "imdb_id")  # type: ignore[arg-type]
    assert command.external_source is ExternalIdSource.IMDB


@pytest.mark.parametrize(
    ("external_id", "expected"),
    [
        ("tt0137523", "/find/tt0137523"),
        ("a/b?c", "/find/a%2Fb%3Fc"),
        ("../movie/550", "/find/..%2Fmovie%2F550"),
        ("id with space#x", "/find/id%20with%20space%23x"),
    ],
)
def test_find_by_id_escapes_external_id_in_path(external_id, expected):
    assert FindById(external_id, ExternalIdSource.IMDB).path() == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, "true"),
        (False, "false"),
        (date(2020, 2, 29), "2020-02-29"),
        (ExternalIdSource.TVDB, "tvdb_id"),
        (42, "42"),
        ("text", "text"),
    ],
)
def test_format_param(value, expected):
    assert format_param(value) == expected
