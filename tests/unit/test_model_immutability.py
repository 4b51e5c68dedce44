from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from tmdb_api_client.common.models import Genre, PaginatedResult
from tmdb_api_client.movie import MovieSearch
from tmdb_api_client.movie.parser import parse_movie_page
from tmdb_api_client.tvshow.parser import parse_tvshow


def test_paginated_results_are_tuple_and_immutable(fixture_loader):
    page = parse_movie_page(fixture_loader("movie-search.json"))
    assert isinstance(page.results, tuple)
    with pytest.raises(FrozenInstanceError):
        page.results = ()  # type: ignore[misc]


def test_nested_collections_are_tuples(fixture_loader):
    show = parse_tvshow(fixture_loader("tv-details.json"))
    assert isinstance(show.seasons, tuple)
    assert isinstance(show.genres, tuple)
    assert isinstance(show.episode_run_time, tuple)
    with pytest.raises(FrozenInstanceError):
        show.name = "Other"  # type: ignore[misc]


def test_commands_are_immutable():
    command = MovieSearch("alien")
    with pytest.raises(FrozenInstanceError):
        command.query = "predator"  # type: ignore[misc]


def test_models_compare_by_value():
    assert Genre(id=1, name="Drama") == Genre(id=1, name="Drama")
    assert PaginatedResult(page=1, total_results=0, total_pages=0, results=()) == PaginatedResult(
        page=1, total_results=0, total_pages=0, results=()
    )
