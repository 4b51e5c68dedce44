from __future__ import annotations

from datetime import date

from tmdb_api_client import TmdbClient
from tmdb_api_client.certification import CertificationList
from tmdb_api_client.changes import ChangeList
from tmdb_api_client.collection import CollectionDetails
from tmdb_api_client.company import CompanyDetails
from tmdb_api_client.configuration import LanguageList
from tmdb_api_client.find import ExternalIdSource, FindById
from tmdb_api_client.genre import GenreList
from tmdb_api_client.movie import (
    MovieCredits,
    MovieDetails,
    MovieNowPlaying,
    MovieReleaseDates,
    MovieReviews,
    MovieSearch,
    MovieWatchProviders,
)
from tmdb_api_client.people import PersonDetails
from tmdb_api_client.tvshow import (
    SeasonDetails,
    TVShowAggregateCredits,
    TVShowContentRatings,
    TVShowDetails,
)
from tmdb_api_client.watch_provider import WatchProviderList
from tests.shared.fixture_transports import SyncFixtureTransport
from tests.shared.transport import API_KEY


def _client(fixture_loader) -> tuple[TmdbClient, SyncFixtureTransport]:
    transport = SyncFixtureTransport(fixture_loader)
    return TmdbClient(api_key=API_KEY, transport=transport), transport


def test_movie_endpoints_decode_fixtures(fixture_loader):
    client, transport = _client(fixture_loader)
    with client:
        movie = client.send(MovieDetails(550).with_language("en-US"))
        search = client.send(MovieSearch("fight club"))
        now_playing = client.send(MovieNowPlaying().with_region("US"))
        credits = client.send(MovieCredits(550))
        release_dates = client.send(MovieReleaseDates(550))
        reviews = client.send(MovieReviews(550))
        providers = client.send(MovieWatchProviders(550))

    assert movie.imdb_id == "tt0137523"
    assert search.total_results == 2
    assert now_playing.dates is not None
    assert credits.cast[0].name == "Edward Norton"
    assert release_dates.results[0].iso_3166_1 == "US"
    assert reviews.results[0].author == "Goddard"
    assert set(providers.results) == {"US", "FR"}

    assert transport.requests[0] == (
        "/movie/550",
        [("language", "en-US"), ("api_key", API_KEY)],
    )
    assert transport.requests[2] == (
        "/movie/now_playing",
        [("region", "US"), ("api_key", API_KEY)],
    )
    assert transport.closed is True


def test_tv_endpoints_decode_fixtures(fixture_loader):
    client, _ = _client(fixture_loader)
    with client:
        show = client.send(TVShowDetails(1396))
        season = client.send(SeasonDetails(1396, 1))
        ratings = client.send(TVShowContentRatings(1396))
        credits = client.send(TVShowAggregateCredits(1396))

    assert show.name == "Breaking Bad"
    assert show.number_of_episodes is None
    assert season.episodes[0].episode_number == 1
    assert ratings[0].rating == "TV-MA"
    assert credits.cast[0].name == "Bryan Cranston"


def test_catalogue_endpoints_decode_fixtures(fixture_loader):
    client, transport = _client(fixture_loader)
    with client:
        certifications = client.send(CertificationList.movie())
        changes = client.send(ChangeList.movie().with_start_date(date(2024, 1, 1)))
        collection = client.send(CollectionDetails(10))
        company = client.send(CompanyDetails(1))
        languages = client.send(LanguageList())
        found = client.send(FindById("tt0137523", ExternalIdSource.IMDB))
        genres = client.send(GenreList.movie())
        person = client.send(PersonDetails(287))
        providers = client.send(WatchProviderList.movie().with_watch_region("US"))

    assert certifications["FR"][1].certification == "12"
    assert changes.results[0].id == 1240669
    assert collection.parts[0].title == "Star Wars"
    assert company.headquarters == "San Francisco, California"
    assert len(languages) == 2
    assert found.movie_results[0].title == "Fight Club"
    assert genres[0].id == 28
    assert person.imdb_id == "nm0000093"
    assert providers[0].provider_id == 8

    paths = [path for path, _ in transport.requests]
    assert "/find/tt0137523" in paths
    for _, params in transport.requests:
        assert params[-1] == ("api_key", API_KEY)
        assert [key for key, _ in params].count("api_key") == 1
