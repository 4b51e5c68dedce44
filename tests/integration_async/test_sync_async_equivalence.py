from __future__ import annotations

import pytest

from tmdb_api_client import AsyncTmdbClient, TmdbClient
from tmdb_api_client.certification import CertificationList
from tmdb_api_client.core.errors import TmdbServerError, TmdbValidationError
from tmdb_api_client.movie import MovieDetails, MovieSearch, MovieWatchProviders
from tmdb_api_client.people import PersonDetails
from tmdb_api_client.tvshow import SeasonDetails, TVShowDetails
from tests.shared.fixture_transports import AsyncFixtureTransport, SyncFixtureTransport
from tests.shared.payloads import EMPTY_QUERY, INVALID_API_KEY
from tests.shared.transport import (
    API_KEY,
    AsyncSequencedClient,
    Response,
    SyncSequencedClient,
    build_config,
)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "command",
    [
        CertificationList.movie(),
        MovieDetails(550),
        MovieSearch("fight club", page=1),
        MovieWatchProviders(550),
        TVShowDetails(1396),
        SeasonDetails(1396, 1),
        PersonDetails(287),
    ],
    ids=["certifications", "movie", "search", "watch-providers", "tv", "season", "person"],
)
async def test_sync_async_success_equivalence_with_fixtures(fixture_loader, command):
    sync_transport = SyncFixtureTransport(fixture_loader)
    async_transport = AsyncFixtureTransport(fixture_loader)

    with TmdbClient(api_key=API_KEY, transport=sync_transport) as sync_client:
        sync_result = sync_client.send(command)
    async with AsyncTmdbClient(api_key=API_KEY, transport=async_transport) as async_client:
        async_result = await async_client.send(command)

    assert sync_result == async_result
    assert sync_transport.requests == async_transport.requests


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("response", "expected_error"),
    [
        (Response(401, INVALID_API_KEY), TmdbServerError),
        (Response(422, EMPTY_QUERY), TmdbValidationError),
    ],
    ids=["invalid-key", "validation"],
)
async def test_sync_async_error_equivalence(response, expected_error):
    sync_client = TmdbClient(config=build_config(), http_client=SyncSequencedClient([response]))
    async_client = AsyncTmdbClient(
        config=build_config(),
        http_client=AsyncSequencedClient([response]),
    )

    with sync_client, pytest.raises(expected_error) as sync_info:
        sync_client.send(MovieSearch(""))
    async with async_client:
        with pytest.raises(expected_error) as async_info:
            await async_client.send(MovieSearch(""))

    assert sync_info.value.http_status == async_info.value.http_status
    assert str(sync_info.value) == str(async_info.value)
