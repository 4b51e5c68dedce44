from __future__ import annotations

import pytest

from tmdb_api_client import AsyncTmdbClient
from tmdb_api_client.certification import CertificationList
from tmdb_api_client.core.errors import TmdbClientClosedError, TmdbMissingCredentialError
from tmdb_api_client.movie import MovieSearch
from tests.shared.client_fakes import DummyAsyncTransport
from tests.shared.payloads import CERTIFICATION_US, EMPTY_PAGE
from tests.shared.transport import API_KEY, AsyncSequencedClient, Response, build_config


@pytest.mark.asyncio
async def test_async_client_context_manager_closes_transport():
    transport = DummyAsyncTransport()
    async with AsyncTmdbClient(api_key=API_KEY, transport=transport) as client:
        assert client is not None
    assert transport.closed is True


@pytest.mark.asyncio
async def test_async_client_raises_when_used_after_close():
    transport = DummyAsyncTransport()
    client = AsyncTmdbClient(api_key=API_KEY, transport=transport)
    await client.close()
    with pytest.raises(TmdbClientClosedError, match="AsyncTmdbClient is already closed"):
        await client.send(CertificationList.movie())


def test_async_client_requires_api_key():
    with pytest.raises(TmdbMissingCredentialError):
        AsyncTmdbClient(api_key="")


@pytest.mark.asyncio
async def test_async_client_appends_api_key_last():
    transport = DummyAsyncTransport(EMPTY_PAGE)
    async with AsyncTmdbClient(api_key=API_KEY, transport=transport) as client:
        page = await client.send(MovieSearch("alien").with_language("en"))

    assert page.results == ()
    assert transport.requests == [
        ("/search/movie", [("query", "alien"), ("language", "en"), ("api_key", API_KEY)])
    ]


@pytest.mark.asyncio
async def test_async_command_execute_and_send_are_equivalent():
    transport = DummyAsyncTransport(CERTIFICATION_US)
    async with AsyncTmdbClient(api_key=API_KEY, transport=transport) as client:
        via_send = await client.send(CertificationList.movie())
        via_execute = await CertificationList.movie().execute_async(client)
    assert via_send == via_execute


@pytest.mark.asyncio
async def test_async_builder_with_injected_http_client():
    http_client = AsyncSequencedClient([Response(200, CERTIFICATION_US)])
    client = (
        AsyncTmdbClient.builder()
        .with_config(build_config())
        .with_http_client(http_client)
        .build()
    )
    async with client:
        result = await client.send(CertificationList.movie())
    assert result["US"][0].certification == "R"
    url, params = http_client.requests[0]
    assert url.endswith("/certification/movie/list")
    assert params[-1] == ("api_key", API_KEY)


def test_async_client_repr_hides_key():
    client = AsyncTmdbClient(api_key="hidden-value", transport=DummyAsyncTransport())
    assert "hidden-value" not in repr(client)
    assert repr(client).startswith("AsyncTmdbClient(")
