from __future__ import annotations

import httpx
import pytest

from tmdb_api_client import TmdbClient
from tmdb_api_client.core.errors import TmdbDecodeError, TmdbServerError, TmdbTransportError
from tmdb_api_client.find import ExternalIdSource, FindById
from tmdb_api_client.movie import MovieSearch
from tests.shared.payloads import EMPTY_PAGE, RESOURCE_NOT_FOUND
from tests.shared.transport import API_KEY, build_config


def _client(handler) -> tuple[TmdbClient, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    http_client = httpx.Client(transport=httpx.MockTransport(record))
    return TmdbClient(config=build_config(), http_client=http_client), seen


def test_query_string_keeps_command_order_and_ends_with_api_key():
    client, seen = _client(lambda request: httpx.Response(200, json=EMPTY_PAGE))
    with client:
        client.send(
            MovieSearch("the thing", page=2, include_adult=True, primary_release_year=1982)
        )

    request = seen[0]
    assert request.method == "GET"
    assert request.url.host == "api.test"
    assert request.url.path == "/3/search/movie"
    assert request.url.params.multi_items() == [
        ("query", "the thing"),
        ("page", "2"),
        ("include_adult", "true"),
        ("primary_release_year", "1982"),
        ("api_key", API_KEY),
    ]


def test_enum_parameter_is_sent_as_wire_value():
    client, seen = _client(lambda request: httpx.Response(200, json={}))
    with client:
        result = client.send(FindById("tt0137523", ExternalIdSource.IMDB))

    assert seen[0].url.path == "/3/find/tt0137523"
    assert seen[0].url.params["external_source"] == "imdb_id"
    assert result.movie_results == ()


def test_html_error_page_is_server_error_without_body():
    client, _ = _client(lambda request: httpx.Response(503, text="<html>down</html>"))
    with client, pytest.raises(TmdbServerError) as exc_info:
        client.send(MovieSearch("alien"))
    assert exc_info.value.http_status == 503
    assert exc_info.value.body is None


def test_json_error_page_keeps_body():
    client, _ = _client(lambda request: httpx.Response(404, json=RESOURCE_NOT_FOUND))
    with client, pytest.raises(TmdbServerError) as exc_info:
        client.send(MovieSearch("alien"))
    assert exc_info.value.is_not_found()


def test_html_success_page_is_decode_error():
    client, _ = _client(lambda request: httpx.Response(200, text="<html>ok</html>"))
    with client, pytest.raises(TmdbDecodeError):
        client.send(MovieSearch("alien"))


def test_httpx_connect_error_is_transport_error():
    def fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client, _ = _client(fail)
    with client, pytest.raises(TmdbTransportError) as exc_info:
        client.send(MovieSearch("alien"))
    assert exc_info.value.cause == "network"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
