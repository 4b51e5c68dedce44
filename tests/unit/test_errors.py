from __future__ import annotations

import pytest

from tmdb_api_client.core.errors import (
    ServerOtherBody,
    TmdbApiError,
    TmdbDecodeError,
    TmdbServerError,
    TmdbTransportError,
    TmdbValidationError,
    classify_api_error,
    parse_other_body,
    parse_validation_body,
)


def test_classify_2xx_is_not_an_error():
    assert classify_api_error({"anything": 1}, http_status=200) is None
    assert classify_api_error(None, http_status=204) is None


def test_classify_422_maps_to_validation_error_with_messages():
    err = classify_api_error({"errors": ["query: cannot be empty"]}, http_status=422)
    assert isinstance(err, TmdbValidationError)
    assert err.errors == ("query: cannot be empty",)
    assert err.http_status == 422


@pytest.mark.parametrize(
    ("payload", "expected_errors"),
    [
        ({"status_code": 22, "status_message": "Invalid page"}, ("Invalid page",)),
        ({"unexpected": True}, ()),
        (None, ()),
        (["not", "an", "object"], ()),
    ],
    ids=["other-error-shape", "unknown-shape", "no-body", "array-body"],
)
def test_classify_422_is_validation_error_regardless_of_body(payload, expected_errors):
    err = classify_api_error(payload, http_status=422)
    assert isinstance(err, TmdbValidationError)
    assert err.errors == expected_errors


@pytest.mark.parametrize("http_status", [400, 401, 404, 429, 500, 503])
def test_classify_other_status_maps_to_server_error_with_exact_status(http_status):
    err = classify_api_error(
        {"status_code": 7, "status_message": "Invalid API key"},
        http_status=http_status,
    )
    assert isinstance(err, TmdbServerError)
    assert err.http_status == http_status
    assert err.body == ServerOtherBody(status_code=7, status_message="Invalid API key")


def test_classify_other_status_without_error_body_keeps_http_status():
    err = classify_api_error("<html>bad gateway</html>", http_status=502)
    assert isinstance(err, TmdbServerError)
    assert err.http_status == 502
    assert err.body is None
    assert err.status_code is None
    assert err.status_message is None


def test_server_error_narrowing_helpers():
    invalid_key = TmdbServerError(
        "x", http_status=401, body=ServerOtherBody(7, "Invalid API key")
    )
    not_found = TmdbServerError(
        "x", http_status=404, body=ServerOtherBody(34, "Resource not found")
    )
    assert invalid_key.is_invalid_api_key() and not invalid_key.is_not_found()
    assert not_found.is_not_found() and not not_found.is_invalid_api_key()
    assert not_found.status_code == 34
    assert not_found.status_message == "Resource not found"


def test_decode_error_is_a_transport_error_with_response_cause():
    err = TmdbDecodeError("bad body", http_status=200)
    assert isinstance(err, TmdbTransportError)
    assert isinstance(err, TmdbApiError)
    assert err.cause == "response"


@pytest.mark.parametrize(
    "payload",
    [
        {"status_code": "7", "status_message": "x"},
        {"status_code": True, "status_message": "x"},
        {"status_code": 7},
        [],
    ],
    ids=["string-code", "bool-code", "missing-message", "array"],
)
def test_parse_other_body_rejects_wrong_shapes(payload):
    assert parse_other_body(payload) is None


def test_parse_validation_body_requires_string_list():
    assert parse_validation_body({"errors": ["a", "b"]}).errors == ("a", "b")
    assert parse_validation_body({"errors": ["a", 1]}) is None
    assert parse_validation_body({"errors": "a"}) is None
