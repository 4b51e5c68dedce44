"""Shared response parsing helpers for sync/async transports."""

from __future__ import annotations

from typing import Protocol

from .errors import TmdbDecodeError, classify_api_error, is_success_status


class JsonPayloadResponse(Protocol):
    status_code: int

    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int,
) -> object:
    """Parse response JSON payload.

    A success body that is not JSON is a decode failure. An error body that
    is not JSON is returned as ``None`` so the status alone drives the error.
    """

    try:
        return response.json()
    except Exception as exc:
        if is_success_status(http_status):
            raise TmdbDecodeError(
                "response body is not valid JSON",
                http_status=http_status,
            ) from exc
        return None


def evaluate_response(response: JsonPayloadResponse) -> object:
    """Return the JSON payload of a 2xx response, raise the mapped error otherwise."""

    http_status = int(response.status_code)
    payload = parse_json_payload(response, http_status=http_status)
    mapped_error = classify_api_error(payload, http_status=http_status)
    if mapped_error is not None:
        raise mapped_error
    return payload


__all__ = [
    "JsonPayloadResponse",
    "parse_json_payload",
    "evaluate_response",
]
