"""Error types and status mapping."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

UNPROCESSABLE_ENTITY = 422

INVALID_API_KEY_CODE = 7
RESOURCE_NOT_FOUND_CODE = 34


@dataclass(slots=True, frozen=True)
class ServerOtherBody:
    """Error body returned for every non-2xx status except 422."""

    status_code: int
    status_message: str


@dataclass(slots=True, frozen=True)
class ServerValidationBody:
    """Error body returned with HTTP 422."""

    errors: tuple[str, ...]


def parse_other_body(payload: object) -> ServerOtherBody | None:
    if not isinstance(payload, Mapping):
        return None
    status_code = payload.get("status_code")
    status_message = payload.get("status_message")
    if isinstance(status_code, bool) or not isinstance(status_code, int):
        return None
    if not isinstance(status_message, str):
        return None
    return ServerOtherBody(status_code=status_code, status_message=status_message)


def parse_validation_body(payload: object) -> ServerValidationBody | None:
    if not isinstance(payload, Mapping):
        return None
    errors = payload.get("errors")
    if not isinstance(errors, list):
        return None
    if any(not isinstance(item, str) for item in errors):
        return None
    return ServerValidationBody(errors=tuple(errors))


class TmdbApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class TmdbConfigurationError(TmdbApiError):
    """Client cannot be built from the given configuration."""


class TmdbMissingCredentialError(TmdbConfigurationError):
    """Client cannot be built without an API key."""


class TmdbClientClosedError(TmdbApiError):
    """Raised when client is used after close."""


class TmdbTransportError(TmdbApiError):
    """Network/transport-level failure, or an undecodable response."""


class TmdbDecodeError(TmdbTransportError):
    """Response body does not match the expected shape."""

    def __init__(self, message: str, *, http_status: int | None = None) -> None:
        super().__init__(message, http_status=http_status, cause="response")


class TmdbValidationError(TmdbApiError):
    """Request rejected with HTTP 422."""

    def __init__(
        self,
        message: str,
        *,
        errors: tuple[str, ...] = (),
        http_status: int = UNPROCESSABLE_ENTITY,
    ) -> None:
        super().__init__(message, http_status=http_status)
        self.errors = errors


class TmdbServerError(TmdbApiError):
    """Any other non-2xx response.

    ``http_status`` is the HTTP status; ``status_code`` is TMDB's own error
    code from the body (7 = invalid API key, 34 = resource not found, ...).
    """

    def __init__(
        self,
        message: str,
        *,
        http_status: int,
        body: ServerOtherBody | None = None,
    ) -> None:
        super().__init__(message, http_status=http_status)
        self.body = body

    @property
    def status_code(self) -> int | None:
        return self.body.status_code if self.body is not None else None

    @property
    def status_message(self) -> str | None:
        return self.body.status_message if self.body is not None else None

    def is_invalid_api_key(self) -> bool:
        return self.status_code == INVALID_API_KEY_CODE

    def is_not_found(self) -> bool:
        return self.status_code == RESOURCE_NOT_FOUND_CODE


def is_success_status(http_status: int) -> bool:
    return 200 <= http_status < 300


def classify_api_error(payload: object, *, http_status: int) -> TmdbApiError | None:
    """Map a non-2xx status and its body to a domain exception."""

    if is_success_status(http_status):
        return None

    if http_status == UNPROCESSABLE_ENTITY:
        validation = parse_validation_body(payload)
        if validation is not None:
            errors = validation.errors
        else:
            # Some 422 bodies come back in the other-error shape.
            other = parse_other_body(payload)
            errors = (other.status_message,) if other is not None else ()
        message = "; ".join(errors) or "TMDB API rejected the request"
        return TmdbValidationError(message, errors=errors, http_status=http_status)

    body = parse_other_body(payload)
    message = body.status_message if body is not None else "TMDB API request failed"
    return TmdbServerError(
        f"server error with HTTP status {http_status}: {message}",
        http_status=http_status,
        body=body,
    )


__all__ = [
    "UNPROCESSABLE_ENTITY",
    "INVALID_API_KEY_CODE",
    "RESOURCE_NOT_FOUND_CODE",
    "ServerOtherBody",
    "ServerValidationBody",
    "parse_other_body",
    "parse_validation_body",
    "TmdbApiError",
    "TmdbConfigurationError",
    "TmdbMissingCredentialError",
    "TmdbClientClosedError",
    "TmdbTransportError",
    "TmdbDecodeError",
    "TmdbValidationError",
    "TmdbServerError",
    "is_success_status",
    "classify_api_error",
]
