"""Public package exports for the TMDB API client."""

from .async_client import AsyncTmdbClient
from .client import TmdbClient
from .client_shared import ClientBuilder
from .config import ThrottlingConfig, TmdbClientConfig, TransportConfig
from .core.command import Command
from .core.errors import (
    ServerOtherBody,
    ServerValidationBody,
    TmdbApiError,
    TmdbClientClosedError,
    TmdbConfigurationError,
    TmdbDecodeError,
    TmdbMissingCredentialError,
    TmdbServerError,
    TmdbTransportError,
    TmdbValidationError,
)

__all__ = [
    "TmdbClient",
    "AsyncTmdbClient",
    "ClientBuilder",
    "TmdbClientConfig",
    "TransportConfig",
    "ThrottlingConfig",
    "Command",
    "ServerOtherBody",
    "ServerValidationBody",
    "TmdbApiError",
    "TmdbConfigurationError",
    "TmdbMissingCredentialError",
    "TmdbClientClosedError",
    "TmdbTransportError",
    "TmdbDecodeError",
    "TmdbValidationError",
    "TmdbServerError",
]
