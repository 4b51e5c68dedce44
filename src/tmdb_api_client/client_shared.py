"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

from .config import DEFAULT_REQUESTS_PER_SECOND, ThrottlingConfig, TmdbClientConfig
from .core.errors import TmdbConfigurationError, TmdbDecodeError, TmdbMissingCredentialError

OutputT = TypeVar("OutputT")
ClientT = TypeVar("ClientT")


def validate_client_config(config: TmdbClientConfig) -> None:
    if not config.api_key:
        raise TmdbMissingCredentialError("missing api key")
    try:
        config.validate()
    except ValueError as exc:
        raise TmdbConfigurationError(str(exc)) from exc


def resolve_client_config(
    config: TmdbClientConfig | None,
    api_key: str | None,
) -> TmdbClientConfig:
    resolved = config or TmdbClientConfig()
    if api_key is not None:
        resolved = replace(resolved, api_key=api_key)
    validate_client_config(resolved)
    return resolved


def decode_payload(
    payload: object,
    decode: Callable[[object], OutputT] | None,
) -> OutputT:
    if decode is None:
        return payload  # type: ignore[return-value]
    try:
        return decode(payload)
    except TmdbDecodeError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise TmdbDecodeError(f"unexpected response shape: {exc}") from exc


def describe_client(name: str, config: TmdbClientConfig) -> str:
    throttling = (
        f"{config.throttling.requests_per_second}/s" if config.throttling.enabled else "off"
    )
    return f"{name}(base_url={config.base_url!r}, api_key='REDACTED', throttling={throttling})"


@dataclass(slots=True, frozen=True)
class ClientBuilder(Generic[ClientT]):
    """Fluent builder; each ``with_*`` call returns a new builder."""

    factory: Callable[..., ClientT]
    config: TmdbClientConfig = field(default_factory=TmdbClientConfig)
    http_client: Any = None

    def with_base_url(self, value: str) -> "ClientBuilder[ClientT]":
        return replace(self, config=replace(self.config, base_url=value))

    def with_api_key(self, value: str) -> "ClientBuilder[ClientT]":
        return replace(self, config=replace(self.config, api_key=value))

    def with_http_client(self, client: Any) -> "ClientBuilder[ClientT]":
        return replace(self, http_client=client)

    def with_config(self, config: TmdbClientConfig) -> "ClientBuilder[ClientT]":
        return replace(self, config=config)

    def with_rate_limit(
        self,
        requests_per_second: int = DEFAULT_REQUESTS_PER_SECOND,
    ) -> "ClientBuilder[ClientT]":
        throttling = ThrottlingConfig(enabled=True, requests_per_second=requests_per_second)
        return replace(self, config=replace(self.config, throttling=throttling))

    def without_rate_limit(self) -> "ClientBuilder[ClientT]":
        throttling = replace(self.config.throttling, enabled=False)
        return replace(self, config=replace(self.config, throttling=throttling))

    def build(self) -> ClientT:
        validate_client_config(self.config)
        return self.factory(config=self.config, http_client=self.http_client)


__all__ = [
    "validate_client_config",
    "resolve_client_config",
    "decode_payload",
    "describe_client",
    "ClientBuilder",
]
