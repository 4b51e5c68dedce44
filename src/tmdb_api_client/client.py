"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from types import TracebackType
from typing import TypeVar

from .client_shared import ClientBuilder, decode_payload, describe_client, resolve_client_config
from .config import TmdbClientConfig
from .core.command import Command
from .core.errors import TmdbClientClosedError
from .core.transport import SyncTransport, SyncTransportClient
from .core.transport_shared import with_credential

OutputT = TypeVar("OutputT")


class TmdbClient:
    """Public TMDB API client.

    Safe to share between threads. With throttling enabled, requests issued
    through one client never leave closer together than the configured
    interval.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        config: TmdbClientConfig | None = None,
        http_client: SyncTransportClient | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._config = resolve_client_config(config, api_key)
        self._api_key: str = self._config.api_key or ""
        self._transport = transport or SyncTransport(self._config, client=http_client)
        self._closed = False

    @classmethod
    def builder(cls) -> ClientBuilder["TmdbClient"]:
        return ClientBuilder(cls)

    @property
    def config(self) -> TmdbClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def execute(
        self,
        path: str,
        params: Sequence[tuple[str, str]] = (),
        *,
        decode: Callable[[object], OutputT] | None = None,
    ) -> OutputT:
        """GET ``path`` with ``params`` plus the credential and decode the body."""

        self._ensure_open()
        payload = self._transport.request(
            path,
            params=with_credential(params, self._api_key),
        )
        return decode_payload(payload, decode)

    def send(self, command: Command[OutputT]) -> OutputT:
        return command.execute(self)

    def _ensure_open(self) -> None:
        if self._closed:
            raise TmdbClientClosedError("TmdbClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "TmdbClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False

    def __repr__(self) -> str:
        return describe_client("TmdbClient", self._config)


__all__ = [
    "TmdbClient",
]
