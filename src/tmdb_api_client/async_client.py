"""Public async client entrypoint."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from types import TracebackType
from typing import TypeVar

from .client_shared import ClientBuilder, decode_payload, describe_client, resolve_client_config
from .config import TmdbClientConfig
from .core.async_transport import AsyncTransport, AsyncTransportClient
from .core.command import Command
from .core.errors import TmdbClientClosedError
from .core.transport_shared import with_credential

OutputT = TypeVar("OutputT")


class AsyncTmdbClient:
    """Public async TMDB API client.

    Safe to share between tasks of one event loop; throttle waits suspend
    only the waiting task.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        config: TmdbClientConfig | None = None,
        http_client: AsyncTransportClient | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        self._config = resolve_client_config(config, api_key)
        self._api_key: str = self._config.api_key or ""
        self._transport = transport or AsyncTransport(self._config, client=http_client)
        self._closed = False

    @classmethod
    def builder(cls) -> ClientBuilder["AsyncTmdbClient"]:
        return ClientBuilder(cls)

    @property
    def config(self) -> TmdbClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    async def execute(
        self,
        path: str,
        params: Sequence[tuple[str, str]] = (),
        *,
        decode: Callable[[object], OutputT] | None = None,
    ) -> OutputT:
        self._ensure_open()
        payload = await self._transport.request(
            path,
            params=with_credential(params, self._api_key),
        )
        return decode_payload(payload, decode)

    async def send(self, command: Command[OutputT]) -> OutputT:
        return await command.execute_async(self)

    def _ensure_open(self) -> None:
        if self._closed:
            raise TmdbClientClosedError("AsyncTmdbClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncTmdbClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False

    def __repr__(self) -> str:
        return describe_client("AsyncTmdbClient", self._config)


__all__ = [
    "AsyncTmdbClient",
]
