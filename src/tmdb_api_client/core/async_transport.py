"""Async HTTP transport with throttling and status evaluation."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Sequence
from typing import Protocol

import httpx

from ..config import TmdbClientConfig
from .async_throttling import AsyncMinIntervalThrottler
from .errors import TmdbApiError, TmdbTransportError
from .response_parsing import JsonPayloadResponse, evaluate_response
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    build_url,
    install_credential_redaction,
)

logger = logging.getLogger("tmdb_api_client")


class AsyncTransportClient(Protocol):
    async def get(self, url: str, params: Sequence[tuple[str, str]]) -> JsonPayloadResponse: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for TMDB API."""

    def __init__(
        self,
        config: TmdbClientConfig,
        *,
        client: AsyncTransportClient | None = None,
        sleeper: Callable[[float], Awaitable[None]] | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        install_credential_redaction()

        self._throttler: AsyncMinIntervalThrottler | None = None
        if config.throttling.enabled:
            self._throttler = AsyncMinIntervalThrottler.from_rate(
                config.throttling.requests_per_second,
                clock=clock or time.monotonic,
                sleeper=sleeper or _default_sleep,
            )
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    @property
    def throttler(self) -> AsyncMinIntervalThrottler | None:
        return self._throttler

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def request(self, path: str, *, params: Sequence[tuple[str, str]]) -> object:
        if self._closed:
            raise TmdbTransportError("transport is already closed")

        url = build_url(self._config.base_url, path)
        if self._throttler is not None:
            waited = await self._throttler.wait()
            if waited > 0:
                logger.debug("request throttled path=%s waited=%.6f", path, waited)

        logger.debug("request start path=%s", path)
        try:
            response = await self._client.get(url, params=list(params))
        except Exception as exc:
            logger.error(
                "request network error path=%s error=%s",
                path,
                exc.__class__.__name__,
            )
            raise TmdbTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        http_status = getattr(response, "status_code", None)
        logger.debug("response received path=%s http_status=%s", path, http_status)
        try:
            payload = evaluate_response(response)
        except TmdbApiError as exc:
            logger.error(
                "request failed path=%s http_status=%s error=%s",
                path,
                http_status,
                exc.__class__.__name__,
            )
            raise
        logger.info("request success path=%s http_status=%s", path, http_status)
        return payload


async def _default_sleep(seconds: float) -> None:
    await asyncio.sleep(seconds)


__all__ = [
    "AsyncTransportClient",
    "AsyncTransport",
]
