"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence

import httpx

from ..config import TmdbClientConfig

API_KEY_PARAM = "api_key"
REDACTED = "REDACTED"

_CREDENTIAL_PATTERN = re.compile(rf"({API_KEY_PARAM}=)[^&\s\"']+")

QueryParams = list[tuple[str, str]]


def build_default_headers(config: TmdbClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: TmdbClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def build_url(base_url: str, path: str) -> str:
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def with_credential(params: Sequence[tuple[str, str]], api_key: str) -> QueryParams:
    """Copy ``params`` and append the credential as the last pair."""

    merged = [(key, value) for key, value in params if key != API_KEY_PARAM]
    merged.append((API_KEY_PARAM, api_key))
    return merged


def redact_credential(text: str) -> str:
    return _CREDENTIAL_PATTERN.sub(rf"\g<1>{REDACTED}", text)


class CredentialRedactingFilter(logging.Filter):
    """Rewrite ``api_key=<value>`` in a record to ``api_key=REDACTED``.

    httpx logs every request URL at INFO, query string included.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_credential(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def install_credential_redaction(logger_name: str = "httpx") -> None:
    """Attach one :class:`CredentialRedactingFilter` to ``logger_name``."""

    target = logging.getLogger(logger_name)
    if not any(isinstance(f, CredentialRedactingFilter) for f in target.filters):
        target.addFilter(CredentialRedactingFilter())


__all__ = [
    "API_KEY_PARAM",
    "REDACTED",
    "QueryParams",
    "build_default_headers",
    "build_default_timeout",
    "build_url",
    "with_credential",
    "redact_credential",
    "CredentialRedactingFilter",
    "install_credential_redaction",
]
