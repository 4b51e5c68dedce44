"""Command contract shared by every endpoint request value."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from ..async_client import AsyncTmdbClient
    from ..client import TmdbClient

OutputT = TypeVar("OutputT")
CommandT = TypeVar("CommandT")


class Command(ABC, Generic[OutputT]):
    """One endpoint call.

    Subclasses are frozen dataclasses and provide ``path`` and ``decode``;
    ``params`` defaults to no query parameters. ``execute`` and
    ``execute_async`` hand the request description to a client, which
    appends the credential, performs the GET and classifies the response.
    """

    __slots__ = ()

    @abstractmethod
    def path(self) -> str:
        """Resource path relative to the base URL, without query string."""

    def params(self) -> list[tuple[str, str]]:
        return []

    @abstractmethod
    def decode(self, payload: object) -> OutputT:
        """Turn the JSON body of a successful response into the output value."""

    def execute(self, client: "TmdbClient") -> OutputT:
        return client.execute(self.path(), self.params(), decode=self.decode)

    async def execute_async(self, client: "AsyncTmdbClient") -> OutputT:
        return await client.execute(self.path(), self.params(), decode=self.decode)


def format_param(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def append_param(params: list[tuple[str, str]], key: str, value: object) -> None:
    """Append ``key`` only when ``value`` is set."""

    if value is None:
        return
    params.append((key, format_param(value)))


def append_flag(params: list[tuple[str, str]], key: str, value: bool) -> None:
    """Append ``key=true`` only when the flag is on."""

    if value:
        params.append((key, "true"))


class LanguageOption:
    __slots__ = ()

    def with_language(self: CommandT, value: str | None) -> CommandT:
        return replace(self, language=value)  # type: ignore[type-var]


class PageOption:
    __slots__ = ()

    def with_page(self: CommandT, value: int | None) -> CommandT:
        return replace(self, page=value)  # type: ignore[type-var]


class RegionOption:
    __slots__ = ()

    def with_region(self: CommandT, value: str | None) -> CommandT:
        return replace(self, region=value)  # type: ignore[type-var]


class DateRangeOption:
    __slots__ = ()

    def with_start_date(self: CommandT, value: date | None) -> CommandT:
        return replace(self, start_date=value)  # type: ignore[type-var]

    def with_end_date(self: CommandT, value: date | None) -> CommandT:
        return replace(self, end_date=value)  # type: ignore[type-var]


__all__ = [
    "Command",
    "format_param",
    "append_param",
    "append_flag",
    "LanguageOption",
    "PageOption",
    "RegionOption",
    "DateRangeOption",
]
