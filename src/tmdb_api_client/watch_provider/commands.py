"""Watch provider catalogue commands."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

from ..core.command import Command, LanguageOption, append_param
from .models import WatchProviderDetail
from .parser import parse_watch_provider_details


@dataclass(slots=True, frozen=True)
class WatchProviderList(LanguageOption, Command[tuple[WatchProviderDetail, ...]]):
    """Providers TMDB knows about, optionally narrowed to one watch region."""

    media: Literal["movie", "tv"] = "movie"
    watch_region: str | None = None
    language: str | None = None

    @classmethod
    def movie(cls) -> "WatchProviderList":
        return cls(media="movie")

    @classmethod
    def tv(cls) -> "WatchProviderList":
        return cls(media="tv")

    def with_watch_region(self, value: str | None) -> "WatchProviderList":
        return replace(self, watch_region=value)

    def path(self) -> str:
        return f"/watch/providers/{self.media}"

    def params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        append_param(params, "watch_region", self.watch_region)
        append_param(params, "language", self.language)
        return params

    def decode(self, payload: object) -> tuple[WatchProviderDetail, ...]:
        return parse_watch_provider_details(payload)


__all__ = [
    "WatchProviderList",
]
