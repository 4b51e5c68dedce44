"""Change-list commands."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal

from ..common.models import PaginatedResult
from ..core.command import Command, DateRangeOption, PageOption, append_param
from .models import Change
from .parser import parse_change_page


@dataclass(slots=True, frozen=True)
class ChangeList(DateRangeOption, PageOption, Command[PaginatedResult[Change]]):
    """Ids of entities changed within a date range (24 hours by default)."""

    media: Literal["movie", "tv", "person"] = "movie"
    start_date: date | None = None
    end_date: date | None = None
    page: int | None = None

    @classmethod
    def movie(cls) -> "ChangeList":
        return cls(media="movie")

    @classmethod
    def tv(cls) -> "ChangeList":
        return cls(media="tv")

    @classmethod
    def person(cls) -> "ChangeList":
        return cls(media="person")

    def path(self) -> str:
        return f"/{self.media}/changes"

    def params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        append_param(params, "start_date", self.start_date)
        append_param(params, "end_date", self.end_date)
        append_param(params, "page", self.page)
        return params

    def decode(self, payload: object) -> PaginatedResult[Change]:
        return parse_change_page(payload)


__all__ = [
    "ChangeList",
]
