"""Genre list commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..common.models import Genre
from ..common.parser import parse_genre
from ..core.command import Command, LanguageOption, append_param
from ..core.decoding import as_object, object_list


@dataclass(slots=True, frozen=True)
class GenreList(LanguageOption, Command[tuple[Genre, ...]]):
    """Official genres for movies or TV shows, unwrapped from ``{"genres": [...]}``."""

    media: Literal["movie", "tv"] = "movie"
    language: str | None = None

    @classmethod
    def movie(cls) -> "GenreList":
        return cls(media="movie")

    @classmethod
    def tv(cls) -> "GenreList":
        return cls(media="tv")

    def path(self) -> str:
        return f"/genre/{self.media}/list"

    def params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        append_param(params, "language", self.language)
        return params

    def decode(self, payload: object) -> tuple[Genre, ...]:
        return object_list(as_object(payload), "genres", parse_genre)


__all__ = [
    "GenreList",
]
