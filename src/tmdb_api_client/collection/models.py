"""Collection response models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class MediaType(str, Enum):
    MOVIE = "movie"
    TV = "tv"
    COLLECTION = "collection"


@dataclass(slots=True, frozen=True)
class CollectionPart:
    id: int
    media_type: MediaType
    title: str
    original_language: str
    original_title: str
    overview: str
    poster_path: str | None
    backdrop_path: str | None
    release_date: date | None
    genre_ids: tuple[int, ...] = ()
    popularity: float = 0.0
    adult: bool = False
    video: bool = False
    vote_average: float = 0.0
    vote_count: int = 0


@dataclass(slots=True, frozen=True)
class Collection:
    id: int
    name: str
    overview: str | None
    poster_path: str | None
    backdrop_path: str | None
    parts: tuple[CollectionPart, ...]


__all__ = [
    "MediaType",
    "CollectionPart",
    "Collection",
]
