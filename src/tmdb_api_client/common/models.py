"""Response shapes shared by several endpoint families."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class Status(str, Enum):
    RUMORED = "Rumored"
    PLANNED = "Planned"
    IN_PRODUCTION = "In Production"
    POST_PRODUCTION = "Post Production"
    RELEASED = "Released"
    CANCELED = "Canceled"


class ReleaseDateKind(IntEnum):
    PREMIERE = 1
    THEATRICAL_LIMITED = 2
    THEATRICAL = 3
    DIGITAL = 4
    PHYSICAL = 5
    TV = 6


@dataclass(slots=True, frozen=True)
class PaginatedResult(Generic[T]):
    page: int
    total_results: int
    total_pages: int
    results: tuple[T, ...]


@dataclass(slots=True, frozen=True)
class Genre:
    id: int
    name: str


@dataclass(slots=True, frozen=True)
class Keyword:
    id: int
    name: str


@dataclass(slots=True, frozen=True)
class Country:
    iso_3166_1: str
    name: str


@dataclass(slots=True, frozen=True)
class Language:
    iso_639_1: str
    name: str
    english_name: str | None = None


@dataclass(slots=True, frozen=True)
class CompanyShort:
    id: int
    name: str
    logo_path: str | None
    origin_country: str | None


@dataclass(slots=True, frozen=True)
class PersonShort:
    id: int
    name: str
    credit_id: str | None = None
    gender: int | None = None
    profile_path: str | None = None


@dataclass(slots=True, frozen=True)
class Cast:
    id: int
    name: str
    credit_id: str
    adult: bool
    known_for_department: str | None
    original_name: str
    popularity: float
    gender: int | None
    profile_path: str | None
    cast_id: int
    character: str
    order: int


@dataclass(slots=True, frozen=True)
class Crew:
    id: int
    name: str
    credit_id: str
    adult: bool
    known_for_department: str | None
    original_name: str
    popularity: float
    gender: int | None
    profile_path: str | None
    department: str
    job: str


@dataclass(slots=True, frozen=True)
class Image:
    aspect_ratio: float
    file_path: str
    height: int
    width: int
    iso_639_1: str | None
    vote_average: float
    vote_count: int


@dataclass(slots=True, frozen=True)
class Video:
    id: str
    name: str
    kind: str
    site: str
    key: str
    published_at: datetime
    size: int
    iso_639_1: str
    iso_3166_1: str


@dataclass(slots=True, frozen=True)
class ReleaseDate:
    certification: str | None
    iso_639_1: str | None
    note: str | None
    release_date: datetime
    kind: ReleaseDateKind


@dataclass(slots=True, frozen=True)
class LocatedReleaseDates:
    iso_3166_1: str
    release_dates: tuple[ReleaseDate, ...]


@dataclass(slots=True, frozen=True)
class WatchProvider:
    provider_id: int
    provider_name: str
    display_priority: int
    logo_path: str


@dataclass(slots=True, frozen=True)
class LocatedWatchProvider:
    link: str
    flatrate: tuple[WatchProvider, ...] = ()
    rent: tuple[WatchProvider, ...] = ()
    buy: tuple[WatchProvider, ...] = ()


@dataclass(slots=True, frozen=True)
class WatchProviderResult:
    """Providers of one title, keyed by ISO 3166-1 country code."""

    id: int
    results: dict[str, LocatedWatchProvider]


__all__ = [
    "Status",
    "ReleaseDateKind",
    "PaginatedResult",
    "Genre",
    "Keyword",
    "Country",
    "Language",
    "CompanyShort",
    "PersonShort",
    "Cast",
    "Crew",
    "Image",
    "Video",
    "ReleaseDate",
    "LocatedReleaseDates",
    "WatchProvider",
    "LocatedWatchProvider",
    "WatchProviderResult",
]
