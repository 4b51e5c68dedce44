"""Response shapes shared across endpoint packages."""

from .models import (
    Cast,
    CompanyShort,
    Country,
    Crew,
    Genre,
    Image,
    Keyword,
    Language,
    LocatedReleaseDates,
    LocatedWatchProvider,
    PaginatedResult,
    PersonShort,
    ReleaseDate,
    ReleaseDateKind,
    Status,
    Video,
    WatchProvider,
    WatchProviderResult,
)

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
