"""Movie domain and response models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..common.models import (
    Cast,
    CompanyShort,
    Country,
    Crew,
    Genre,
    Image,
    Keyword,
    Language,
    LocatedReleaseDates,
    Status,
    Video,
)


@dataclass(slots=True, frozen=True)
class MovieShort:
    id: int
    title: str
    original_title: str
    original_language: str
    overview: str
    release_date: date | None
    poster_path: str | None
    backdrop_path: str | None
    adult: bool
    popularity: float
    vote_count: int
    vote_average: float
    video: bool
    genre_ids: tuple[int, ...] = ()


@dataclass(slots=True, frozen=True)
class Movie:
    id: int
    title: str
    original_title: str
    original_language: str
    overview: str
    release_date: date | None
    poster_path: str | None
    backdrop_path: str | None
    adult: bool
    popularity: float
    vote_count: int
    vote_average: float
    video: bool
    budget: int
    genres: tuple[Genre, ...]
    homepage: str | None
    imdb_id: str | None
    production_companies: tuple[CompanyShort, ...]
    production_countries: tuple[Country, ...]
    revenue: int
    runtime: int | None
    spoken_languages: tuple[Language, ...]
    status: Status
    tagline: str | None


@dataclass(slots=True, frozen=True)
class DateRange:
    maximum: date | None
    minimum: date | None


@dataclass(slots=True, frozen=True)
class MovieDatedPage:
    """A page of movies plus the release window it covers."""

    page: int
    total_results: int
    total_pages: int
    results: tuple[MovieShort, ...]
    dates: DateRange | None


@dataclass(slots=True, frozen=True)
class MovieAlternativeTitle:
    iso_3166_1: str
    title: str
    kind: str | None


@dataclass(slots=True, frozen=True)
class MovieAlternativeTitlesResult:
    id: int
    titles: tuple[MovieAlternativeTitle, ...]


@dataclass(slots=True, frozen=True)
class MovieChangeItem:
    id: str
    action: str
    time: datetime
    iso_639_1: str
    iso_3166_1: str


@dataclass(slots=True, frozen=True)
class MovieChange:
    key: str
    items: tuple[MovieChangeItem, ...]


@dataclass(slots=True, frozen=True)
class MovieCreditsResult:
    id: int
    cast: tuple[Cast, ...]
    crew: tuple[Crew, ...]


@dataclass(slots=True, frozen=True)
class MovieExternalIdsResult:
    id: int
    imdb_id: str | None
    facebook_id: str | None
    instagram_id: str | None
    twitter_id: str | None
    wikidata_id: str | None = None


@dataclass(slots=True, frozen=True)
class MovieImagesResult:
    id: int
    backdrops: tuple[Image, ...]
    posters: tuple[Image, ...]
    logos: tuple[Image, ...] = ()


@dataclass(slots=True, frozen=True)
class MovieKeywordsResult:
    id: int
    keywords: tuple[Keyword, ...]


@dataclass(slots=True, frozen=True)
class MovieList:
    id: int
    name: str
    description: str | None
    list_type: str
    poster_path: str | None
    iso_639_1: str
    item_count: int
    favorite_count: int


@dataclass(slots=True, frozen=True)
class MovieReleaseDatesResult:
    id: int
    results: tuple[LocatedReleaseDates, ...]


@dataclass(slots=True, frozen=True)
class AuthorDetails:
    name: str
    username: str
    avatar_path: str | None
    rating: float | None


@dataclass(slots=True, frozen=True)
class MovieReview:
    id: str
    author: str
    author_details: AuthorDetails
    content: str
    url: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class TranslationData:
    title: str | None
    overview: str | None
    homepage: str | None


@dataclass(slots=True, frozen=True)
class Translation:
    iso_3166_1: str
    iso_639_1: str
    name: str
    english_name: str
    data: TranslationData


@dataclass(slots=True, frozen=True)
class MovieTranslationsResult:
    id: int
    translations: tuple[Translation, ...]


@dataclass(slots=True, frozen=True)
class MovieVideosResult:
    id: int
    results: tuple[Video, ...]


__all__ = [
    "MovieShort",
    "Movie",
    "DateRange",
    "MovieDatedPage",
    "MovieAlternativeTitle",
    "MovieAlternativeTitlesResult",
    "MovieChangeItem",
    "MovieChange",
    "MovieCreditsResult",
    "MovieExternalIdsResult",
    "MovieImagesResult",
    "MovieKeywordsResult",
    "MovieList",
    "MovieReleaseDatesResult",
    "AuthorDetails",
    "MovieReview",
    "TranslationData",
    "Translation",
    "MovieTranslationsResult",
    "MovieVideosResult",
]
