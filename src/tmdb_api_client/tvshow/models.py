"""TV show, season and episode models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.models import CompanyShort, Country, Genre, Image, Language, PersonShort


@dataclass(slots=True, frozen=True)
class TVShowShort:
    id: int
    name: str
    original_name: str
    original_language: str
    origin_country: tuple[str, ...]
    overview: str | None
    first_air_date: date | None
    poster_path: str | None
    backdrop_path: str | None
    popularity: float
    vote_count: int
    vote_average: float
    adult: bool = False
    genre_ids: tuple[int, ...] = ()


@dataclass(slots=True, frozen=True)
class EpisodeShort:
    id: int
    name: str
    air_date: date | None
    episode_number: int
    season_number: int
    overview: str | None
    production_code: str
    still_path: str | None
    vote_average: float
    vote_count: int


@dataclass(slots=True, frozen=True)
class Episode:
    id: int
    name: str
    air_date: date | None
    episode_number: int
    season_number: int
    overview: str | None
    production_code: str
    still_path: str | None
    vote_average: float
    vote_count: int
    crew: tuple[PersonShort, ...] = ()
    guest_stars: tuple[PersonShort, ...] = ()


@dataclass(slots=True, frozen=True)
class SeasonShort:
    id: int
    name: str
    air_date: date | None
    overview: str | None
    poster_path: str | None
    season_number: int
    episode_count: int


@dataclass(slots=True, frozen=True)
class Season:
    id: int
    name: str
    air_date: date | None
    overview: str | None
    poster_path: str | None
    season_number: int
    episodes: tuple[Episode, ...]
    object_id: str | None = None


@dataclass(slots=True, frozen=True)
class TVShow:
    """Full TV show record.

    ``number_of_episodes`` is ``None`` when the provider omits it, which it
    does for some shows.
    """

    id: int
    name: str
    original_name: str
    original_language: str
    origin_country: tuple[str, ...]
    overview: str | None
    first_air_date: date | None
    poster_path: str | None
    backdrop_path: str | None
    popularity: float
    vote_count: int
    vote_average: float
    adult: bool
    created_by: tuple[PersonShort, ...]
    episode_run_time: tuple[int, ...]
    genres: tuple[Genre, ...]
    homepage: str
    in_production: bool
    languages: tuple[str, ...]
    last_air_date: date | None
    last_episode_to_air: EpisodeShort | None
    next_episode_to_air: EpisodeShort | None
    networks: tuple[CompanyShort, ...]
    number_of_episodes: int | None
    number_of_seasons: int
    production_companies: tuple[CompanyShort, ...]
    production_countries: tuple[Country, ...]
    seasons: tuple[SeasonShort, ...]
    spoken_languages: tuple[Language, ...]
    status: str
    tagline: str | None
    kind: str


@dataclass(slots=True, frozen=True)
class Role:
    credit_id: str
    character: str
    episode_count: int


@dataclass(slots=True, frozen=True)
class CrewJob:
    credit_id: str
    job: str
    episode_count: int


@dataclass(slots=True, frozen=True)
class AggregateCast:
    id: int
    name: str
    original_name: str
    adult: bool
    gender: int | None
    known_for_department: str | None
    popularity: float
    profile_path: str | None
    total_episode_count: int
    roles: tuple[Role, ...]
    order: int


@dataclass(slots=True, frozen=True)
class AggregateCrew:
    id: int
    name: str
    original_name: str
    adult: bool
    gender: int | None
    known_for_department: str | None
    popularity: float
    profile_path: str | None
    total_episode_count: int
    jobs: tuple[CrewJob, ...]
    department: str


@dataclass(slots=True, frozen=True)
class TVShowAggregateCreditsResult:
    id: int
    cast: tuple[AggregateCast, ...]
    crew: tuple[AggregateCrew, ...]


@dataclass(slots=True, frozen=True)
class ContentRating:
    iso_3166_1: str
    rating: str
    descriptors: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class TVShowExternalIdsResult:
    id: int
    imdb_id: str | None
    freebase_mid: str | None
    freebase_id: str | None
    tvdb_id: int | None
    tvrage_id: int | None
    wikidata_id: str | None
    facebook_id: str | None
    instagram_id: str | None
    twitter_id: str | None


@dataclass(slots=True, frozen=True)
class TVShowImagesResult:
    id: int
    backdrops: tuple[Image, ...]
    posters: tuple[Image, ...]
    logos: tuple[Image, ...] = ()


__all__ = [
    "TVShowShort",
    "EpisodeShort",
    "Episode",
    "SeasonShort",
    "Season",
    "TVShow",
    "Role",
    "CrewJob",
    "AggregateCast",
    "AggregateCrew",
    "TVShowAggregateCreditsResult",
    "ContentRating",
    "TVShowExternalIdsResult",
    "TVShowImagesResult",
]
