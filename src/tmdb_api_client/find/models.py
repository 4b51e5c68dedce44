"""Lookup-by-external-id models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..common.models import PersonShort
from ..movie.models import MovieShort
from ..tvshow.models import EpisodeShort, SeasonShort, TVShowShort


class ExternalIdSource(str, Enum):
    IMDB = "imdb_id"
    FACEBOOK = "facebook_id"
    INSTAGRAM = "instagram_id"
    TVDB = "tvdb_id"
    TIKTOK = "tiktok_id"
    TWITTER = "twitter_id"
    WIKIDATA = "wikidata_id"
    YOUTUBE = "youtube_id"


@dataclass(slots=True, frozen=True)
class FindResults:
    movie_results: tuple[MovieShort, ...] = ()
    person_results: tuple[PersonShort, ...] = ()
    tv_results: tuple[TVShowShort, ...] = ()
    tv_season_results: tuple[SeasonShort, ...] = ()
    tv_episode_results: tuple[EpisodeShort, ...] = ()


__all__ = [
    "ExternalIdSource",
    "FindResults",
]
