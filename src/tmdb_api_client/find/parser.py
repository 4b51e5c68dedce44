"""Parser for lookup-by-external-id payloads."""

from __future__ import annotations

from ..common.parser import parse_person_short
from ..core.decoding import as_object, object_list
from ..movie.parser import parse_movie_short
from ..tvshow.parser import parse_episode_short, parse_season_short, parse_tvshow_short
from .models import FindResults


def parse_find_results(payload: object) -> FindResults:
    item = as_object(payload)
    return FindResults(
        movie_results=object_list(item, "movie_results", parse_movie_short, default=[]),
        person_results=object_list(item, "person_results", parse_person_short, default=[]),
        tv_results=object_list(item, "tv_results", parse_tvshow_short, default=[]),
        tv_season_results=object_list(
            item, "tv_season_results", parse_season_short, default=[]
        ),
        tv_episode_results=object_list(
            item, "tv_episode_results", parse_episode_short, default=[]
        ),
    )


__all__ = [
    "parse_find_results",
]
