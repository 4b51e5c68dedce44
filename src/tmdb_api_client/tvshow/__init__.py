"""TV show, season and episode endpoints."""

from .commands import (
    EpisodeDetails,
    SeasonDetails,
    TVShowAggregateCredits,
    TVShowContentRatings,
    TVShowDetails,
    TVShowExternalIds,
    TVShowImages,
    TVShowKeywords,
    TVShowLatest,
    TVShowSearch,
    TVShowSimilar,
    TVShowWatchProviders,
)
from .models import (
    AggregateCast,
    AggregateCrew,
    ContentRating,
    CrewJob,
    Episode,
    EpisodeShort,
    Role,
    Season,
    SeasonShort,
    TVShow,
    TVShowAggregateCreditsResult,
    TVShowExternalIdsResult,
    TVShowImagesResult,
    TVShowShort,
)

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
    "TVShowDetails",
    "TVShowSearch",
    "TVShowAggregateCredits",
    "TVShowContentRatings",
    "TVShowExternalIds",
    "TVShowImages",
    "TVShowKeywords",
    "TVShowLatest",
    "TVShowSimilar",
    "TVShowWatchProviders",
    "SeasonDetails",
    "EpisodeDetails",
]
