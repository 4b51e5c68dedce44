"""Movie endpoints."""

from .commands import (
    MovieAlternativeTitles,
    MovieChanges,
    MovieCredits,
    MovieDetails,
    MovieExternalIds,
    MovieImages,
    MovieKeywords,
    MovieLatest,
    MovieLists,
    MovieNowPlaying,
    MoviePopular,
    MovieRecommendations,
    MovieReleaseDates,
    MovieReviews,
    MovieSearch,
    MovieSimilar,
    MovieTopRated,
    MovieTranslations,
    MovieUpcoming,
    MovieVideos,
    MovieWatchProviders,
)
from .models import (
    AuthorDetails,
    DateRange,
    Movie,
    MovieAlternativeTitle,
    MovieAlternativeTitlesResult,
    MovieChange,
    MovieChangeItem,
    MovieCreditsResult,
    MovieDatedPage,
    MovieExternalIdsResult,
    MovieImagesResult,
    MovieKeywordsResult,
    MovieList,
    MovieReleaseDatesResult,
    MovieReview,
    MovieShort,
    MovieTranslationsResult,
    MovieVideosResult,
    Translation,
    TranslationData,
)

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
    "MovieDetails",
    "MovieSearch",
    "MovieAlternativeTitles",
    "MovieChanges",
    "MovieCredits",
    "MovieExternalIds",
    "MovieImages",
    "MovieKeywords",
    "MovieLatest",
    "MovieLists",
    "MovieNowPlaying",
    "MovieUpcoming",
    "MoviePopular",
    "MovieTopRated",
    "MovieRecommendations",
    "MovieSimilar",
    "MovieReleaseDates",
    "MovieReviews",
    "MovieTranslations",
    "MovieVideos",
    "MovieWatchProviders",
]
