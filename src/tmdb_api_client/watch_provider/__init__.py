"""Watch provider endpoints."""

from ..common.models import LocatedWatchProvider, WatchProvider, WatchProviderResult
from .commands import WatchProviderList
from .models import WatchProviderDetail

__all__ = [
    "WatchProvider",
    "LocatedWatchProvider",
    "WatchProviderResult",
    "WatchProviderDetail",
    "WatchProviderList",
]
