"""Collection endpoints."""

from .commands import CollectionDetails
from .models import Collection, CollectionPart, MediaType

__all__ = [
    "Collection",
    "CollectionPart",
    "MediaType",
    "CollectionDetails",
]
