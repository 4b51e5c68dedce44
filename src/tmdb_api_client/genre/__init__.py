"""Genre endpoints."""

from ..common.models import Genre
from .commands import GenreList

__all__ = [
    "Genre",
    "GenreList",
]
