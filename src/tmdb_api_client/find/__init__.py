"""Lookup-by-external-id endpoint."""

from .commands import FindById
from .models import ExternalIdSource, FindResults

__all__ = [
    "ExternalIdSource",
    "FindResults",
    "FindById",
]
