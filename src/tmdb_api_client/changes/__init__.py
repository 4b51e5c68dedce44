"""Change-list endpoints."""

from .commands import ChangeList
from .models import Change

__all__ = [
    "Change",
    "ChangeList",
]
