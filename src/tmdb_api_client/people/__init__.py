"""Person endpoints."""

from ..common.models import PersonShort
from .commands import PersonDetails
from .models import Person

__all__ = [
    "Person",
    "PersonShort",
    "PersonDetails",
]
