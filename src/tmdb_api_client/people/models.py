"""Person response models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(slots=True, frozen=True)
class Person:
    id: int
    name: str
    adult: bool
    also_known_as: tuple[str, ...]
    biography: str | None
    birthday: date | None
    deathday: date | None
    homepage: str | None
    imdb_id: str | None
    known_for_department: str | None
    popularity: float
    place_of_birth: str | None
    profile_path: str | None
    gender: int | None = None
    credit_id: str | None = None


__all__ = [
    "Person",
]
