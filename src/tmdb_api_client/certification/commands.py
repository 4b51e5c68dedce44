"""Certification list commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..core.command import Command
from .models import Certification
from .parser import parse_certification_map

CertificationMap = dict[str, tuple[Certification, ...]]


@dataclass(slots=True, frozen=True)
class CertificationList(Command[CertificationMap]):
    """Official certifications per country, for movies or for TV shows."""

    media: Literal["movie", "tv"] = "movie"

    @classmethod
    def movie(cls) -> "CertificationList":
        return cls(media="movie")

    @classmethod
    def tv(cls) -> "CertificationList":
        return cls(media="tv")

    def path(self) -> str:
        return f"/certification/{self.media}/list"

    def decode(self, payload: object) -> CertificationMap:
        return parse_certification_map(payload)


__all__ = [
    "CertificationMap",
    "CertificationList",
]
