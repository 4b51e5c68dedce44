"""Company response models."""

from __future__ import annotations

from dataclasses import dataclass

from ..common.models import CompanyShort


@dataclass(slots=True, frozen=True)
class Company:
    id: int
    name: str
    logo_path: str | None
    origin_country: str | None
    description: str | None
    headquarters: str
    homepage: str
    parent_company: CompanyShort | None


@dataclass(slots=True, frozen=True)
class CompanyAlternativeName:
    name: str
    kind: str | None


@dataclass(slots=True, frozen=True)
class CompanyAlternativeNamesResult:
    id: int
    results: tuple[CompanyAlternativeName, ...]


@dataclass(slots=True, frozen=True)
class CompanyImage:
    id: str
    aspect_ratio: float
    file_path: str
    file_type: str
    height: int
    width: int
    vote_average: float
    vote_count: int


@dataclass(slots=True, frozen=True)
class CompanyImagesResult:
    id: int
    logos: tuple[CompanyImage, ...]


__all__ = [
    "Company",
    "CompanyAlternativeName",
    "CompanyAlternativeNamesResult",
    "CompanyImage",
    "CompanyImagesResult",
]
