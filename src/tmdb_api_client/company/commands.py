"""Company commands."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.command import Command
from .models import Company, CompanyAlternativeNamesResult, CompanyImagesResult
from .parser import parse_alternative_names, parse_company, parse_company_images


@dataclass(slots=True, frozen=True)
class CompanyDetails(Command[Company]):
    company_id: int

    def path(self) -> str:
        return f"/company/{self.company_id}"

    def decode(self, payload: object) -> Company:
        return parse_company(payload)


@dataclass(slots=True, frozen=True)
class CompanyAlternativeNames(Command[CompanyAlternativeNamesResult]):
    company_id: int

    def path(self) -> str:
        return f"/company/{self.company_id}/alternative_names"

    def decode(self, payload: object) -> CompanyAlternativeNamesResult:
        return parse_alternative_names(payload)


@dataclass(slots=True, frozen=True)
class CompanyImages(Command[CompanyImagesResult]):
    company_id: int

    def path(self) -> str:
        return f"/company/{self.company_id}/images"

    def decode(self, payload: object) -> CompanyImagesResult:
        return parse_company_images(payload)


__all__ = [
    "CompanyDetails",
    "CompanyAlternativeNames",
    "CompanyImages",
]
