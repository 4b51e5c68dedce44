"""Company endpoints."""

from .commands import CompanyAlternativeNames, CompanyDetails, CompanyImages
from .models import (
    Company,
    CompanyAlternativeName,
    CompanyAlternativeNamesResult,
    CompanyImage,
    CompanyImagesResult,
)

__all__ = [
    "Company",
    "CompanyAlternativeName",
    "CompanyAlternativeNamesResult",
    "CompanyImage",
    "CompanyImagesResult",
    "CompanyDetails",
    "CompanyAlternativeNames",
    "CompanyImages",
]
