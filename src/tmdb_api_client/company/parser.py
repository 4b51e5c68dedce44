"""Parsers for company payloads."""

from __future__ import annotations

from ..common.parser import parse_company_short
from ..core.decoding import (
    JsonObject,
    as_object,
    empty_str,
    object_list,
    opt_object,
    opt_str,
    req_float,
    req_int,
    req_str,
)
from .models import (
    Company,
    CompanyAlternativeName,
    CompanyAlternativeNamesResult,
    CompanyImage,
    CompanyImagesResult,
)


def parse_company(payload: object) -> Company:
    item = as_object(payload)
    return Company(
        id=req_int(item, "id"),
        name=req_str(item, "name"),
        logo_path=opt_str(item, "logo_path"),
        origin_country=empty_str(item, "origin_country"),
        description=empty_str(item, "description"),
        headquarters=req_str(item, "headquarters"),
        homepage=req_str(item, "homepage"),
        parent_company=opt_object(item, "parent_company", parse_company_short),
    )


def parse_alternative_name(item: JsonObject) -> CompanyAlternativeName:
    return CompanyAlternativeName(
        name=req_str(item, "name"),
        kind=empty_str(item, "type"),
    )


def parse_alternative_names(payload: object) -> CompanyAlternativeNamesResult:
    item = as_object(payload)
    return CompanyAlternativeNamesResult(
        id=req_int(item, "id"),
        results=object_list(item, "results", parse_alternative_name),
    )


def parse_company_image(item: JsonObject) -> CompanyImage:
    return CompanyImage(
        id=req_str(item, "id"),
        aspect_ratio=req_float(item, "aspect_ratio"),
        file_path=req_str(item, "file_path"),
        file_type=req_str(item, "file_type"),
        height=req_int(item, "height"),
        width=req_int(item, "width"),
        vote_average=req_float(item, "vote_average"),
        vote_count=req_int(item, "vote_count"),
    )


def parse_company_images(payload: object) -> CompanyImagesResult:
    item = as_object(payload)
    return CompanyImagesResult(
        id=req_int(item, "id"),
        logos=object_list(item, "logos", parse_company_image),
    )


__all__ = [
    "parse_company",
    "parse_alternative_name",
    "parse_alternative_names",
    "parse_company_image",
    "parse_company_images",
]
