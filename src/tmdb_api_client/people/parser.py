"""Parsers for person payloads."""

from __future__ import annotations

from ..core.decoding import (
    as_object,
    empty_str,
    opt_date,
    opt_int,
    opt_str,
    req_bool,
    req_float,
    req_int,
    req_str,
    str_list,
)
from .models import Person


def parse_person(payload: object) -> Person:
    item = as_object(payload)
    return Person(
        id=req_int(item, "id"),
        name=req_str(item, "name"),
        adult=req_bool(item, "adult"),
        also_known_as=str_list(item, "also_known_as", default=[]),
        biography=empty_str(item, "biography"),
        birthday=opt_date(item, "birthday"),
        deathday=opt_date(item, "deathday"),
        homepage=opt_str(item, "homepage"),
        imdb_id=opt_str(item, "imdb_id"),
        known_for_department=opt_str(item, "known_for_department"),
        popularity=req_float(item, "popularity"),
        place_of_birth=opt_str(item, "place_of_birth"),
        profile_path=opt_str(item, "profile_path"),
        gender=opt_int(item, "gender"),
        credit_id=opt_str(item, "credit_id"),
    )


__all__ = [
    "parse_person",
]
