"""Parsers for change-list payloads."""

from __future__ import annotations

from ..common.models import PaginatedResult
from ..common.parser import parse_paginated
from ..core.decoding import JsonObject, opt_int, req_bool
from .models import Change


def parse_change(item: JsonObject) -> Change:
    return Change(
        id=opt_int(item, "id"),
        adult=req_bool(item, "adult", default=None),
    )


def parse_change_page(payload: object) -> PaginatedResult[Change]:
    return parse_paginated(payload, parse_change)


__all__ = [
    "parse_change",
    "parse_change_page",
]
