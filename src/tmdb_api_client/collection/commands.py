"""Collection commands."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.command import Command, LanguageOption, append_param
from .models import Collection
from .parser import parse_collection


@dataclass(slots=True, frozen=True)
class CollectionDetails(LanguageOption, Command[Collection]):
    collection_id: int
    language: str | None = None

    def path(self) -> str:
        return f"/collection/{self.collection_id}"

    def params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        append_param(params, "language", self.language)
        return params

    def decode(self, payload: object) -> Collection:
        return parse_collection(payload)


__all__ = [
    "CollectionDetails",
]
