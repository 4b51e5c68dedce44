"""Person commands."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.command import Command, LanguageOption, append_param
from .models import Person
from .parser import parse_person


@dataclass(slots=True, frozen=True)
class PersonDetails(LanguageOption, Command[Person]):
    person_id: int
    language: str | None = None

    def path(self) -> str:
        return f"/person/{self.person_id}"

    def params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        append_param(params, "language", self.language)
        return params

    def decode(self, payload: object) -> Person:
        return parse_person(payload)


__all__ = [
    "PersonDetails",
]
