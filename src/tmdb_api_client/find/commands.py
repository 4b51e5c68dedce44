"""Lookup-by-external-id command."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from ..core.command import Command, LanguageOption, append_param
from .models import ExternalIdSource, FindResults
from .parser import parse_find_results


@dataclass(slots=True, frozen=True)
class FindById(LanguageOption, Command[FindResults]):
    """Find movies, people, shows, seasons and episodes by an external id."""

    external_id: str
    external_source: ExternalIdSource
    language: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.external_source, ExternalIdSource):
            object.__setattr__(
                self, "external_source", ExternalIdSource(self.external_source)
            )

    def path(self) -> str:
        return "/find/" + quote(self.external_id, safe="")

    def params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        append_param(params, "external_source", self.external_source)
        append_param(params, "language", self.language)
        return params

    def decode(self, payload: object) -> FindResults:
        return parse_find_results(payload)


__all__ = [
    "FindById",
]
