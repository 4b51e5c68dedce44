"""Configuration commands. Each returns a JSON array root."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.command import Command, LanguageOption, append_param
from ..core.decoding import parse_list
from .models import ConfigurationCountry, ConfigurationLanguage, Job
from .parser import parse_configuration_country, parse_configuration_language, parse_job


@dataclass(slots=True, frozen=True)
class CountryList(LanguageOption, Command[tuple[ConfigurationCountry, ...]]):
    language: str | None = None

    def path(self) -> str:
        return "/configuration/countries"

    def params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        append_param(params, "language", self.language)
        return params

    def decode(self, payload: object) -> tuple[ConfigurationCountry, ...]:
        return parse_list(payload, parse_configuration_country)


@dataclass(slots=True, frozen=True)
class JobList(Command[tuple[Job, ...]]):
    def path(self) -> str:
        return "/configuration/jobs"

    def decode(self, payload: object) -> tuple[Job, ...]:
        return parse_list(payload, parse_job)


@dataclass(slots=True, frozen=True)
class LanguageList(Command[tuple[ConfigurationLanguage, ...]]):
    def path(self) -> str:
        return "/configuration/languages"

    def decode(self, payload: object) -> tuple[ConfigurationLanguage, ...]:
        return parse_list(payload, parse_configuration_language)


__all__ = [
    "CountryList",
    "JobList",
    "LanguageList",
]
