"""Configuration response models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ConfigurationCountry:
    iso_3166_1: str
    english_name: str
    native_name: str


@dataclass(slots=True, frozen=True)
class ConfigurationLanguage:
    iso_639_1: str
    english_name: str
    name: str


@dataclass(slots=True, frozen=True)
class Job:
    department: str
    jobs: tuple[str, ...]


__all__ = [
    "ConfigurationCountry",
    "ConfigurationLanguage",
    "Job",
]
