"""Parsers for configuration payloads."""

from __future__ import annotations

from ..core.decoding import JsonObject, req_str, str_list
from .models import ConfigurationCountry, ConfigurationLanguage, Job


def parse_configuration_country(item: JsonObject) -> ConfigurationCountry:
    return ConfigurationCountry(
        iso_3166_1=req_str(item, "iso_3166_1"),
        english_name=req_str(item, "english_name"),
        native_name=req_str(item, "native_name"),
    )


def parse_configuration_language(item: JsonObject) -> ConfigurationLanguage:
    return ConfigurationLanguage(
        iso_639_1=req_str(item, "iso_639_1"),
        english_name=req_str(item, "english_name"),
        name=req_str(item, "name"),
    )


def parse_job(item: JsonObject) -> Job:
    return Job(department=req_str(item, "department"), jobs=str_list(item, "jobs"))


__all__ = [
    "parse_configuration_country",
    "parse_configuration_language",
    "parse_job",
]
