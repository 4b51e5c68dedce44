"""Configuration endpoints."""

from .commands import CountryList, JobList, LanguageList
from .models import ConfigurationCountry, ConfigurationLanguage, Job

__all__ = [
    "ConfigurationCountry",
    "ConfigurationLanguage",
    "Job",
    "CountryList",
    "JobList",
    "LanguageList",
]
