from __future__ import annotations

import importlib

import pytest

import tmdb_api_client


def test_root_package_exports_clients_config_and_errors():
    expected = {
        "TmdbClient",
        "AsyncTmdbClient",
        "ClientBuilder",
        "TmdbClientConfig",
        "Command",
        "TmdbApiError",
        "TmdbServerError",
        "TmdbValidationError",
        "TmdbDecodeError",
        "TmdbMissingCredentialError",
    }
    assert expected.issubset(set(tmdb_api_client.__all__))
    for name in tmdb_api_client.__all__:
        assert hasattr(tmdb_api_client, name)


@pytest.mark.parametrize(
    ("package", "names"),
    [
        ("certification", {"CertificationList", "Certification"}),
        ("changes", {"ChangeList", "Change"}),
        ("collection", {"CollectionDetails", "Collection", "CollectionPart"}),
        ("company", {"CompanyDetails", "CompanyAlternativeNames", "CompanyImages", "Company"}),
        ("configuration", {"CountryList", "JobList", "LanguageList"}),
        ("find", {"FindById", "ExternalIdSource", "FindResults"}),
        ("genre", {"GenreList", "Genre"}),
        ("movie", {"MovieDetails", "MovieSearch", "Movie", "MovieShort"}),
        ("people", {"PersonDetails", "Person"}),
        ("tvshow", {"TVShowDetails", "TVShowSearch", "SeasonDetails", "EpisodeDetails"}),
        ("watch_provider", {"WatchProviderList", "WatchProviderDetail"}),
    ],
)
def test_endpoint_packages_export_commands_and_models(package, names):
    module = importlib.import_module(f"tmdb_api_client.{package}")
    assert names.issubset(set(module.__all__))
    for name in module.__all__:
        assert hasattr(module, name)


def test_parsers_are_not_reexported_from_endpoint_packages():
    import tmdb_api_client.movie as movie

    assert "parse_movie" not in movie.__all__
