"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from .core.throttling import interval_from_rate

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_REQUESTS_PER_SECOND = 50


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class ThrottlingConfig:
    """Throttling-related settings."""

    enabled: bool = False
    requests_per_second: int = DEFAULT_REQUESTS_PER_SECOND

    @property
    def min_interval_seconds(self) -> float:
        return interval_from_rate(self.requests_per_second)

    def validate(self) -> None:
        if not isinstance(self.enabled, bool):
            raise ValueError("throttling.enabled must be bool")
        if isinstance(self.requests_per_second, bool) or not isinstance(
            self.requests_per_second, int
        ):
            raise ValueError("throttling.requests_per_second must be int")
        if self.requests_per_second <= 0:
            raise ValueError("throttling.requests_per_second must be > 0")


@dataclass(slots=True, frozen=True)
class TmdbClientConfig:
    """Runtime configuration for TMDB client."""

    api_key: str | None = field(default=None, repr=False)
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = "tmdb-api-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)
    throttling: ThrottlingConfig = field(default_factory=ThrottlingConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        self.transport.validate()
        self.throttling.validate()


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_REQUESTS_PER_SECOND",
    "TransportConfig",
    "ThrottlingConfig",
    "TmdbClientConfig",
]
