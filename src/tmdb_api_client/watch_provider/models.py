"""Watch provider catalogue models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class WatchProviderDetail:
    provider_id: int
    provider_name: str
    display_priority: int
    logo_path: str
    display_priorities: dict[str, int] = field(default_factory=dict)


__all__ = [
    "WatchProviderDetail",
]
