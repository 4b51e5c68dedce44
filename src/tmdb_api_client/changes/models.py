"""Change-list response models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Change:
    id: int | None
    adult: bool | None


__all__ = [
    "Change",
]
