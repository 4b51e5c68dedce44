"""Certification response models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Certification:
    certification: str
    meaning: str
    order: int


__all__ = [
    "Certification",
]
