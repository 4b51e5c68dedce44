"""Certification endpoints."""

from .commands import CertificationList, CertificationMap
from .models import Certification

__all__ = [
    "Certification",
    "CertificationList",
    "CertificationMap",
]
