"""Ports (interfaces) for the bariatric domain."""

from .repository import IPatientProfileRepository
from .weight_entry_repository import IWeightEntryRepository

__all__ = ["IPatientProfileRepository", "IWeightEntryRepository"]
