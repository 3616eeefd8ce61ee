"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.patient_profile_repository import (
    InMemoryPatientProfileRepository,
)
from infrastructure.persistence.in_memory.weight_entry_repository import (
    InMemoryWeightEntryRepository,
)

__all__ = [
    "InMemoryPatientProfileRepository",
    "InMemoryWeightEntryRepository",
]
