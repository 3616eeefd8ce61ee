"""Factory for creating weight entry repository instances."""

from typing import Optional

import structlog

from domain.bariatric.core.ports.weight_entry_repository import IWeightEntryRepository
from infrastructure.config import get_repository_backend
from infrastructure.persistence.in_memory.weight_entry_repository import (
    InMemoryWeightEntryRepository,
)

logger = structlog.get_logger(__name__)

# Singleton instance
_weight_entry_repository: Optional[IWeightEntryRepository] = None


def create_weight_entry_repository() -> IWeightEntryRepository:
    """
    Create weight entry repository based on REPOSITORY_BACKEND.

    Follows the same rules as the patient profile repository: 'inmemory'
    by default, 'mongodb' rejected, anything else falls back to in-memory.

    Raises:
        NotImplementedError: If REPOSITORY_BACKEND='mongodb'
    """
    repo_type = get_repository_backend()

    if repo_type == "inmemory":
        return InMemoryWeightEntryRepository()

    if repo_type == "mongodb":
        raise NotImplementedError(
            "Persistent weight history storage is not implemented. "
            "Use REPOSITORY_BACKEND='inmemory'."
        )

    logger.warning("weight_entry_repository.unknown_backend", backend=repo_type)
    return InMemoryWeightEntryRepository()


def get_weight_entry_repository() -> IWeightEntryRepository:
    """Get singleton weight entry repository instance."""
    global _weight_entry_repository

    if _weight_entry_repository is None:
        _weight_entry_repository = create_weight_entry_repository()

    return _weight_entry_repository


def reset_weight_entry_repository() -> None:
    """Reset singleton instance (useful for testing)."""
    global _weight_entry_repository
    _weight_entry_repository = None
