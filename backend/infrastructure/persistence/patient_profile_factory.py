"""Factory for creating patient profile repository instances."""

from typing import Optional

import structlog

from domain.bariatric.core.ports.repository import IPatientProfileRepository
from infrastructure.config import get_repository_backend
from infrastructure.persistence.in_memory.patient_profile_repository import (
    InMemoryPatientProfileRepository,
)

logger = structlog.get_logger(__name__)

# Singleton instance
_profile_repository: Optional[IPatientProfileRepository] = None


def create_patient_profile_repository() -> IPatientProfileRepository:
    """
    Create profile repository based on REPOSITORY_BACKEND configuration.

    Environment Variables:
        REPOSITORY_BACKEND: Repository type ('inmemory' or 'mongodb')

    Returns:
        IPatientProfileRepository implementation

    Raises:
        NotImplementedError: If REPOSITORY_BACKEND='mongodb'
            (storage lives with the hosted database, not in this service)

    Default:
        Returns InMemoryPatientProfileRepository if REPOSITORY_BACKEND not set
    """
    repo_type = get_repository_backend()

    if repo_type == "inmemory":
        return InMemoryPatientProfileRepository()

    if repo_type == "mongodb":
        raise NotImplementedError(
            "Persistent patient profile storage is not implemented. "
            "Use REPOSITORY_BACKEND='inmemory'."
        )

    # Unknown type - graceful fallback to inmemory
    logger.warning("patient_profile_repository.unknown_backend", backend=repo_type)
    return InMemoryPatientProfileRepository()


def get_patient_profile_repository() -> IPatientProfileRepository:
    """
    Get singleton profile repository instance.

    Returns:
        Singleton IPatientProfileRepository
    """
    global _profile_repository

    if _profile_repository is None:
        _profile_repository = create_patient_profile_repository()

    return _profile_repository


def reset_patient_profile_repository() -> None:
    """Reset singleton instance (useful for testing)."""
    global _profile_repository
    _profile_repository = None
