"""In-memory implementation of IPatientProfileRepository."""

from typing import Optional

import structlog

from domain.bariatric.core.ports.repository import IPatientProfileRepository
from domain.bariatric.core.value_objects.patient_profile import PatientProfile

logger = structlog.get_logger(__name__)


class InMemoryPatientProfileRepository(IPatientProfileRepository):
    """
    In-memory implementation of patient profile repository.

    Uses a dictionary keyed by user ID. Suitable for testing and
    development. Data is lost when the application stops.
    """

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._profiles: dict[str, PatientProfile] = {}

    async def save(self, profile: PatientProfile) -> None:
        """
        Save or replace the profile of ``profile.user_id``.

        Profiles are frozen dataclasses, so stored instances cannot be
        mutated by callers.
        """
        self._profiles[profile.user_id] = profile
        logger.debug("patient_profile.saved", user_id=profile.user_id)

    async def find_by_user_id(self, user_id: str) -> Optional[PatientProfile]:
        """
        Find profile by user ID.

        Returns:
            Profile if found, None otherwise
        """
        return self._profiles.get(user_id)

    async def delete(self, user_id: str) -> None:
        """Delete profile by user ID (no-op if absent)."""
        self._profiles.pop(user_id, None)

    async def exists(self, user_id: str) -> bool:
        """Check if a profile exists for the user."""
        return user_id in self._profiles

    def clear(self) -> None:
        """Clear all profiles (useful for testing)."""
        self._profiles.clear()

    def count(self) -> int:
        """Get total number of stored profiles (useful for testing)."""
        return len(self._profiles)
