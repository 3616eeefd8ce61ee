"""IPatientProfileRepository port - repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ..value_objects.patient_profile import PatientProfile


class IPatientProfileRepository(ABC):
    """Port for patient profile persistence.

    Storage and its access-control policies live outside the domain;
    adapters in the infrastructure layer implement this interface.
    """

    @abstractmethod
    async def save(self, profile: PatientProfile) -> None:
        """Save profile (create or replace).

        Args:
            profile: Profile to save
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> Optional[PatientProfile]:
        """Find profile by user ID.

        Args:
            user_id: User identifier

        Returns:
            Optional[PatientProfile]: Profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> None:
        """Delete the profile owned by a user.

        Args:
            user_id: User identifier
        """
        pass

    @abstractmethod
    async def exists(self, user_id: str) -> bool:
        """Check if a profile exists for a user.

        Args:
            user_id: User identifier

        Returns:
            bool: True if a profile exists
        """
        pass
