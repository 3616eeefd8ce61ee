"""IWeightEntryRepository port - weight history interface."""

from abc import ABC, abstractmethod
from typing import List

from ..value_objects.weight_entry import WeightEntry


class IWeightEntryRepository(ABC):
    """Port for the weight history of each patient."""

    @abstractmethod
    async def add(self, entry: WeightEntry) -> None:
        """Append an entry to the owner's history.

        Args:
            entry: Entry to store
        """
        pass

    @abstractmethod
    async def list_recent(self, user_id: str, limit: int = 10) -> List[WeightEntry]:
        """List the most recent entries of a user.

        Args:
            user_id: User identifier
            limit: Maximum number of entries

        Returns:
            List[WeightEntry]: Entries, newest ``measured_at`` first
        """
        pass
