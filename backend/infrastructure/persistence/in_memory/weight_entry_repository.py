"""In-memory implementation of IWeightEntryRepository."""

from typing import List

import structlog

from domain.bariatric.core.ports.weight_entry_repository import IWeightEntryRepository
from domain.bariatric.core.value_objects.weight_entry import WeightEntry

logger = structlog.get_logger(__name__)


class InMemoryWeightEntryRepository(IWeightEntryRepository):
    """
    In-memory weight history keyed by user ID.

    Suitable for testing and development. Data is lost when the
    application stops.
    """

    def __init__(self) -> None:
        self._entries: dict[str, List[WeightEntry]] = {}

    async def add(self, entry: WeightEntry) -> None:
        self._entries.setdefault(entry.user_id, []).append(entry)
        logger.debug(
            "weight_entry.added",
            user_id=entry.user_id,
            measured_at=entry.measured_at.isoformat(),
        )

    async def list_recent(self, user_id: str, limit: int = 10) -> List[WeightEntry]:
        """Newest first; entries logged with equal timestamps keep insertion order."""
        entries = sorted(
            self._entries.get(user_id, []),
            key=lambda entry: entry.measured_at,
            reverse=True,
        )
        return entries[:limit]

    def clear(self) -> None:
        """Clear all entries (useful for testing)."""
        self._entries.clear()

    def count(self) -> int:
        """Total number of stored entries (useful for testing)."""
        return sum(len(entries) for entries in self._entries.values())
