"""GetWeightHistoryQuery - most recent weight entries of a patient."""

from dataclasses import dataclass
from typing import List

from domain.bariatric.core.exceptions.domain_errors import InvalidArgumentError
from domain.bariatric.core.ports.weight_entry_repository import IWeightEntryRepository
from domain.bariatric.core.value_objects.weight_entry import WeightEntry

DEFAULT_HISTORY_LIMIT = 10


@dataclass(frozen=True)
class GetWeightHistoryQuery:
    """Query for a patient's recent weight entries.

    Attributes:
        user_id: Patient identifier
        limit: Maximum number of entries returned
    """

    user_id: str
    limit: int = DEFAULT_HISTORY_LIMIT


class GetWeightHistoryQueryHandler:
    """Handler for GetWeightHistoryQuery (newest entries first)."""

    def __init__(self, repository: IWeightEntryRepository):
        self._repository = repository

    async def handle(self, query: GetWeightHistoryQuery) -> List[WeightEntry]:
        if query.limit < 1:
            raise InvalidArgumentError(f"limit must be at least 1, got {query.limit}")
        return await self._repository.list_recent(query.user_id, limit=query.limit)
