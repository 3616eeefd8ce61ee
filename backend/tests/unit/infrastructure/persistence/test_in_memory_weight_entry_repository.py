"""Unit tests for InMemoryWeightEntryRepository."""

from datetime import datetime, timezone

import pytest

from domain.bariatric.core.ports.weight_entry_repository import IWeightEntryRepository
from domain.bariatric.core.value_objects import WeightEntry
from infrastructure.persistence.in_memory.weight_entry_repository import (
    InMemoryWeightEntryRepository,
)


def entry(user_id: str, day: int, weight_kg: float = 100.0) -> WeightEntry:
    return WeightEntry(
        user_id=user_id,
        weight_kg=weight_kg,
        measured_at=datetime(2024, 3, day, 7, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def repository() -> InMemoryWeightEntryRepository:
    """Fixture providing clean InMemoryWeightEntryRepository."""
    return InMemoryWeightEntryRepository()


class TestInMemoryWeightEntryRepository:
    """Test weight history storage."""

    def test_implements_port(self, repository):
        assert isinstance(repository, IWeightEntryRepository)

    @pytest.mark.asyncio
    async def test_list_recent_sorts_by_measured_at(self, repository):
        """Test back-dated entries land in date order, not insertion order."""
        await repository.add(entry("user123", 10))
        await repository.add(entry("user123", 12))
        await repository.add(entry("user123", 5))

        days = [item.measured_at.day for item in await repository.list_recent("user123")]

        assert days == [12, 10, 5]

    @pytest.mark.asyncio
    async def test_list_recent_limit(self, repository):
        for day in range(1, 6):
            await repository.add(entry("user123", day))

        recent = await repository.list_recent("user123", limit=2)

        assert [item.measured_at.day for item in recent] == [5, 4]

    @pytest.mark.asyncio
    async def test_histories_are_per_user(self, repository):
        await repository.add(entry("user123", 1))
        await repository.add(entry("user456", 2))

        assert len(await repository.list_recent("user123")) == 1
        assert await repository.list_recent("nobody") == []

    @pytest.mark.asyncio
    async def test_clear_and_count(self, repository):
        await repository.add(entry("user123", 1))
        await repository.add(entry("user456", 2))
        assert repository.count() == 2

        repository.clear()

        assert repository.count() == 0
