"""Integration test fixtures.

This conftest loads the full app for HTTP tests. Unit tests in tests/unit/
only touch the packages they exercise.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, AsyncIterator, Iterator, cast

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load .env.test if present (overrides defaults)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)


@pytest.fixture(autouse=True)
def _reset_repositories() -> Iterator[None]:
    """Give each test fresh repository singletons."""
    from infrastructure.persistence.patient_profile_factory import (
        reset_patient_profile_repository,
    )
    from infrastructure.persistence.weight_entry_factory import (
        reset_weight_entry_repository,
    )

    reset_patient_profile_repository()
    reset_weight_entry_repository()
    yield
    reset_patient_profile_repository()
    reset_weight_entry_repository()


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client for GraphQL/REST tests.

    Uses httpx.AsyncClient with an explicit ASGITransport and a dummy
    base_url so relative requests resolve.
    """
    from app import app

    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as ac:
        yield ac
