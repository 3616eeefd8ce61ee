"""GraphQL context factory for dependency injection.

Resolvers access dependencies using ``info.context.get("name")``.
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from domain.bariatric.core.ports.repository import IPatientProfileRepository
from domain.bariatric.core.ports.weight_entry_repository import IWeightEntryRepository
from domain.bariatric.core.value_objects import ClinicalPhase


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Attributes:
        profile_repository: Repository for patient profile persistence
        weight_entry_repository: Repository for weight history
        default_phase: Phase assumed for profiles without one
        default_meals_per_day: Meals the protein goal is split across
        request: FastAPI request object
    """

    def __init__(
        self,
        profile_repository: IPatientProfileRepository,
        weight_entry_repository: Optional[IWeightEntryRepository] = None,
        default_phase: ClinicalPhase = ClinicalPhase.REGULAR,
        default_meals_per_day: int = 5,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.profile_repository = profile_repository
        self.weight_entry_repository = weight_entry_repository
        self.default_phase = default_phase
        self.default_meals_per_day = default_meals_per_day
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name (None if not found).

        Example:
            >>> repository = info.context.get("profile_repository")
        """
        return getattr(self, key, None)


def create_context(
    profile_repository: IPatientProfileRepository,
    weight_entry_repository: Optional[IWeightEntryRepository] = None,
    default_phase: ClinicalPhase = ClinicalPhase.REGULAR,
    default_meals_per_day: int = 5,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies.

    Example:
        >>> from api.context import create_context
        >>> context = create_context(
        ...     profile_repository=InMemoryPatientProfileRepository(),
        ...     weight_entry_repository=InMemoryWeightEntryRepository(),
        ... )
    """
    return GraphQLContext(
        profile_repository=profile_repository,
        weight_entry_repository=weight_entry_repository,
        default_phase=default_phase,
        default_meals_per_day=default_meals_per_day,
        request=request,
    )
