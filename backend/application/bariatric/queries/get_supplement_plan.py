"""GetSupplementPlanQuery - supplements due today and compliance."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, FrozenSet, Optional, Tuple

from domain.bariatric.calculation import (
    calculate_supplement_schedule,
    days_since_surgery,
    supplement_compliance_rate,
)
from domain.bariatric.core.exceptions.domain_errors import (
    PatientProfileNotFoundError,
)
from domain.bariatric.core.ports.repository import IPatientProfileRepository
from domain.bariatric.core.value_objects import SupplementScheduleItem, SurgeryType


@dataclass(frozen=True)
class SupplementPlan:
    """Supplements due today with the share already taken.

    Attributes:
        surgery_type: Procedure the catalog was built for
        days_post_op: Post-op day used for the filter (0 without surgery date)
        items: Supplements due, in catalog order
        taken: Names of due supplements marked as taken
        compliance_rate: Taken as % of due (0 when nothing is due)
    """

    surgery_type: SurgeryType
    days_post_op: int
    items: Tuple[SupplementScheduleItem, ...]
    taken: FrozenSet[str] = field(default_factory=frozenset)
    compliance_rate: float = 0.0


@dataclass(frozen=True)
class GetSupplementPlanQuery:
    """Query for today's supplement plan.

    Attributes:
        user_id: Patient identifier
        taken_names: Supplements the patient ticked off today
        now: Reference instant (defaults to the handler's clock)
    """

    user_id: str
    taken_names: Tuple[str, ...] = ()
    now: Optional[datetime] = None


class GetSupplementPlanQueryHandler:
    """Handler for GetSupplementPlanQuery.

    Patients without a surgery date get the day-0 schedule (nothing due);
    patients without a surgery type get the sleeve catalog.
    """

    def __init__(
        self,
        repository: IPatientProfileRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._repository = repository
        self._clock = clock

    async def handle(self, query: GetSupplementPlanQuery) -> SupplementPlan:
        """
        Handle supplement plan query.

        Raises:
            PatientProfileNotFoundError: If the user has no profile
        """
        profile = await self._repository.find_by_user_id(query.user_id)
        if profile is None:
            raise PatientProfileNotFoundError(query.user_id)

        now = query.now or self._clock()
        days_post_op = (
            days_since_surgery(profile.surgery_date, now=now) if profile.surgery_date else 0
        )
        surgery_type = profile.surgery_type or SurgeryType.SLEEVE
        items = calculate_supplement_schedule(surgery_type, days_post_op)

        due_names = {item.name for item in items}
        taken = frozenset(name for name in query.taken_names if name in due_names)

        return SupplementPlan(
            surgery_type=surgery_type,
            days_post_op=days_post_op,
            items=tuple(items),
            taken=taken,
            compliance_rate=supplement_compliance_rate(taken, items),
        )
