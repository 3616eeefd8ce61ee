"""LogWeightCommand - record a weight measurement."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

import structlog

from domain.bariatric.calculation import calculate_bmi
from domain.bariatric.calculation.numeric import require_positive
from domain.bariatric.core.exceptions.domain_errors import PatientProfileNotFoundError
from domain.bariatric.core.ports.repository import IPatientProfileRepository
from domain.bariatric.core.ports.weight_entry_repository import IWeightEntryRepository
from domain.bariatric.core.value_objects.patient_profile import PatientProfile
from domain.bariatric.core.value_objects.weight_entry import WeightEntry

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LogWeightCommand:
    """Command to log a weight measurement.

    Attributes:
        user_id: Patient identifier
        weight_kg: Measured weight in kg
        measured_at: When it was measured (defaults to now; naive is UTC)
        notes: Optional notes about the measurement
    """

    user_id: str
    weight_kg: float
    measured_at: Optional[datetime] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class LogWeightResult:
    """Result of weight logging.

    Attributes:
        entry: Newly stored weight entry
        profile: Patient profile after the command
        profile_updated: True when the entry became the current weight
    """

    entry: WeightEntry
    profile: PatientProfile
    profile_updated: bool


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


class LogWeightHandler:
    """Handler for LogWeightCommand.

    Logs weight by:
    1. Loading the patient profile
    2. Storing the entry, with its BMI when the height is known
    3. Updating the profile's current weight if the entry is dated today
    """

    def __init__(
        self,
        profile_repository: IPatientProfileRepository,
        weight_entry_repository: IWeightEntryRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._profile_repository = profile_repository
        self._weight_entry_repository = weight_entry_repository
        self._clock = clock

    async def handle(self, command: LogWeightCommand) -> LogWeightResult:
        """
        Handle weight logging command.

        Returns:
            LogWeightResult with the stored entry and resulting profile

        Raises:
            PatientProfileNotFoundError: If the user has no profile
            InvalidArgumentError: If the weight is not positive
        """
        weight_kg = require_positive("weight_kg", command.weight_kg)

        profile = await self._profile_repository.find_by_user_id(command.user_id)
        if profile is None:
            raise PatientProfileNotFoundError(command.user_id)

        now = _as_utc(self._clock())
        measured_at = _as_utc(command.measured_at) if command.measured_at else now

        bmi = calculate_bmi(weight_kg, profile.height_cm) if profile.height_cm else None

        entry = WeightEntry(
            user_id=command.user_id,
            weight_kg=weight_kg,
            measured_at=measured_at,
            bmi=bmi,
            source="manual",
            notes=command.notes or None,
        )
        await self._weight_entry_repository.add(entry)

        # Back-dated entries only extend the history
        profile_updated = measured_at.date() == now.date()
        if profile_updated:
            profile = profile.with_weight(weight_kg)
            await self._profile_repository.save(profile)

        logger.info(
            "weight.logged",
            user_id=command.user_id,
            measured_at=measured_at.isoformat(),
            profile_updated=profile_updated,
        )

        return LogWeightResult(entry=entry, profile=profile, profile_updated=profile_updated)
