"""SavePatientProfileCommand - create or replace a patient profile."""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Callable, Optional

import structlog

from domain.bariatric.core.exceptions.domain_errors import InvalidArgumentError
from domain.bariatric.core.ports.repository import IPatientProfileRepository
from domain.bariatric.core.value_objects.clinical_phase import ClinicalPhase
from domain.bariatric.core.value_objects.patient_profile import PatientProfile
from domain.bariatric.core.value_objects.sex import Sex
from domain.bariatric.core.value_objects.surgery_type import SurgeryType

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SavePatientProfileCommand:
    """Command to store the clinical fields of a patient profile.

    Attributes:
        user_id: User identifier (from authentication)
        dob: Date of birth
        sex: "male" or "female"
        height_cm: Height in cm
        baseline_weight_kg: Weight at programme start
        current_weight_kg: Latest weight
        surgery_date: Date of the procedure
        surgery_type: "sleeve", "bypass" or "band"
        current_phase: Diet progression phase
    """

    user_id: str
    dob: Optional[date] = None
    sex: Optional[str] = None
    height_cm: Optional[float] = None
    baseline_weight_kg: Optional[float] = None
    current_weight_kg: Optional[float] = None
    surgery_date: Optional[date] = None
    surgery_type: Optional[str] = None
    current_phase: Optional[str] = None


class SavePatientProfileHandler:
    """Handler for SavePatientProfileCommand.

    Validates enumerations (unknown sex, surgery type or phase is an error)
    and rejects a date of birth after today, then builds the PatientProfile
    value object and persists it.
    """

    def __init__(
        self,
        repository: IPatientProfileRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._repository = repository
        self._clock = clock

    async def handle(self, command: SavePatientProfileCommand) -> PatientProfile:
        """
        Handle profile save command.

        Returns:
            PatientProfile: The stored profile

        Raises:
            InvalidArgumentError: If an enumeration or measurement is invalid,
                or the date of birth is after today
        """
        phase: Optional[ClinicalPhase] = None
        if command.current_phase:
            phase = ClinicalPhase.match(command.current_phase)
            if phase is None:
                raise InvalidArgumentError(f"Unknown clinical phase: {command.current_phase!r}")

        if command.dob is not None:
            today = self._clock().date()
            if command.dob > today:
                raise InvalidArgumentError(f"dob {command.dob} is after {today}")

        profile = PatientProfile(
            user_id=command.user_id,
            dob=command.dob,
            sex=Sex.parse(command.sex) if command.sex else None,
            height_cm=command.height_cm,
            baseline_weight_kg=command.baseline_weight_kg,
            current_weight_kg=command.current_weight_kg,
            surgery_date=command.surgery_date,
            surgery_type=SurgeryType.parse(command.surgery_type) if command.surgery_type else None,
            current_phase=phase,
        )

        await self._repository.save(profile)
        logger.info("patient_profile.saved", user_id=profile.user_id)
        return profile
