"""GetClinicalSnapshotQuery - today's clinical targets for a patient."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Callable, Optional, Tuple

import structlog

from domain.bariatric.calculation import (
    calculate_age,
    calculate_bmi,
    calculate_fluid_target,
    calculate_ideal_body_weight,
    calculate_portion_guideline,
    calculate_protein_target,
    calculate_supplement_schedule,
    days_since_surgery,
    percent_of_target,
    weight_lost_kg,
    weight_lost_percent,
)
from domain.bariatric.core.exceptions.domain_errors import (
    PatientProfileNotFoundError,
)
from domain.bariatric.core.ports.repository import IPatientProfileRepository
from domain.bariatric.core.value_objects import (
    BMIResult,
    ClinicalPhase,
    FluidTarget,
    IBWResult,
    PortionGuideline,
    ProteinTarget,
    Sex,
    SupplementScheduleItem,
    SurgeryType,
)

logger = structlog.get_logger(__name__)

# Values assumed for fields a patient has not filled in yet
DEFAULT_HEIGHT_CM = 170.0
DEFAULT_WEIGHT_KG = 80.0
DEFAULT_SEX = Sex.FEMALE
DEFAULT_SURGERY_TYPE = SurgeryType.SLEEVE


@dataclass(frozen=True)
class ClinicalSnapshot:
    """Everything the dashboard shows for one patient on one day.

    Attributes:
        user_id: Patient identifier
        phase: Clinical phase the targets were computed for
        days_post_op: Days since surgery, None before a date is recorded
        age: Age in years, None without a usable date of birth
        bmi: BMI, None unless both weight and height are recorded
        ideal_body_weight: Devine IBW (with adjusted weight if applicable)
        protein_target: Daily protein goal
        fluid_target: Daily fluid goal
        portion_guideline: Per-meal portion rules
        supplements: Supplements due today
        weight_lost_kg: Baseline minus current weight
        weight_lost_percent: Weight lost as % of baseline
        protein_consumed_g: Protein logged today
        fluid_consumed_ml: Fluid logged today
        protein_percent: Protein logged as % of target
        fluid_percent: Fluid logged as % of target
    """

    user_id: str
    phase: ClinicalPhase
    days_post_op: Optional[int]
    age: Optional[int]
    bmi: Optional[BMIResult]
    ideal_body_weight: IBWResult
    protein_target: ProteinTarget
    fluid_target: FluidTarget
    portion_guideline: PortionGuideline
    supplements: Tuple[SupplementScheduleItem, ...] = field(default_factory=tuple)
    weight_lost_kg: float = 0.0
    weight_lost_percent: float = 0.0
    protein_consumed_g: float = 0.0
    fluid_consumed_ml: float = 0.0
    protein_percent: float = 0.0
    fluid_percent: float = 0.0


@dataclass(frozen=True)
class GetClinicalSnapshotQuery:
    """Query for a patient's clinical snapshot.

    Attributes:
        user_id: Patient identifier
        now: Reference instant (defaults to the handler's clock)
        protein_consumed_g: Protein logged today
        fluid_consumed_ml: Fluid logged today
        meals_per_day: Meals the protein goal is split across
    """

    user_id: str
    now: Optional[datetime] = None
    protein_consumed_g: float = 0.0
    fluid_consumed_ml: float = 0.0
    meals_per_day: Optional[int] = None


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GetClinicalSnapshotQueryHandler:
    """Handler for GetClinicalSnapshotQuery.

    Loads the patient profile, fills in defaults for missing fields and
    runs the calculators for the patient's current phase.
    """

    def __init__(
        self,
        repository: IPatientProfileRepository,
        default_phase: ClinicalPhase = ClinicalPhase.REGULAR,
        default_meals_per_day: int = 5,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._repository = repository
        self._default_phase = default_phase
        self._default_meals_per_day = default_meals_per_day
        self._clock = clock

    async def handle(self, query: GetClinicalSnapshotQuery) -> ClinicalSnapshot:
        """
        Handle snapshot query.

        Raises:
            PatientProfileNotFoundError: If the user has no profile
            InvalidArgumentError: If a calculator rejects the inputs
        """
        profile = await self._repository.find_by_user_id(query.user_id)
        if profile is None:
            raise PatientProfileNotFoundError(query.user_id)

        now = query.now or self._clock()
        today: date = now.date()

        phase = profile.current_phase or self._default_phase
        height_cm = profile.height_cm or DEFAULT_HEIGHT_CM
        weight_kg = profile.current_weight_kg or DEFAULT_WEIGHT_KG
        sex = profile.sex or DEFAULT_SEX
        meals_per_day = (
            query.meals_per_day
            if query.meals_per_day is not None
            else self._default_meals_per_day
        )

        days_post_op = (
            days_since_surgery(profile.surgery_date, now=now)
            if profile.surgery_date is not None
            else None
        )
        age: Optional[int] = None
        if profile.dob is not None:
            if profile.dob > today:
                logger.warning(
                    "clinical_snapshot.dob_in_future",
                    user_id=query.user_id,
                    dob=profile.dob.isoformat(),
                )
            else:
                age = calculate_age(profile.dob, today=today)

        bmi = None
        if profile.current_weight_kg and profile.height_cm:
            bmi = calculate_bmi(profile.current_weight_kg, profile.height_cm)

        ibw = calculate_ideal_body_weight(height_cm, sex, current_weight_kg=weight_kg)
        protein = calculate_protein_target(weight_kg, ibw.ibw_kg, phase, meals_per_day)
        fluid = calculate_fluid_target(weight_kg, phase, days_post_op)
        portion = calculate_portion_guideline(phase, days_post_op)
        supplements = calculate_supplement_schedule(
            profile.surgery_type or DEFAULT_SURGERY_TYPE,
            days_post_op or 0,
        )

        logger.debug(
            "clinical_snapshot.computed",
            user_id=query.user_id,
            phase=phase.value,
            days_post_op=days_post_op,
            protein_target_g=protein.daily_grams,
            fluid_target_ml=fluid.daily_ml,
        )

        return ClinicalSnapshot(
            user_id=query.user_id,
            phase=phase,
            days_post_op=days_post_op,
            age=age,
            bmi=bmi,
            ideal_body_weight=ibw,
            protein_target=protein,
            fluid_target=fluid,
            portion_guideline=portion,
            supplements=tuple(supplements),
            weight_lost_kg=weight_lost_kg(profile.baseline_weight_kg, profile.current_weight_kg),
            weight_lost_percent=weight_lost_percent(
                profile.baseline_weight_kg, profile.current_weight_kg
            ),
            protein_consumed_g=query.protein_consumed_g,
            fluid_consumed_ml=query.fluid_consumed_ml,
            protein_percent=percent_of_target(query.protein_consumed_g, protein.daily_grams),
            fluid_percent=percent_of_target(query.fluid_consumed_ml, fluid.daily_ml),
        )
