"""Query resolvers for the bariatric domain.

Stateless calculators take their inputs as arguments; patient-bound
queries (clinicalSnapshot, supplementPlan, patientProfile, weightHistory)
read their repositories from the GraphQL context.
"""

from typing import List, Optional

import strawberry

from application.bariatric.queries import (
    GetClinicalSnapshotQuery,
    GetClinicalSnapshotQueryHandler,
    GetSupplementPlanQuery,
    GetSupplementPlanQueryHandler,
    GetWeightHistoryQuery,
    GetWeightHistoryQueryHandler,
)
from domain.bariatric.calculation import (
    calculate_bmi,
    calculate_bmr,
    calculate_fluid_target,
    calculate_ideal_body_weight,
    calculate_portion_guideline,
    calculate_protein_target,
    calculate_supplement_schedule,
    calculate_tdee,
    estimate_exercise_calories,
)
from api.resolvers.bariatric.mappers import (
    map_bmi,
    map_bmr,
    map_clinical_snapshot,
    map_fluid_target,
    map_ibw,
    map_patient_profile,
    map_portion_guideline,
    map_protein_target,
    map_supplement,
    map_supplement_plan,
    map_tdee,
    map_weight_entry,
)
from api.types_bariatric import (
    ActivityLevelEnum,
    BMIType,
    BMRType,
    ClinicalSnapshotType,
    ExerciseIntensityEnum,
    ExerciseTypeEnum,
    FluidTargetType,
    IdealBodyWeightType,
    PatientProfileType,
    PortionGuidelineType,
    ProteinTargetType,
    SexEnum,
    SupplementPlanType,
    SupplementType,
    SurgeryTypeEnum,
    TDEEType,
    WeightEntryType,
)


def _profile_repository(info: strawberry.types.Info):
    repository = info.context.get("profile_repository")
    if not repository:
        raise Exception("Missing profile_repository in GraphQL context")
    return repository


@strawberry.type
class BariatricQueries:
    """GraphQL queries for the bariatric domain."""

    @strawberry.field
    def bmi(self, weight_kg: float, height_cm: float) -> BMIType:
        """Body Mass Index with weight-status category.

        Example:
            query {
              bariatric {
                bmi(weightKg: 120, heightCm: 170) { bmi category healthRisk }
              }
            }
        """
        return map_bmi(calculate_bmi(weight_kg, height_cm))

    @strawberry.field
    def ideal_body_weight(
        self,
        height_cm: float,
        sex: SexEnum,
        current_weight_kg: Optional[float] = None,
    ) -> IdealBodyWeightType:
        """Devine ideal body weight, with adjusted weight for obese patients."""
        result = calculate_ideal_body_weight(
            height_cm, sex.value, current_weight_kg=current_weight_kg
        )
        return map_ibw(result)

    @strawberry.field
    def bmr(self, weight_kg: float, height_cm: float, age: int, sex: SexEnum) -> BMRType:
        """Mifflin-St Jeor basal metabolic rate."""
        return map_bmr(calculate_bmr(weight_kg, height_cm, age, sex.value))

    @strawberry.field
    def tdee(self, bmr: int, activity_level: ActivityLevelEnum) -> TDEEType:
        """Total daily energy expenditure from BMR and activity level."""
        return map_tdee(calculate_tdee(bmr, activity_level.value))

    @strawberry.field
    def protein_target(
        self,
        current_weight_kg: float,
        ideal_body_weight_kg: float,
        phase: str,
        meals_per_day: int = 5,
    ) -> ProteinTargetType:
        """Daily protein goal.

        ``phase`` is free text: an unrecognized phase yields the default
        80 g target instead of an error.
        """
        result = calculate_protein_target(
            current_weight_kg, ideal_body_weight_kg, phase, meals_per_day
        )
        return map_protein_target(result)

    @strawberry.field
    def fluid_target(
        self,
        current_weight_kg: float,
        phase: str,
        days_since_surgery: Optional[int] = None,
    ) -> FluidTargetType:
        """Daily fluid goal (an unrecognized phase yields 1800 ml)."""
        return map_fluid_target(
            calculate_fluid_target(current_weight_kg, phase, days_since_surgery)
        )

    @strawberry.field
    def portion_guideline(
        self,
        phase: str,
        days_since_surgery: Optional[int] = None,
    ) -> PortionGuidelineType:
        """Per-meal portion rules for a phase."""
        return map_portion_guideline(calculate_portion_guideline(phase, days_since_surgery))

    @strawberry.field
    def supplement_schedule(
        self,
        surgery_type: SurgeryTypeEnum,
        days_since_surgery: int,
    ) -> List[SupplementType]:
        """Supplements due on a post-op day, in catalog order.

        Example:
            query {
              bariatric {
                supplementSchedule(surgeryType: BYPASS, daysSinceSurgery: 10) {
                  name dose startDay
                }
              }
            }
        """
        items = calculate_supplement_schedule(surgery_type.value, days_since_surgery)
        return [map_supplement(item) for item in items]

    @strawberry.field
    def exercise_calories(
        self,
        exercise_type: ExerciseTypeEnum,
        duration_min: float,
        intensity: ExerciseIntensityEnum = ExerciseIntensityEnum.MODERATE,
    ) -> int:
        """Estimated kcal burned by an exercise session."""
        return estimate_exercise_calories(exercise_type.value, duration_min, intensity.value)

    @strawberry.field
    async def patient_profile(
        self,
        info: strawberry.types.Info,
        user_id: str,
    ) -> Optional[PatientProfileType]:
        """Stored patient profile, or null if the user has none."""
        profile = await _profile_repository(info).find_by_user_id(user_id)
        if profile:
            return map_patient_profile(profile)
        return None

    @strawberry.field
    async def clinical_snapshot(
        self,
        info: strawberry.types.Info,
        user_id: str,
        protein_consumed_g: float = 0.0,
        fluid_consumed_ml: float = 0.0,
        meals_per_day: Optional[int] = None,
    ) -> ClinicalSnapshotType:
        """Today's clinical targets and progress for a patient.

        Raises:
            PatientProfileNotFoundError: If the user has no profile

        Example:
            query {
              bariatric {
                clinicalSnapshot(userId: "user123", proteinConsumedG: 30) {
                  phase
                  daysPostOp
                  proteinTarget { dailyGrams }
                  proteinPercent
                }
              }
            }
        """
        handler = GetClinicalSnapshotQueryHandler(
            repository=_profile_repository(info),
            default_phase=info.context.get("default_phase"),
            default_meals_per_day=info.context.get("default_meals_per_day"),
        )
        snapshot = await handler.handle(
            GetClinicalSnapshotQuery(
                user_id=user_id,
                protein_consumed_g=protein_consumed_g,
                fluid_consumed_ml=fluid_consumed_ml,
                meals_per_day=meals_per_day,
            )
        )
        return map_clinical_snapshot(snapshot)

    @strawberry.field
    async def supplement_plan(
        self,
        info: strawberry.types.Info,
        user_id: str,
        taken: Optional[List[str]] = None,
    ) -> SupplementPlanType:
        """Supplements due today with compliance for the ones taken."""
        handler = GetSupplementPlanQueryHandler(repository=_profile_repository(info))
        plan = await handler.handle(
            GetSupplementPlanQuery(user_id=user_id, taken_names=tuple(taken or ()))
        )
        return map_supplement_plan(plan)

    @strawberry.field
    async def weight_history(
        self,
        info: strawberry.types.Info,
        user_id: str,
        limit: int = 10,
    ) -> List[WeightEntryType]:
        """Most recent weight entries, newest first."""
        repository = info.context.get("weight_entry_repository")
        if not repository:
            raise Exception("Missing weight_entry_repository in GraphQL context")

        handler = GetWeightHistoryQueryHandler(repository=repository)
        entries = await handler.handle(GetWeightHistoryQuery(user_id=user_id, limit=limit))
        return [map_weight_entry(entry) for entry in entries]
