"""Map bariatric domain value objects to GraphQL types."""

from application.bariatric.commands.log_weight import LogWeightResult
from application.bariatric.queries.get_clinical_snapshot import ClinicalSnapshot
from application.bariatric.queries.get_supplement_plan import SupplementPlan
from domain.bariatric.core.value_objects import (
    BMIResult,
    BMRResult,
    FluidTarget,
    IBWResult,
    PatientProfile,
    PortionGuideline,
    ProteinTarget,
    SupplementScheduleItem,
    TDEEResult,
    WeightEntry,
)
from api.types_bariatric import (
    ActivityLevelEnum,
    BMIType,
    BMRType,
    ClinicalPhaseEnum,
    ClinicalSnapshotType,
    FluidTargetType,
    IdealBodyWeightType,
    LogWeightResultType,
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


def map_bmi(result: BMIResult) -> BMIType:
    return BMIType(bmi=result.bmi, category=result.category, health_risk=result.health_risk)


def map_ibw(result: IBWResult) -> IdealBodyWeightType:
    return IdealBodyWeightType(
        ibw_kg=result.ibw_kg,
        formula=result.formula,
        adjusted_body_weight_kg=result.adjusted_body_weight_kg,
    )


def map_bmr(result: BMRResult) -> BMRType:
    return BMRType(bmr=result.bmr, formula=result.formula)


def map_tdee(result: TDEEResult) -> TDEEType:
    return TDEEType(
        tdee=result.tdee,
        activity_level=ActivityLevelEnum(result.activity_level.value),
        activity_factor=result.activity_factor,
    )


def map_protein_target(result: ProteinTarget) -> ProteinTargetType:
    return ProteinTargetType(
        daily_grams=result.daily_grams,
        per_meal_grams=result.per_meal_grams,
        method=result.method,
        rationale=result.rationale,
    )


def map_fluid_target(result: FluidTarget) -> FluidTargetType:
    return FluidTargetType(
        daily_ml=result.daily_ml,
        per_hour_ml=result.per_hour_ml,
        method=result.method,
        restrictions=list(result.restrictions),
    )


def map_portion_guideline(result: PortionGuideline) -> PortionGuidelineType:
    return PortionGuidelineType(
        max_volume_ml=result.max_volume_ml,
        recommended_protein_g=result.recommended_protein_g,
        eating_duration=result.eating_duration,
        bite_size=result.bite_size,
        chew_count=result.chew_count,
    )


def map_supplement(item: SupplementScheduleItem) -> SupplementType:
    return SupplementType(
        name=item.name,
        dose=item.dose,
        frequency=item.frequency,
        timing=list(item.timing),
        start_day=item.start_day,
        notes=item.notes,
    )


def map_supplement_plan(plan: SupplementPlan) -> SupplementPlanType:
    return SupplementPlanType(
        surgery_type=SurgeryTypeEnum(plan.surgery_type.value),
        days_post_op=plan.days_post_op,
        items=[map_supplement(item) for item in plan.items],
        # Keep catalog order
        taken=[item.name for item in plan.items if item.name in plan.taken],
        compliance_rate=plan.compliance_rate,
    )


def map_patient_profile(profile: PatientProfile) -> PatientProfileType:
    return PatientProfileType(
        user_id=profile.user_id,
        dob=profile.dob,
        sex=SexEnum(profile.sex.value) if profile.sex else None,
        height_cm=profile.height_cm,
        baseline_weight_kg=profile.baseline_weight_kg,
        current_weight_kg=profile.current_weight_kg,
        surgery_date=profile.surgery_date,
        surgery_type=SurgeryTypeEnum(profile.surgery_type.value) if profile.surgery_type else None,
        current_phase=(
            ClinicalPhaseEnum(profile.current_phase.value) if profile.current_phase else None
        ),
    )


def map_clinical_snapshot(snapshot: ClinicalSnapshot) -> ClinicalSnapshotType:
    return ClinicalSnapshotType(
        user_id=snapshot.user_id,
        phase=ClinicalPhaseEnum(snapshot.phase.value),
        days_post_op=snapshot.days_post_op,
        age=snapshot.age,
        bmi=map_bmi(snapshot.bmi) if snapshot.bmi else None,
        ideal_body_weight=map_ibw(snapshot.ideal_body_weight),
        protein_target=map_protein_target(snapshot.protein_target),
        fluid_target=map_fluid_target(snapshot.fluid_target),
        portion_guideline=map_portion_guideline(snapshot.portion_guideline),
        supplements=[map_supplement(item) for item in snapshot.supplements],
        weight_lost_kg=snapshot.weight_lost_kg,
        weight_lost_percent=snapshot.weight_lost_percent,
        protein_consumed_g=snapshot.protein_consumed_g,
        fluid_consumed_ml=snapshot.fluid_consumed_ml,
        protein_percent=snapshot.protein_percent,
        fluid_percent=snapshot.fluid_percent,
    )


def map_weight_entry(entry: WeightEntry) -> WeightEntryType:
    return WeightEntryType(
        user_id=entry.user_id,
        weight_kg=entry.weight_kg,
        measured_at=entry.measured_at,
        bmi=map_bmi(entry.bmi) if entry.bmi else None,
        source=entry.source,
        notes=entry.notes,
    )


def map_log_weight_result(result: LogWeightResult) -> LogWeightResultType:
    return LogWeightResultType(
        entry=map_weight_entry(result.entry),
        profile=map_patient_profile(result.profile),
        profile_updated=result.profile_updated,
    )
