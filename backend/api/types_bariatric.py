"""GraphQL types for the bariatric clinical calculators.

Output types mirror the domain value objects; enums mirror the domain
enumerations. Diet phase arguments stay plain strings because the target
calculators have a documented fallback for unrecognized phases.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import List, Optional

import strawberry

__all__ = [
    # Enums
    "SexEnum",
    "ActivityLevelEnum",
    "ClinicalPhaseEnum",
    "SurgeryTypeEnum",
    "ExerciseTypeEnum",
    "ExerciseIntensityEnum",
    # Output types
    "BMIType",
    "IdealBodyWeightType",
    "BMRType",
    "TDEEType",
    "ProteinTargetType",
    "FluidTargetType",
    "PortionGuidelineType",
    "SupplementType",
    "SupplementPlanType",
    "PatientProfileType",
    "ClinicalSnapshotType",
    "WeightEntryType",
    "LogWeightResultType",
    # Input types
    "PatientProfileInput",
    "LogWeightInput",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class SexEnum(str, Enum):
    """Biological sex for the Devine and Mifflin-St Jeor formulas."""

    MALE = "male"
    FEMALE = "female"


@strawberry.enum
class ActivityLevelEnum(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation."""

    SEDENTARY = "sedentary"  # 1.2
    LIGHT = "light"  # 1.375
    MODERATE = "moderate"  # 1.55
    ACTIVE = "active"  # 1.725
    VERY_ACTIVE = "very_active"  # 1.9


@strawberry.enum
class ClinicalPhaseEnum(str, Enum):
    """Post-operative diet progression phase."""

    PRE_OP = "pre_op"
    CLEAR_LIQUID = "clear_liquid"
    FULL_LIQUID = "full_liquid"
    PUREED = "pureed"
    SOFT = "soft"
    REGULAR = "regular"
    MAINTENANCE = "maintenance"


@strawberry.enum
class SurgeryTypeEnum(str, Enum):
    """Bariatric procedure."""

    SLEEVE = "sleeve"
    BYPASS = "bypass"
    BAND = "band"


@strawberry.enum
class ExerciseTypeEnum(str, Enum):
    """Loggable exercise types."""

    WALKING = "walking"
    RUNNING = "running"
    CYCLING = "cycling"
    SWIMMING = "swimming"
    YOGA = "yoga"
    STRENGTH_TRAINING = "strength_training"
    DANCING = "dancing"
    STRETCHING = "stretching"
    OTHER = "other"


@strawberry.enum
class ExerciseIntensityEnum(str, Enum):
    """Perceived exertion of an exercise session."""

    LIGHT = "light"
    MODERATE = "moderate"
    VIGOROUS = "vigorous"


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class BMIType:
    """Body Mass Index with weight-status classification."""

    bmi: float  # kg/m², one decimal
    category: str
    health_risk: str


@strawberry.type
class IdealBodyWeightType:
    """Ideal body weight (Devine) and optional adjusted body weight."""

    ibw_kg: float
    formula: str
    adjusted_body_weight_kg: Optional[float] = None


@strawberry.type
class BMRType:
    """Basal Metabolic Rate - calories burned at rest."""

    bmr: int  # kcal/day
    formula: str


@strawberry.type
class TDEEType:
    """Total Daily Energy Expenditure - calories burned with activity."""

    tdee: int  # kcal/day
    activity_level: ActivityLevelEnum
    activity_factor: float


@strawberry.type
class ProteinTargetType:
    """Daily protein goal for a phase."""

    daily_grams: int
    per_meal_grams: int
    method: str
    rationale: str


@strawberry.type
class FluidTargetType:
    """Daily fluid goal for a phase."""

    daily_ml: int
    per_hour_ml: int
    method: str
    restrictions: List[str]


@strawberry.type
class PortionGuidelineType:
    """Per-meal portion rules for a phase."""

    max_volume_ml: int
    recommended_protein_g: int
    eating_duration: str
    bite_size: str
    chew_count: int


@strawberry.type
class SupplementType:
    """A supplement due after surgery."""

    name: str
    dose: str
    frequency: str
    timing: List[str]
    start_day: int
    notes: str


@strawberry.type
class SupplementPlanType:
    """Supplements due today and how many were taken."""

    surgery_type: SurgeryTypeEnum
    days_post_op: int
    items: List[SupplementType]
    taken: List[str]
    compliance_rate: float


@strawberry.type
class PatientProfileType:
    """Clinical fields of a patient profile."""

    user_id: str
    dob: Optional[date] = None
    sex: Optional[SexEnum] = None
    height_cm: Optional[float] = None
    baseline_weight_kg: Optional[float] = None
    current_weight_kg: Optional[float] = None
    surgery_date: Optional[date] = None
    surgery_type: Optional[SurgeryTypeEnum] = None
    current_phase: Optional[ClinicalPhaseEnum] = None


@strawberry.type
class ClinicalSnapshotType:
    """Dashboard view of a patient's clinical targets for today."""

    user_id: str
    phase: ClinicalPhaseEnum
    days_post_op: Optional[int]
    age: Optional[int]
    bmi: Optional[BMIType]
    ideal_body_weight: IdealBodyWeightType
    protein_target: ProteinTargetType
    fluid_target: FluidTargetType
    portion_guideline: PortionGuidelineType
    supplements: List[SupplementType]
    weight_lost_kg: float
    weight_lost_percent: float
    protein_consumed_g: float
    fluid_consumed_ml: float
    protein_percent: float
    fluid_percent: float


@strawberry.type
class WeightEntryType:
    """A logged weight measurement."""

    user_id: str
    weight_kg: float
    measured_at: datetime
    bmi: Optional[BMIType]
    source: str
    notes: Optional[str] = None


@strawberry.type
class LogWeightResultType:
    """Outcome of logging a weight."""

    entry: WeightEntryType
    profile: PatientProfileType
    profile_updated: bool


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class PatientProfileInput:
    """Input for creating or replacing a patient profile."""

    user_id: str
    dob: Optional[date] = None
    sex: Optional[SexEnum] = None
    height_cm: Optional[float] = None
    baseline_weight_kg: Optional[float] = None
    current_weight_kg: Optional[float] = None
    surgery_date: Optional[date] = None
    surgery_type: Optional[SurgeryTypeEnum] = None
    current_phase: Optional[ClinicalPhaseEnum] = None


@strawberry.input
class LogWeightInput:
    """Input for logging a weight measurement.

    ``measuredAt`` defaults to now; only entries dated today replace the
    profile's current weight.
    """

    user_id: str
    weight_kg: float
    measured_at: Optional[datetime] = None
    notes: Optional[str] = None
