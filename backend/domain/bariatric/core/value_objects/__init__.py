"""Value objects for the bariatric domain."""

from .activity_level import ActivityLevel
from .anthropometrics import BMIResult, IBWResult
from .clinical_phase import ClinicalPhase
from .energy import BMRResult, TDEEResult
from .exercise import ExerciseIntensity, ExerciseType
from .nutrition_targets import FluidTarget, PortionGuideline, ProteinTarget
from .patient_profile import PatientProfile
from .sex import Sex
from .supplement import SupplementScheduleItem
from .surgery_type import SurgeryType
from .weight_entry import WeightEntry

__all__ = [
    "Sex",
    "ActivityLevel",
    "ClinicalPhase",
    "SurgeryType",
    "ExerciseType",
    "ExerciseIntensity",
    "BMIResult",
    "IBWResult",
    "BMRResult",
    "TDEEResult",
    "ProteinTarget",
    "FluidTarget",
    "PortionGuideline",
    "SupplementScheduleItem",
    "PatientProfile",
    "WeightEntry",
]
