"""PatientProfile value object - clinical fields of a patient record."""

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from .clinical_phase import ClinicalPhase
from .sex import Sex
from .surgery_type import SurgeryType


@dataclass(frozen=True)
class PatientProfile:
    """Clinical subset of the patient's stored profile.

    Every field but ``user_id`` is optional: patients fill the profile in
    during onboarding and calculators apply defaults for what is missing.

    Attributes:
        user_id: Owner of the profile
        dob: Date of birth
        sex: Biological sex
        height_cm: Height in centimetres
        baseline_weight_kg: Weight at programme start
        current_weight_kg: Latest recorded weight
        surgery_date: Date of the bariatric procedure
        surgery_type: Procedure performed
        current_phase: Current diet progression phase
    """

    user_id: str
    dob: Optional[date] = None
    sex: Optional[Sex] = None
    height_cm: Optional[float] = None
    baseline_weight_kg: Optional[float] = None
    current_weight_kg: Optional[float] = None
    surgery_date: Optional[date] = None
    surgery_type: Optional[SurgeryType] = None
    current_phase: Optional[ClinicalPhase] = None

    def __post_init__(self) -> None:
        """Validate profile constraints.

        Raises:
            InvalidArgumentError: If any recorded measurement is not positive
        """
        from ..exceptions.domain_errors import InvalidArgumentError

        if not self.user_id:
            raise InvalidArgumentError("user_id is required")

        for name in ("height_cm", "baseline_weight_kg", "current_weight_kg"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise InvalidArgumentError(f"{name} must be positive, got {value}")

    @property
    def is_post_op(self) -> bool:
        return self.surgery_date is not None

    def with_weight(self, current_weight_kg: float) -> "PatientProfile":
        """Return a copy with a new current weight."""
        return replace(self, current_weight_kg=current_weight_kg)
