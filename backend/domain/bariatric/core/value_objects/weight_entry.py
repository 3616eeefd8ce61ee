"""WeightEntry value object - one logged weight measurement."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .anthropometrics import BMIResult


@dataclass(frozen=True)
class WeightEntry:
    """A weight measurement in the patient's history.

    Attributes:
        user_id: Patient who logged the weight
        weight_kg: Measured weight in kg
        measured_at: When the measurement was taken
        bmi: BMI at this weight, None when height is unknown
        source: Where the measurement came from (e.g. "manual")
        notes: Free-text notes
    """

    user_id: str
    weight_kg: float
    measured_at: datetime
    bmi: Optional[BMIResult] = None
    source: str = "manual"
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        from ..exceptions.domain_errors import InvalidArgumentError

        if not self.user_id:
            raise InvalidArgumentError("user_id is required")
        if not self.weight_kg > 0:
            raise InvalidArgumentError(f"weight_kg must be positive, got {self.weight_kg}")
