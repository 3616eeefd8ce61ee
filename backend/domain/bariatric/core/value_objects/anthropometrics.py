"""Anthropometric result value objects (BMI, ideal body weight)."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BMIResult:
    """Body Mass Index with its weight-status classification.

    Attributes:
        bmi: BMI in kg/m^2, rounded to one decimal
        category: Weight-status label (e.g. "Obesity Class II")
        health_risk: Qualitative risk label (e.g. "High")
    """

    bmi: float
    category: str
    health_risk: str

    def __str__(self) -> str:
        return f"{self.bmi:.1f} kg/m² ({self.category})"


@dataclass(frozen=True)
class IBWResult:
    """Ideal body weight and, when relevant, adjusted body weight.

    Attributes:
        ibw_kg: Ideal body weight in kg, rounded to one decimal
        formula: Formula used to compute the ideal weight
        adjusted_body_weight_kg: Adjusted weight in kg; None when the
            current weight does not exceed 125% of the ideal weight
    """

    ibw_kg: float
    formula: str = "Devine"
    adjusted_body_weight_kg: Optional[float] = None

    @property
    def has_adjusted_weight(self) -> bool:
        return self.adjusted_body_weight_kg is not None
