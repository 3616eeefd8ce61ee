"""Energy expenditure value objects (BMR, TDEE)."""

from dataclasses import dataclass

from .activity_level import ActivityLevel


@dataclass(frozen=True)
class BMRResult:
    """Basal Metabolic Rate in kcal/day.

    Attributes:
        bmr: BMR rounded to the nearest integer
        formula: Equation used
    """

    bmr: int
    formula: str = "Mifflin-St Jeor"

    def __str__(self) -> str:
        return f"{self.bmr} kcal/day"


@dataclass(frozen=True)
class TDEEResult:
    """Total Daily Energy Expenditure in kcal/day.

    Attributes:
        tdee: BMR × activity factor, rounded to the nearest integer
        activity_level: Activity level used
        activity_factor: PAL multiplier applied
    """

    tdee: int
    activity_level: ActivityLevel
    activity_factor: float

    def __str__(self) -> str:
        return f"{self.tdee} kcal/day ({self.activity_level.value})"
