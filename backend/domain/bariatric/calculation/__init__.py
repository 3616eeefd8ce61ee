"""Bariatric clinical calculators.

Pure functions of their inputs; the two date utilities accept the
current time as an optional argument.
"""

from .anthropometrics import calculate_bmi, calculate_ideal_body_weight
from .dates import calculate_age, days_since_surgery
from .energy import calculate_bmr, calculate_tdee
from .exercise import estimate_exercise_calories
from .fluid_target import calculate_fluid_target
from .portion_guideline import calculate_portion_guideline
from .progress import (
    percent_of_target,
    supplement_compliance_rate,
    weight_lost_kg,
    weight_lost_percent,
)
from .protein_target import calculate_protein_target
from .supplement_schedule import calculate_supplement_schedule, supplement_catalog

__all__ = [
    "calculate_bmi",
    "calculate_ideal_body_weight",
    "calculate_bmr",
    "calculate_tdee",
    "calculate_protein_target",
    "calculate_fluid_target",
    "calculate_portion_guideline",
    "calculate_supplement_schedule",
    "supplement_catalog",
    "calculate_age",
    "days_since_surgery",
    "estimate_exercise_calories",
    "percent_of_target",
    "weight_lost_kg",
    "weight_lost_percent",
    "supplement_compliance_rate",
]
