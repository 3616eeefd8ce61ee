"""Energy calculators: BMR (Mifflin-St Jeor) and TDEE."""

from typing import Union

from ..core.exceptions.domain_errors import InvalidArgumentError
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.energy import BMRResult, TDEEResult
from ..core.value_objects.sex import Sex
from .numeric import require_positive, round_to_int


def calculate_bmr(
    weight_kg: float,
    height_cm: float,
    age: int,
    sex: Union[Sex, str],
) -> BMRResult:
    """Calculate Basal Metabolic Rate using the Mifflin-St Jeor equation.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.

    Example:
        >>> calculate_bmr(80, 170, 40, "male").bmr
        1668
    """
    weight_kg = require_positive("weight_kg", weight_kg)
    height_cm = require_positive("height_cm", height_cm)
    if age is None or age < 0:
        raise InvalidArgumentError(f"age must be zero or greater, got {age}")
    sex = Sex.parse(sex)

    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    bmr = base + 5 if sex is Sex.MALE else base - 161

    return BMRResult(bmr=round_to_int(bmr), formula="Mifflin-St Jeor")


def calculate_tdee(bmr: float, activity_level: Union[ActivityLevel, str]) -> TDEEResult:
    """Calculate Total Daily Energy Expenditure as BMR × PAL.

    Raises:
        InvalidArgumentError: If BMR is not positive or the activity
            level is unknown
    """
    bmr = require_positive("bmr", bmr)
    level = ActivityLevel.parse(activity_level)
    factor = level.pal_multiplier()

    return TDEEResult(
        tdee=round_to_int(bmr * factor),
        activity_level=level,
        activity_factor=factor,
    )
