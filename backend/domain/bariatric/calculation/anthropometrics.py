"""Anthropometric calculators: BMI and ideal/adjusted body weight."""

from typing import Optional, Union

from ..core.value_objects.anthropometrics import BMIResult, IBWResult
from ..core.value_objects.sex import Sex
from .numeric import require_positive, round_half_up

# Upper bound (exclusive) of each band; the last band is open-ended.
BMI_BANDS = (
    (18.5, "Underweight", "Malnutrition risk"),
    (25.0, "Normal weight", "Low"),
    (30.0, "Overweight", "Moderate"),
    (35.0, "Obesity Class I", "Moderate to High"),
    (40.0, "Obesity Class II", "High"),
    (float("inf"), "Obesity Class III", "Very High"),
)

CM_PER_INCH = 2.54
ADJUSTED_WEIGHT_THRESHOLD = 1.25
ADJUSTED_WEIGHT_FACTOR = 0.4


def calculate_bmi(weight_kg: float, height_cm: float) -> BMIResult:
    """Calculate Body Mass Index and classify it.

    Classification uses the unrounded value against half-open bands
    [0, 18.5), [18.5, 25), [25, 30), [30, 35), [35, 40), [40, inf).

    Args:
        weight_kg: Body weight in kg
        height_cm: Height in cm

    Returns:
        BMIResult: BMI rounded to one decimal with category and risk

    Raises:
        InvalidArgumentError: If weight or height is not positive

    Example:
        >>> calculate_bmi(100.0, 200.0)
        BMIResult(bmi=25.0, category='Overweight', health_risk='Moderate')
    """
    weight_kg = require_positive("weight_kg", weight_kg)
    height_m = require_positive("height_cm", height_cm) / 100

    bmi = weight_kg / (height_m * height_m)

    for upper, category, health_risk in BMI_BANDS:
        if bmi < upper:
            break

    return BMIResult(
        bmi=round_half_up(bmi, 1),
        category=category,
        health_risk=health_risk,
    )


def calculate_ideal_body_weight(
    height_cm: float,
    sex: Union[Sex, str],
    current_weight_kg: Optional[float] = None,
) -> IBWResult:
    """Calculate ideal body weight with the Devine formula.

    Formula:
        Men:   IBW = 50.0 + 2.3 × (height in inches - 60)
        Women: IBW = 45.5 + 2.3 × (height in inches - 60)

    When the current weight exceeds 125% of IBW the adjusted body weight
    ``IBW + 0.4 × (current - IBW)`` is reported as well.

    Args:
        height_cm: Height in cm
        sex: Biological sex
        current_weight_kg: Optional current weight in kg

    Returns:
        IBWResult: IBW (and adjusted weight if applicable), one decimal

    Raises:
        InvalidArgumentError: If height/weight is not positive or sex unknown
    """
    height_cm = require_positive("height_cm", height_cm)
    sex = Sex.parse(sex)

    inches_over_5ft = height_cm / CM_PER_INCH - 60
    base = 50.0 if sex is Sex.MALE else 45.5
    ibw_kg = base + 2.3 * inches_over_5ft

    adjusted: Optional[float] = None
    if current_weight_kg is not None:
        current_weight_kg = require_positive("current_weight_kg", current_weight_kg)
        if current_weight_kg > ibw_kg * ADJUSTED_WEIGHT_THRESHOLD:
            adjusted_kg = ibw_kg + ADJUSTED_WEIGHT_FACTOR * (current_weight_kg - ibw_kg)
            adjusted = round_half_up(adjusted_kg, 1)

    return IBWResult(
        ibw_kg=round_half_up(ibw_kg, 1),
        formula="Devine",
        adjusted_body_weight_kg=adjusted,
    )
