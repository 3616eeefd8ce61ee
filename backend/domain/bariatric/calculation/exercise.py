"""Exercise calorie estimate."""

from typing import Union

from ..core.exceptions.domain_errors import InvalidArgumentError
from ..core.value_objects.exercise import ExerciseIntensity, ExerciseType
from .numeric import round_to_int


def estimate_exercise_calories(
    exercise_type: Union[ExerciseType, str],
    duration_min: float,
    intensity: Union[ExerciseIntensity, str] = ExerciseIntensity.MODERATE,
) -> int:
    """Estimate kcal burned: rate × minutes × intensity multiplier.

    Raises:
        InvalidArgumentError: If type/intensity is unknown or duration negative

    Example:
        >>> estimate_exercise_calories("walking", 30, "vigorous")
        180
    """
    exercise_type = ExerciseType.parse(exercise_type)
    intensity = ExerciseIntensity.parse(intensity)
    if duration_min is None or duration_min < 0:
        raise InvalidArgumentError(f"duration_min must be zero or greater, got {duration_min}")

    calories = exercise_type.calories_per_minute() * duration_min * intensity.multiplier()
    return round_to_int(calories)
