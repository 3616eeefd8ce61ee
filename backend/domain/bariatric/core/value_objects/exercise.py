"""Exercise value objects - logged activity type and intensity."""

from enum import Enum
from typing import Union

from ..exceptions.domain_errors import InvalidArgumentError


class ExerciseType(str, Enum):
    """Exercise types a patient can log."""

    WALKING = "walking"
    RUNNING = "running"
    CYCLING = "cycling"
    SWIMMING = "swimming"
    YOGA = "yoga"
    STRENGTH_TRAINING = "strength_training"
    DANCING = "dancing"
    STRETCHING = "stretching"
    OTHER = "other"

    def calories_per_minute(self) -> int:
        """Average kcal burned per minute at moderate intensity."""
        rates = {
            ExerciseType.WALKING: 4,
            ExerciseType.RUNNING: 10,
            ExerciseType.CYCLING: 7,
            ExerciseType.SWIMMING: 8,
            ExerciseType.YOGA: 3,
            ExerciseType.STRENGTH_TRAINING: 6,
            ExerciseType.DANCING: 5,
            ExerciseType.STRETCHING: 2,
            ExerciseType.OTHER: 4,
        }
        return rates[self]

    @classmethod
    def parse(cls, value: Union["ExerciseType", str]) -> "ExerciseType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidArgumentError(f"Unknown exercise type: {value!r}") from None


class ExerciseIntensity(str, Enum):
    """Perceived exertion of a session."""

    LIGHT = "light"
    MODERATE = "moderate"
    VIGOROUS = "vigorous"

    def multiplier(self) -> float:
        multipliers = {
            ExerciseIntensity.LIGHT: 0.7,
            ExerciseIntensity.MODERATE: 1.0,
            ExerciseIntensity.VIGOROUS: 1.5,
        }
        return multipliers[self]

    @classmethod
    def parse(cls, value: Union["ExerciseIntensity", str]) -> "ExerciseIntensity":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidArgumentError(f"Unknown exercise intensity: {value!r}") from None
