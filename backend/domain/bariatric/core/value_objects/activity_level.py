"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum
from typing import Union

from ..exceptions.domain_errors import InvalidArgumentError


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation.

    - SEDENTARY: Little or no exercise
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - ACTIVE: Hard exercise 6-7 days/week
    - VERY_ACTIVE: Very hard exercise + physical job
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    def pal_multiplier(self) -> float:
        """Get PAL multiplier applied to BMR.

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        multipliers = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHT: 1.375,
            ActivityLevel.MODERATE: 1.55,
            ActivityLevel.ACTIVE: 1.725,
            ActivityLevel.VERY_ACTIVE: 1.9,
        }
        return multipliers[self]

    @classmethod
    def parse(cls, value: Union["ActivityLevel", str]) -> "ActivityLevel":
        """Coerce a string (case-insensitive) into an ActivityLevel.

        Raises:
            InvalidArgumentError: If the value is not a known activity level
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(level.value for level in cls)
            raise InvalidArgumentError(
                f"Activity level must be one of {allowed}, got {value!r}"
            ) from None
