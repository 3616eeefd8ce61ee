"""Sex value object - selects the sex-specific formula coefficient."""

from enum import Enum
from typing import Union

from ..exceptions.domain_errors import InvalidArgumentError


class Sex(str, Enum):
    """Biological sex category used by the Devine and Mifflin-St Jeor formulas.

    Only the two branches the formulas define are modelled.
    """

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, value: Union["Sex", str]) -> "Sex":
        """Coerce a string (case-insensitive) into a Sex.

        Raises:
            InvalidArgumentError: If the value is not a known sex
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidArgumentError(
                f"Sex must be 'male' or 'female', got {value!r}"
            ) from None
