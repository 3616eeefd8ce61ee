"""SurgeryType value object - bariatric procedure performed."""

from enum import Enum
from typing import Union

from ..exceptions.domain_errors import InvalidArgumentError


class SurgeryType(str, Enum):
    """Bariatric procedure.

    - SLEEVE: Sleeve gastrectomy
    - BYPASS: Roux-en-Y gastric bypass (malabsorptive, needs B12)
    - BAND: Adjustable gastric band
    """

    SLEEVE = "sleeve"
    BYPASS = "bypass"
    BAND = "band"

    @classmethod
    def parse(cls, value: Union["SurgeryType", str]) -> "SurgeryType":
        """Coerce a string (case-insensitive) into a SurgeryType.

        Raises:
            InvalidArgumentError: If the value is not a known surgery type
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidArgumentError(
                f"Surgery type must be 'sleeve', 'bypass' or 'band', got {value!r}"
            ) from None
