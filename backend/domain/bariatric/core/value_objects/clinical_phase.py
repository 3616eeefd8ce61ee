"""ClinicalPhase value object - post-operative diet progression stage."""

from enum import Enum
from typing import Optional, Union


class ClinicalPhase(str, Enum):
    """Stage of the bariatric diet progression.

    Order: pre-op, clear liquid, full liquid, pureed, soft, regular,
    maintenance. Each phase has its own protein, fluid and portion rules.
    """

    PRE_OP = "pre_op"
    CLEAR_LIQUID = "clear_liquid"
    FULL_LIQUID = "full_liquid"
    PUREED = "pureed"
    SOFT = "soft"
    REGULAR = "regular"
    MAINTENANCE = "maintenance"

    @classmethod
    def match(cls, value: Union["ClinicalPhase", str, None]) -> Optional["ClinicalPhase"]:
        """Match a phase string case-insensitively.

        Unlike the other enumerations, an unknown phase is not an error:
        the target calculators have a documented fallback for it, so this
        returns None and lets the caller pick the default branch.

        Example:
            >>> ClinicalPhase.match("Soft")
            <ClinicalPhase.SOFT: 'soft'>
            >>> ClinicalPhase.match("post_op") is None
            True
        """
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None
