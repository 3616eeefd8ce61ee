"""Rounding and argument checks shared by the calculators."""

import math
from typing import Optional

from ..core.exceptions.domain_errors import InvalidArgumentError


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves upward, unlike the built-in banker's rounding.

    Example:
        >>> round_half_up(24.25, 1)
        24.3
        >>> round(24.25, 1)
        24.2
    """
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def round_to_int(value: float) -> int:
    """Round to the nearest integer, halves upward (1667.5 -> 1668)."""
    return int(math.floor(value + 0.5))


def require_positive(name: str, value: Optional[float]) -> float:
    """Return ``value`` or raise if it is missing, NaN or not > 0."""
    if value is None or not value > 0 or math.isinf(value):
        raise InvalidArgumentError(f"{name} must be a positive number, got {value}")
    return float(value)


def require_non_negative(name: str, value: Optional[int]) -> int:
    """Return ``value`` as an int or raise if it is missing, negative or fractional.

    Integral floats (14.0) are accepted; 13.9 is rejected rather than truncated.
    """
    if value is None or value < 0:
        raise InvalidArgumentError(f"{name} must be zero or greater, got {value}")
    if isinstance(value, float) and not value.is_integer():
        raise InvalidArgumentError(f"{name} must be a whole number, got {value}")
    return int(value)
