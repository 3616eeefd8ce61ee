"""Domain exceptions for bariatric calculations."""

from .domain_errors import (
    BariatricDomainError,
    InvalidArgumentError,
    PatientProfileNotFoundError,
)

__all__ = [
    "BariatricDomainError",
    "InvalidArgumentError",
    "PatientProfileNotFoundError",
]
