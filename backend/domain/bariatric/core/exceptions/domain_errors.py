"""Domain exceptions for bariatric clinical calculations."""


class BariatricDomainError(Exception):
    """Base exception for bariatric domain errors."""

    pass


class InvalidArgumentError(BariatricDomainError):
    """Raised when a calculator receives an invalid input.

    Covers non-positive weights/heights, negative day counts and
    unrecognized enumeration values that have no documented default
    (sex, activity level, surgery type, exercise type).
    """

    pass


class PatientProfileNotFoundError(BariatricDomainError):
    """Raised when no patient profile exists for a user."""

    def __init__(self, user_id: str):
        super().__init__(f"Patient profile not found for user: {user_id}")
        self.user_id = user_id
