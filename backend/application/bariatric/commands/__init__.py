"""Commands for the bariatric domain."""

from .log_weight import LogWeightCommand, LogWeightHandler, LogWeightResult
from .save_patient_profile import SavePatientProfileCommand, SavePatientProfileHandler

__all__ = [
    "LogWeightCommand",
    "LogWeightHandler",
    "LogWeightResult",
    "SavePatientProfileCommand",
    "SavePatientProfileHandler",
]
