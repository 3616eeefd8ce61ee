"""Configuration utilities for infrastructure layer."""

import os

from domain.bariatric.core.value_objects.clinical_phase import ClinicalPhase


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Upper-cased LOG_LEVEL env var, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_app_version() -> str:
    """
    Get application version (Docker build ARG -> ENV APP_VERSION).

    Returns:
        Version string, defaults to "0.0.0-dev"
    """
    return os.getenv("APP_VERSION", "0.0.0-dev")


def get_repository_backend() -> str:
    """
    Get repository backend name.

    Returns:
        Lower-cased REPOSITORY_BACKEND env var, defaults to "inmemory"
    """
    return os.getenv("REPOSITORY_BACKEND", "inmemory").lower()


def get_default_meals_per_day() -> int:
    """
    Get number of meals the daily protein goal is split across.

    Returns:
        DEFAULT_MEALS_PER_DAY env var as int, defaults to 5.
        Invalid or non-positive values fall back to 5.
    """
    raw = os.getenv("DEFAULT_MEALS_PER_DAY", "5")
    try:
        value = int(raw)
    except ValueError:
        return 5
    return value if value >= 1 else 5


def get_default_phase() -> ClinicalPhase:
    """
    Get clinical phase assumed for profiles without a recorded phase.

    Returns:
        DEFAULT_PHASE env var as ClinicalPhase, defaults to REGULAR
    """
    return ClinicalPhase.match(os.getenv("DEFAULT_PHASE", "regular")) or ClinicalPhase.REGULAR
