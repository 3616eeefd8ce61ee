"""Fluid target calculator keyed by clinical phase and post-op day."""

from typing import Optional, Union

import structlog

from ..core.value_objects.clinical_phase import ClinicalPhase
from ..core.value_objects.nutrition_targets import FluidTarget
from .numeric import require_non_negative, require_positive, round_to_int

logger = structlog.get_logger(__name__)

ML_PER_KG = 30
WAKING_HOURS = 16
FLUID_FLOOR_ML = 1000.0
FLUID_CAP_ML = 2000.0
EARLY_POST_OP_DAYS = 3
EARLY_POST_OP_ML = 1000.0
DEFAULT_FLUID_ML = 1800.0
METHOD = "30 ml/kg with phase adjustments"


def calculate_fluid_target(
    current_weight_kg: float,
    phase: Union[ClinicalPhase, str],
    days_since_surgery: Optional[int] = None,
) -> FluidTarget:
    """Calculate the daily fluid goal for a clinical phase.

    Base target is 30 ml per kg of current weight, then:
        clear_liquid:                1000 ml during the first 3 post-op
                                     days, else min(1500, base)
        full_liquid/pureed:          min(1800, base)
        soft/regular/maintenance:    base clamped to 1500-2000
        unrecognized phase:          1800 ml (conservative default)

    The result is always within 1000-2000 ml; ``per_hour_ml`` spreads it
    across 16 waking hours.

    Args:
        current_weight_kg: Current body weight in kg
        phase: Clinical phase (case-insensitive string or enum)
        days_since_surgery: Post-op day; None when unknown

    Returns:
        FluidTarget: Daily and hourly volume with restriction notes

    Raises:
        InvalidArgumentError: If weight is not positive or days negative
    """
    current_weight_kg = require_positive("current_weight_kg", current_weight_kg)
    if days_since_surgery is not None:
        days_since_surgery = require_non_negative("days_since_surgery", days_since_surgery)

    base_target = current_weight_kg * ML_PER_KG
    matched = ClinicalPhase.match(phase)

    if matched is ClinicalPhase.CLEAR_LIQUID:
        if days_since_surgery is not None and days_since_surgery < EARLY_POST_OP_DAYS:
            daily_ml = EARLY_POST_OP_ML
            restrictions = (
                "Sip only 30-60ml per 15 minutes",
                "No straws",
                "Avoid carbonation",
            )
        else:
            daily_ml = min(1500.0, base_target)
            restrictions = ("No straws", "Small sips")
    elif matched in (ClinicalPhase.FULL_LIQUID, ClinicalPhase.PUREED):
        daily_ml = min(1800.0, base_target)
        restrictions = (
            "Separate fluids from meals (30 min rule)",
            "No carbonation",
        )
    elif matched in (ClinicalPhase.SOFT, ClinicalPhase.REGULAR, ClinicalPhase.MAINTENANCE):
        daily_ml = min(2000.0, max(1500.0, base_target))
        restrictions = (
            "Stop drinking 30 min before meals",
            "Resume 30 min after meals",
            "Limit caffeine",
        )
    else:
        if matched is None:
            logger.warning("fluid_target.unrecognized_phase", phase=str(phase))
        daily_ml = DEFAULT_FLUID_ML
        restrictions = ("Follow phase guidelines",)

    daily_ml = min(FLUID_CAP_ML, max(FLUID_FLOOR_ML, daily_ml))

    return FluidTarget(
        daily_ml=round_to_int(daily_ml),
        per_hour_ml=round_to_int(daily_ml / WAKING_HOURS),
        method=METHOD,
        restrictions=restrictions,
    )
