"""Protein target calculator keyed by clinical phase."""

from typing import Union

import structlog

from ..core.exceptions.domain_errors import InvalidArgumentError
from ..core.value_objects.clinical_phase import ClinicalPhase
from ..core.value_objects.nutrition_targets import ProteinTarget
from .numeric import require_positive, round_to_int

logger = structlog.get_logger(__name__)

PROTEIN_FLOOR_G = 60.0
DEFAULT_PROTEIN_G = 80.0
DEFAULT_MEALS_PER_DAY = 5


def calculate_protein_target(
    current_weight_kg: float,
    ideal_body_weight_kg: float,
    phase: Union[ClinicalPhase, str],
    meals_per_day: int = DEFAULT_MEALS_PER_DAY,
) -> ProteinTarget:
    """Calculate the daily protein goal for a clinical phase.

    Policy:
        pre_op:                   max(60, 1.0 g/kg IBW)
        clear/full liquid:        60 g fixed
        pureed/soft:              max(60, 1.2 g/kg IBW)
        regular/maintenance:      1.5 g/kg of current weight while it is
                                  under 130% of IBW, of IBW otherwise
        unrecognized phase:       80 g (conservative default)

    Every branch is floored at 60 g. Daily and per-meal grams are rounded
    from the floored value.

    Args:
        current_weight_kg: Current body weight in kg
        ideal_body_weight_kg: Ideal body weight in kg
        phase: Clinical phase (case-insensitive string or enum)
        meals_per_day: Number of meals the daily goal is split across

    Returns:
        ProteinTarget: Daily and per-meal grams with method and rationale

    Raises:
        InvalidArgumentError: If a weight is not positive or meals_per_day < 1
    """
    current_weight_kg = require_positive("current_weight_kg", current_weight_kg)
    ideal_body_weight_kg = require_positive("ideal_body_weight_kg", ideal_body_weight_kg)
    if meals_per_day is None or meals_per_day < 1:
        raise InvalidArgumentError(f"meals_per_day must be at least 1, got {meals_per_day}")

    matched = ClinicalPhase.match(phase)

    if matched is ClinicalPhase.PRE_OP:
        daily_grams = max(PROTEIN_FLOOR_G, ideal_body_weight_kg * 1.0)
        method = "1.0 g/kg IBW"
        rationale = "Support healing, prepare for surgery"
    elif matched in (ClinicalPhase.CLEAR_LIQUID, ClinicalPhase.FULL_LIQUID):
        daily_grams = PROTEIN_FLOOR_G
        method = "Fixed minimum"
        rationale = "Maintain muscle mass during restriction"
    elif matched in (ClinicalPhase.PUREED, ClinicalPhase.SOFT):
        daily_grams = max(PROTEIN_FLOOR_G, ideal_body_weight_kg * 1.2)
        method = "1.2 g/kg IBW"
        rationale = "Support healing, prevent malnutrition"
    elif matched in (ClinicalPhase.REGULAR, ClinicalPhase.MAINTENANCE):
        if current_weight_kg < ideal_body_weight_kg * 1.3:
            reference_weight = current_weight_kg
        else:
            reference_weight = ideal_body_weight_kg
        daily_grams = reference_weight * 1.5
        method = "1.5 g/kg body weight"
        rationale = "Optimize body composition, maintain muscle"
    else:
        logger.warning("protein_target.unrecognized_phase", phase=str(phase))
        daily_grams = DEFAULT_PROTEIN_G
        method = "Default safe minimum"
        rationale = "Conservative estimate"

    daily_grams = max(PROTEIN_FLOOR_G, daily_grams)

    return ProteinTarget(
        daily_grams=round_to_int(daily_grams),
        per_meal_grams=round_to_int(daily_grams / meals_per_day),
        method=method,
        rationale=rationale,
    )
