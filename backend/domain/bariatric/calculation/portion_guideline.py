"""Portion guideline lookup per clinical phase."""

from typing import Dict, Optional, Union

import structlog

from ..core.value_objects.clinical_phase import ClinicalPhase
from ..core.value_objects.nutrition_targets import PortionGuideline
from .numeric import require_non_negative

logger = structlog.get_logger(__name__)

_REGULAR_PORTION = PortionGuideline(
    max_volume_ml=350,
    recommended_protein_g=30,
    eating_duration="30-45 minutes",
    bite_size="Small, mindful bites",
    chew_count=30,
)

PORTION_GUIDELINES: Dict[ClinicalPhase, PortionGuideline] = {
    ClinicalPhase.CLEAR_LIQUID: PortionGuideline(
        max_volume_ml=60,
        recommended_protein_g=10,
        eating_duration="15-20 minutes",
        bite_size="Small sips",
        chew_count=0,
    ),
    ClinicalPhase.FULL_LIQUID: PortionGuideline(
        max_volume_ml=120,
        recommended_protein_g=15,
        eating_duration="20-30 minutes",
        bite_size="Small sips",
        chew_count=0,
    ),
    ClinicalPhase.PUREED: PortionGuideline(
        max_volume_ml=180,
        recommended_protein_g=20,
        eating_duration="30 minutes",
        bite_size="Teaspoon size",
        chew_count=20,
    ),
    ClinicalPhase.SOFT: PortionGuideline(
        max_volume_ml=250,
        recommended_protein_g=25,
        eating_duration="30-45 minutes",
        bite_size="Dime size",
        chew_count=25,
    ),
    ClinicalPhase.REGULAR: _REGULAR_PORTION,
    ClinicalPhase.MAINTENANCE: _REGULAR_PORTION,
}

DEFAULT_PORTION = PortionGuideline(
    max_volume_ml=200,
    recommended_protein_g=20,
    eating_duration="30 minutes",
    bite_size="Small",
    chew_count=25,
)


def calculate_portion_guideline(
    phase: Union[ClinicalPhase, str],
    days_since_surgery: Optional[int] = None,
) -> PortionGuideline:
    """Look up the portion rules for a clinical phase.

    Phases without an entry (pre_op, unrecognized strings) get the
    default guideline. ``days_since_surgery`` is validated but portions
    do not ramp within a phase.

    Raises:
        InvalidArgumentError: If days_since_surgery is negative
    """
    if days_since_surgery is not None:
        require_non_negative("days_since_surgery", days_since_surgery)

    matched = ClinicalPhase.match(phase)
    if matched is None:
        logger.warning("portion_guideline.unrecognized_phase", phase=str(phase))
        return DEFAULT_PORTION
    return PORTION_GUIDELINES.get(matched, DEFAULT_PORTION)
