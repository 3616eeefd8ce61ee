"""Post-operative supplement scheduler."""

from typing import List, Tuple, Union

from ..core.value_objects.supplement import SupplementScheduleItem
from ..core.value_objects.surgery_type import SurgeryType
from .numeric import require_non_negative

MULTIVITAMIN = SupplementScheduleItem(
    name="Bariatric Multivitamin",
    dose="2 chewable tablets",
    frequency="Daily",
    timing=("08:00", "20:00"),
    start_day=1,
    notes="Take with food when tolerated",
)

CALCIUM_CITRATE = SupplementScheduleItem(
    name="Calcium Citrate",
    dose="500-600mg",
    frequency="2-3 times daily",
    timing=("09:00", "15:00", "21:00"),
    start_day=14,
    notes="Take separate from multivitamin (2+ hours apart)",
)

VITAMIN_B12 = SupplementScheduleItem(
    name="Vitamin B12",
    dose="500-1000 mcg sublingual",
    frequency="Daily",
    timing=("08:00",),
    start_day=7,
    notes="May switch to monthly injection per provider",
)

IRON = SupplementScheduleItem(
    name="Iron (Ferrous Sulfate or Citrate)",
    dose="45-60mg elemental iron",
    frequency="Daily",
    timing=("08:00",),
    start_day=30,
    notes="Take with Vitamin C, separate from calcium by 2+ hours",
)

VITAMIN_D3 = SupplementScheduleItem(
    name="Vitamin D3",
    dose="3000 IU",
    frequency="Daily",
    timing=("08:00",),
    start_day=1,
    notes="Take with calcium for absorption",
)


def supplement_catalog(surgery_type: Union[SurgeryType, str]) -> Tuple[SupplementScheduleItem, ...]:
    """Full supplement catalog for a procedure, in display order.

    Vitamin B12 is only prescribed after gastric bypass.
    """
    surgery_type = SurgeryType.parse(surgery_type)
    catalog = [MULTIVITAMIN, CALCIUM_CITRATE]
    if surgery_type is SurgeryType.BYPASS:
        catalog.append(VITAMIN_B12)
    catalog.extend([IRON, VITAMIN_D3])
    return tuple(catalog)


def calculate_supplement_schedule(
    surgery_type: Union[SurgeryType, str],
    days_since_surgery: int,
) -> List[SupplementScheduleItem]:
    """Supplements due on a given post-op day.

    Filters the catalog to items whose ``start_day`` has been reached,
    keeping catalog order. Once an item is due it stays due.

    Args:
        surgery_type: Procedure performed
        days_since_surgery: Post-op day (0 before or on surgery day)

    Returns:
        List[SupplementScheduleItem]: Due supplements in catalog order

    Raises:
        InvalidArgumentError: If surgery type is unknown or days negative

    Example:
        >>> [s.name for s in calculate_supplement_schedule("sleeve", 1)]
        ['Bariatric Multivitamin', 'Vitamin D3']
    """
    days_since_surgery = require_non_negative("days_since_surgery", days_since_surgery)
    return [item for item in supplement_catalog(surgery_type) if item.is_due(days_since_surgery)]
