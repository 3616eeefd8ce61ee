"""Daily progress arithmetic shown on the patient dashboard."""

from typing import Iterable, Optional, Sequence

from ..core.value_objects.supplement import SupplementScheduleItem


def percent_of_target(consumed: float, target: float) -> float:
    """Share of a daily target reached, in percent (0 when no target)."""
    if not target or target <= 0:
        return 0.0
    return consumed / target * 100


def weight_lost_kg(
    baseline_weight_kg: Optional[float],
    current_weight_kg: Optional[float],
) -> float:
    """Weight lost since programme start (0 if either weight is missing)."""
    if not baseline_weight_kg or not current_weight_kg:
        return 0.0
    return baseline_weight_kg - current_weight_kg


def weight_lost_percent(
    baseline_weight_kg: Optional[float],
    current_weight_kg: Optional[float],
) -> float:
    """Weight lost as a percentage of the baseline weight.

    Example:
        >>> weight_lost_percent(120.0, 90.0)
        25.0
    """
    if not baseline_weight_kg or baseline_weight_kg <= 0:
        return 0.0
    return weight_lost_kg(baseline_weight_kg, current_weight_kg) / baseline_weight_kg * 100


def supplement_compliance_rate(
    taken_names: Iterable[str],
    schedule: Sequence[SupplementScheduleItem],
) -> float:
    """Percentage of today's scheduled supplements marked as taken.

    Names not in the schedule are ignored; an empty schedule is 0%.
    """
    if not schedule:
        return 0.0
    scheduled = {item.name for item in schedule}
    taken = scheduled.intersection(taken_names)
    return len(taken) / len(schedule) * 100
