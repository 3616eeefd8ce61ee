"""Nutrition target value objects (protein, fluid, portions)."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ProteinTarget:
    """Daily protein goal for the current clinical phase.

    Attributes:
        daily_grams: Grams per day (never below 60)
        per_meal_grams: Daily grams split across meals
        method: Short label of the formula used
        rationale: Clinical rationale shown to the patient
    """

    daily_grams: int
    per_meal_grams: int
    method: str
    rationale: str


@dataclass(frozen=True)
class FluidTarget:
    """Daily fluid goal for the current clinical phase.

    Attributes:
        daily_ml: Millilitres per day (1000-2000)
        per_hour_ml: Daily volume spread over 16 waking hours
        method: Short label of the formula used
        restrictions: Drinking rules for the phase, in display order
    """

    daily_ml: int
    per_hour_ml: int
    method: str
    restrictions: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PortionGuideline:
    """Per-meal portion rules for a clinical phase.

    Attributes:
        max_volume_ml: Maximum meal volume
        recommended_protein_g: Protein to aim for per meal
        eating_duration: How long a meal should take
        bite_size: Bite/sip size description
        chew_count: Target chews per bite (0 for liquids)
    """

    max_volume_ml: int
    recommended_protein_g: int
    eating_duration: str
    bite_size: str
    chew_count: int
