"""Unit tests for the protein target calculator."""

import pytest

from domain.bariatric.calculation import calculate_protein_target
from domain.bariatric.core.exceptions import InvalidArgumentError
from domain.bariatric.core.value_objects import ClinicalPhase


class TestProteinTargetByPhase:
    """Test protein policy per clinical phase."""

    def test_pre_op_uses_ibw(self):
        """Test pre-op: 1.0 g/kg IBW."""
        result = calculate_protein_target(110.0, 75.0, "pre_op")

        assert result.daily_grams == 75
        assert result.per_meal_grams == 15
        assert result.method == "1.0 g/kg IBW"
        assert result.rationale == "Support healing, prepare for surgery"

    @pytest.mark.parametrize("phase", ["clear_liquid", "full_liquid"])
    def test_liquid_phases_fixed_minimum(self, phase):
        """Test liquid phases get the fixed 60 g minimum."""
        result = calculate_protein_target(150.0, 75.0, phase)

        assert result.daily_grams == 60
        assert result.per_meal_grams == 12
        assert result.method == "Fixed minimum"
        assert result.rationale == "Maintain muscle mass during restriction"

    def test_pureed_uses_1_2_g_per_kg_ibw(self):
        """Test pureed: 1.2 × 60 = 72 g, 14.4 -> 14 per meal."""
        result = calculate_protein_target(100.0, 60.0, ClinicalPhase.PUREED)

        assert result.daily_grams == 72
        assert result.per_meal_grams == 14
        assert result.method == "1.2 g/kg IBW"
        assert result.rationale == "Support healing, prevent malnutrition"

    def test_soft_floored_at_60(self):
        """Test soft with small IBW: 1.2 × 40 = 48 -> floored to 60."""
        result = calculate_protein_target(70.0, 40.0, "soft")

        assert result.daily_grams == 60

    def test_regular_uses_current_weight_when_near_ibw(self):
        """Test regular: current < 130% IBW -> 1.5 × current."""
        result = calculate_protein_target(70.0, 60.0, "regular")

        assert result.daily_grams == 105
        assert result.per_meal_grams == 21
        assert result.method == "1.5 g/kg body weight"
        assert result.rationale == "Optimize body composition, maintain muscle"

    def test_regular_uses_ibw_when_obese(self):
        """Test regular: current >= 130% IBW -> 1.5 × IBW."""
        result = calculate_protein_target(100.0, 60.0, "maintenance")

        assert result.daily_grams == 90
        assert result.per_meal_grams == 18

    def test_phase_case_insensitive(self):
        """Test phase strings are matched case-insensitively."""
        assert calculate_protein_target(100.0, 60.0, "PUREED").daily_grams == 72

    def test_unrecognized_phase_uses_default(self):
        """Test unknown phase falls back to 80 g instead of raising."""
        result = calculate_protein_target(100.0, 60.0, "post_op_week_1")

        assert result.daily_grams == 80
        assert result.per_meal_grams == 16
        assert result.method == "Default safe minimum"
        assert result.rationale == "Conservative estimate"


class TestProteinTargetInvariants:
    """Test floor, meal split and validation."""

    @pytest.mark.parametrize("phase", [phase.value for phase in ClinicalPhase] + ["unknown"])
    @pytest.mark.parametrize("current,ibw", [(30.0, 20.0), (60.0, 45.0), (180.0, 70.0)])
    def test_daily_grams_never_below_60(self, phase, current, ibw):
        """Test the 60 g floor holds for every phase and weight."""
        assert calculate_protein_target(current, ibw, phase).daily_grams >= 60

    def test_meals_per_day_splits_target(self):
        """Test per-meal grams use the requested meal count."""
        result = calculate_protein_target(70.0, 60.0, "regular", meals_per_day=3)

        assert result.daily_grams == 105
        assert result.per_meal_grams == 35

    def test_per_meal_from_unrounded_daily(self):
        """Test per-meal comes from the unrounded daily value (72.6 / 2 = 36.3)."""
        result = calculate_protein_target(110.0, 60.5, "pureed", meals_per_day=2)

        assert result.daily_grams == 73
        assert result.per_meal_grams == 36

    def test_same_inputs_same_result(self):
        """Test the calculator is deterministic."""
        first = calculate_protein_target(95.0, 62.0, "soft")
        second = calculate_protein_target(95.0, 62.0, "soft")

        assert first == second

    @pytest.mark.parametrize("meals_per_day", [0, -1])
    def test_meals_per_day_below_one_raises(self, meals_per_day):
        """Test meals_per_day must be at least 1."""
        with pytest.raises(InvalidArgumentError, match="meals_per_day"):
            calculate_protein_target(70.0, 60.0, "regular", meals_per_day=meals_per_day)

    def test_non_positive_ibw_raises(self):
        """Test IBW must be positive."""
        with pytest.raises(InvalidArgumentError):
            calculate_protein_target(70.0, 0.0, "regular")
