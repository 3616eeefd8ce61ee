"""Unit tests for the portion guideline lookup."""

import pytest

from domain.bariatric.calculation import calculate_portion_guideline
from domain.bariatric.calculation.portion_guideline import DEFAULT_PORTION
from domain.bariatric.core.exceptions import InvalidArgumentError


class TestPortionGuideline:
    """Test per-phase portion table."""

    @pytest.mark.parametrize(
        "phase,max_volume,protein,duration,bite,chews",
        [
            ("clear_liquid", 60, 10, "15-20 minutes", "Small sips", 0),
            ("full_liquid", 120, 15, "20-30 minutes", "Small sips", 0),
            ("pureed", 180, 20, "30 minutes", "Teaspoon size", 20),
            ("soft", 250, 25, "30-45 minutes", "Dime size", 25),
            ("regular", 350, 30, "30-45 minutes", "Small, mindful bites", 30),
        ],
    )
    def test_table(self, phase, max_volume, protein, duration, bite, chews):
        """Test each phase maps to its fixed guideline."""
        result = calculate_portion_guideline(phase)

        assert result.max_volume_ml == max_volume
        assert result.recommended_protein_g == protein
        assert result.eating_duration == duration
        assert result.bite_size == bite
        assert result.chew_count == chews

    def test_maintenance_same_as_regular(self):
        """Test maintenance shares the regular guideline."""
        assert calculate_portion_guideline("maintenance") == calculate_portion_guideline("regular")

    @pytest.mark.parametrize("phase", ["pre_op", "unknown"])
    def test_default_guideline(self, phase):
        """Test phases without an entry get the default guideline."""
        result = calculate_portion_guideline(phase)

        assert result == DEFAULT_PORTION
        assert result.max_volume_ml == 200
        assert result.bite_size == "Small"

    def test_days_do_not_change_lookup(self):
        """Test post-op day is accepted but portions do not ramp."""
        assert calculate_portion_guideline("soft", 10) == calculate_portion_guideline("soft", 60)

    def test_negative_days_raises(self):
        """Test negative post-op day is rejected."""
        with pytest.raises(InvalidArgumentError):
            calculate_portion_guideline("soft", -3)
