"""Unit tests for BMR (Mifflin-St Jeor) and TDEE calculators."""

import pytest

from domain.bariatric.calculation import calculate_bmr, calculate_tdee
from domain.bariatric.core.exceptions import InvalidArgumentError
from domain.bariatric.core.value_objects import ActivityLevel


class TestCalculateBMR:
    """Test BMR calculation using Mifflin-St Jeor formula."""

    def test_male_rounds_half_up(self):
        """Test 10*80 + 6.25*170 - 5*40 + 5 = 1667.5 -> 1668."""
        result = calculate_bmr(80.0, 170.0, 40, "male")

        assert result.bmr == 1668
        assert result.formula == "Mifflin-St Jeor"

    def test_female(self):
        """Test 10*60 + 6.25*165 - 5*25 - 161 = 1345.25 -> 1345."""
        result = calculate_bmr(60.0, 165.0, 25, "female")

        assert result.bmr == 1345

    def test_male_female_offset(self):
        """Test male and female differ by 166 kcal for same inputs."""
        male = calculate_bmr(90.0, 175.0, 35, "male").bmr
        female = calculate_bmr(90.0, 175.0, 35, "female").bmr

        assert male - female == 166

    def test_age_zero_allowed(self):
        """Test age 0 is valid: 100 + 437.5 - 161 = 376.5 -> 377."""
        assert calculate_bmr(10.0, 70.0, 0, "female").bmr == 377

    def test_negative_age_raises(self):
        """Test negative age is rejected."""
        with pytest.raises(InvalidArgumentError, match="age"):
            calculate_bmr(80.0, 170.0, -1, "male")

    def test_unknown_sex_raises(self):
        """Test unknown sex is rejected."""
        with pytest.raises(InvalidArgumentError):
            calculate_bmr(80.0, 170.0, 40, "x")

    def test_non_positive_weight_raises(self):
        """Test zero weight is rejected."""
        with pytest.raises(InvalidArgumentError):
            calculate_bmr(0.0, 170.0, 40, "male")


class TestCalculateTDEE:
    """Test TDEE = BMR × PAL multiplier."""

    def test_moderate(self):
        """Test 1668 × 1.55 = 2585.4 -> 2585."""
        result = calculate_tdee(1668, "moderate")

        assert result.tdee == 2585
        assert result.activity_level == ActivityLevel.MODERATE
        assert result.activity_factor == 1.55

    def test_sedentary(self):
        """Test 1500 × 1.2 = 1800."""
        assert calculate_tdee(1500, ActivityLevel.SEDENTARY).tdee == 1800

    def test_activity_level_case_insensitive(self):
        """Test activity level strings are matched case-insensitively."""
        result = calculate_tdee(2000, "Very_Active")

        assert result.activity_level == ActivityLevel.VERY_ACTIVE
        assert result.tdee == 3800

    def test_unknown_activity_level_raises(self):
        """Test unknown level is an error, not a silent default."""
        with pytest.raises(InvalidArgumentError, match="Activity level must be one of"):
            calculate_tdee(1500, "extreme")

    def test_non_positive_bmr_raises(self):
        """Test zero BMR is rejected."""
        with pytest.raises(InvalidArgumentError):
            calculate_tdee(0, "moderate")
