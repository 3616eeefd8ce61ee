"""Unit tests for the exercise calorie estimate."""

import pytest

from domain.bariatric.calculation import estimate_exercise_calories
from domain.bariatric.core.exceptions import InvalidArgumentError
from domain.bariatric.core.value_objects import ExerciseIntensity, ExerciseType


class TestEstimateExerciseCalories:
    """Test kcal = rate × minutes × intensity multiplier."""

    def test_moderate_is_default(self):
        """Test running 20 min at default intensity: 10 × 20."""
        assert estimate_exercise_calories("running", 20) == 200

    def test_vigorous(self):
        """Test walking 30 min vigorous: 4 × 30 × 1.5."""
        assert estimate_exercise_calories("walking", 30, "vigorous") == 180

    def test_light(self):
        """Test yoga 60 min light: 3 × 60 × 0.7."""
        assert estimate_exercise_calories(ExerciseType.YOGA, 60, ExerciseIntensity.LIGHT) == 126

    def test_result_rounded(self):
        """Test stretching 5 min light: 2 × 5 × 0.7 = 7."""
        assert estimate_exercise_calories("stretching", 5, "light") == 7

    def test_zero_duration(self):
        """Test zero minutes burns nothing."""
        assert estimate_exercise_calories("cycling", 0) == 0

    def test_case_insensitive(self):
        """Test exercise type strings are matched case-insensitively."""
        assert estimate_exercise_calories("Strength_Training", 10) == 60

    def test_unknown_type_raises(self):
        """Test unknown exercise type is rejected."""
        with pytest.raises(InvalidArgumentError, match="exercise type"):
            estimate_exercise_calories("skiing", 30)

    def test_unknown_intensity_raises(self):
        """Test unknown intensity is rejected."""
        with pytest.raises(InvalidArgumentError, match="intensity"):
            estimate_exercise_calories("walking", 30, "extreme")

    def test_negative_duration_raises(self):
        """Test negative duration is rejected."""
        with pytest.raises(InvalidArgumentError, match="duration_min"):
            estimate_exercise_calories("walking", -5)
