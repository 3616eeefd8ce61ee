"""Unit tests for bariatric value objects."""

from datetime import date, datetime, timezone

import pytest

from domain.bariatric.core.exceptions import (
    BariatricDomainError,
    InvalidArgumentError,
    PatientProfileNotFoundError,
)
from domain.bariatric.core.value_objects import (
    ActivityLevel,
    BMIResult,
    ClinicalPhase,
    ExerciseIntensity,
    ExerciseType,
    IBWResult,
    PatientProfile,
    Sex,
    SupplementScheduleItem,
    SurgeryType,
    WeightEntry,
)


class TestEnumerations:
    """Test parsing of closed enumerations."""

    def test_sex_parse(self):
        assert Sex.parse(" Female ") is Sex.FEMALE
        assert Sex.parse(Sex.MALE) is Sex.MALE

    def test_sex_parse_unknown(self):
        with pytest.raises(InvalidArgumentError):
            Sex.parse("unknown")

    @pytest.mark.parametrize(
        "level,multiplier",
        [
            (ActivityLevel.SEDENTARY, 1.2),
            (ActivityLevel.LIGHT, 1.375),
            (ActivityLevel.MODERATE, 1.55),
            (ActivityLevel.ACTIVE, 1.725),
            (ActivityLevel.VERY_ACTIVE, 1.9),
        ],
    )
    def test_pal_multipliers(self, level, multiplier):
        assert level.pal_multiplier() == multiplier

    def test_surgery_type_parse(self):
        assert SurgeryType.parse("BYPASS") is SurgeryType.BYPASS

    def test_clinical_phase_match(self):
        """Test phases match case-insensitively, unknowns yield None."""
        assert ClinicalPhase.match("Soft") is ClinicalPhase.SOFT
        assert ClinicalPhase.match("post_op") is None
        assert ClinicalPhase.match(None) is None

    def test_clinical_phase_order(self):
        assert [phase.value for phase in ClinicalPhase] == [
            "pre_op",
            "clear_liquid",
            "full_liquid",
            "pureed",
            "soft",
            "regular",
            "maintenance",
        ]

    def test_exercise_rates(self):
        assert ExerciseType.RUNNING.calories_per_minute() == 10
        assert ExerciseType.OTHER.calories_per_minute() == 4
        assert ExerciseIntensity.VIGOROUS.multiplier() == 1.5


class TestResults:
    """Test result value objects."""

    def test_results_are_immutable(self):
        result = BMIResult(bmi=25.0, category="Overweight", health_risk="Moderate")

        with pytest.raises(AttributeError):
            result.bmi = 30.0  # type: ignore[misc]

    def test_ibw_defaults(self):
        result = IBWResult(ibw_kg=61.4)

        assert result.formula == "Devine"
        assert result.adjusted_body_weight_kg is None
        assert not result.has_adjusted_weight

    def test_supplement_is_due(self):
        item = SupplementScheduleItem(
            name="Iron",
            dose="45mg",
            frequency="Daily",
            timing=("08:00",),
            start_day=30,
            notes="",
        )

        assert not item.is_due(29)
        assert item.is_due(30)
        assert item.is_due(31)


class TestPatientProfile:
    """Test PatientProfile validation and helpers."""

    def test_minimal_profile(self):
        """Test only user_id is required."""
        profile = PatientProfile(user_id="user123")

        assert profile.sex is None
        assert not profile.is_post_op

    def test_post_op(self):
        profile = PatientProfile(user_id="user123", surgery_date=date(2024, 1, 1))

        assert profile.is_post_op

    def test_empty_user_id_raises(self):
        with pytest.raises(InvalidArgumentError, match="user_id"):
            PatientProfile(user_id="")

    @pytest.mark.parametrize("field", ["height_cm", "baseline_weight_kg", "current_weight_kg"])
    def test_non_positive_measurement_raises(self, field):
        with pytest.raises(InvalidArgumentError, match=field):
            PatientProfile(user_id="user123", **{field: 0})

    def test_with_weight_returns_copy(self):
        profile = PatientProfile(user_id="user123", current_weight_kg=110.0)

        updated = profile.with_weight(105.0)

        assert updated.current_weight_kg == 105.0
        assert profile.current_weight_kg == 110.0

    def test_with_weight_validates(self):
        profile = PatientProfile(user_id="user123")

        with pytest.raises(InvalidArgumentError):
            profile.with_weight(-1.0)


class TestWeightEntry:
    """Test logged weight measurements."""

    def test_defaults(self):
        entry = WeightEntry(
            user_id="user123",
            weight_kg=104.2,
            measured_at=datetime(2024, 3, 15, 7, 0, tzinfo=timezone.utc),
        )

        assert entry.bmi is None
        assert entry.source == "manual"
        assert entry.notes is None

    @pytest.mark.parametrize("weight_kg", [0.0, -1.0])
    def test_non_positive_weight_raises(self, weight_kg):
        with pytest.raises(InvalidArgumentError, match="weight_kg"):
            WeightEntry(
                user_id="user123",
                weight_kg=weight_kg,
                measured_at=datetime(2024, 3, 15, tzinfo=timezone.utc),
            )


class TestDomainErrors:
    """Test exception hierarchy."""

    def test_hierarchy(self):
        assert issubclass(InvalidArgumentError, BariatricDomainError)
        assert issubclass(PatientProfileNotFoundError, BariatricDomainError)

    def test_profile_not_found_message(self):
        error = PatientProfileNotFoundError("user123")

        assert error.user_id == "user123"
        assert str(error) == "Patient profile not found for user: user123"
