"""Every calculator returns equal results for equal inputs."""

from datetime import date, datetime, timezone

import pytest

from domain.bariatric.calculation import (
    calculate_age,
    calculate_bmi,
    calculate_bmr,
    calculate_fluid_target,
    calculate_ideal_body_weight,
    calculate_portion_guideline,
    calculate_protein_target,
    calculate_supplement_schedule,
    calculate_tdee,
    days_since_surgery,
    estimate_exercise_calories,
    percent_of_target,
    supplement_catalog,
    supplement_compliance_rate,
    weight_lost_kg,
    weight_lost_percent,
)

SCHEDULE = calculate_supplement_schedule("bypass", 30)

CALLS = [
    pytest.param(calculate_bmi, (120.0, 170.0), {}, id="bmi"),
    pytest.param(
        calculate_ideal_body_weight,
        (165.0, "female"),
        {"current_weight_kg": 110.0},
        id="ideal_body_weight",
    ),
    pytest.param(calculate_bmr, (100.0, 180.0, 40, "male"), {}, id="bmr"),
    pytest.param(calculate_tdee, (1800.0, "moderate"), {}, id="tdee"),
    pytest.param(calculate_protein_target, (110.0, 56.9, "pureed", 4), {}, id="protein_target"),
    pytest.param(calculate_fluid_target, (110.0, "clear_liquid", 3), {}, id="fluid_target"),
    pytest.param(calculate_portion_guideline, ("soft", 40), {}, id="portion_guideline"),
    pytest.param(calculate_supplement_schedule, ("sleeve", 20), {}, id="supplement_schedule"),
    pytest.param(supplement_catalog, ("band",), {}, id="supplement_catalog"),
    pytest.param(calculate_age, (date(1985, 3, 10),), {"today": date(2024, 1, 21)}, id="age"),
    pytest.param(
        days_since_surgery,
        (date(2024, 1, 1),),
        {"now": datetime(2024, 1, 21, 9, 0, tzinfo=timezone.utc)},
        id="days_since_surgery",
    ),
    pytest.param(estimate_exercise_calories, ("walking", 30, "vigorous"), {}, id="exercise"),
    pytest.param(percent_of_target, (30.0, 60.0), {}, id="percent_of_target"),
    pytest.param(weight_lost_kg, (130.0, 110.0), {}, id="weight_lost_kg"),
    pytest.param(weight_lost_percent, (130.0, 110.0), {}, id="weight_lost_percent"),
    pytest.param(
        supplement_compliance_rate,
        (["Vitamin D3"], SCHEDULE),
        {},
        id="supplement_compliance_rate",
    ),
]


@pytest.mark.parametrize("calculator,args,kwargs", CALLS)
def test_repeated_calls_return_equal_results(calculator, args, kwargs):
    """Test a second call with the same arguments gives the same answer."""
    first = calculator(*args, **kwargs)
    second = calculator(*args, **kwargs)

    assert first == second
