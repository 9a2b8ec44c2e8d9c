"""Tests for rubric feedback text."""

import pytest

from conftest import make_simulation
from ecomap.evaluation.scorer import calculate_eco_score, feedback_band, generate_feedback

FULL_BREAKDOWN = {"trees": 300, "solar": 250, "pavement": 250, "parks": 200}


@pytest.mark.parametrize(
    "total,band",
    [
        (1000, "Outstanding"),
        (900, "Outstanding"),
        (899, "Excellent"),
        (750, "Excellent"),
        (749, "Good"),
        (600, "Good"),
        (599, "Fair"),
        (400, "Fair"),
        (399, "Needs work"),
        (0, "Needs work"),
    ],
)
def test_band_lower_bounds_are_inclusive(total, band):
    assert feedback_band(total) == band
    assert band in generate_feedback(total, FULL_BREAKDOWN)


def test_no_suggestions_when_every_category_meets_threshold():
    feedback = generate_feedback(1000, FULL_BREAKDOWN)
    assert "\n\nSuggestions: " not in feedback


def test_thresholds_are_strict():
    breakdown = {"trees": 150, "solar": 125, "pavement": 125, "parks": 100}
    assert "Suggestions" not in generate_feedback(500, breakdown)


def test_suggestions_joined_and_terminated():
    breakdown = {"trees": 149.9, "solar": 250, "pavement": 0, "parks": 200}
    feedback = generate_feedback(500, breakdown)

    assert feedback.endswith(
        "\n\nSuggestions: Add more trees for better air quality and carbon absorption; "
        "Use more permeable pavement to reduce water runoff."
    )


def test_excellent_band_with_park_suggestion():
    # 300 + 250 + 200 (16 pavement points) = 750
    result = calculate_eco_score(
        make_simulation(tree_counts=[10] * 5, solar_counts=[6] * 5, pavement=16)
    )

    assert result.total_score == 750
    assert feedback_band(result.total_score) == "Excellent"
    assert result.feedback.endswith(
        "Suggestions: Create more green spaces for community wellbeing."
    )
