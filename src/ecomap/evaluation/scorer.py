"""Deterministic EcoScore rubric scorer.

Maps a SimulationData snapshot to a 0-1000 score without any external calls.
Maximum score: 1000 points
- Trees: 300 points max (quantity, distribution across clusters)
- Solar panels: 250 points max (quantity, cluster coverage)
- Permeable pavement: 250 points max (coverage)
- Parks: 200 points max (quantity, presence bonus)
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict

from ..schemas.ecoscore import EcoScoreBreakdown, EcoScoreResult
from ..schemas.simulation import SimulationData
from .rubrics import FEEDBACK_BANDS, RUBRIC_CATEGORIES

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _capped(count: int, scale: dict) -> float:
    """Linear share of ``points`` saturating at ``optimal``, clamping the count first."""
    return min(count, scale["optimal"]) / scale["optimal"] * scale["points"]


def calculate_trees_score(data: SimulationData) -> float:
    config = RUBRIC_CATEGORIES["trees"]
    quantity = config["quantity"]
    distribution = config["distribution"]

    quantity_score = _capped(data.total_trees_placed, quantity)
    distribution_score = _capped(len(data.tree_clusters), distribution)
    return quantity_score + distribution_score


def calculate_solar_score(data: SimulationData) -> float:
    config = RUBRIC_CATEGORIES["solar"]
    quantity = config["quantity"]
    distribution = config["distribution"]

    quantity_score = _capped(data.total_solar_placed, quantity)
    # Linear per cluster, saturating at five clusters
    distribution_score = min(
        len(data.solar_clusters) * distribution["per_cluster"],
        distribution["points"],
    )
    return quantity_score + distribution_score


def calculate_pavement_score(data: SimulationData) -> float:
    quantity = RUBRIC_CATEGORIES["pavement"]["quantity"]
    return _capped(len(data.placed_pavement_points), quantity)


def calculate_park_score(data: SimulationData) -> float:
    config = RUBRIC_CATEGORIES["parks"]
    quantity = config["quantity"]

    quantity_score = _capped(len(data.placed_parks), quantity)
    # Step bonus: any park at all earns the full amount
    presence_bonus = config["presence_bonus"] if data.placed_parks else 0
    return quantity_score + presence_bonus


def feedback_band(total_score: int) -> str:
    """Name of the feedback band a total score falls into."""
    for lower_bound, label, _ in FEEDBACK_BANDS:
        if total_score >= lower_bound:
            return label
    return FEEDBACK_BANDS[-1][1]


def generate_feedback(total_score: int, breakdown: Dict[str, float]) -> str:
    """
    Build the feedback text for a rubric result.

    Args:
        total_score: Rounded total score
        breakdown: Unrounded category scores keyed trees/solar/pavement/parks

    Returns:
        Band sentence, followed by suggestions for every category that
        fell below its recommendation threshold.
    """
    feedback = FEEDBACK_BANDS[-1][2]
    for lower_bound, _, sentence in FEEDBACK_BANDS:
        if total_score >= lower_bound:
            feedback = sentence
            break

    recommendations = [
        config["recommendation"]
        for category, config in RUBRIC_CATEGORIES.items()
        if breakdown[category] < config["recommend_below"]
    ]

    if recommendations:
        feedback += "\n\nSuggestions: " + "; ".join(recommendations) + "."

    return feedback


def calculate_eco_score(data: SimulationData) -> EcoScoreResult:
    """
    Score a simulation snapshot against the fixed rubric.

    Accepts any non-negative counts, including an empty simulation. Totals
    that disagree with the cluster counts are scored as declared.
    """
    if not data.is_consistent:
        logger.warning(
            "Simulation totals disagree with cluster counts "
            "(trees=%d, solar=%d); scoring declared totals",
            data.total_trees_placed,
            data.total_solar_placed,
        )

    raw = {
        "trees": calculate_trees_score(data),
        "solar": calculate_solar_score(data),
        "pavement": calculate_pavement_score(data),
        "parks": calculate_park_score(data),
    }

    # Rounded from the unrounded sum, so it may not equal the breakdown sum
    total_score = round_half_up(sum(raw.values()))

    return EcoScoreResult(
        total_score=total_score,
        breakdown=EcoScoreBreakdown(
            trees_score=round_half_up(raw["trees"]),
            solar_score=round_half_up(raw["solar"]),
            pavement_score=round_half_up(raw["pavement"]),
            park_score=round_half_up(raw["parks"]),
        ),
        feedback=generate_feedback(total_score, raw),
    )
