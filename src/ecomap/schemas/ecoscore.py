"""EcoScore schemas for API validation."""

from pydantic import Field

from .simulation import CamelModel, SimulationData


class EcoScoreBreakdown(CamelModel):
    """Rubric sub-scores, each rounded to the nearest point."""

    trees_score: int = Field(..., ge=0, le=300)
    solar_score: int = Field(..., ge=0, le=250)
    pavement_score: int = Field(..., ge=0, le=250)
    park_score: int = Field(..., ge=0, le=200)


class EcoScoreResult(CamelModel):
    """
    Output of the deterministic rubric scorer.

    Note: total_score is rounded from the unrounded category sum, so it
    can differ from the sum of the rounded breakdown entries.
    """

    total_score: int = Field(..., ge=0, le=1000)
    breakdown: EcoScoreBreakdown
    feedback: str


class EvaluationBreakdown(CamelModel):
    """Sub-scores from the context-aware evaluator."""

    relevance: int = Field(..., ge=0, le=500)
    quantity: int = Field(..., ge=0, le=250)
    diversity: int = Field(..., ge=0, le=150)
    distribution: int = Field(..., ge=0, le=100)


class EvaluationFeedback(CamelModel):
    """Prose explanation returned alongside an evaluation."""

    what_worked: str
    what_didnt_work: str
    optimal_solution: str


class EcoScoreEvaluation(CamelModel):
    """Output of the context-aware evaluator."""

    ecoscore: int = Field(..., ge=1, le=1000)
    breakdown: EvaluationBreakdown
    feedback: EvaluationFeedback


class EvaluateRequest(CamelModel):
    """Body for the context-aware scoring endpoint."""

    location_analysis: str = Field(..., min_length=1)
    simulation_data: SimulationData
