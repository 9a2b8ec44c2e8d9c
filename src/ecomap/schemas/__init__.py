"""Pydantic schemas for API request/response validation."""

from .challenge import ChallengeArea, LocationAnalysisRequest, LocationAnalysisResponse
from .ecoscore import (
    EcoScoreBreakdown,
    EcoScoreEvaluation,
    EcoScoreResult,
    EvaluateRequest,
    EvaluationBreakdown,
    EvaluationFeedback,
)
from .simulation import LatLng, PointCluster, PointPlacement, SimulationData

__all__ = [
    "ChallengeArea",
    "LocationAnalysisRequest",
    "LocationAnalysisResponse",
    "EcoScoreBreakdown",
    "EcoScoreEvaluation",
    "EcoScoreResult",
    "EvaluateRequest",
    "EvaluationBreakdown",
    "EvaluationFeedback",
    "LatLng",
    "PointCluster",
    "PointPlacement",
    "SimulationData",
]
