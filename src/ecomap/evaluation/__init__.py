"""EcoScore rubric scoring and LLM-backed evaluation."""

from .analysis import LocationAnalyzer
from .challenge import FALLBACK_AREAS, ChallengeGenerator
from .errors import CollaboratorUnavailable, EvaluationError, ParseError, ValidationError
from .evaluator import EcoScoreEvaluator
from .providers import LLMProvider, get_available_providers, get_provider
from .rubrics import EVALUATION_DIMENSIONS, RUBRIC_CATEGORIES
from .scorer import calculate_eco_score, feedback_band

__all__ = [
    "LocationAnalyzer",
    "FALLBACK_AREAS",
    "ChallengeGenerator",
    "CollaboratorUnavailable",
    "EvaluationError",
    "ParseError",
    "ValidationError",
    "EcoScoreEvaluator",
    "LLMProvider",
    "get_available_providers",
    "get_provider",
    "EVALUATION_DIMENSIONS",
    "RUBRIC_CATEGORIES",
    "calculate_eco_score",
    "feedback_band",
]
