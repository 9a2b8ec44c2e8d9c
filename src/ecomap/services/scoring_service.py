"""Scoring service used by the API and CLI."""

import logging
from typing import Optional, Sequence

from ..evaluation.analysis import LocationAnalyzer
from ..evaluation.challenge import ChallengeGenerator
from ..evaluation.evaluator import EcoScoreEvaluator
from ..evaluation.providers import LLMProvider
from ..evaluation.scorer import calculate_eco_score
from ..schemas.challenge import ChallengeArea
from ..schemas.ecoscore import EcoScoreEvaluation, EcoScoreResult
from ..schemas.simulation import LatLng, SimulationData

logger = logging.getLogger(__name__)


class ScoringService:
    """
    Service for scoring simulations and preparing challenges.

    All LLM-backed operations share one provider. Nothing is cached: every
    call is scored afresh.
    """

    def __init__(self, provider: Optional[LLMProvider] = None):
        self.provider = provider
        self._evaluator: Optional[EcoScoreEvaluator] = None
        self._analyzer: Optional[LocationAnalyzer] = None
        self._challenges: Optional[ChallengeGenerator] = None

    @property
    def evaluator(self) -> EcoScoreEvaluator:
        if self._evaluator is None:
            self._evaluator = EcoScoreEvaluator(self.provider)
        return self._evaluator

    @property
    def analyzer(self) -> LocationAnalyzer:
        if self._analyzer is None:
            self._analyzer = LocationAnalyzer(self.provider)
        return self._analyzer

    @property
    def challenges(self) -> ChallengeGenerator:
        if self._challenges is None:
            self._challenges = ChallengeGenerator(self.provider)
        return self._challenges

    def score_simulation(self, data: SimulationData) -> EcoScoreResult:
        """Score with the deterministic rubric."""
        result = calculate_eco_score(data)
        logger.info(
            "Rubric EcoScore %d for %d placements", result.total_score, data.placement_count
        )
        return result

    async def evaluate_simulation(
        self,
        location_analysis: str,
        data: SimulationData,
    ) -> EcoScoreEvaluation:
        """Score against a location analysis through the LLM evaluator."""
        return await self.evaluator.evaluate(location_analysis, data)

    async def analyze_location(
        self,
        coordinates: Sequence[LatLng],
        request: Optional[str] = None,
    ) -> str:
        return await self.analyzer.analyze(coordinates, request)

    async def generate_challenge(self) -> ChallengeArea:
        return await self.challenges.generate()
