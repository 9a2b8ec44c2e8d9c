"""Context-aware EcoScore evaluator backed by a text-generation provider."""

import logging
import math
from typing import Any, Optional

from ..config import get_settings
from ..schemas.ecoscore import EcoScoreEvaluation, EvaluationBreakdown, EvaluationFeedback
from ..schemas.simulation import SimulationData
from .errors import ParseError, ValidationError
from .parsing import load_json_response
from .prompts import EVALUATOR_SYSTEM_PROMPT, build_evaluation_prompt
from .providers import LLMProvider, get_provider
from .rubrics import EVALUATION_DIMENSIONS, EVALUATION_FEEDBACK_FIELDS, MAX_TOTAL_SCORE
from .scorer import round_half_up

settings = get_settings()
logger = logging.getLogger(__name__)

MIN_ECOSCORE = 1


class EcoScoreEvaluator:
    """
    Scores a simulation against a free-text location analysis.

    Relevance judgement and prose feedback are delegated to an LLM; this
    class builds the request and turns the untyped reply into an
    EcoScoreEvaluation, rejecting anything outside the contract.
    """

    def __init__(self, provider: Optional[LLMProvider] = None):
        self.provider = provider or get_provider(
            settings.scoring_provider, settings.scoring_model
        )

    async def evaluate(
        self,
        location_analysis: str,
        data: SimulationData,
    ) -> EcoScoreEvaluation:
        """
        Run one evaluation.

        Raises:
            CollaboratorUnavailable: the provider call failed
            ParseError: the reply was not JSON
            ValidationError: the reply broke the score or shape contract
        """
        prompt = build_evaluation_prompt(location_analysis, data)

        logger.info(
            "Requesting EcoScore evaluation from %s (model=%s, placements=%d)",
            self.provider.provider_name,
            self.provider.model,
            data.placement_count,
        )
        response_text = await self.provider.generate(EVALUATOR_SYSTEM_PROMPT, prompt)

        try:
            evaluation = self.parse_evaluation_response(response_text)
        except (ParseError, ValidationError) as e:
            logger.warning("Rejected EcoScore response: %s", e)
            raise

        logger.info("EcoScore evaluation complete: %d", evaluation.ecoscore)
        return evaluation

    def parse_evaluation_response(self, response_text: str) -> EcoScoreEvaluation:
        """
        Parse the LLM's JSON reply into an EcoScoreEvaluation.

        Handles replies wrapped in markdown code fences.
        """
        data = load_json_response(response_text)

        if not isinstance(data, dict):
            raise ValidationError("LLM response is not a JSON object")

        ecoscore = data.get("ecoscore")
        if not _is_number(ecoscore) or not MIN_ECOSCORE <= ecoscore <= MAX_TOTAL_SCORE:
            raise ValidationError(
                f"Invalid ecoscore value: {ecoscore!r} (must be {MIN_ECOSCORE}-{MAX_TOTAL_SCORE})"
            )

        breakdown = data.get("breakdown")
        if not isinstance(breakdown, dict):
            raise ValidationError("Missing breakdown in response")

        scores = {}
        for dim, config in EVALUATION_DIMENSIONS.items():
            value = breakdown.get(dim)
            if not _is_number(value):
                raise ValidationError(f"Missing or non-numeric score for dimension: {dim}")
            if not 0 <= value <= config["max_points"]:
                raise ValidationError(
                    f"Score for {dim} out of range: {value} (must be 0-{config['max_points']})"
                )
            scores[dim] = round_half_up(value)

        feedback = data.get("feedback")
        if not isinstance(feedback, dict):
            raise ValidationError("Missing feedback in response")

        for field in EVALUATION_FEEDBACK_FIELDS:
            if not isinstance(feedback.get(field), str):
                raise ValidationError(f"Missing feedback field: {field}")

        return EcoScoreEvaluation(
            ecoscore=round_half_up(ecoscore),
            breakdown=EvaluationBreakdown(**scores),
            feedback=EvaluationFeedback(
                what_worked=feedback["whatWorked"],
                what_didnt_work=feedback["whatDidntWork"],
                optimal_solution=feedback["optimalSolution"],
            ),
        )


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
