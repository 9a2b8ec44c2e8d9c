"""EcoScore API endpoints."""

from fastapi import APIRouter, HTTPException, status

from ..deps import ScoringServiceDep
from ...evaluation.errors import CollaboratorUnavailable, ParseError, ValidationError
from ...schemas.ecoscore import EcoScoreEvaluation, EcoScoreResult, EvaluateRequest
from ...schemas.simulation import SimulationData

router = APIRouter(prefix="/ecoscore", tags=["ecoscore"])


@router.post("/rubric", response_model=EcoScoreResult)
async def score_rubric(data: SimulationData, service: ScoringServiceDep):
    """
    Score a simulation with the deterministic rubric.

    No external calls; identical input always yields the identical result.
    """
    return service.score_simulation(data)


@router.post("/evaluate", response_model=EcoScoreEvaluation)
async def evaluate(request: EvaluateRequest, service: ScoringServiceDep):
    """
    Score a simulation against the location analysis it was built for.

    Relevance and feedback come from the configured LLM provider. A reply
    that breaks the score contract fails the request rather than being
    replaced by a default score.
    """
    try:
        return await service.evaluate_simulation(
            request.location_analysis, request.simulation_data
        )
    except CollaboratorUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Failed to calculate EcoScore: {e}",
        )
    except (ParseError, ValidationError) as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to calculate EcoScore: {e}",
        )
