"""Challenge setup endpoints: play area and location analysis."""

from fastapi import APIRouter, HTTPException, status

from ..deps import ScoringServiceDep
from ...evaluation.errors import CollaboratorUnavailable, ParseError, ValidationError
from ...schemas.challenge import (
    ChallengeArea,
    LocationAnalysisRequest,
    LocationAnalysisResponse,
)

router = APIRouter(prefix="/challenge", tags=["challenge"])


@router.post("/area", response_model=ChallengeArea)
async def generate_area(service: ScoringServiceDep):
    """
    Pick a random play area for a new challenge.

    Falls back to a fixed list of cities when the provider quota is exhausted.
    """
    try:
        return await service.generate_challenge()
    except CollaboratorUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Failed to generate coordinates: {e}",
        )
    except (ParseError, ValidationError) as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to generate coordinates: {e}",
        )


@router.post("/analysis", response_model=LocationAnalysisResponse)
async def analyze_location(request: LocationAnalysisRequest, service: ScoringServiceDep):
    """Describe the environmental issues of the selected area."""
    try:
        text = await service.analyze_location(request.coordinates, request.prompt)
    except CollaboratorUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Failed to generate content: {e}",
        )

    return LocationAnalysisResponse(text=text)
