"""API dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from ..services.scoring_service import ScoringService


# Service factory dependencies
def get_scoring_service() -> ScoringService:
    return ScoringService()


# Service type aliases
ScoringServiceDep = Annotated[ScoringService, Depends(get_scoring_service)]
