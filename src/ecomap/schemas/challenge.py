"""Challenge area and location analysis schemas."""

from typing import List, Optional

from pydantic import Field

from .simulation import CamelModel, LatLng


class ChallengeArea(CamelModel):
    """A rectangular play area: four [lat, lon] corners and a place name."""

    coordinates: List[LatLng] = Field(..., min_length=4, max_length=4)
    location: str


class LocationAnalysisRequest(CamelModel):
    """Polygon to analyse, with an optional custom question."""

    coordinates: List[LatLng] = Field(..., min_length=3)
    prompt: Optional[str] = Field(None, max_length=2000)


class LocationAnalysisResponse(CamelModel):
    text: str
