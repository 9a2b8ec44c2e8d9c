"""Challenge area generation with an offline fallback when the provider is rate limited."""

import logging
import random
from typing import Optional

from ..config import get_settings
from ..schemas.challenge import ChallengeArea
from .errors import CollaboratorUnavailable, ValidationError
from .parsing import load_json_response
from .prompts import CHALLENGE_SYSTEM_PROMPT, CHALLENGE_USER_PROMPT
from .providers import LLMProvider, get_provider

settings = get_settings()
logger = logging.getLogger(__name__)


def _square(lat: float, lon: float, location: str) -> ChallengeArea:
    # Roughly 280m x 550m box with (lat, lon) as the top-left corner
    return ChallengeArea(
        coordinates=[
            (lat, lon),
            (lat, lon + 0.005),
            (lat - 0.0025, lon + 0.005),
            (lat - 0.0025, lon),
        ],
        location=location,
    )


# Used when the provider quota is exhausted
FALLBACK_AREAS = [
    # North America
    _square(37.8000, -122.4600, "Presidio, San Francisco, CA"),
    _square(40.7580, -73.9855, "Times Square, New York City, NY"),
    _square(43.6532, -79.3832, "Toronto, Canada"),
    _square(19.4326, -99.1332, "Mexico City, Mexico"),
    # Europe
    _square(51.5074, -0.1278, "London, United Kingdom"),
    _square(48.8566, 2.3522, "Paris, France"),
    _square(52.5200, 13.4050, "Berlin, Germany"),
    _square(41.9028, 12.4964, "Rome, Italy"),
    _square(40.4168, -3.7038, "Madrid, Spain"),
    _square(55.7558, 37.6173, "Moscow, Russia"),
    # Asia
    _square(35.6762, 139.6503, "Tokyo, Japan"),
    _square(39.9042, 116.4074, "Beijing, China"),
    _square(31.2304, 121.4737, "Shanghai, China"),
    _square(1.3521, 103.8198, "Singapore"),
    _square(37.5665, 126.9780, "Seoul, South Korea"),
    _square(28.6139, 77.2090, "New Delhi, India"),
    _square(19.0760, 72.8777, "Mumbai, India"),
    _square(13.7563, 100.5018, "Bangkok, Thailand"),
    # Middle East
    _square(25.2048, 55.2708, "Dubai, UAE"),
    _square(41.0082, 28.9784, "Istanbul, Turkey"),
    # Africa
    _square(-33.9249, 18.4241, "Cape Town, South Africa"),
    _square(30.0444, 31.2357, "Cairo, Egypt"),
    _square(-1.2921, 36.8219, "Nairobi, Kenya"),
    # South America
    _square(-23.5505, -46.6333, "São Paulo, Brazil"),
    _square(-34.6037, -58.3816, "Buenos Aires, Argentina"),
    _square(-12.0464, -77.0428, "Lima, Peru"),
    # Oceania
    _square(-33.8688, 151.2093, "Sydney, Australia"),
    _square(-37.8136, 144.9631, "Melbourne, Australia"),
    _square(-36.8485, 174.7633, "Auckland, New Zealand"),
]


class ChallengeGenerator:
    """Picks a random play area for a new challenge."""

    def __init__(
        self,
        provider: Optional[LLMProvider] = None,
        rng: Optional[random.Random] = None,
    ):
        self.provider = provider or get_provider(
            settings.scoring_provider, settings.scoring_model
        )
        self.rng = rng or random.Random()

    async def generate(self) -> ChallengeArea:
        """
        Ask the provider for a new area.

        Falls back to a fixed list of cities when the provider reports a
        rate limit or exhausted quota. Any other failure propagates.
        """
        try:
            response_text = await self.provider.generate(
                CHALLENGE_SYSTEM_PROMPT, CHALLENGE_USER_PROMPT
            )
        except CollaboratorUnavailable as e:
            if not e.is_rate_limited:
                raise
            area = self.rng.choice(FALLBACK_AREAS)
            logger.warning("Quota exceeded, using fallback challenge area: %s", area.location)
            return area

        area = self.parse_challenge_response(response_text)
        logger.info("Generated challenge area: %s", area.location)
        return area

    def parse_challenge_response(self, response_text: str) -> ChallengeArea:
        data = load_json_response(response_text)

        if not isinstance(data, dict):
            raise ValidationError("Challenge response is not a JSON object")

        coordinates = data.get("coordinates")
        if not isinstance(coordinates, list) or len(coordinates) != 4:
            raise ValidationError("Invalid coordinate format: expected four points")

        points = []
        for coord in coordinates:
            if not isinstance(coord, list) or len(coord) != 2:
                raise ValidationError("Invalid coordinate point format")
            lat, lon = coord
            if any(isinstance(v, bool) or not isinstance(v, (int, float)) for v in coord):
                raise ValidationError("Coordinates must be numbers")
            if not (-90 <= lat <= 90 and -180 <= lon <= 180):
                raise ValidationError(f"Coordinates out of valid range: [{lat}, {lon}]")
            points.append((float(lat), float(lon)))

        location = data.get("location")
        if not isinstance(location, str) or not location.strip():
            raise ValidationError("Missing location name")

        return ChallengeArea(coordinates=points, location=location.strip())
