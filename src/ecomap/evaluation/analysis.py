"""Location analysis: the free-text input to the context-aware evaluator."""

import logging
from typing import Optional, Sequence

from ..config import get_settings
from ..schemas.simulation import LatLng
from .prompts import ANALYSIS_SYSTEM_PROMPT, build_analysis_prompt
from .providers import LLMProvider, get_provider

settings = get_settings()
logger = logging.getLogger(__name__)


class LocationAnalyzer:
    """Asks a provider to describe the environmental issues of a selected area."""

    def __init__(self, provider: Optional[LLMProvider] = None):
        self.provider = provider or get_provider(
            settings.scoring_provider, settings.scoring_model
        )

    async def analyze(
        self,
        coordinates: Sequence[LatLng],
        request: Optional[str] = None,
    ) -> str:
        """Return the provider's analysis text, stripped of surrounding whitespace."""
        if len(coordinates) < 3:
            raise ValueError("An area needs at least three coordinates")

        logger.info("Analyzing area with %d vertices", len(coordinates))
        text = await self.provider.generate(
            ANALYSIS_SYSTEM_PROMPT,
            build_analysis_prompt(coordinates, request),
        )
        return text.strip()
