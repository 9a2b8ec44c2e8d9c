"""Business logic services."""

from .scoring_service import ScoringService

__all__ = ["ScoringService"]
