"""Simulation session state: placements inside a drawn area."""

from .placement import (
    InterventionType,
    OutsideBoundary,
    PlacementLimitReached,
    PlacementRecorder,
    PlacementRejected,
    build_boundary,
)

__all__ = [
    "InterventionType",
    "OutsideBoundary",
    "PlacementLimitReached",
    "PlacementRecorder",
    "PlacementRejected",
    "build_boundary",
]
