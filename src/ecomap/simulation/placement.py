"""Placement recording for a simulation session.

Each click inside a drawn boundary adds one cluster (trees, solar) or one
placement (pavement, park). The recorder enforces the boundary and the
combined click cap, and produces the SimulationData snapshot on submit.
"""

import enum
import logging
import random
from typing import List, Optional, Sequence, Union
from uuid import uuid4

from shapely.geometry import Point, Polygon

from ..config import get_settings
from ..schemas.simulation import LatLng, PointCluster, PointPlacement, SimulationData

settings = get_settings()
logger = logging.getLogger(__name__)

MIN_BRUSH_SIZE = 1
MAX_BRUSH_SIZE = 100


class InterventionType(str, enum.Enum):
    """Interventions a player can place."""

    TREES = "trees"
    SOLAR = "solar"
    PAVEMENT = "pavement"
    PARK = "park"


class PlacementRejected(Exception):
    """Raised when a click does not produce a placement."""

    pass


class OutsideBoundary(PlacementRejected):
    pass


class PlacementLimitReached(PlacementRejected):
    pass


def build_boundary(ring: Sequence[LatLng]) -> Optional[Polygon]:
    """
    Build a shapely polygon from a ring of (lat, lon) vertices.

    Returns None for rings with fewer than three distinct vertices.
    """
    distinct = list(dict.fromkeys((float(lat), float(lon)) for lat, lon in ring))
    if len(distinct) < 3:
        return None
    # shapely works in (x, y) = (lon, lat) and closes the ring itself
    return Polygon([(lon, lat) for lat, lon in distinct])


class PlacementRecorder:
    """Accumulates the placements of one simulation session."""

    def __init__(
        self,
        boundaries: Sequence[Sequence[LatLng]],
        max_placements: Optional[int] = None,
        brush_size: Optional[int] = None,
        scatter_radius: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ):
        self.boundaries: List[Polygon] = [
            polygon for polygon in (build_boundary(ring) for ring in boundaries) if polygon is not None
        ]
        self.max_placements = max_placements if max_placements is not None else settings.max_placements
        self.scatter_radius = scatter_radius if scatter_radius is not None else settings.scatter_radius
        self.rng = rng or random.Random()
        self.brush_size = settings.default_brush_size
        if brush_size is not None:
            self.set_brush_size(brush_size)

        self.tree_clusters: List[PointCluster] = []
        self.solar_clusters: List[PointCluster] = []
        self.pavement_points: List[PointPlacement] = []
        self.parks: List[PointPlacement] = []
        # Individual scattered points, for rendering
        self.placed_trees: List[LatLng] = []
        self.placed_solar_panels: List[LatLng] = []

    @property
    def placement_count(self) -> int:
        return (
            len(self.tree_clusters)
            + len(self.solar_clusters)
            + len(self.pavement_points)
            + len(self.parks)
        )

    @property
    def remaining_placements(self) -> int:
        return max(self.max_placements - self.placement_count, 0)

    def set_brush_size(self, brush_size: int) -> None:
        """Set how many points each tree/solar click scatters."""
        if not MIN_BRUSH_SIZE <= brush_size <= MAX_BRUSH_SIZE:
            raise ValueError(
                f"Brush size must be between {MIN_BRUSH_SIZE} and {MAX_BRUSH_SIZE}, got {brush_size}"
            )
        self.brush_size = brush_size

    def contains(self, lat: float, lon: float) -> bool:
        """True when the point lies inside or on any drawn boundary."""
        point = Point(lon, lat)
        return any(polygon.covers(point) for polygon in self.boundaries)

    def place(
        self,
        kind: Union[InterventionType, str],
        lat: float,
        lon: float,
    ) -> Union[PointCluster, PointPlacement]:
        """
        Record one click.

        Raises:
            PlacementLimitReached: the combined click cap is already used up
            OutsideBoundary: the click is outside every drawn boundary
        """
        kind = InterventionType(kind)

        if self.placement_count >= self.max_placements:
            raise PlacementLimitReached(
                f"Maximum number of placements ({self.max_placements}) reached"
            )

        if not self.contains(lat, lon):
            logger.debug("Click outside drawn boundaries at (%f, %f)", lat, lon)
            raise OutsideBoundary(f"Place {kind.value} inside the drawn area")

        center = (lat, lon)
        item_id = uuid4().hex

        if kind in (InterventionType.TREES, InterventionType.SOLAR):
            points = self._scatter(center, self.brush_size)
            cluster = PointCluster(id=item_id, center=center, count=len(points))
            if kind == InterventionType.TREES:
                self.tree_clusters.append(cluster)
                self.placed_trees.extend(points)
            else:
                self.solar_clusters.append(cluster)
                self.placed_solar_panels.extend(points)
            return cluster

        placement = PointPlacement(id=item_id, center=center)
        if kind == InterventionType.PAVEMENT:
            self.pavement_points.append(placement)
        else:
            self.parks.append(placement)
        return placement

    def snapshot(self) -> SimulationData:
        """Build the immutable snapshot handed to the scorers."""
        return SimulationData(
            tree_clusters=list(self.tree_clusters),
            solar_clusters=list(self.solar_clusters),
            placed_pavement_points=list(self.pavement_points),
            placed_parks=list(self.parks),
            total_trees_placed=len(self.placed_trees),
            total_solar_placed=len(self.placed_solar_panels),
        )

    def reset(self) -> None:
        """Discard every placement so the player can retry."""
        self.tree_clusters.clear()
        self.solar_clusters.clear()
        self.pavement_points.clear()
        self.parks.clear()
        self.placed_trees.clear()
        self.placed_solar_panels.clear()

    def _scatter(self, center: LatLng, count: int) -> List[LatLng]:
        lat, lon = center
        radius = self.scatter_radius
        return [
            (
                lat + (self.rng.random() - 0.5) * radius * 2,
                lon + (self.rng.random() - 0.5) * radius * 2,
            )
            for _ in range(count)
        ]
