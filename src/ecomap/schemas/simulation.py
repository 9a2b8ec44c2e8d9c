"""Simulation snapshot schemas shared by the map client and the scorers."""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# (latitude, longitude)
LatLng = Tuple[float, float]


class CamelModel(BaseModel):
    """Immutable model that reads and writes camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class PointCluster(CamelModel):
    """One click that scattered a batch of trees or solar panels."""

    id: str = Field(..., min_length=1)
    center: LatLng
    count: int = Field(..., ge=1)


class PointPlacement(CamelModel):
    """One click that placed a single pavement point or park."""

    id: str = Field(..., min_length=1)
    center: LatLng


class SimulationData(CamelModel):
    """
    Snapshot of everything the user placed, taken on submit.

    Totals are declared by the map client and are expected to equal the
    sum of cluster counts; see `is_consistent`.
    """

    tree_clusters: List[PointCluster] = Field(default_factory=list)
    solar_clusters: List[PointCluster] = Field(default_factory=list)
    placed_pavement_points: List[PointPlacement] = Field(default_factory=list)
    placed_parks: List[PointPlacement] = Field(default_factory=list)
    total_trees_placed: int = Field(0, ge=0)
    total_solar_placed: int = Field(0, ge=0)

    @property
    def placement_count(self) -> int:
        """Number of clicks recorded across all four collections."""
        return (
            len(self.tree_clusters)
            + len(self.solar_clusters)
            + len(self.placed_pavement_points)
            + len(self.placed_parks)
        )

    @property
    def is_consistent(self) -> bool:
        """True when the declared totals match the cluster counts."""
        return (
            self.total_trees_placed == sum(c.count for c in self.tree_clusters)
            and self.total_solar_placed == sum(c.count for c in self.solar_clusters)
        )
