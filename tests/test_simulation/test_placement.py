"""Tests for placement recording inside a drawn area."""

import random

import pytest

from conftest import PRESIDIO
from ecomap.evaluation.scorer import calculate_eco_score
from ecomap.simulation.placement import (
    InterventionType,
    OutsideBoundary,
    PlacementLimitReached,
    PlacementRecorder,
    PlacementRejected,
    build_boundary,
)

INSIDE = (37.7990, -122.4575)
OUTSIDE = (37.8100, -122.4575)


@pytest.fixture
def recorder() -> PlacementRecorder:
    return PlacementRecorder([PRESIDIO], max_placements=20, brush_size=10, rng=random.Random(1))


class TestBoundary:

    def test_inside_and_outside(self, recorder):
        assert recorder.contains(*INSIDE)
        assert not recorder.contains(*OUTSIDE)

    def test_points_on_the_edge_count_as_inside(self, recorder):
        assert recorder.contains(37.8000, -122.4575)
        assert recorder.contains(*PRESIDIO[0])

    def test_closed_ring_same_as_open_ring(self):
        closed = build_boundary(PRESIDIO + [PRESIDIO[0]])
        opened = build_boundary(PRESIDIO)
        assert closed.equals(opened)

    def test_degenerate_ring_ignored(self):
        assert build_boundary([(1.0, 1.0), (1.0, 2.0), (1.0, 1.0)]) is None

        recorder = PlacementRecorder([[(1.0, 1.0), (1.0, 2.0)]])
        assert recorder.boundaries == []
        with pytest.raises(OutsideBoundary):
            recorder.place("park", 1.0, 1.5)

    def test_any_of_several_boundaries(self):
        second = [(lat + 1, lon) for lat, lon in PRESIDIO]
        recorder = PlacementRecorder([PRESIDIO, second])
        assert recorder.contains(INSIDE[0] + 1, INSIDE[1])


class TestPlacement:

    def test_tree_click_scatters_brush_size_points(self, recorder):
        cluster = recorder.place(InterventionType.TREES, *INSIDE)

        assert cluster.count == 10
        assert cluster.center == INSIDE
        assert len(recorder.placed_trees) == 10
        for lat, lon in recorder.placed_trees:
            assert abs(lat - INSIDE[0]) <= recorder.scatter_radius
            assert abs(lon - INSIDE[1]) <= recorder.scatter_radius

    def test_pavement_and_park_are_single_points(self, recorder):
        recorder.place("pavement", *INSIDE)
        recorder.place("park", *INSIDE)

        data = recorder.snapshot()
        assert len(data.placed_pavement_points) == 1
        assert len(data.placed_parks) == 1
        assert data.total_trees_placed == 0

    def test_ids_are_unique(self, recorder):
        ids = {recorder.place("park", *INSIDE).id for _ in range(10)}
        assert len(ids) == 10

    def test_outside_click_changes_nothing(self, recorder):
        recorder.place("solar", *INSIDE)
        before = recorder.snapshot()

        with pytest.raises(OutsideBoundary):
            recorder.place("solar", *OUTSIDE)

        assert recorder.snapshot() == before

    def test_unknown_kind(self, recorder):
        with pytest.raises(ValueError):
            recorder.place("windmill", *INSIDE)

    @pytest.mark.parametrize("size", [0, 101, -5])
    def test_brush_size_bounds(self, recorder, size):
        with pytest.raises(ValueError):
            recorder.set_brush_size(size)

    def test_brush_size_applies_to_later_clicks(self, recorder):
        recorder.place("trees", *INSIDE)
        recorder.set_brush_size(3)
        recorder.place("trees", *INSIDE)

        data = recorder.snapshot()
        assert [c.count for c in data.tree_clusters] == [10, 3]
        assert data.total_trees_placed == 13


class TestPlacementCap:

    def test_twenty_placements_then_rejected(self, recorder):
        kinds = ["trees"] * 5 + ["solar"] * 5 + ["pavement"] * 6 + ["park"] * 4
        for kind in kinds:
            recorder.place(kind, *INSIDE)

        assert recorder.placement_count == 20
        assert recorder.remaining_placements == 0

        with pytest.raises(PlacementLimitReached):
            recorder.place("park", *INSIDE)
        # The cap applies even to clicks outside the area
        with pytest.raises(PlacementLimitReached):
            recorder.place("park", *OUTSIDE)

        assert recorder.placement_count == 20

    def test_snapshot_at_cap_scores_sanely(self, recorder):
        recorder.set_brush_size(6)
        for kind in ["trees"] * 10 + ["solar"] * 5 + ["pavement"] * 4 + ["park"]:
            recorder.place(kind, *INSIDE)

        data = recorder.snapshot()
        assert data.is_consistent
        assert data.placement_count == 20

        result = calculate_eco_score(data)
        # trees: 60/50 capped 150 + 10 clusters capped 150
        assert result.breakdown.trees_score == 300
        # solar: 30/30*150 + 5*20
        assert result.breakdown.solar_score == 250
        assert result.breakdown.pavement_score == 50
        assert result.breakdown.park_score == 110
        assert result.total_score == 710

    def test_reset_allows_new_placements(self, recorder):
        for _ in range(20):
            recorder.place("pavement", *INSIDE)

        recorder.reset()

        assert recorder.snapshot().placement_count == 0
        assert recorder.placed_trees == []
        recorder.place("trees", *INSIDE)
        assert recorder.placement_count == 1

    def test_rejections_share_a_base_class(self):
        assert issubclass(OutsideBoundary, PlacementRejected)
        assert issubclass(PlacementLimitReached, PlacementRejected)
