"""Pytest fixtures for testing."""

import json
from typing import AsyncGenerator, List, Optional, Sequence

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from ecomap.api.deps import get_scoring_service
from ecomap.evaluation.providers import LLMProvider
from ecomap.main import app
from ecomap.schemas.simulation import PointCluster, PointPlacement, SimulationData
from ecomap.services.scoring_service import ScoringService

# Presidio, San Francisco
PRESIDIO = [
    (37.8000, -122.4600),
    (37.8000, -122.4550),
    (37.7975, -122.4550),
    (37.7975, -122.4600),
]

SAMPLE_ANALYSIS = """The selected area sits in a low-lying coastal district with frequent
street flooding after winter storms and large impervious parking lots. Summer heat is
moderate. The area already has extensive park land along its western edge."""

VALID_EVALUATION = {
    "ecoscore": 720,
    "breakdown": {
        "relevance": 380,
        "quantity": 180,
        "diversity": 100,
        "distribution": 60,
    },
    "feedback": {
        "whatWorked": "Permeable pavement targets the flooding described in the analysis.",
        "whatDidntWork": "Extra parks add little because the area already has plenty.",
        "optimalSolution": "Concentrate pavement on the parking lots and add trees along streets.",
    },
}


class FakeProvider(LLMProvider):
    """Provider that replays canned responses instead of calling an API."""

    provider_name = "fake"

    def __init__(
        self,
        responses: Optional[List[str]] = None,
        error: Optional[Exception] = None,
        api_key: str = "test-key",
    ):
        super().__init__(model="fake-model", api_key=api_key)
        self.responses = list(responses or [])
        self.error = error
        self.calls: List[tuple] = []

    def _configured_key(self) -> str:
        return ""

    async def _generate(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


def make_simulation(
    tree_counts: Sequence[int] = (),
    solar_counts: Sequence[int] = (),
    pavement: int = 0,
    parks: int = 0,
) -> SimulationData:
    """Build a consistent snapshot: one cluster per entry in the count lists."""
    lat, lon = PRESIDIO[0]
    return SimulationData(
        tree_clusters=[
            PointCluster(id=f"tree-{i}", center=(lat - 0.0001 * i, lon + 0.0001 * i), count=count)
            for i, count in enumerate(tree_counts)
        ],
        solar_clusters=[
            PointCluster(id=f"solar-{i}", center=(lat - 0.0002 * i, lon + 0.0003), count=count)
            for i, count in enumerate(solar_counts)
        ],
        placed_pavement_points=[
            PointPlacement(id=f"pavement-{i}", center=(lat - 0.0003, lon + 0.0001 * i))
            for i in range(pavement)
        ],
        placed_parks=[
            PointPlacement(id=f"park-{i}", center=(lat - 0.002, lon + 0.001 * i))
            for i in range(parks)
        ],
        total_trees_placed=sum(tree_counts),
        total_solar_placed=sum(solar_counts),
    )


@pytest.fixture
def full_simulation() -> SimulationData:
    """Every rubric category exactly at its reference optimum."""
    return make_simulation(
        tree_counts=[10] * 5,
        solar_counts=[6] * 5,
        pavement=20,
        parks=4,
    )


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider(responses=[json.dumps(VALID_EVALUATION)])


@pytest_asyncio.fixture(scope="function")
async def client(fake_provider: FakeProvider) -> AsyncGenerator[AsyncClient, None]:
    """Create test client whose scoring service uses the fake provider."""

    def override_get_scoring_service():
        return ScoringService(provider=fake_provider)

    app.dependency_overrides[get_scoring_service] = override_get_scoring_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
