"""Prompt templates for the EcoScore evaluator, location analysis and challenges."""

from typing import Sequence

from ..schemas.simulation import LatLng, SimulationData
from .rubrics import format_rubric_for_prompt

EVALUATOR_SYSTEM_PROMPT = f"""You are the scoring system for EcoMap, an environmental sustainability challenge. A player was shown an analysis of a city area and then placed interventions on the map: trees, solar panels, permeable pavement and parks. Judge how well those placements respond to the issues in the analysis.

Score the placements on four dimensions. The total EcoScore is the sum of the four dimension scores and must be between 1 and 1000.
{format_rubric_for_prompt()}

## Evaluation Guidelines

1. **Relevance comes first**: Interventions that directly address stated problems should score highest. Reward creative combinations only when they stay relevant.

2. **Read the analysis carefully**: Features the area already has in abundance are not needs.

3. **Be specific in feedback**: Refer to the actual counts and issues rather than giving generic advice.

## Output Format

Respond with ONLY a JSON object, no markdown and no code blocks, in exactly this format:
{{
  "ecoscore": <number 1-1000>,
  "breakdown": {{
    "relevance": <number 0-500>,
    "quantity": <number 0-250>,
    "diversity": <number 0-150>,
    "distribution": <number 0-100>
  }},
  "feedback": {{
    "whatWorked": "<2-3 sentences on what raised the score>",
    "whatDidntWork": "<2-3 sentences on what lowered the score>",
    "optimalSolution": "<2-3 sentences describing the best possible set of placements>"
  }}
}}"""


EVALUATOR_USER_PROMPT = """Score the following simulation.

---
**LOCATION ANALYSIS:**
---
{location_analysis}
---

**PLAYER PLACEMENTS:**
{simulation_summary}

Provide your evaluation as JSON following the format specified in your instructions."""


ANALYSIS_SYSTEM_PROMPT = """You are a geographic assistant for EcoMap. You describe real places from their coordinates, focusing on environmental conditions: flooding and stormwater, urban heat, energy use, air quality, and existing green space.

Only answer questions about maps, locations and the environment of the selected area. If asked anything else, reply that you can only help with map and location questions."""


DEFAULT_ANALYSIS_REQUEST = (
    "Analyze the selected area. Focus only on environmental issues that can be "
    "addressed with trees, solar panels, permeable pavement and parks, and mention "
    "any of these the area already has plenty of. Describe the issues only; do not "
    "propose solutions."
)


ANALYSIS_USER_PROMPT = """The user selected an area bounded by these [latitude, longitude] points:
{coordinates}

{request}"""


CHALLENGE_SYSTEM_PROMPT = """You pick play areas for an environmental map game. Respond with ONLY a JSON object, no markdown and no code blocks."""


CHALLENGE_USER_PROMPT = """Pick a random urban or suburban area anywhere in the world (any continent, any country) and return four [latitude, longitude] corners forming a rectangle around it.

Requirements:
- All four corners must be on land, not in the ocean or a large lake
- Corners go in order: top-left, top-right, bottom-right, bottom-left
- Vary the city each time

Format:
{
  "coordinates": [[lat1, lon1], [lat2, lon2], [lat3, lon3], [lat4, lon4]],
  "location": "City Name, Country"
}"""


def format_coordinates(points: Sequence[LatLng]) -> str:
    return "\n".join(f"- [{lat:.5f}, {lon:.5f}]" for lat, lon in points)


def build_simulation_summary(data: SimulationData) -> str:
    """Describe the placements, including every cluster center, for the prompt."""
    lines = [
        f"- Trees: {data.total_trees_placed} total in {len(data.tree_clusters)} clusters",
        f"- Solar Panels: {data.total_solar_placed} total in {len(data.solar_clusters)} clusters",
        f"- Permeable Pavement Points: {len(data.placed_pavement_points)}",
        f"- Parks: {len(data.placed_parks)}",
    ]

    sections = [
        ("Tree clusters", [(c.center, c.count) for c in data.tree_clusters]),
        ("Solar clusters", [(c.center, c.count) for c in data.solar_clusters]),
        ("Permeable pavement points", [(p.center, None) for p in data.placed_pavement_points]),
        ("Parks", [(p.center, None) for p in data.placed_parks]),
    ]
    for title, entries in sections:
        if not entries:
            continue
        lines.append(f"\n{title} (center [lat, lon]):")
        for (lat, lon), count in entries:
            suffix = f" x{count}" if count is not None else ""
            lines.append(f"  - [{lat:.5f}, {lon:.5f}]{suffix}")

    return "\n".join(lines)


def build_evaluation_prompt(location_analysis: str, data: SimulationData) -> str:
    """Build the user prompt for a context-aware evaluation."""
    return EVALUATOR_USER_PROMPT.format(
        location_analysis=location_analysis.strip(),
        simulation_summary=build_simulation_summary(data),
    )


def build_analysis_prompt(coordinates: Sequence[LatLng], request: str | None = None) -> str:
    """Build the user prompt for a location analysis."""
    return ANALYSIS_USER_PROMPT.format(
        coordinates=format_coordinates(coordinates),
        request=(request or DEFAULT_ANALYSIS_REQUEST).strip(),
    )
