"""Command-line scoring of saved simulation snapshots.

Usage:
    python -m ecomap.cli score <simulation.json>
    python -m ecomap.cli evaluate <simulation.json> <analysis.txt>
"""

import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError as SnapshotError

from .evaluation.errors import EvaluationError
from .schemas.simulation import SimulationData
from .services.scoring_service import ScoringService


def load_simulation(path: str) -> SimulationData:
    return SimulationData.model_validate_json(Path(path).read_text(encoding="utf-8"))


def score(simulation_path: str) -> str:
    """Score a snapshot with the deterministic rubric and return JSON."""
    result = ScoringService().score_simulation(load_simulation(simulation_path))
    return result.model_dump_json(by_alias=True, indent=2)


async def evaluate(simulation_path: str, analysis_path: str) -> str:
    """Score a snapshot through the LLM evaluator and return JSON."""
    analysis = Path(analysis_path).read_text(encoding="utf-8")
    result = await ScoringService().evaluate_simulation(
        analysis, load_simulation(simulation_path)
    )
    return result.model_dump_json(by_alias=True, indent=2)


def main(argv: list[str]) -> int:
    try:
        if len(argv) == 2 and argv[0] == "score":
            print(score(argv[1]))
            return 0

        if len(argv) == 3 and argv[0] == "evaluate":
            print(asyncio.run(evaluate(argv[1], argv[2])))
            return 0
    except (EvaluationError, OSError, SnapshotError) as e:
        print(f"Failed to calculate EcoScore: {e}", file=sys.stderr)
        return 1

    print(__doc__.strip(), file=sys.stderr)
    return 2


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
