"""Tests for the command-line entry point."""

import json

from conftest import make_simulation
from ecomap import cli


def test_score_file(tmp_path, capsys):
    path = tmp_path / "simulation.json"
    simulation = make_simulation(parks=1)
    path.write_text(simulation.model_dump_json(by_alias=True), encoding="utf-8")

    assert cli.main(["score", str(path)]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["totalScore"] == 110
    assert output["breakdown"]["parkScore"] == 110


def test_usage_on_bad_arguments(capsys):
    assert cli.main(["frobnicate"]) == 2
    assert "python -m ecomap.cli score" in capsys.readouterr().err


def test_score_missing_file(tmp_path, capsys):
    assert cli.main(["score", str(tmp_path / "missing.json")]) == 1
    assert capsys.readouterr().err.startswith("Failed to calculate EcoScore")


def test_score_malformed_snapshot(tmp_path, capsys):
    path = tmp_path / "simulation.json"
    path.write_text('{"totalTreesPlaced": -5}', encoding="utf-8")

    assert cli.main(["score", str(path)]) == 1
    assert "totalTreesPlaced" in capsys.readouterr().err
