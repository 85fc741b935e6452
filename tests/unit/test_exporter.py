from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.models.records import AdjustedRecord, EstimateRecord
from src.services.exporter import StatsFileError, load_stats_json, write_stats_json


def test_write_stats_json_pretty_printed(temp_workdir: Path):
    table = {
        "Côte d'Ivoire": {"2030": AdjustedRecord(adjusted_incidence=1.5, adjusted_incidence_ci=(1.0, None))},
    }
    out = write_stats_json(table, temp_workdir / "nested" / "adjusted.json")
    text = out.read_text(encoding="utf-8")
    assert "Côte d'Ivoire" in text
    assert text.startswith("{\n  ")
    assert json.loads(text) == {
        "Côte d'Ivoire": {
            "2030": {
                "adjusted_incidence": 1.5,
                "adjusted_incidence_ci": [1.0, None],
                "adjusted_daly": None,
                "adjusted_daly_ci": [None, None],
            }
        }
    }


def test_load_stats_json_round_trip(temp_workdir: Path):
    table = {"Peru": {"2040": EstimateRecord(clp_estimate="12", clp_number=12.0)}}
    out = write_stats_json(table, temp_workdir / "est.json")
    assert load_stats_json(out)["Peru"]["2040"]["clp_number"] == 12.0


def test_load_stats_json_errors(temp_workdir: Path):
    with pytest.raises(StatsFileError):
        load_stats_json(temp_workdir / "missing.json")
    bad = temp_workdir / "bad.json"
    bad.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(StatsFileError):
        load_stats_json(bad)
