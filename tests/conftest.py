# Shared pytest fixtures (workbook helpers live in tests/helpers.py)
from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "public").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("CLP_STATS_CONFIG", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """years: ["2030", "2040", "2050"]
adjusted:
  input: public/adjusted.xlsx
  output: data/adjusted_stats.json
estimate:
  input: public/estimates.xlsx
  output: data/estimated_stats.json
geography_path: public/countries.geojson
render_output: build/map.html
missing_text: "No data"
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "stats.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def geojson_file(temp_workdir: Path) -> Path:
    def square(x: float, y: float) -> dict[str, Any]:
        return {"type": "Polygon", "coordinates": [[[x, y], [x + 1, y], [x + 1, y + 1], [x, y + 1], [x, y]]]}

    data = {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "properties": {"name": "Vietnam"}, "geometry": square(105, 15)},
            {"type": "Feature", "properties": {"ADMIN": "Brazil"}, "geometry": square(-50, -10)},
            {"type": "Feature", "properties": {"NAME": "Atlantis"}, "geometry": square(0, 0)},
        ],
    }
    path = temp_workdir / "public" / "countries.geojson"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
