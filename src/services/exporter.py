from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models.records import StatsTable

"""StatsTable JSON export / load.

Shape: ``{country: {year: record}}``, pretty-printed (indent=2) so that
regenerated files diff cleanly. Non-ASCII country names are written as-is.
"""

__all__ = [
    "table_to_dict",
    "write_stats_json",
    "load_stats_json",
    "StatsFileError",
]


class StatsFileError(Exception):
    """Raised when a stats JSON file is missing or malformed."""


def table_to_dict(table: StatsTable) -> dict[str, dict[str, dict[str, Any]]]:
    return {
        country: {year: record.to_dict() for year, record in years.items()}
        for country, years in table.items()
    }


def write_stats_json(table: StatsTable, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(table_to_dict(table), indent=2, ensure_ascii=False, allow_nan=False)
    path.write_text(text + "\n", encoding="utf-8")
    return path


def load_stats_json(path: Path) -> dict[str, dict[str, dict[str, Any]]]:
    """Load a previously written stats file for the renderer."""
    if not path.exists():
        raise StatsFileError(f"stats file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise StatsFileError(f"invalid stats json {path}: {e}") from e
    if not isinstance(data, dict):
        raise StatsFileError(f"stats json {path} must be an object keyed by country")
    return data
