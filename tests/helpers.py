from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd


def make_workbook(path: Path, rows: list[dict[str, Any]], columns: list[str] | None = None) -> Path:
    """Single-sheet workbook, header on row 1."""
    path.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame(rows, columns=columns)
    with pd.ExcelWriter(path) as writer:
        df.to_excel(writer, sheet_name="Sheet1", index=False)
    return path


ADJUSTED_HEADERS = [
    "Country",
    "Year",
    "Adjusted Incidence per Birth Population",
    "Adjusted Incidence Rate per Birth Population (Lower)",
    "Adjusted Incidence Rate per Birth Population (Upper)",
    "Adjusted Incidence of DALYs per Birth Population",
    "Adjusted Incidence of DALYs per Birth Population (Lower)",
    "Adjusted Incidence of DALYs per Birth Population (Upper)",
]


def adjusted_row(country: Any, year: Any, inc: Any = 1.5, low: Any = 1.0, high: Any = 2.0,
                 daly: Any = 12.0, daly_low: Any = 10.0, daly_high: Any = 14.0) -> dict[str, Any]:
    return dict(zip(ADJUSTED_HEADERS, [country, year, inc, low, high, daly, daly_low, daly_high]))
