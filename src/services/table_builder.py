from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ..models.column_catalog import COUNTRY, YEAR
from ..models.records import AdjustedRecord, EstimateRecord, StatsTable
from ..parsing.numeric import display_text, extract_number
from .progress import RowProgress

"""Statistics table builder: RawRows -> StatsTable.

Two workbook layouts are supported:

- adjusted: one row per (country, year) with adjusted incidence / DALY and
  their CI bounds.
- estimate: one row per country with year-named CL/P and DALY estimate
  columns; display text is kept alongside the parsed number.

Rows with an unrecognized year or an empty country are skipped. A later
row for the same country and year replaces the earlier record.
"""

__all__ = [
    "BuildStats",
    "match_year",
    "build_adjusted_table",
    "build_estimate_table",
]

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    total_rows: int = 0
    skipped_rows: int = 0

    @property
    def used_rows(self) -> int:
        return self.total_rows - self.skipped_rows


def match_year(value: Any, years: Sequence[str]) -> str | None:
    """Return the recognized year label equal to ``value``.

    Accepts the label text itself or any value with the same numeric value
    (``2030``, ``2030.0``, ``" 2030 "``).
    """
    if value is None:
        return None
    text = display_text(value) if not isinstance(value, str) else value.strip()
    if not text:
        return None
    numeric = _as_float(text)
    for year in years:
        if year == text:
            return year
        if numeric is not None and _as_float(year) == numeric:
            return year
    return None


def _as_float(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


def _cell(row: Mapping[str, Any], column: str | None) -> Any:
    return row.get(column) if column is not None else None


def _country(row: Mapping[str, Any], column: str | None) -> str | None:
    raw = _cell(row, column)
    if raw is None:
        return None
    country = str(raw).strip()
    return country or None


def build_adjusted_table(
    rows: Sequence[Mapping[str, Any]],
    columns: Mapping[str, str | None],
    years: Sequence[str],
    stats: BuildStats | None = None,
) -> StatsTable:
    """Assemble the adjusted-layout table.

    ``columns`` maps field keys (see ``column_catalog.adjusted_specs``) to
    resolved headers; ``None`` leaves that field absent on every record.
    """
    stats = stats if stats is not None else BuildStats()
    table: StatsTable = {}
    with RowProgress(len(rows), description="Building adjusted table") as progress:
        for row in rows:
            stats.total_rows += 1
            progress.advance()
            year = match_year(_cell(row, columns.get(YEAR)), years)
            country = _country(row, columns.get(COUNTRY)) if year else None
            if year is None or country is None:
                stats.skipped_rows += 1
                continue

            def num(key: str) -> float | None:
                return extract_number(_cell(row, columns.get(key)))

            table.setdefault(country, {})[year] = AdjustedRecord(
                adjusted_incidence=num("adjusted_incidence"),
                adjusted_incidence_ci=(num("adjusted_incidence_lower"), num("adjusted_incidence_upper")),
                adjusted_daly=num("adjusted_daly"),
                adjusted_daly_ci=(num("adjusted_daly_lower"), num("adjusted_daly_upper")),
            )
    logger.debug(f"adjusted table: rows={stats.total_rows} skipped={stats.skipped_rows} countries={len(table)}")
    return table


def build_estimate_table(
    rows: Sequence[Mapping[str, Any]],
    columns: Mapping[str, str | None],
    years: Sequence[str],
    stats: BuildStats | None = None,
) -> StatsTable:
    """Assemble the estimate-layout table.

    Every row with a country yields one record per recognized year, so a
    repeated country replaces all of its years at once.
    """
    stats = stats if stats is not None else BuildStats()
    table: StatsTable = {}
    with RowProgress(len(rows), description="Building estimate table") as progress:
        for row in rows:
            stats.total_rows += 1
            progress.advance()
            country = _country(row, columns.get(COUNTRY))
            if country is None:
                stats.skipped_rows += 1
                continue

            per_year = {}
            for year in years:
                clp = _cell(row, columns.get(f"clp:{year}"))
                daly = _cell(row, columns.get(f"daly:{year}"))
                per_year[year] = EstimateRecord(
                    clp_estimate=display_text(clp),
                    daly_estimate=display_text(daly),
                    clp_number=extract_number(clp),
                    daly_number=extract_number(daly),
                )
            table[country] = per_year
    logger.debug(f"estimate table: rows={stats.total_rows} skipped={stats.skipped_rows} countries={len(table)}")
    return table
