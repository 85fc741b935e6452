from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from src.models.processing_result import ProcessingResult
from src.services.summary import render_map_summary_line, render_summary_line


def _result(elapsed: float) -> ProcessingResult:
    start = datetime(2025, 1, 1, tzinfo=UTC)
    return ProcessingResult(
        variant="estimate",
        output_path=Path("data") / "estimated_stats.json",
        total_rows=12,
        countries=10,
        records=30,
        skipped_rows=2,
        unresolved_columns=("DALY Estimate 2050 (95% CI)",),
        start_time=start,
        end_time=start,
        elapsed_seconds=elapsed,
    )


def test_summary_line_fields():
    line = render_summary_line(_result(1.5))
    assert line == (
        "SUMMARY variant=estimate countries=10 records=30 rows=12 skipped_rows=2 "
        "unresolved_columns=1 output=data/estimated_stats.json elapsed_sec=1.5"
    )


def test_summary_line_small_elapsed_avoids_scientific_notation():
    line = render_summary_line(_result(0.000123))
    assert line.endswith("elapsed_sec=0.000123")
    assert render_summary_line(_result(0)).endswith("elapsed_sec=0")


def test_map_summary_line():
    assert render_map_summary_line("2030", "daly", 170, 150, "build/clp_map.html") == (
        "SUMMARY year=2030 metric=daly regions=170 with_data=150 output=build/clp_map.html"
    )
