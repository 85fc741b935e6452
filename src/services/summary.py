from __future__ import annotations

from ..models.processing_result import ProcessingResult

"""SUMMARY line rendering for the batch conversion and the map export."""


def _format_seconds(seconds: float) -> str:
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        # avoid scientific notation
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return f"{seconds:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: ProcessingResult) -> str:
    """Render the SUMMARY line for one conversion run.

    Examples:
        >>> from datetime import datetime, timezone
        >>> from pathlib import Path
        >>> start = datetime(2025, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2025, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ProcessingResult(
        ...     variant="adjusted", output_path=Path("data/adjusted_stats.json"),
        ...     total_rows=10, countries=3, records=9, skipped_rows=1,
        ...     unresolved_columns=(), start_time=start, end_time=end,
        ...     elapsed_seconds=2.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY variant=adjusted countries=3 records=9 rows=10 skipped_rows=1 unresolved_columns=0 output=data/adjusted_stats.json elapsed_sec=2'
    """
    return (
        f"SUMMARY variant={result.variant} "
        f"countries={result.countries} "
        f"records={result.records} "
        f"rows={result.total_rows} "
        f"skipped_rows={result.skipped_rows} "
        f"unresolved_columns={len(result.unresolved_columns)} "
        f"output={result.output_path.as_posix()} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )


def render_map_summary_line(year: str, metric: str, regions: int, with_data: int, output: str) -> str:
    return (
        f"SUMMARY year={year} metric={metric} regions={regions} "
        f"with_data={with_data} output={output}"
    )
