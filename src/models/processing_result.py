from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

"""Processing result model for one batch conversion run.

Carries the metrics printed on the SUMMARY line.
"""


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results of a conversion run."""
    variant: str  # adjusted / estimate
    output_path: Path
    total_rows: int  # rows read from the sheet
    countries: int  # distinct country keys written
    records: int  # country x year records written
    skipped_rows: int  # unrecognized year or empty country
    unresolved_columns: tuple[str, ...]  # labels with no matching header
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
