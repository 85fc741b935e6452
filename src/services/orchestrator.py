from __future__ import annotations

import json
import logging
import zipfile
from datetime import UTC, datetime

from ..excel.reader import EmptySheetError, SheetData, read_first_sheet
from ..models.column_catalog import adjusted_specs, estimate_specs
from ..models.config_models import StatsConfig
from ..models.processing_result import ProcessingResult
from ..models.records import StatsTable
from ..parsing.columns import resolve_columns
from .exporter import table_to_dict, write_stats_json
from .table_builder import BuildStats, build_adjusted_table, build_estimate_table

logger = logging.getLogger(__name__)

"""Service orchestration for one batch conversion run.

read workbook -> resolve columns -> build StatsTable -> write JSON.
A missing or unreadable input file, or an empty first sheet, aborts the
run. Unresolved columns, unparsable cells and skipped rows only degrade
to absent values.
"""

VARIANTS = ("adjusted", "estimate")
SAMPLE_SIZE = 5


class ProcessingError(Exception):
    """Base exception for fatal processing errors."""
    pass


class InputFileMissingError(ProcessingError):
    pass


class EmptyInputError(ProcessingError):
    pass


class UnreadableInputError(ProcessingError):
    pass


def load_sheet(config: StatsConfig, variant: str) -> SheetData:
    path = config.paths_for(variant).input
    if not path.exists():
        raise InputFileMissingError(f"missing input workbook {path}")
    if path.stat().st_size == 0:
        raise EmptyInputError(f"input workbook {path} is empty")
    try:
        return read_first_sheet(path)
    except EmptySheetError as e:
        raise EmptyInputError(str(e)) from e
    except (ValueError, zipfile.BadZipFile, OSError) as e:
        raise UnreadableInputError(f"cannot read input workbook {path}: {e}") from e


def build_table(sheet: SheetData, config: StatsConfig, variant: str, stats: BuildStats) -> tuple[StatsTable, tuple[str, ...]]:
    """Resolve columns for ``variant`` and build its table.

    Returns the table plus the labels of columns that could not be resolved.
    """
    logger.debug(f"detected headers: {sheet.columns}")
    if variant == "adjusted":
        specs = adjusted_specs()
    elif variant == "estimate":
        specs = estimate_specs(config.years)
    else:
        raise ProcessingError(f"unknown variant: {variant}")

    columns = resolve_columns(sheet.columns, specs)
    logger.debug(f"matched columns: {columns}")
    unresolved = tuple(
        specs[key].label for key, header in columns.items() if header is None or header not in sheet.columns
    )

    if variant == "adjusted":
        table = build_adjusted_table(sheet.rows, columns, config.years, stats)
    else:
        table = build_estimate_table(sheet.rows, columns, config.years, stats)
    return table, unresolved


def process_variant(config: StatsConfig, variant: str) -> ProcessingResult:
    """Run one conversion end to end.

    Raises:
        InputFileMissingError: input workbook does not exist
        EmptyInputError: input file is zero bytes or its first sheet has no data rows
        UnreadableInputError: input file is not a readable workbook
    """
    start = datetime.now(UTC)
    sheet = load_sheet(config, variant)
    logger.info(f"read {len(sheet.rows)} rows from sheet '{sheet.sheet_name}'")

    stats = BuildStats()
    table, unresolved = build_table(sheet, config, variant, stats)

    if logger.isEnabledFor(logging.DEBUG):
        sample = dict(list(table_to_dict(table).items())[:SAMPLE_SIZE])
        logger.debug(f"sample parsed entries: {json.dumps(sample, indent=2, ensure_ascii=False)}")

    output = write_stats_json(table, config.paths_for(variant).output)
    end = datetime.now(UTC)
    logger.info(
        f"wrote {output} with {len(table)} countries across years {', '.join(config.years)}"
    )
    return ProcessingResult(
        variant=variant,
        output_path=output,
        total_rows=stats.total_rows,
        countries=len(table),
        records=sum(len(years) for years in table.values()),
        skipped_rows=stats.skipped_rows,
        unresolved_columns=unresolved,
        start_time=start,
        end_time=end,
        elapsed_seconds=(end - start).total_seconds(),
    )
