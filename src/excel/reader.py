from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd

"""Excel reader for the CL/P statistics workbooks.

Only the first sheet is read. Row 1 is the header row; every following row
becomes a RawRow (header -> raw cell value). Blank cells become ``None``;
numbers stay numbers so the numeric extractor can pass them through.
"""

__all__ = [
    "SheetData",
    "EmptySheetError",
    "read_first_sheet",
    "sheet_to_rows",
]


class EmptySheetError(Exception):
    """Raised when the first sheet holds no data rows."""


@dataclass
class SheetData:
    sheet_name: str
    columns: list[str]
    rows: list[dict[str, Any]]  # RawRow: header -> raw value


def sheet_to_rows(df: pd.DataFrame) -> tuple[list[str], list[dict[str, Any]]]:
    """Convert a header-parsed DataFrame into (columns, rows).

    Fully blank rows are dropped. NaN cells become ``None``.
    """
    columns = [str(c) for c in df.columns]
    rows: list[dict[str, Any]] = []
    for raw in df.itertuples(index=False, name=None):
        values = [None if pd.isna(v) else v for v in raw]
        if all(v is None for v in values):
            continue
        rows.append(dict(zip(columns, values, strict=False)))
    return columns, rows


def read_first_sheet(path: Path, keep_na_strings: bool = True) -> SheetData:
    """Read the first sheet of ``path``.

    Parameters
    ----------
    path: workbook path
    keep_na_strings: when True, literal texts such as "N/A" or "NA" are kept
        as strings instead of pandas' default NaN conversion. The display
        text of the estimate layout depends on it; the numeric extractor
        treats them as absent either way.

    Raises
    ------
    EmptySheetError: the sheet has a header but no data rows.
    """
    with pd.ExcelFile(path) as xls:
        sheet_name = str(xls.sheet_names[0])
        if keep_na_strings:
            df = xls.parse(sheet_name, header=0, keep_default_na=False, na_values=[""])
        else:
            df = xls.parse(sheet_name, header=0)
    columns, rows = sheet_to_rows(df)
    if not rows:
        raise EmptySheetError(f"no rows found in the first sheet '{sheet_name}' of {path.name}")
    return SheetData(sheet_name=sheet_name, columns=columns, rows=rows)
