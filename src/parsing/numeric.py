from __future__ import annotations

import math
import numbers
import re
from typing import Any

"""Numeric text extraction for loosely formatted spreadsheet cells.

Cells in the source workbooks hold prose such as "1.2 (95% CI 0.8-1.6)",
"<0.1", "≈0.2" or "1,234". Only the leading quantity is recovered; CI
annotations that follow it are ignored.
"""

__all__ = [
    "extract_number",
    "display_text",
    "is_missing_marker",
]

# One or more dash-like characters (hyphen, en dash, em dash) or "n/a" / "na"
_MISSING_RE = re.compile(r"^[-–—]+$|^n/?a$", re.IGNORECASE)
_NUMBER_RE = re.compile(r"-?\d+(\.\d+)?")


def is_missing_marker(text: str) -> bool:
    return bool(_MISSING_RE.match(text))


def extract_number(value: Any) -> float | None:
    """Return the first finite number found in ``value`` or ``None``.

    Finite numbers are returned with their value unchanged (as ``float``).
    ``bool`` is not treated as a number. Thousands-separator commas are
    dropped before searching so that "1,234.5" yields 1234.5.
    """
    if value is None:
        return None
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        if math.isfinite(value):
            return float(value)
    text = str(value).strip()
    if not text or is_missing_marker(text):
        return None
    match = _NUMBER_RE.search(text.replace(",", ""))
    if match is None:
        return None
    number = float(match.group(0))
    return number if math.isfinite(number) else None


def display_text(value: Any) -> str | None:
    """Cell value as a trimmed display string (``None`` when blank).

    Integral floats coming from Excel numeric cells are shown without the
    trailing ``.0``.
    """
    if value is None:
        return None
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        if not math.isfinite(value):
            return None
        if float(value).is_integer():
            return str(int(value))
    text = str(value).strip()
    return text or None
