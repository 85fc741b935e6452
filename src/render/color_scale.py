from __future__ import annotations

import math
import numbers
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

"""Log-scale choropleth color buckets.

CL/P incidence spans several orders of magnitude across countries, so the
value is normalized as log10(value / min) / log10(max / min) and mapped to
one of ten light-to-dark blue-green buckets.
"""

__all__ = [
    "COLOR_BUCKETS",
    "BUCKET_THRESHOLDS",
    "MISSING_COLOR",
    "FALLBACK_COLOR",
    "ColorScale",
    "finite_or_none",
]

COLOR_BUCKETS: tuple[str, ...] = (
    "#EEF5F0",
    "#DBEDE4",
    "#C7E1D5",
    "#B1D3C6",
    "#9AC5B7",
    "#82B4A8",
    "#6AA19A",
    "#538A90",
    "#3E708A",
    "#2B4F82",
)
# upper bound (exclusive) of each bucket but the last
BUCKET_THRESHOLDS: tuple[float, ...] = (0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9)

MISSING_COLOR = "#e5e5e5"
FALLBACK_COLOR = "#9AC5B7"  # min == max

_FLOOR = 1.0


def finite_or_none(value: Any) -> float | None:
    if isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value):
        return float(value)
    return None


@dataclass(frozen=True)
class ColorScale:
    min_value: float
    max_value: float

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> ColorScale:
        """Range over present finite values only; (0, 0) when there are none."""
        present = [v for v in (finite_or_none(x) for x in values) if v is not None]
        if not present:
            return cls(0.0, 0.0)
        return cls(min(present), max(present))

    @property
    def degenerate(self) -> bool:
        return self.max_value == self.min_value

    def ratio(self, value: float) -> float:
        """Log-normalized position of ``value``; values and min are floored at 1.

        When the floored range is empty (both bounds at or below 1) every
        value sits at the top of the scale.
        """
        safe_val = max(value, _FLOOR)
        safe_min = max(self.min_value, _FLOOR)
        safe_max = max(self.max_value, _FLOOR)
        if safe_max == safe_min:
            return 1.0
        return math.log10(safe_val / safe_min) / math.log10(safe_max / safe_min)

    def bucket_index(self, value: Any) -> int | None:
        """Index into COLOR_BUCKETS, ``None`` for missing or degenerate cases."""
        v = finite_or_none(value)
        if v is None or self.degenerate:
            return None
        r = self.ratio(v)
        for index, threshold in enumerate(BUCKET_THRESHOLDS):
            if r < threshold:
                return index
        return len(COLOR_BUCKETS) - 1

    def color_for(self, value: Any) -> str:
        if finite_or_none(value) is None:
            return MISSING_COLOR
        if self.degenerate:
            return FALLBACK_COLOR
        index = self.bucket_index(value)
        return COLOR_BUCKETS[index] if index is not None else MISSING_COLOR
