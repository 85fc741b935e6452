from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

"""CountryYearRecord variants and the StatsTable shape.

Every field is independently optional. ``to_dict`` yields the JSON shape
consumed by the map renderer (``None`` serializes to ``null``).
"""

__all__ = [
    "AdjustedRecord",
    "EstimateRecord",
    "CountryYearRecord",
    "StatsTable",
    "CIPair",
]

CIPair = tuple[float | None, float | None]


@dataclass(frozen=True)
class AdjustedRecord:
    """Adjusted incidence / DALY per birth population with (lower, upper) CI."""
    adjusted_incidence: float | None = None
    adjusted_incidence_ci: CIPair = (None, None)
    adjusted_daly: float | None = None
    adjusted_daly_ci: CIPair = (None, None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "adjusted_incidence": self.adjusted_incidence,
            "adjusted_incidence_ci": list(self.adjusted_incidence_ci),
            "adjusted_daly": self.adjusted_daly,
            "adjusted_daly_ci": list(self.adjusted_daly_ci),
        }


@dataclass(frozen=True)
class EstimateRecord:
    """Estimated CL/P cases and DALYs: display text kept next to the number."""
    clp_estimate: str | None = None
    daly_estimate: str | None = None
    clp_number: float | None = None
    daly_number: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "clp_estimate": self.clp_estimate,
            "daly_estimate": self.daly_estimate,
            "clp_number": self.clp_number,
            "daly_number": self.daly_number,
        }


CountryYearRecord = Union[AdjustedRecord, EstimateRecord]

# country (as in the source sheet) -> year label -> record
StatsTable = dict[str, dict[str, CountryYearRecord]]
