from __future__ import annotations

import re
from collections.abc import Sequence

from ..parsing.columns import ColumnSpec

"""Static header catalogue for both workbook layouts.

Pure data: each logical field lists its accepted header spellings in
priority order. Adjusted-variant labels double as record field keys.
"""

__all__ = [
    "YEAR",
    "COUNTRY",
    "ADJUSTED_METRIC_SPECS",
    "adjusted_specs",
    "estimate_specs",
    "clp_label",
    "daly_label",
]

YEAR = "year"
COUNTRY = "country"

_I = re.IGNORECASE

YEAR_SPEC = ColumnSpec.of("Year", re.compile(r"^year$", _I), fallback="Year")
COUNTRY_SPEC = ColumnSpec.of("Country", re.compile(r"^country$", _I), fallback="Country")

ADJUSTED_METRIC_SPECS: tuple[tuple[str, ColumnSpec], ...] = (
    (
        "adjusted_incidence",
        ColumnSpec.of(
            "Adjusted Incidence per Birth Population",
            re.compile(r"^Adjusted Incidence per Birth Population$", _I),
            re.compile(r"^Adjusted Incidence Rate per Birth Population$", _I),
            re.compile(r"Adjusted.*Incidence.*Birth Population", _I),
        ),
    ),
    (
        "adjusted_incidence_lower",
        ColumnSpec.of(
            "Adjusted Incidence Rate per Birth Population (Lower)",
            re.compile(r"^Adjusted Incidence Rate per Birth Population \(Lower\)$", _I),
            re.compile(r"Adjusted.*Incidence.*Birth Population.*\(Lower\)", _I),
        ),
    ),
    (
        "adjusted_incidence_upper",
        ColumnSpec.of(
            "Adjusted Incidence Rate per Birth Population (Upper)",
            re.compile(r"^Adjusted Incidence Rate per Birth Population \(Upper\)$", _I),
            re.compile(r"Adjusted.*Incidence.*Birth Population.*\(Upper\)", _I),
        ),
    ),
    (
        "adjusted_daly",
        ColumnSpec.of(
            "Adjusted Incidence of DALYs per Birth Population",
            re.compile(r"^Adjusted Incidence of DALYs per Birth Population$", _I),
            re.compile(r"Adjusted.*DALYs.*Birth Population", _I),
        ),
    ),
    (
        "adjusted_daly_lower",
        ColumnSpec.of(
            "Adjusted Incidence of DALYs per Birth Population (Lower)",
            re.compile(r"^Adjusted Incidence of DALYs per Birth Population \(Lower\)$", _I),
            re.compile(r"Adjusted.*DALYs.*Birth Population.*\(Lower\)", _I),
        ),
    ),
    (
        "adjusted_daly_upper",
        ColumnSpec.of(
            "Adjusted Incidence of DALYs per Birth Population (Upper)",
            re.compile(r"^Adjusted Incidence of DALYs per Birth Population \(Upper\)$", _I),
            re.compile(r"Adjusted.*DALYs.*Birth Population.*\(Upper", _I),
        ),
    ),
)


def adjusted_specs() -> dict[str, ColumnSpec]:
    """Field key -> spec for the one-row-per-country-year layout."""
    specs = {YEAR: YEAR_SPEC, COUNTRY: COUNTRY_SPEC}
    specs.update(ADJUSTED_METRIC_SPECS)
    return specs


def clp_label(year: str) -> str:
    return f"CL/P Estimated {year} (95% CI)"


def daly_label(year: str) -> str:
    return f"DALY Estimate {year} (95% CI)"


def estimate_specs(years: Sequence[str]) -> dict[str, ColumnSpec]:
    """Field key -> spec for the one-row-per-country layout.

    Keys are ``clp:<year>`` / ``daly:<year>``.
    """
    specs = {COUNTRY: COUNTRY_SPEC}
    for year in years:
        y = re.escape(year)
        specs[f"clp:{year}"] = ColumnSpec.of(
            clp_label(year),
            clp_label(year),
            re.compile(rf"^CL/?P\s+Estimated?\s+{y}\b", _I),
        )
        specs[f"daly:{year}"] = ColumnSpec.of(
            daly_label(year),
            daly_label(year),
            re.compile(rf"^DALYs?\s+Estimated?\s+{y}\b", _I),
        )
    return specs
