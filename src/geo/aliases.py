from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

"""Country alias resolution: statistical-source names -> geography names.

The statistics workbooks follow World Bank style names ("Congo, Dem Rep",
"Viet Nam") while the boundary dataset uses Natural Earth short names
("Dem. Rep. Congo", "Vietnam"). Aliases only fill gaps: a geography name
that already has its own record is never overwritten.
"""

__all__ = [
    "COUNTRY_ALIASES",
    "flatten_year",
    "apply_aliases",
    "records_for_year",
]

R = TypeVar("R")

# (source name, geography name) in application order
COUNTRY_ALIASES: tuple[tuple[str, str], ...] = (
    ("United States", "United States of America"),
    ("Congo, Dem Rep", "Dem. Rep. Congo"),
    ("Congo, Rep", "Congo"),
    ("Cote d'Ivoire", "Côte d'Ivoire"),
    ("Eswatini", "Swaziland"),
    ("Myanmar", "Burma"),
    ("Czechia", "Czech Republic"),
    ("North Macedonia", "Macedonia"),
    ("Syrian Arab Republic", "Syria"),
    ("Viet Nam", "Vietnam"),
    ("Lao PDR", "Laos"),
    ("Kyrgyz Republic", "Kyrgyzstan"),
    ("Turkiye", "Turkey"),
    ("South Sudan", "S. Sudan"),
    ("Central African Republic", "Central African Rep."),
    ("Equatorial Guinea", "Eq. Guinea"),
    ("Somalia", "Somaliland"),
    ("Bosnia and Herzegovina", "Bosnia and Herz."),
    ("Korea, Rep", "South Korea"),
    ("Brunei Darussalam", "Brunei"),
    ("Dominican Republic", "Dominican Rep."),
)


def flatten_year(table: Mapping[str, Mapping[str, R]], year: str) -> dict[str, R]:
    """country -> record for ``year``; countries without that year drop out."""
    flat: dict[str, R] = {}
    for country, years in table.items():
        if years and years.get(year) is not None:
            flat[country] = years[year]
    return flat


def apply_aliases(
    flat: Mapping[str, R],
    aliases: Iterable[tuple[str, str]] = COUNTRY_ALIASES,
) -> dict[str, R]:
    """Copy each source record to its target name when the target is empty.

    Single pass in declaration order: a target filled by an earlier pair is
    visible as a source to later pairs, and is not filled again.
    """
    resolved = dict(flat)
    for source, target in aliases:
        if resolved.get(source) is not None and resolved.get(target) is None:
            resolved[target] = resolved[source]
    return resolved


def records_for_year(
    table: Mapping[str, Mapping[str, Any]],
    year: str,
    aliases: Iterable[tuple[str, str]] = COUNTRY_ALIASES,
) -> dict[str, Any]:
    """Flat geography-name -> record mapping used to match map features."""
    return apply_aliases(flatten_year(table, year), aliases)
