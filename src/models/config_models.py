from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

"""Configuration dataclasses for the CL/P statistics converter.

Built by src/config/loader.py from config/stats.yml (or defaults when the
file is absent). Immutable once loaded.
"""

DEFAULT_YEARS: tuple[str, ...] = ("2030", "2040", "2050")


@dataclass(frozen=True)
class VariantPaths:
    """Fixed input workbook and output JSON for one conversion variant."""
    input: Path
    output: Path


@dataclass(frozen=True)
class StatsConfig:
    """Root configuration object."""
    years: tuple[str, ...] = DEFAULT_YEARS
    adjusted: VariantPaths = field(
        default_factory=lambda: VariantPaths(
            input=Path("public/CLP Global Raw.xlsx"),
            output=Path("data/adjusted_stats.json"),
        )
    )
    estimate: VariantPaths = field(
        default_factory=lambda: VariantPaths(
            input=Path("public/CLP Global Raw - Estimates.xlsx"),
            output=Path("data/estimated_stats.json"),
        )
    )
    geography_path: Path = Path("public/countries.geojson")
    render_output: Path = Path("build/clp_map.html")
    missing_text: str = "N/A"  # tooltip placeholder for absent values

    def paths_for(self, variant: str) -> VariantPaths:
        if variant == "adjusted":
            return self.adjusted
        if variant == "estimate":
            return self.estimate
        raise ValueError(f"unknown variant: {variant}")
