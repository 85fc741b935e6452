#!/usr/bin/env python3
"""Sample workbook generation for local runs of the converter.

Writes both workbook layouts with the messy cell texts seen in the real
sheets (CI annotations, "<0.1", thousands separators, dashes, "N/A"):

- adjusted: one row per (country, year)
- estimate: one row per country, year-named "(95% CI)" columns
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

COUNTRIES = [
    "Afghanistan", "Brazil", "Congo, Dem Rep", "Cote d'Ivoire", "India",
    "Korea, Rep", "Nigeria", "United States", "Viet Nam", "Turkiye",
]
YEARS = ["2030", "2040", "2050"]


def _ci_text(value: float, rng: np.random.Generator) -> str:
    low, high = value * rng.uniform(0.7, 0.9), value * rng.uniform(1.1, 1.3)
    return f"{value:,.1f} (95% CI {low:,.1f}–{high:,.1f})"


def generate_adjusted(seed: int = 42) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    rows = []
    for country in COUNTRIES:
        base = rng.uniform(0.3, 2.0)
        for year in YEARS:
            inc = base * rng.uniform(0.9, 1.1)
            daly = inc * rng.uniform(8, 12)
            rows.append({
                "Country": country,
                "Year": int(year),
                "Adjusted Incidence per Birth Population": round(inc, 4),
                "Adjusted Incidence Rate per Birth Population (Lower)": round(inc * 0.8, 4),
                "Adjusted Incidence Rate per Birth Population (Upper)": round(inc * 1.2, 4),
                "Adjusted Incidence of DALYs per Birth Population": round(daly, 4),
                "Adjusted Incidence of DALYs per Birth Population (Lower)": "–",
                "Adjusted Incidence of DALYs per Birth Population (Upper)": "N/A",
            })
    return pd.DataFrame(rows)


def generate_estimates(seed: int = 42) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    rows = []
    for country in COUNTRIES:
        row: dict[str, object] = {"Country": country}
        cases = rng.uniform(50, 50_000)
        for year in YEARS:
            cases *= rng.uniform(0.95, 1.1)
            row[f"CL/P Estimated {year} (95% CI)"] = _ci_text(cases, rng)
            row[f"DALY Estimate {year} (95% CI)"] = _ci_text(cases * 9.5, rng)
        rows.append(row)
    rows[-1][f"CL/P Estimated {YEARS[-1]} (95% CI)"] = "—"
    return pd.DataFrame(rows)


def write_workbook(df: pd.DataFrame, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name="Sheet1", index=False)
    return path


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate sample CL/P workbooks")
    parser.add_argument("--out-dir", type=Path, default=Path("public"), help="Output directory (default: public)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    try:
        adjusted = write_workbook(generate_adjusted(args.seed), args.out_dir / "CLP Global Raw.xlsx")
        estimates = write_workbook(generate_estimates(args.seed), args.out_dir / "CLP Global Raw - Estimates.xlsx")
    except OSError as e:
        print(f"Error writing workbooks: {e}", file=sys.stderr)
        return 1
    print(f"Wrote {adjusted}")
    print(f"Wrote {estimates}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
