from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from src.config.loader import ConfigError, load_config
from src.logging.init import log_summary, set_debug, setup_logging
from src.render.choropleth import (
    METRICS,
    GeographyError,
    build_region_views,
    detect_variant,
    load_geojson,
    write_choropleth_html,
)
from src.services.exporter import StatsFileError, load_stats_json
from src.services.orchestrator import VARIANTS
from src.services.summary import render_map_summary_line

"""CLI entrypoint for the world choropleth export.

Reads a converter output file and the local boundary GeoJSON, colors each
country for the selected year and writes a standalone HTML map.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render the CL/P world choropleth as HTML")
    p.add_argument("--variant", choices=VARIANTS, default="estimate", help="Which converter output to map")
    p.add_argument("--year", default=None, help="Forecast year (default: first configured year)")
    p.add_argument("--metric", choices=("incidence", "daly"), default="incidence")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    if Path(".env").exists():
        load_dotenv(dotenv_path=Path(".env"))
    if args.debug:
        set_debug(logger)

    try:
        cfg = load_config()
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    year = args.year if args.year is not None else cfg.years[0]
    if year not in cfg.years:
        logger.error(f"unknown year {year}; expected one of {', '.join(cfg.years)}")
        return EXIT_FATAL

    try:
        data = load_stats_json(cfg.paths_for(args.variant).output)
        geojson = load_geojson(cfg.geography_path)
    except (StatsFileError, GeographyError) as e:
        logger.error(f"input: {e}")
        return EXIT_FATAL

    variant = detect_variant(data)
    if variant != args.variant:
        logger.warning(f"stats file looks like '{variant}' output, using its fields")
    metric = METRICS[variant][args.metric]

    views = build_region_views(
        geojson["features"], data, year, metric, missing_text=cfg.missing_text
    )
    output = write_choropleth_html(
        geojson, views, cfg.render_output, title=f"CL/P Incidence and DALYs (CI 95%) - {year}"
    )
    with_data = sum(1 for v in views if v.value is not None)
    summary = render_map_summary_line(year, args.metric, len(views), with_data, output.as_posix())
    log_summary(summary[len("SUMMARY "):])
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
