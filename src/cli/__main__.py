from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from src.config.loader import ConfigError, load_config
from src.logging.init import log_summary, set_debug, setup_logging
from src.services.orchestrator import VARIANTS, ProcessingError, process_variant
from src.services.summary import render_summary_line

"""CLI entrypoint for the spreadsheet -> JSON conversion.

Runs with no arguments on the fixed paths from config/stats.yml (or the
built-in defaults):
- Load .env, then config
- Read the first sheet of the variant's workbook
- Build and write the StatsTable JSON
- Print a SUMMARY line
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env using python-dotenv (CLP_STATS_CONFIG may be set there)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="CL/P statistics workbook -> JSON converter")
    p.add_argument("--variant", choices=VARIANTS, default="adjusted", help="Workbook layout to convert")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print sheet headers & first rows then exit")
    return p.parse_args(argv)


def _inspect_data(cfg, variant: str) -> int:
    from src.excel.reader import EmptySheetError, read_first_sheet

    path = cfg.paths_for(variant).input
    if not path.exists():
        print(f"inspect: file not found: {path}")
        return EXIT_FATAL
    print(f"FILE: {path.name}")
    try:
        sheet = read_first_sheet(path)
    except EmptySheetError as e:
        print(f"  empty: {e}")
        return EXIT_FATAL
    print(f"  SHEET: {sheet.sheet_name} cols={sheet.columns}")
    safe_rows = []
    for r in sheet.rows[:3]:
        safe_rows.append({k: (v.isoformat() if hasattr(v, "isoformat") else v) for k, v in r.items()})
    print("    sample_rows=", safe_rows)
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None only: an explicit [] from tests must not pick up pytest's argv
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    try:
        cfg = load_config()
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(cfg, args.variant)

    logger.info(f"Converting {cfg.paths_for(args.variant).input} ({args.variant})")
    try:
        result = process_variant(cfg, args.variant)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    summary_line = render_summary_line(result)
    # log_summary adds the "SUMMARY " prefix itself
    log_summary(summary_line[len("SUMMARY "):])
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
