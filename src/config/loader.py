from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import StatsConfig, VariantPaths

"""Config loader.

Responsibilities:
- Load YAML config/stats.yml (path overridable via CLP_STATS_CONFIG)
- Validate against config_schema.json shipped next to this module
- Apply defaults for every key the file leaves out
- A missing file is not an error: the converter runs on built-in defaults
"""

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/stats.yml")
CONFIG_ENV_VAR = "CLP_STATS_CONFIG"


class ConfigError(Exception):
    pass


def resolve_config_path() -> Path:
    return Path(os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing or invalid, or the data violates it
            (unknown keys, wrong types, empty years list).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _variant(raw: dict[str, Any] | None, default: VariantPaths) -> VariantPaths:
    raw = raw or {}
    return VariantPaths(
        input=Path(raw.get("input", default.input)),
        output=Path(raw.get("output", default.output)),
    )


def load_config(path: Path | None = None) -> StatsConfig:
    path = path if path is not None else resolve_config_path()
    defaults = StatsConfig()
    if not path.exists():
        return defaults
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    years = tuple(str(y).strip() for y in data.get("years", defaults.years))
    duplicates = sorted({y for y in years if years.count(y) > 1})
    if duplicates:
        raise ConfigError(f"config validation failed: duplicate years {duplicates}")
    return StatsConfig(
        years=years,
        adjusted=_variant(data.get("adjusted"), defaults.adjusted),
        estimate=_variant(data.get("estimate"), defaults.estimate),
        geography_path=Path(data.get("geography_path", defaults.geography_path)),
        render_output=Path(data.get("render_output", defaults.render_output)),
        missing_text=data.get("missing_text", defaults.missing_text),
    )
