from __future__ import annotations

import copy
import html
import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import plotly.graph_objects as go

from ..geo.aliases import COUNTRY_ALIASES, records_for_year
from .color_scale import ColorScale, finite_or_none

logger = logging.getLogger(__name__)

"""World choropleth: per-region fill color and tooltip payload.

Works on the JSON shape written by the converter. The statistics for one
year are flattened, aliased onto geography names, and colored on a log
scale. ``write_choropleth_html`` renders the regions as a standalone plotly
figure; the boundary GeoJSON is read from a local file.
"""

__all__ = [
    "MetricView",
    "RegionView",
    "METRICS",
    "feature_name",
    "detect_variant",
    "build_region_views",
    "load_geojson",
    "build_figure",
    "write_choropleth_html",
    "GeographyError",
]

# Property keys probed (in order) for a feature's display name
NAME_PROPERTIES = ("name", "NAME", "ADMIN", "NAME_LONG", "SOVEREIGNT", "BRK_NAME", "FORMAL_EN")


class GeographyError(Exception):
    """Raised when the boundary file is missing or not a FeatureCollection."""


@dataclass(frozen=True)
class MetricView:
    """Which record field drives the color, and which fields the tooltip shows."""
    value_field: str
    tooltip: tuple[tuple[str, str], ...]  # (label, field)


METRICS: dict[str, dict[str, MetricView]] = {
    "estimate": {
        "incidence": MetricView(
            "clp_number",
            (("CL/P Estimate", "clp_estimate"), ("DALY Estimate", "daly_estimate"), ("Estimated Cost", "estimated_cost")),
        ),
        "daly": MetricView(
            "daly_number",
            (("CL/P Estimate", "clp_estimate"), ("DALY Estimate", "daly_estimate"), ("Estimated Cost", "estimated_cost")),
        ),
    },
    "adjusted": {
        "incidence": MetricView(
            "adjusted_incidence",
            (("Adjusted Incidence", "adjusted_incidence"), ("Adjusted DALYs", "adjusted_daly")),
        ),
        "daly": MetricView(
            "adjusted_daly",
            (("Adjusted Incidence", "adjusted_incidence"), ("Adjusted DALYs", "adjusted_daly")),
        ),
    },
}


@dataclass
class RegionView:
    name: str
    fill: str
    value: float | None
    tooltip: list[tuple[str, str]] = field(default_factory=list)

    def tooltip_html(self) -> str:
        lines = [f"<b>{html.escape(self.name)}</b>"]
        lines.extend(f"<i>{html.escape(label)}:</i> {html.escape(text)}" for label, text in self.tooltip)
        return "<br>".join(lines)


def feature_name(properties: Mapping[str, Any] | None) -> str | None:
    for key in NAME_PROPERTIES:
        value = (properties or {}).get(key)
        if value:
            return str(value)
    return None


def detect_variant(data: Mapping[str, Mapping[str, Mapping[str, Any]]]) -> str:
    """Guess the converter variant from the first record's fields."""
    for years in data.values():
        for record in (years or {}).values():
            if record and "adjusted_incidence" in record:
                return "adjusted"
            if record and ("clp_number" in record or "clp_estimate" in record):
                return "estimate"
    return "estimate"


def _format_number(value: float) -> str:
    if value.is_integer():
        return f"{value:,.0f}"
    return f"{value:,.6f}".rstrip("0").rstrip(".")


def _display(record: Mapping[str, Any] | None, fld: str, missing_text: str) -> str:
    if record is None:
        return missing_text
    value = record.get(fld)
    if value is None or value == "":
        return missing_text
    ci = record.get(f"{fld}_ci")
    number = finite_or_none(value)
    if number is None:
        text = str(value)
    else:
        text = _format_number(number)
        if fld == "estimated_cost":
            text = f"${text}"
    if isinstance(ci, Sequence) and len(ci) == 2 and all(finite_or_none(b) is not None for b in ci):
        text += f" ({_format_number(float(ci[0]))} - {_format_number(float(ci[1]))})"
    return text


def build_region_views(
    features: Sequence[Mapping[str, Any]],
    data: Mapping[str, Mapping[str, Mapping[str, Any]]],
    year: str,
    metric: MetricView,
    *,
    aliases: Sequence[tuple[str, str]] = COUNTRY_ALIASES,
    missing_text: str = "N/A",
) -> list[RegionView]:
    """One RegionView per geography feature for the selected year.

    The color range covers every aliased record of that year, including
    ones without a matching feature. Missing data never raises: the region
    gets the missing color and placeholder tooltip text.
    """
    per_year = records_for_year(data, year, aliases)
    scale = ColorScale.from_values(
        (record or {}).get(metric.value_field) for record in per_year.values()
    )
    logger.debug(f"color range year={year} field={metric.value_field} min={scale.min_value} max={scale.max_value}")

    views: list[RegionView] = []
    for feature in features:
        name = feature_name(feature.get("properties"))
        if name is None:
            continue
        record = per_year.get(name)
        value = finite_or_none((record or {}).get(metric.value_field))
        views.append(
            RegionView(
                name=name,
                fill=scale.color_for(value),
                value=value,
                tooltip=[(label, _display(record, fld, missing_text)) for label, fld in metric.tooltip],
            )
        )
    return views


def load_geojson(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise GeographyError(f"geography file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise GeographyError(f"invalid geography json {path}: {e}") from e
    if not isinstance(data, dict) or data.get("type") != "FeatureCollection" or not isinstance(data.get("features"), list):
        raise GeographyError(f"{path} is not a GeoJSON FeatureCollection")
    return data


def build_figure(geojson: Mapping[str, Any], views: Sequence[RegionView], title: str = "") -> go.Figure:
    """Plotly figure with the exact bucket fills.

    One trace per fill color with a flat colorscale, so plotly never
    interpolates the buckets.
    """
    geo = copy.deepcopy(dict(geojson))
    named = []
    for feature in geo["features"]:
        name = feature_name(feature.get("properties"))
        if name is not None:
            feature["id"] = name
            named.append(feature)
    geo["features"] = named

    by_fill: dict[str, list[RegionView]] = {}
    for view in views:
        by_fill.setdefault(view.fill, []).append(view)

    fig = go.Figure()
    for fill, group in by_fill.items():
        fig.add_trace(
            go.Choropleth(
                geojson=geo,
                locations=[v.name for v in group],
                z=[1] * len(group),
                colorscale=[[0, fill], [1, fill]],
                showscale=False,
                marker_line_color="#666",
                marker_line_width=0.5,
                hovertext=[v.tooltip_html() for v in group],
                hoverinfo="text",
                name=fill,
            )
        )
    fig.update_geos(fitbounds="locations", visible=False)
    fig.update_layout(
        title_text=title,
        margin={"l": 0, "r": 0, "t": 40 if title else 0, "b": 0},
        paper_bgcolor="#f1f5f9",
    )
    return fig


def write_choropleth_html(
    geojson: Mapping[str, Any],
    views: Sequence[RegionView],
    output: Path,
    title: str = "",
) -> Path:
    output.parent.mkdir(parents=True, exist_ok=True)
    fig = build_figure(geojson, views, title)
    fig.write_html(str(output), include_plotlyjs="cdn", full_html=True)
    return output
