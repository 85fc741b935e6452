from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Union

"""Header resolution tolerant to wording variations.

A ColumnSpec pairs a label with an ordered list of acceptable patterns.
Plain strings compare case-insensitively for equality against the
normalized header; compiled patterns are searched in it. The first header
(in the sheet's own order) satisfying any pattern wins.
"""

__all__ = [
    "ColumnSpec",
    "HeaderPattern",
    "normalize_header",
    "header_matches",
    "resolve_column",
    "resolve_columns",
]

logger = logging.getLogger(__name__)

HeaderPattern = Union[str, "re.Pattern[str]"]

_WS_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class ColumnSpec:
    """Label plus ordered match patterns for one logical column."""
    label: str
    patterns: tuple[HeaderPattern, ...]
    fallback: str | None = None  # literal header used when nothing matches

    @classmethod
    def of(cls, label: str, *patterns: HeaderPattern, fallback: str | None = None) -> ColumnSpec:
        return cls(label=label, patterns=tuple(patterns), fallback=fallback)

    def describe_patterns(self) -> list[str]:
        return [p if isinstance(p, str) else f"/{p.pattern}/" for p in self.patterns]


def normalize_header(header: object) -> str:
    return _WS_RE.sub(" ", str(header)).strip()


def header_matches(header: object, patterns: Sequence[HeaderPattern]) -> bool:
    cleaned = normalize_header(header)
    lowered = cleaned.lower()
    for pattern in patterns:
        if isinstance(pattern, str):
            if lowered == pattern.lower():
                return True
        elif pattern.search(cleaned):
            return True
    return False


def resolve_column(headers: Iterable[object], spec: ColumnSpec) -> str | None:
    """Return the first header matching ``spec`` or ``None``.

    An unresolved column is not fatal: a warning is logged and every
    dependent field stays absent.
    """
    for header in headers:
        if header_matches(header, spec.patterns):
            return str(header)
    logger.warning(
        f'column not found for "{spec.label}" tried patterns={spec.describe_patterns()}'
    )
    return None


def resolve_columns(headers: Sequence[object], specs: Mapping[str, ColumnSpec]) -> dict[str, str | None]:
    """Resolve field key -> header for one header row.

    A spec with a ``fallback`` resolves to that literal header when no
    pattern matches.
    """
    resolved: dict[str, str | None] = {}
    for key, spec in specs.items():
        found = resolve_column(headers, spec)
        resolved[key] = found if found is not None else spec.fallback
    return resolved
