from .columns import ColumnSpec, resolve_column, resolve_columns
from .numeric import display_text, extract_number

__all__ = [
    "ColumnSpec",
    "resolve_column",
    "resolve_columns",
    "display_text",
    "extract_number",
]
