"""Domain models for the CL/P statistics converter.

Records, the static column catalogue, configuration and processing results.
"""

from .config_models import StatsConfig, VariantPaths
from .processing_result import ProcessingResult
from .records import AdjustedRecord, CountryYearRecord, EstimateRecord, StatsTable

__all__ = [
    # Configuration models
    "StatsConfig",
    "VariantPaths",
    # Records
    "AdjustedRecord",
    "EstimateRecord",
    "CountryYearRecord",
    "StatsTable",
    # Results
    "ProcessingResult",
]
