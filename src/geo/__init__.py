from .aliases import COUNTRY_ALIASES, apply_aliases, flatten_year, records_for_year

__all__ = ["COUNTRY_ALIASES", "apply_aliases", "flatten_year", "records_for_year"]
