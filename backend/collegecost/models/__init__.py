"""Domain models for the college cost lookup service."""

from collegecost.models.college import CostRecord, LookupResult, parse_decimal

__all__ = [
    "CostRecord",
    "LookupResult",
    "parse_decimal",
]
