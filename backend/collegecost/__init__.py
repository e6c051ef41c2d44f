"""College cost-of-attendance lookup service.

Usage::

    from collegecost import create_lookup

    lookup = create_lookup("college_costs.csv")
    result = lookup.lookup("Test U", room_and_board="false")
"""

from collegecost.data.directory import CollegeDirectory
from collegecost.data.loader import load_directory
from collegecost.factory import create_lookup
from collegecost.formatting import format_cost
from collegecost.lookup import CostLookup, parse_room_and_board
from collegecost.models.college import CostRecord, LookupResult

__all__ = [
    "CollegeDirectory",
    "CostLookup",
    "CostRecord",
    "LookupResult",
    "create_lookup",
    "format_cost",
    "load_directory",
    "parse_room_and_board",
]
