"""Cost data layer for the college cost lookup service."""

from collegecost.data.directory import CollegeDirectory
from collegecost.data.loader import REQUIRED_COLUMNS, load_directory, read_rows

__all__ = [
    "REQUIRED_COLUMNS",
    "CollegeDirectory",
    "load_directory",
    "read_rows",
]
