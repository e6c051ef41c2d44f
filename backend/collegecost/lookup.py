"""Cost lookup against an in-memory college directory.

A lookup takes a college name and a room-and-board flag and:

1. **Validates** that a college name was given.
2. **Finds** the exact, case-sensitive name in the directory.
3. **Computes** in-state tuition, adding room and board when requested.
4. **Rounds** the total to whole cents.
"""

from __future__ import annotations

import logging
from decimal import DecimalException
from typing import TYPE_CHECKING

from collegecost.exceptions import (
    CollegeNotFoundError,
    MalformedDataError,
    MissingCollegeError,
)
from collegecost.formatting import round_cost
from collegecost.models.college import LookupResult

if TYPE_CHECKING:
    from collegecost.data.directory import CollegeDirectory

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"true", "1"})
_FALSE_VALUES = frozenset({"false", "0"})


def parse_room_and_board(value: str | bool | None, default: bool = True) -> bool:
    """Interpret the room_and_board query value.

    "true"/"1" and "false"/"0" (any case, surrounding whitespace ignored)
    are recognised; anything else, including an absent value, gives *default*.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


class CostLookup:
    """Answers cost-of-attendance queries for colleges in a directory.

    Args:
        directory: The loaded, read-only college directory.

    Example::

        from collegecost.data.loader import load_directory

        lookup = CostLookup(load_directory("college_costs.csv"))
        result = lookup.lookup("Test U", room_and_board="false")
    """

    def __init__(self, directory: CollegeDirectory) -> None:
        self._directory = directory

    @property
    def directory(self) -> CollegeDirectory:
        return self._directory

    def lookup(
        self,
        college: str | None,
        room_and_board: str | bool | None = None,
    ) -> LookupResult:
        """Compute the annual cost for *college*.

        Raises:
            MissingCollegeError: If *college* is None or empty.
            CollegeNotFoundError: If *college* is not in the directory.
            MalformedDataError: If a needed cost field is not a number or the
                total is too large to round to cents.
        """
        include_room_and_board = parse_room_and_board(room_and_board)
        logger.info(
            "Parsed query: college=%r, room_and_board=%s",
            college,
            include_room_and_board,
        )

        if not college:
            logger.info("College name omitted")
            raise MissingCollegeError

        record = self._directory.get(college)
        if record is None:
            logger.info("College %r not found in dataset", college)
            raise CollegeNotFoundError

        try:
            cost = round_cost(record.cost(include_room_and_board))
        except DecimalException as exc:
            msg = f"Cost for {college!r} cannot be represented in cents"
            raise MalformedDataError(msg) from exc
        logger.info("Successful lookup for %r: %s", college, cost)
        return LookupResult(
            college=college,
            include_room_and_board=include_room_and_board,
            cost=cost,
        )
