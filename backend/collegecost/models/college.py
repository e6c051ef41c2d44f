"""College cost domain models."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, ConfigDict

from collegecost.exceptions import MalformedDataError


def parse_decimal(value: str, field_name: str) -> Decimal:
    """Parse a dataset cell as a finite Decimal.

    Raises MalformedDataError for empty, non-numeric, NaN or infinite values.
    """
    try:
        number = Decimal(value.strip())
    except InvalidOperation as exc:
        msg = f"{field_name} is not a number: {value!r}"
        raise MalformedDataError(msg) from exc
    if not number.is_finite():
        msg = f"{field_name} is not a finite number: {value!r}"
        raise MalformedDataError(msg)
    return number


class CostRecord(BaseModel):
    """Cost profile for a single college.

    Values are kept exactly as they appear in the dataset and only parsed
    when a cost is computed, so a malformed row fails the request that
    touches it rather than the whole load.
    """

    model_config = ConfigDict(frozen=True)

    tuition_in: str
    tuition_out: str
    room_and_board: str

    def cost(self, include_room_and_board: bool = True) -> Decimal:
        """Return in-state tuition, plus room and board when requested."""
        total = parse_decimal(self.tuition_in, "tuition_in")
        if include_room_and_board:
            total += parse_decimal(self.room_and_board, "room_and_board")
        return total


class LookupResult(BaseModel):
    """Outcome of a successful cost lookup."""

    model_config = ConfigDict(frozen=True)

    college: str
    include_room_and_board: bool
    cost: Decimal
