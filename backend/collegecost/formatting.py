"""Formatting helpers for cost lookup output."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_CENTS = Decimal("0.01")


def round_cost(amount: Decimal) -> Decimal:
    """Round *amount* to whole cents, halves away from zero."""
    return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_cost(amount: Decimal) -> str:
    """Format a cost as a plain decimal string with exactly two places.

    No currency symbol or thousands separators (e.g. '32000.50').
    """
    return f"{round_cost(amount):.2f}"
