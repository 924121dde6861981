# core/formatting.py
"""Display helpers shared by the dashboard and the asset table rows."""
import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def percentage(part: float, total: float) -> int:
    """Whole-number percentage of part in total; 0 for an empty total."""
    if not total:
        return 0
    return round_half_up(part / total * 100)


def format_idr(amount: float | None) -> str:
    """
    Format an amount as Indonesian rupiah without fraction digits.

    >>> format_idr(10000000)
    'Rp 10.000.000'
    """
    value = round_half_up(amount or 0)
    sign = "-" if value < 0 else ""
    grouped = f"{abs(value):,}".replace(",", ".")
    return f"{sign}Rp {grouped}"
