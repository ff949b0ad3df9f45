"""Rounding and comma-grouped rendering of Decimal amounts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_TWO_PLACES = Decimal("0.01")


def round_amount(value: Decimal) -> Decimal:
    """Round to two decimal places and drop trailing zeros ("2.50" → "2.5").

    A negative value that rounds away to nothing comes back as plain 0.
    """
    try:
        rounded = value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # More digits than the context precision can carry to two places
        return value
    if rounded == 0:
        rounded = rounded.copy_abs()
    if rounded == rounded.to_integral_value():
        return rounded.quantize(Decimal(1))
    return rounded.normalize()


def commafy(value: Decimal) -> str:
    """Render with thousands separators: 1234567.891 → "1,234,567.89"."""
    return f"{round_amount(value):,f}"
