"""
Dollar ⇄ yen arithmetic at a caller-supplied rate.

The rate is "yen per dollar" (e.g. 150.0). It arrives as a float, so it is
converted through str() to keep binary float artifacts out of the Decimal
result (Decimal(0.1) != Decimal("0.1")).
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from .exceptions import InvalidRateError


def _rate_to_decimal(rate: float) -> Decimal:
    """Validate the rate and convert it to Decimal.

    Raises:
        InvalidRateError: If the rate is not a finite, positive number.
    """
    try:
        value = Decimal(str(rate))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidRateError(f"Exchange rate {rate!r} is not a number", {"rate": str(rate)})

    if not value.is_finite() or value <= 0:
        raise InvalidRateError(
            f"Exchange rate must be a finite positive number, got {rate!r}",
            {"rate": str(rate)},
        )
    return value


def dollars_to_yen(amount: Decimal, rate: float) -> Decimal:
    """$100 at 150 yen/dollar → 15000 yen."""
    return amount * _rate_to_decimal(rate)


def yen_to_dollars(amount: Decimal, rate: float) -> Decimal:
    """15000 yen at 150 yen/dollar → $100."""
    return amount / _rate_to_decimal(rate)
