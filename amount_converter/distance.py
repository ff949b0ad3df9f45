"""
Metric ⇄ imperial distance conversion.

Each supported unit has one partner:

    cm ⇄ in      1 in = 2.54 cm
    m  ⇄ ft      1 ft = 0.3048 m
    km ⇄ mi      1 mi = 1.609344 km

The factors are the exact international definitions, kept as Decimal.
"""

from __future__ import annotations

from decimal import Decimal

from .counting import convert_to_largest_unit
from .exceptions import DispatchError
from .formatting import commafy

# Exact meters per unit; converting through meters keeps 254cm at exactly 100in.
METERS_PER_UNIT: dict[str, Decimal] = {
    "cm": Decimal("0.01"),
    "in": Decimal("0.0254"),
    "m": Decimal(1),
    "ft": Decimal("0.3048"),
    "km": Decimal(1000),
    "mi": Decimal("1609.344"),
}

PARTNER_UNITS: dict[str, str] = {
    "cm": "in",
    "in": "cm",
    "m": "ft",
    "ft": "m",
    "km": "mi",
    "mi": "km",
}


def convert_distance(unit: str, value: Decimal, use_large_units: bool) -> str:
    """Convert a distance to its partner unit and format it.

    Args:
        unit: One of cm, in, m, ft, km, mi.
        value: The distance in `unit`.
        use_large_units: Format with 万/億 words instead of comma grouping.

    Returns:
        e.g. convert_distance("km", Decimal(5), False) → "3.11mi"

    Raises:
        DispatchError: If `unit` is not a supported distance unit.
    """
    try:
        target = PARTNER_UNITS[unit]
    except KeyError:
        raise DispatchError(
            f"Unsupported distance unit: {unit!r}",
            {"unit": unit, "supported": sorted(PARTNER_UNITS)},
        )

    converted = value * METERS_PER_UNIT[unit] / METERS_PER_UNIT[target]
    formatted = convert_to_largest_unit(converted) if use_large_units else commafy(converted)
    return f"{formatted}{target}"
