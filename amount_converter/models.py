"""
Pydantic models and the marker enumeration.

The marker set is closed: every value the classifier can produce is a member
of `Marker`, so the dispatcher can branch on it exhaustively.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ─── Markers ─────────────────────────────────────────────────────────


class Marker(str, Enum):
    """Currency or distance unit detected in an input string."""

    NONE = ""  # Plain number, no currency/unit
    DOLLAR = "$"
    YEN = "円"
    CENTIMETER = "cm"
    INCH = "in"
    METER = "m"
    FOOT = "ft"
    KILOMETER = "km"
    MILE = "mi"

    @property
    def is_distance(self) -> bool:
        return self in DISTANCE_MARKERS


DISTANCE_MARKERS: frozenset[Marker] = frozenset({
    Marker.CENTIMETER,
    Marker.INCH,
    Marker.METER,
    Marker.FOOT,
    Marker.KILOMETER,
    Marker.MILE,
})


# ─── Request / Result ───────────────────────────────────────────────


class ConversionRequest(BaseModel):
    """One conversion: the raw amount plus the rate and style to apply.

    `rate` and `use_large_units` are optional so outer surfaces can fill
    them from configuration.
    """

    amount: str = Field(..., min_length=1, description="Free-form amount, e.g. '$100' or '5km'.")
    rate: Optional[float] = Field(
        None,
        gt=0,
        allow_inf_nan=False,
        description="Exchange rate in yen per dollar.",
    )
    use_large_units: Optional[bool] = Field(
        None,
        description="Format with 万/億 magnitude words instead of comma grouping.",
    )


class ConversionResult(BaseModel):
    """The final output of a conversion, with the classification that drove it."""

    amount: str
    marker: Marker
    payload: str
    result: str
