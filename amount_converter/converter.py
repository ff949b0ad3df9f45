"""
Conversion dispatcher — orchestrates classify → parse → convert → format.

Flow:
  ┌────────────┐
  │ Raw amount │   "$100000", "100 yen", "5km", "1100万"
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │ Classifier │   ← (marker, payload)
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │   Parser   │   ← payload → Decimal (ParseError on garbage)
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │  Dispatch  │   ← none / $ / 円 / distance
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │  Display   │   ← "1100万円", "$909.09", "3.11mi", "1.23万"
  └────────────┘

Design principles:
  - Stateless: one AmountConverter can be shared across threads.
  - Every arithmetic/formatting capability is injected via Collaborators,
    so classification and routing can be tested with plain fakes.
  - Failures propagate immediately as typed errors; no partial results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from . import counting, currency, distance, formatting
from .classifier import ParsedAmount, parse_amount
from .exceptions import DispatchError, ParseError
from .models import Marker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Collaborators:
    """The numeric and formatting capabilities the dispatcher relies on."""

    parse: Callable[[str], Decimal] = counting.parse
    is_japanese_number: Callable[[str], bool] = counting.is_japanese_number
    convert_to_largest_unit: Callable[[Decimal], str] = counting.convert_to_largest_unit
    commafy: Callable[[Decimal], str] = formatting.commafy
    dollars_to_yen: Callable[[Decimal, float], Decimal] = currency.dollars_to_yen
    yen_to_dollars: Callable[[Decimal, float], Decimal] = currency.yen_to_dollars
    convert_distance: Callable[[str, Decimal, bool], str] = distance.convert_distance


class AmountConverter:
    """Converts a free-form amount into its alternative representation.

    Usage:
        converter = AmountConverter()
        converter.convert("$100000", rate=110, use_large_units=True)  # "1100万円"
        converter.convert("12345", rate=110, use_large_units=True)    # "1.23万"
    """

    def __init__(
        self,
        collaborators: Collaborators | None = None,
        classify: Callable[[str], ParsedAmount] = parse_amount,
    ):
        self.collaborators = collaborators or Collaborators()
        self._classify = classify

    def classify(self, amount: str) -> ParsedAmount:
        """Split the amount into (marker, payload) without converting it."""
        return self._classify(amount)

    def convert(self, amount: str, rate: float, use_large_units: bool) -> str:
        """Convert an amount to its display string.

        Args:
            amount: e.g. "$100", "100円", "100 dollars", "5km", "12345"
            rate: Exchange rate in yen per dollar (currency amounts only).
            use_large_units: Format currency/distance results with 万/億
                words instead of comma grouping.

        Returns:
            The formatted result, e.g. "1100万円" or "$909.09".

        Raises:
            ParseError: The payload is not a recognizable numeral.
            InvalidRateError: A currency amount was given a non-positive rate.
            DispatchError: The classifier produced a marker with no branch.
        """
        c = self.collaborators
        marker, payload = self.classify(amount)
        logger.debug("Classified %r as marker=%r payload=%r", amount, marker, payload)

        try:
            value = c.parse(payload)
        except ParseError:
            logger.warning("Could not parse payload %r of amount %r", payload, amount)
            raise

        # No marker: ignore rate and style, render in the notation NOT used
        # by the input (comma ⇄ magnitude words).
        if marker == Marker.NONE:
            if c.is_japanese_number(payload):
                return c.commafy(value)
            return c.convert_to_largest_unit(value)

        if marker == Marker.DOLLAR:
            yen = c.dollars_to_yen(value, rate)
            return f"{self._format(yen, use_large_units)}円"

        if marker == Marker.YEN:
            dollars = c.yen_to_dollars(value, rate)
            return f"${self._format(dollars, use_large_units)}"

        if isinstance(marker, Marker) and marker.is_distance:
            return c.convert_distance(marker.value, value, use_large_units)

        logger.warning("No conversion branch for marker %r (input %r)", marker, amount)
        raise DispatchError(
            "unrecognized currency/unit marker",
            {"marker": str(marker), "amount": amount},
        )

    def _format(self, value: Decimal, use_large_units: bool) -> str:
        if use_large_units:
            return self.collaborators.convert_to_largest_unit(value)
        return self.collaborators.commafy(value)


_default_converter = AmountConverter()


def convert(amount: str, rate: float, use_large_units: bool) -> str:
    """Convert with the default collaborators. See AmountConverter.convert."""
    return _default_converter.convert(amount, rate, use_large_units)
