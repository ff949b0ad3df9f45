"""
Marker detection — split a raw amount into (marker, payload).

Detection is an ordered list of rules; the first rule that matches wins.
The order IS the priority policy:

  1. trailing word  "dollars" / "yen"      ("100 dollars", "100 yen")
  2. two-char suffix "ドル"                  ("100ドル")
  3. two-char suffix cm / in / ft / km / mi  ("5km")
  4. leading "$" or "＄"                     ("$100")
  5. one-char suffix "円"                    ("100円")
  6. one-char suffix "m"                     ("5m")

Two-character suffixes are checked before single characters, so "5km" is
always kilometers and never "5k" meters.

Python strings index by code point, so multi-byte markers such as "円" and
"ドル" need no special handling.
"""

from __future__ import annotations

from typing import Callable, NamedTuple, Optional

from .models import Marker


class ParsedAmount(NamedTuple):
    """Result of classifying a raw amount."""

    marker: Marker
    payload: str  # Raw text with the marker removed; not guaranteed numeric


class MarkerRule(NamedTuple):
    """One detection rule: `strip(raw)` returns the payload, or None on no match."""

    name: str
    marker: Marker
    strip: Callable[[str], Optional[str]]


# ─── Rule Builders ───────────────────────────────────────────────────


def _trailing_word(word: str) -> Callable[[str], Optional[str]]:
    """Match a final space-separated word, e.g. "100 dollars"."""

    def strip(raw: str) -> Optional[str]:
        segments = raw.split(" ")
        if len(segments) > 1 and segments[-1] == word:
            return " ".join(segments[:-1])
        return None

    return strip


def _suffix(token: str, min_length: int = 1) -> Callable[[str], Optional[str]]:
    """Match a literal suffix on strings of at least `min_length` characters."""

    def strip(raw: str) -> Optional[str]:
        if len(raw) >= min_length and raw.endswith(token):
            return raw[: -len(token)]
        return None

    return strip


def _prefix(*tokens: str) -> Callable[[str], Optional[str]]:
    """Match any one of several single-character prefixes."""

    def strip(raw: str) -> Optional[str]:
        if raw[:1] in tokens:
            return raw[1:]
        return None

    return strip


# ─── Rule Table ─────────────────────────────────────────────────────

# Two-character suffixes need a non-empty payload left over: "km" alone is
# not kilometers (it falls through to the single "m" rule).
_TWO_CHAR_MIN = 3

MARKER_RULES: tuple[MarkerRule, ...] = (
    MarkerRule("dollars-word", Marker.DOLLAR, _trailing_word("dollars")),
    MarkerRule("yen-word", Marker.YEN, _trailing_word("yen")),
    MarkerRule("doru-suffix", Marker.DOLLAR, _suffix("ドル", _TWO_CHAR_MIN)),
    MarkerRule("cm-suffix", Marker.CENTIMETER, _suffix("cm", _TWO_CHAR_MIN)),
    MarkerRule("in-suffix", Marker.INCH, _suffix("in", _TWO_CHAR_MIN)),
    MarkerRule("ft-suffix", Marker.FOOT, _suffix("ft", _TWO_CHAR_MIN)),
    MarkerRule("km-suffix", Marker.KILOMETER, _suffix("km", _TWO_CHAR_MIN)),
    MarkerRule("mi-suffix", Marker.MILE, _suffix("mi", _TWO_CHAR_MIN)),
    MarkerRule("dollar-sign", Marker.DOLLAR, _prefix("$", "＄")),
    MarkerRule("yen-suffix", Marker.YEN, _suffix("円")),
    MarkerRule("m-suffix", Marker.METER, _suffix("m")),
)


# ─── Public API ──────────────────────────────────────────────────────


def parse_amount(raw: str) -> ParsedAmount:
    """Split an input into its marker (if present) and numeric payload.

    Examples:
        "$100"      → ("$", "100")
        "100 yen"   → ("円", "100")
        "5km"       → ("km", "5")
        "12345"     → ("", "12345")

    Empty input has no marker and is returned unchanged.
    """
    if not raw:
        return ParsedAmount(Marker.NONE, raw)

    for rule in MARKER_RULES:
        payload = rule.strip(raw)
        if payload is not None:
            return ParsedAmount(rule.marker, payload)

    return ParsedAmount(Marker.NONE, raw)
