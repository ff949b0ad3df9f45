"""
Japanese-style numerals: parsing, recognition and magnitude-word formatting.

Supported patterns:
    "12,345"            → 12345
    "1100万"            → 11,000,000
    "3.5億"             → 350,000,000
    "1億2345万6789"     → 123,456,789
    "三千五百万"         → 35,000,000
    "１２３"             → 123          (fullwidth digits, NFKC-normalized)

Magnitude words are the 4-digit Japanese groups: 万 (10^4), 億 (10^8),
兆 (10^12), 京 (10^16).
"""

from __future__ import annotations

import re
import unicodedata
from decimal import Decimal, localcontext

from .exceptions import ParseError
from .formatting import round_amount

# ─── Lookup Tables ───────────────────────────────────────────────────

# Ordered largest-first.
LARGE_UNITS: dict[str, Decimal] = {
    "京": Decimal(10) ** 16,
    "兆": Decimal(10) ** 12,
    "億": Decimal(10) ** 8,
    "万": Decimal(10) ** 4,
}

_SMALL_UNITS: dict[str, int] = {
    "十": 10,
    "百": 100,
    "千": 1_000,
}

_KANJI_DIGITS: dict[str, int] = {
    "〇": 0,
    "零": 0,
    "一": 1,
    "二": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "七": 7,
    "八": 8,
    "九": 9,
}

_JAPANESE_CHARS: frozenset[str] = frozenset(LARGE_UNITS) | frozenset(_SMALL_UNITS) | frozenset(_KANJI_DIGITS)

_PLAIN_NUMBER = re.compile(r"\d+(?:\.\d+)?|\.\d+")

# (word, value) ascending, with the bare number as the bottom level
_LEVELS: tuple[tuple[str, Decimal], ...] = (("", Decimal(1)),) + tuple(reversed(LARGE_UNITS.items()))


# ─── Normalization ───────────────────────────────────────────────────


def _normalize(text: str) -> str:
    """NFKC-fold fullwidth forms, trim, and drop thousands separators."""
    return unicodedata.normalize("NFKC", text).strip().replace(",", "")


# ─── Parsing ─────────────────────────────────────────────────────────


def parse(text: str) -> Decimal:
    """Parse a plain or Japanese-style numeral to a Decimal.

    Args:
        text: e.g. "1,234.5", "1100万", "一億二千万"

    Returns:
        The numeric value as a Decimal.

    Raises:
        ParseError: If the text is empty or is not a recognizable numeral.

    Algorithm:
        The numeral is split into sections at each magnitude word. Each
        section is worth `section * unit`; the trailing section (no unit)
        is worth its own value. Magnitude words must strictly decrease
        ("1億2345万", never "5万3億").
    """
    if not text or not text.strip():
        raise ParseError("Empty text cannot be parsed as a number", {"text": text})

    normalized = _normalize(text)

    negative = False
    if normalized[:1] in ("-", "+"):
        negative = normalized[0] == "-"
        normalized = normalized[1:].strip()
        if not normalized:
            raise ParseError(f"Sign without a number in {text!r}", {"text": text})

    if _PLAIN_NUMBER.fullmatch(normalized):
        value = Decimal(normalized)
    else:
        value = _parse_sections(normalized, text)

    # copy_negate is exact; unary minus would round to the context precision
    return value.copy_negate() if negative else value


def _parse_sections(normalized: str, source: str) -> Decimal:
    """Sum the sections of a numeral split at its magnitude words."""
    result = Decimal(0)
    section = ""
    previous_unit: Decimal | None = None

    # Enough precision that no digit of the input is rounded away
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(normalized) + 20)

        for ch in normalized:
            if ch not in LARGE_UNITS:
                section += ch
                continue

            unit = LARGE_UNITS[ch]
            if not section:
                raise ParseError(f"Magnitude word {ch!r} has no number before it in {source!r}", {"text": source})
            if previous_unit is not None and unit >= previous_unit:
                raise ParseError(f"Magnitude words out of order in {source!r}", {"text": source})

            result += _parse_section(section, source) * unit
            previous_unit = unit
            section = ""

        if section:
            result += _parse_section(section, source)

    return result


def _parse_section(section: str, source: str) -> Decimal:
    """Parse the digits between two magnitude words.

    A section is either a plain decimal ("2345", "3.5") or digits (kanji or
    arabic) with 十/百/千 ("三千五百", "二十", "3千5百").
    """
    if _PLAIN_NUMBER.fullmatch(section):
        return Decimal(section)

    total = 0
    current = 0
    for ch in section:
        if ch in _KANJI_DIGITS:
            current = current * 10 + _KANJI_DIGITS[ch]
        elif ch.isdecimal():
            current = current * 10 + int(ch)
        elif ch in _SMALL_UNITS:
            total += (current or 1) * _SMALL_UNITS[ch]
            current = 0
        else:
            raise ParseError(f"Unrecognized numeral character {ch!r} in {source!r}", {"text": source})

    return Decimal(total + current)


def is_japanese_number(text: str) -> bool:
    """True if the numeral uses Japanese notation (magnitude words or kanji digits)."""
    return any(ch in _JAPANESE_CHARS for ch in _normalize(text))


# ─── Formatting ──────────────────────────────────────────────────────


def convert_to_largest_unit(value: Decimal) -> str:
    """Render a number with the largest magnitude word that fits.

    The word is chosen on the rounded value, so a number that rounds up to
    the next word moves to it (99999999 → "1億", never "10000万").

    Examples:
        11000000  → "1100万"
        12345     → "1.23万"
        250000000 → "2.5億"
        909.0909  → "909.09"   (below 万, no word)
    """
    index = 0
    for i, (_, unit) in enumerate(_LEVELS):
        if abs(value) >= unit:
            index = i

    scaled = round_amount(value / _LEVELS[index][1])
    # Adjacent words are 10^4 apart
    while abs(scaled) >= 10_000 and index + 1 < len(_LEVELS):
        index += 1
        scaled = round_amount(value / _LEVELS[index][1])

    return f"{scaled:f}{_LEVELS[index][0]}"
