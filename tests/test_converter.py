"""
Tests for the conversion dispatcher.

Two layers:
  - end-to-end with the real collaborators (the documented examples);
  - routing only, with fake collaborators, so branch selection is checked
    independently of numeral formatting rules.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import pytest

from amount_converter.classifier import ParsedAmount
from amount_converter.converter import AmountConverter, Collaborators, convert
from amount_converter.counting import parse
from amount_converter.exceptions import DispatchError, InvalidRateError, ParseError
from amount_converter.models import Marker


# ═══════════════════════════════════════════════════════════════════════
# CURRENCY
# ═══════════════════════════════════════════════════════════════════════


class TestCurrencyConversion:
    def test_dollars_to_yen_large_units(self):
        assert convert("$100000", rate=110, use_large_units=True) == "1100万円"

    def test_dollars_to_yen_commas(self):
        assert convert("$100000", rate=110, use_large_units=False) == "11,000,000円"

    def test_yen_to_dollars_commas(self):
        assert convert("100000円", rate=110, use_large_units=False) == "$909.09"

    def test_yen_to_dollars_large_units_below_man(self):
        assert convert("100000円", rate=110, use_large_units=True) == "$909.09"

    @pytest.mark.parametrize("amount", ["100 dollars", "100ドル", "＄100", "$100"])
    def test_dollar_spellings(self, amount):
        assert convert(amount, rate=150, use_large_units=False) == "15,000円"

    def test_yen_word(self):
        assert convert("1500000 yen", rate=150, use_large_units=False) == "$10,000"
        assert convert("1500000 yen", rate=150, use_large_units=True) == "$1万"

    def test_japanese_numeral_yen_amount(self):
        assert convert("1.5万円", rate=150, use_large_units=False) == "$100"

    def test_zero_rate_raises(self):
        with pytest.raises(InvalidRateError):
            convert("$100", rate=0, use_large_units=True)

    def test_very_long_dollar_amount(self):
        result = convert("$" + "9" * 5000, rate=110, use_large_units=False)
        assert result.endswith("円")
        digits = result[:-1].replace(",", "")
        assert digits.isdigit()
        assert len(digits) == 5003
        assert digits.startswith("11")


class TestRoundTrip:
    """dollars → yen → dollars at the same rate recovers the amount."""

    @pytest.mark.parametrize(
        ("dollars", "rate"),
        [("$1,234.56", 151.25), ("$100", 110), ("$42", 149.5), ("$99999", 133.3)],
    )
    def test_round_trip(self, dollars, rate):
        yen = convert(dollars, rate=rate, use_large_units=False)
        back = convert(yen, rate=rate, use_large_units=False)
        assert abs(parse(back[1:]) - parse(dollars[1:])) <= Decimal("0.01")

    def test_exact_round_trip(self):
        yen = convert("$1,234.56", rate=151.25, use_large_units=False)
        assert yen == "186,727.2円"
        assert convert(yen, rate=151.25, use_large_units=False) == "$1,234.56"


# ═══════════════════════════════════════════════════════════════════════
# PLAIN NUMBERS (no marker)
# ═══════════════════════════════════════════════════════════════════════


class TestPlainNumbers:
    """No marker → render in the notation the input did NOT use.

    Intentional: typing a number in one style shows it in the other, and
    rate/style are ignored.
    """

    @pytest.mark.parametrize("use_large_units", [True, False])
    def test_plain_number_becomes_magnitude_words(self, use_large_units):
        assert convert("12345", rate=110, use_large_units=use_large_units) == "1.23万"

    @pytest.mark.parametrize("use_large_units", [True, False])
    def test_japanese_number_becomes_commas(self, use_large_units):
        assert convert("1.23万", rate=110, use_large_units=use_large_units) == "12,300"

    def test_kanji_number_becomes_commas(self):
        assert convert("一億", rate=110, use_large_units=True) == "100,000,000"

    def test_comma_grouped_input(self):
        assert convert("1,000,000", rate=110, use_large_units=False) == "100万"

    def test_small_plain_number(self):
        assert convert("999", rate=110, use_large_units=True) == "999"

    def test_rate_is_ignored(self):
        assert convert("12345", rate=0, use_large_units=True) == "1.23万"

    def test_rounds_up_into_next_word(self):
        assert convert("99999999", rate=1, use_large_units=True) == "1億"

    def test_tiny_negative_renders_as_zero(self):
        assert convert("-0.001", rate=1, use_large_units=True) == "0"

    def test_very_long_japanese_number(self):
        result = convert("1" + "0" * 5000 + "万", rate=110, use_large_units=True)
        assert result.replace(",", "") == "1" + "0" * 5004


# ═══════════════════════════════════════════════════════════════════════
# DISTANCE
# ═══════════════════════════════════════════════════════════════════════


class TestDistanceConversion:
    def test_km_to_miles(self):
        assert convert("5km", rate=110, use_large_units=False) == "3.11mi"

    def test_meters_to_feet(self):
        assert convert("5m", rate=110, use_large_units=False) == "16.4ft"

    def test_inches_to_cm(self):
        assert convert("100in", rate=110, use_large_units=False) == "254cm"

    def test_large_units(self):
        assert convert("10000mi", rate=110, use_large_units=True) == "1.61万km"

    def test_rate_is_ignored(self):
        assert convert("5km", rate=0, use_large_units=False) == "3.11mi"


# ═══════════════════════════════════════════════════════════════════════
# ERRORS
# ═══════════════════════════════════════════════════════════════════════


class TestErrors:
    @pytest.mark.parametrize("amount", ["abc", "$abc", "", "円", "ten dollars"])
    def test_unparseable_payload(self, amount):
        with pytest.raises(ParseError):
            convert(amount, rate=110, use_large_units=True)


# ═══════════════════════════════════════════════════════════════════════
# ROUTING (fake collaborators)
# ═══════════════════════════════════════════════════════════════════════


def _fake_collaborators(calls: list, japanese: bool = False) -> Collaborators:
    """Collaborators that record calls and return tagged strings."""

    def record(name, result):
        def fake(*args):
            calls.append((name, args))
            return result(*args)

        return fake

    return Collaborators(
        parse=record("parse", lambda text: Decimal(7)),
        is_japanese_number=record("is_japanese_number", lambda text: japanese),
        convert_to_largest_unit=record("convert_to_largest_unit", lambda n: f"L({n})"),
        commafy=record("commafy", lambda n: f"C({n})"),
        dollars_to_yen=record("dollars_to_yen", lambda n, rate: n * 2),
        yen_to_dollars=record("yen_to_dollars", lambda n, rate: n / 2),
        convert_distance=record("convert_distance", lambda unit, n, flag: f"D({unit},{n},{flag})"),
    )


class TestRouting:
    def test_dollar_branch(self):
        calls: list = []
        converter = AmountConverter(_fake_collaborators(calls))
        assert converter.convert("$1", 3.0, True) == "L(14)円"
        assert ("dollars_to_yen", (Decimal(7), 3.0)) in calls

    def test_yen_branch(self):
        calls: list = []
        converter = AmountConverter(_fake_collaborators(calls))
        assert converter.convert("1円", 3.0, False) == "$C(3.5)"
        assert ("yen_to_dollars", (Decimal(7), 3.0)) in calls

    def test_distance_branch_is_pass_through(self):
        calls: list = []
        converter = AmountConverter(_fake_collaborators(calls))
        assert converter.convert("1km", 3.0, True) == "D(km,7,True)"
        names = [name for name, _ in calls]
        assert names == ["parse", "convert_distance"]

    def test_distance_branch_gets_plain_unit_string(self):
        calls: list = []
        AmountConverter(_fake_collaborators(calls)).convert("1ft", 3.0, False)
        unit = calls[-1][1][0]
        assert unit == "ft" and type(unit) is str

    def test_no_marker_plain_uses_largest_unit_regardless_of_flag(self):
        calls: list = []
        converter = AmountConverter(_fake_collaborators(calls, japanese=False))
        assert converter.convert("7", 3.0, False) == "L(7)"
        assert "commafy" not in [name for name, _ in calls]

    def test_no_marker_japanese_uses_commas_regardless_of_flag(self):
        calls: list = []
        converter = AmountConverter(_fake_collaborators(calls, japanese=True))
        assert converter.convert("7", 3.0, True) == "C(7)"
        assert "convert_to_largest_unit" not in [name for name, _ in calls]

    def test_no_marker_never_touches_currency(self):
        calls: list = []
        AmountConverter(_fake_collaborators(calls)).convert("7", 3.0, True)
        names = {name for name, _ in calls}
        assert "dollars_to_yen" not in names
        assert "yen_to_dollars" not in names

    def test_predicate_sees_payload_not_raw_input(self):
        calls: list = []
        AmountConverter(_fake_collaborators(calls)).convert("12345", 3.0, True)
        assert ("is_japanese_number", ("12345",)) in calls

    def test_parse_failure_stops_dispatch(self):
        def failing_parse(text):
            raise ParseError(f"bad {text!r}", {"text": text})

        calls: list = []
        converter = AmountConverter(replace(_fake_collaborators(calls), parse=failing_parse))
        with pytest.raises(ParseError):
            converter.convert("5km", 3.0, True)
        assert calls == []

    def test_unknown_marker_raises_dispatch_error(self):
        calls: list = []
        converter = AmountConverter(
            _fake_collaborators(calls),
            classify=lambda amount: ParsedAmount("yd", amount),
        )
        with pytest.raises(DispatchError) as exc_info:
            converter.convert("5", 3.0, True)
        assert exc_info.value.code == "UNRECOGNIZED_MARKER"
        assert "unrecognized currency/unit marker" in str(exc_info.value)

    def test_classify_exposed(self):
        assert AmountConverter().classify("100 yen") == (Marker.YEN, "100")
