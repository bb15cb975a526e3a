"""Tests for unit-aware value parsing, formatting and stepping."""

from __future__ import annotations

import pytest

from token_studio.core.units import (
    CSS_UNITS,
    clamp,
    coerce_number,
    format_number,
    format_value,
    is_recognized_unit,
    parse_number,
    parse_value_and_unit,
    scan,
    step_delta,
)


class TestScan:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12px", ("12", "px")),
            ("-0.5 rem", ("-0.5", "rem")),
            ("  .5em  ", (".5", "em")),
            ("12.", ("12.", "")),
            ("100%", ("100", "%")),
            ("7", ("7", "")),
        ],
    )
    def test_valid(self, text, expected):
        assert scan(text) == expected

    @pytest.mark.parametrize("text", ["", "-", ".", "px", "1 2px", "12px3", "--1", "1.2.3", "١٢"])
    def test_invalid(self, text):
        assert scan(text) is None


class TestParseValueAndUnit:
    def test_recognized_unit_adopted(self):
        parsed = parse_value_and_unit("2rem", "px")
        assert parsed.number == 2
        assert parsed.unit == "rem"

    def test_unit_case_insensitive(self):
        assert parse_value_and_unit("0.9VW").unit == "vw"

    def test_unrecognized_unit_falls_back(self):
        parsed = parse_value_and_unit("3abc", "vw")
        assert parsed.number == 3
        assert parsed.unit == "vw"

    def test_missing_unit_uses_default(self):
        assert parse_value_and_unit("12", "em").unit == "em"

    def test_number_input_never_scanned(self):
        parsed = parse_value_and_unit(12.5, "vh")
        assert (parsed.number, parsed.unit) == (12.5, "vh")

    def test_bool_is_not_a_number(self):
        assert parse_value_and_unit(True) is None

    def test_unparsable(self):
        assert parse_value_and_unit("-") is None

    def test_parse_number_ignores_unit(self):
        assert parse_number("64px") == 64
        assert parse_number("abc") is None

    def test_round_trip(self):
        parsed = parse_value_and_unit("12.0px")
        assert format_value(parsed.number, parsed.unit) == "12px"


class TestFormatting:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (12.0, "12"),
            (12, "12"),
            (-1.75, "-1.75"),
            (0.7999999999999999, "0.8"),
            (-0.0, "0"),
            (1e-12, "0"),
            (0.1 + 0.2, "0.3"),
        ],
    )
    def test_format_number(self, value, expected):
        assert format_number(value) == expected

    def test_coerce_integral_float(self):
        result = coerce_number(64.0)
        assert result == 64
        assert isinstance(result, int)

    def test_coerce_keeps_fraction(self):
        assert coerce_number(1.1000000000000001) == 1.1

    def test_coerce_int_input(self):
        result = coerce_number(900)
        assert result == 900
        assert isinstance(result, int)

    def test_recognized_units(self):
        assert CSS_UNITS == ("px", "rem", "em", "vw", "vh", "%", "pt", "ch")
        assert is_recognized_unit("PT")
        assert not is_recognized_unit("in")
        assert not is_recognized_unit(None)


class TestStepping:
    def test_base_step(self):
        assert step_delta(1, 1) == 1

    def test_down(self):
        assert step_delta(1, -1) == -1

    def test_fine(self):
        assert step_delta(1, 1, fine=True) == pytest.approx(0.1)

    def test_coarse(self):
        assert step_delta(1, 1, coarse=True) == 10

    def test_modifiers_compose(self):
        assert step_delta(0.25, 1, fine=True, coarse=True) == pytest.approx(0.25)

    def test_zero_direction(self):
        assert step_delta(1, 0) == 0

    def test_clamp_bounds(self):
        assert clamp(130, 12, 120) == 120
        assert clamp(5, 12, 120) == 12
        assert clamp(50, 12, 120) == 50

    def test_clamp_open_bounds(self):
        assert clamp(-500, None, 10) == -500
        assert clamp(500, 0, None) == 500
