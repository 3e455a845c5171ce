"""Tests for the Celsius-pivot conversion engine."""

import itertools
import math

import pytest

from converttemp.core.conversion import (
    Temperature,
    convert,
    convert_all,
    from_celsius,
    to_celsius,
)
from converttemp.core.errors import Bound, InvalidTemperature, NonFiniteInputError
from converttemp.core.units import TemperatureUnit, absolute_zero

U = TemperatureUnit

SAMPLE_VALUES = [-250.0, -40.0, -0.5, 0.0, 0.1, 25.0, 36.6, 100.0, 451.0, 1234.5678, 9999.99]


class TestKnownPoints:
    @pytest.mark.parametrize("celsius, unit, expected", [
        (100, U.FAHRENHEIT, 212.0),
        (-40, U.FAHRENHEIT, -40.0),
        (0, U.KELVIN, 273.15),
        (0, U.RANKINE, 491.67),
        (100, U.REAUMUR, 80.0),
        (0, U.DELISLE, 150.0),
        (100, U.DELISLE, 0.0),
        (100, U.NEWTON, 33.0),
        (0, U.ROMER, 7.5),
        (100, U.ROMER, 60.0),
    ])
    def test_from_celsius(self, celsius, unit, expected):
        assert from_celsius(celsius, unit) == pytest.approx(expected, abs=1e-9)

    @pytest.mark.parametrize("value, unit, expected", [
        (212, U.FAHRENHEIT, 100.0),
        (0, U.KELVIN, -273.15),
        (671.67, U.RANKINE, 100.0),
        (80, U.REAUMUR, 100.0),
        (150, U.DELISLE, 0.0),
        (33, U.NEWTON, 100.0),
        (60, U.ROMER, 100.0),
    ])
    def test_to_celsius(self, value, unit, expected):
        assert to_celsius(value, unit) == pytest.approx(expected, abs=1e-9)

    def test_fahrenheit_to_kelvin(self):
        assert convert(32, U.FAHRENHEIT, U.KELVIN) == pytest.approx(273.15)

    def test_kelvin_to_rankine(self):
        assert convert(100, U.KELVIN, U.RANKINE) == pytest.approx(180.0)


class TestRoundTrip:
    @pytest.mark.parametrize("unit", list(TemperatureUnit))
    def test_via_celsius(self, unit):
        for value in SAMPLE_VALUES + [absolute_zero(unit)]:
            assert from_celsius(to_celsius(value, unit), unit) == pytest.approx(value, abs=1e-9)

    @pytest.mark.parametrize("source, target", list(itertools.permutations(TemperatureUnit, 2)))
    def test_there_and_back(self, source, target):
        for value in SAMPLE_VALUES:
            there = convert(value, source, target)
            assert convert(there, target, source) == pytest.approx(value, abs=1e-9)


class TestPivotConsistency:
    @pytest.mark.parametrize("source, target", list(itertools.permutations(TemperatureUnit, 2)))
    def test_convert_is_pivot(self, source, target):
        for value in SAMPLE_VALUES:
            assert convert(value, source, target) == from_celsius(to_celsius(value, source), target)

    def test_same_unit_is_identity(self):
        for unit in TemperatureUnit:
            assert convert(0.1, unit, unit) == 0.1
            assert convert(-17.777, unit, unit) == -17.777

    def test_convert_all_matches_convert(self):
        for unit in TemperatureUnit:
            result = convert_all(42.0, unit)
            for target in TemperatureUnit:
                assert result.value_of(target) == convert(42.0, unit, target)


class TestConvertAll:
    def test_twenty_five_celsius(self):
        result = convert_all(25, U.CELSIUS)
        assert result.celsius == 25
        assert result.fahrenheit == pytest.approx(77.0)
        assert result.kelvin == pytest.approx(298.15)
        assert result.rankine == pytest.approx(536.67)
        assert result.reaumur == pytest.approx(20.0)
        assert result.delisle == pytest.approx(112.5)
        assert result.newton == pytest.approx(8.25)
        assert result.romer == pytest.approx(20.625)

    def test_formatted_strings(self):
        result = convert_all(25, U.CELSIUS)
        assert result.display_of(U.CELSIUS) == "25.00°C"
        assert result.display_of(U.FAHRENHEIT) == "77.00°F"
        assert result.display_of(U.KELVIN) == "298.1K"
        assert result.display_of(U.RANKINE) == "536.7°R"
        assert result.display_of(U.DELISLE) == "112.5°De"
        assert result.display_of(U.ROMER) == "20.63°Rø"

    def test_covers_all_units(self):
        result = convert_all(0, U.KELVIN)
        assert set(result.values) == set(TemperatureUnit)
        assert set(result.formatted) == set(TemperatureUnit)

    def test_source_value_kept_exactly(self):
        result = convert_all(98.6, U.FAHRENHEIT)
        assert result.fahrenheit == 98.6
        assert result.celsius_value == pytest.approx(37.0)

    def test_no_range_validation(self):
        result = convert_all(-1_000_000, U.CELSIUS)
        assert result.kelvin == pytest.approx(-999_726.85)

    def test_result_is_read_only(self):
        result = convert_all(0, U.CELSIUS)
        with pytest.raises(TypeError):
            result.values[U.KELVIN] = 1.0

    @pytest.mark.parametrize("value, unit", [
        (1e308, U.CELSIUS),
        (1.7e308, U.FAHRENHEIT),
        (-1e308, U.DELISLE),
    ])
    def test_huge_finite_input_does_not_raise(self, value, unit):
        result = convert_all(value, unit)
        assert result.value_of(unit) == value
        assert set(result.formatted) == set(TemperatureUnit)
        assert any(math.isinf(v) for v in result.values.values())

    def test_overflowed_units_display_as_infinity(self):
        result = convert_all(1e308, U.CELSIUS)
        assert result.fahrenheit == math.inf
        assert result.display_of(U.FAHRENHEIT) == "Infinity°F"
        assert result.display_of(U.CELSIUS).endswith(".0°C")

    def test_overflow_through_pivot(self):
        result = convert_all(1.7e308, U.FAHRENHEIT)
        assert result.celsius_value == math.inf
        assert result.display_of(U.DELISLE) == "-Infinity°De"
        assert convert(1.7e308, U.FAHRENHEIT, U.KELVIN) == math.inf

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, bad):
        with pytest.raises(NonFiniteInputError):
            convert_all(bad, U.CELSIUS)
        with pytest.raises(NonFiniteInputError):
            convert(bad, U.CELSIUS, U.CELSIUS)
        with pytest.raises(NonFiniteInputError):
            to_celsius(bad, U.KELVIN)


class TestTemperature:
    def test_valid_reading(self):
        t = Temperature(100, U.CELSIUS)
        assert t.to(U.FAHRENHEIT) == pytest.approx(212.0)
        assert str(t) == "100.0°C"
        assert t.convert_all().kelvin == pytest.approx(373.15)

    def test_is_immutable(self):
        t = Temperature(1, U.KELVIN)
        with pytest.raises(AttributeError):
            t.value = 2

    def test_equality_ignores_ceiling(self):
        assert Temperature(5, U.CELSIUS) == Temperature(5, U.CELSIUS, ceiling=50)

    def test_below_absolute_zero_rejected(self):
        with pytest.raises(InvalidTemperature) as exc:
            Temperature(-1, U.KELVIN)
        assert exc.value.error.bound is Bound.ABSOLUTE_ZERO
        assert exc.value.error.unit is U.KELVIN

    def test_custom_ceiling(self):
        with pytest.raises(InvalidTemperature) as exc:
            Temperature(60, U.CELSIUS, ceiling=50)
        assert exc.value.error.bound is Bound.CEILING

    def test_nan_rejected(self):
        with pytest.raises(NonFiniteInputError):
            Temperature(math.nan, U.CELSIUS)
