"""Temperature conversion engine.

Every conversion pivots through Celsius: ``to_celsius`` on the source unit,
then ``from_celsius`` on the target. There are no direct unit-to-unit
formulas, so the 8x8 conversion matrix cannot drift out of agreement with
itself or with the absolute-zero bounds in the catalog.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from converttemp.core.errors import InvalidTemperature, NonFiniteInputError
from converttemp.core.formatter import format_temperature
from converttemp.core.units import UNITS, TemperatureUnit
from converttemp.core.validator import DEFAULT_CEILING, validate


def _require_finite(value: float) -> float:
    if not math.isfinite(value):
        raise NonFiniteInputError(value)
    return float(value)


def to_celsius(value: float, unit: TemperatureUnit) -> float:
    """Convert a reading in ``unit`` to the Celsius pivot."""
    return UNITS[unit].to_celsius(_require_finite(value))


def from_celsius(celsius: float, unit: TemperatureUnit) -> float:
    """Convert a Celsius pivot value to ``unit``."""
    return UNITS[unit].from_celsius(_require_finite(celsius))


def convert(value: float, source: TemperatureUnit, target: TemperatureUnit) -> float:
    """Convert one reading between two units via Celsius."""
    value = _require_finite(value)
    if source is target:
        return value
    return UNITS[target].from_celsius(UNITS[source].to_celsius(value))


@dataclass(frozen=True)
class ConversionResult:
    """A single reading expressed in every supported unit."""

    value: float
    unit: TemperatureUnit
    celsius_value: float
    values: Mapping[TemperatureUnit, float]
    formatted: Mapping[TemperatureUnit, str]

    def value_of(self, unit: TemperatureUnit) -> float:
        return self.values[unit]

    def display_of(self, unit: TemperatureUnit) -> str:
        return self.formatted[unit]

    @property
    def celsius(self) -> float:
        return self.values[TemperatureUnit.CELSIUS]

    @property
    def fahrenheit(self) -> float:
        return self.values[TemperatureUnit.FAHRENHEIT]

    @property
    def kelvin(self) -> float:
        return self.values[TemperatureUnit.KELVIN]

    @property
    def rankine(self) -> float:
        return self.values[TemperatureUnit.RANKINE]

    @property
    def reaumur(self) -> float:
        return self.values[TemperatureUnit.REAUMUR]

    @property
    def delisle(self) -> float:
        return self.values[TemperatureUnit.DELISLE]

    @property
    def newton(self) -> float:
        return self.values[TemperatureUnit.NEWTON]

    @property
    def romer(self) -> float:
        return self.values[TemperatureUnit.ROMER]


def convert_all(value: float, unit: TemperatureUnit) -> ConversionResult:
    """Express ``value`` in all units, with display strings.

    Performs no range validation. Raises NonFiniteInputError only for NaN or
    infinite input; a finite input whose conversion overflows yields an
    infinite value for that unit.
    """
    value = _require_finite(value)
    celsius = UNITS[unit].to_celsius(value)

    values: dict[TemperatureUnit, float] = {}
    for target in TemperatureUnit:
        values[target] = value if target is unit else UNITS[target].from_celsius(celsius)

    return ConversionResult(
        value=value,
        unit=unit,
        celsius_value=celsius,
        values=MappingProxyType(values),
        formatted=MappingProxyType({u: format_temperature(v, u) for u, v in values.items()}),
    )


@dataclass(frozen=True)
class Temperature:
    """A finite, physically plausible reading. Rejected at construction otherwise."""

    value: float
    unit: TemperatureUnit
    ceiling: float = field(default=DEFAULT_CEILING, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _require_finite(self.value))
        error = validate(self.value, self.unit, self.ceiling)
        if error is not None:
            raise InvalidTemperature(error)

    def to(self, unit: TemperatureUnit) -> float:
        return convert(self.value, self.unit, unit)

    def convert_all(self) -> ConversionResult:
        return convert_all(self.value, self.unit)

    def __str__(self) -> str:
        return format_temperature(self.value, self.unit)
