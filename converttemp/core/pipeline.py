"""Text-to-result pipeline: parse -> validate -> convert_all."""

from __future__ import annotations

from dataclasses import dataclass

from converttemp.core.conversion import ConversionResult, convert_all
from converttemp.core.errors import OutOfRangeError, ParseError
from converttemp.core.parser import Reading, parse
from converttemp.core.units import TemperatureUnit
from converttemp.core.validator import DEFAULT_CEILING, validate


@dataclass(frozen=True)
class ConversionOutcome:
    result: ConversionResult | None = None
    error: ParseError | OutOfRangeError | None = None
    reading: Reading | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def convert_value(
    value: float,
    unit: TemperatureUnit,
    ceiling: float = DEFAULT_CEILING,
) -> ConversionOutcome:
    """Validate a numeric reading and convert it to every unit."""
    reading = Reading(float(value), unit)
    error = validate(reading.value, unit, ceiling)
    if error is not None:
        return ConversionOutcome(error=error, reading=reading)
    return ConversionOutcome(result=convert_all(reading.value, unit), reading=reading)


def convert_text(
    text: str,
    default_unit: TemperatureUnit,
    ceiling: float = DEFAULT_CEILING,
) -> ConversionOutcome:
    """Run smart input through the whole pipeline.

    Stops at the first failing stage; the failure is returned, not raised.
    """
    parsed = parse(text, default_unit)
    if not parsed.ok:
        return ConversionOutcome(error=parsed.error)

    reading = parsed.reading
    error = validate(reading.value, reading.unit, ceiling)
    if error is not None:
        return ConversionOutcome(error=error, reading=reading)
    return ConversionOutcome(result=convert_all(reading.value, reading.unit), reading=reading)
