"""Smart input parser: free-form text like "25C", "77 F" or "80Re" -> (value, unit)."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from converttemp.core.errors import ParseError
from converttemp.core.units import TemperatureUnit, unit_for_token

# Sign, digits with optional fraction (".5" allowed), optional degree sign,
# then the whole trailing letter run as the unit token.
_INPUT_RE = re.compile(
    r"^(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+))\s*(?:°\s*)?(?P<unit>[^\W\d_]+)?$"
)


@dataclass(frozen=True)
class Reading:
    value: float
    unit: TemperatureUnit
    explicit: bool = True


@dataclass(frozen=True)
class ParseOutcome:
    reading: Reading | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse(text: str, default_unit: TemperatureUnit) -> ParseOutcome:
    """Extract a magnitude and unit from ``text``.

    A bare number takes ``default_unit``. Unit tokens must match an alias
    exactly, so "25KG" fails instead of reading as 25 K.
    """
    if not isinstance(text, str):
        return ParseOutcome(error=ParseError("Input must be text", text=repr(text)))

    cleaned = text.strip().upper()
    if not cleaned:
        return ParseOutcome(error=ParseError("Enter a temperature, e.g. 25C", text=text))

    m = _INPUT_RE.match(cleaned)
    if m is None:
        return ParseOutcome(error=ParseError(f"Could not understand '{text.strip()}'", text=text))

    value = float(m.group("number"))
    if not math.isfinite(value):
        return ParseOutcome(error=ParseError(f"'{m.group('number')}' is not a finite number", text=text))

    token = m.group("unit")
    if token is None:
        return ParseOutcome(reading=Reading(value, default_unit, explicit=False))

    unit = unit_for_token(token)
    if unit is None:
        return ParseOutcome(error=ParseError(f"Unknown temperature unit '{token}'", text=text, token=token))

    return ParseOutcome(reading=Reading(value, unit))
