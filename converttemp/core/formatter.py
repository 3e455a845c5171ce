"""Display formatting for temperature readings."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

from converttemp.core.units import TemperatureUnit, symbol

# Enough digits to quantize any finite float without overflow.
_CONTEXT = Context(prec=400)


def precision_for(value: float) -> int:
    return 1 if abs(value) >= 100 else 2


def format_number(value: float, places: int) -> str:
    """Fixed-point text, ties rounded away from zero ("20.625" -> "20.63")."""
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if math.isnan(value):
        return "NaN"
    quantum = Decimal(1).scaleb(-places)
    numeral = f"{Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_CONTEXT):f}"
    # "-0.00" reads as a sign error to users
    if Decimal(numeral) == 0:
        numeral = numeral.lstrip("-")
    return numeral


def format_temperature(value: float, unit: TemperatureUnit) -> str:
    """Render ``value`` with its unit symbol, e.g. "98.60°F" or "373.1K"."""
    return f"{format_number(value, precision_for(value))}{symbol(unit)}"
