"""Physical plausibility checks for a temperature reading.

Most scales grow warmer upward, so absolute zero is a lower bound and the
sanity ceiling an upper one. Delisle runs the other way: 559.725 °De is
absolute zero, readings above it are rejected, and the ceiling bounds the
warm side from below (-ceiling). A reading at absolute zero minus epsilon is
therefore valid on Delisle, while absolute zero plus epsilon is not.
"""

from __future__ import annotations

import math

from converttemp.core.errors import Bound, NonFiniteInputError, OutOfRangeError
from converttemp.core.units import TemperatureUnit, absolute_zero, is_inverted

# Data-entry sanity limit, applied in the reading's own unit.
DEFAULT_CEILING = 10_000.0


def validate(
    value: float,
    unit: TemperatureUnit,
    ceiling: float = DEFAULT_CEILING,
) -> OutOfRangeError | None:
    """Check a reading against absolute zero and the sanity ceiling.

    Returns None when the reading is plausible. On Delisle (inverted) the
    colder direction is upward, so absolute zero is the upper bound and the
    ceiling limits how far below zero a reading may go.
    """
    if not math.isfinite(value):
        raise NonFiniteInputError(value)

    zero = absolute_zero(unit)

    if is_inverted(unit):
        if value > zero:
            return OutOfRangeError(value, unit, Bound.ABSOLUTE_ZERO, zero)
        if value < -ceiling:
            return OutOfRangeError(value, unit, Bound.CEILING, -ceiling)
        return None

    if value < zero:
        return OutOfRangeError(value, unit, Bound.ABSOLUTE_ZERO, zero)
    if value > ceiling:
        return OutOfRangeError(value, unit, Bound.CEILING, ceiling)
    return None


def is_valid(value: float, unit: TemperatureUnit, ceiling: float = DEFAULT_CEILING) -> bool:
    return validate(value, unit, ceiling) is None
