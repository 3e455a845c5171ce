"""Failure types reported by the temperature engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from converttemp.core.units import TemperatureUnit, symbol


def _num(x: float) -> str:
    return repr(float(x)).removesuffix(".0")


class Bound(Enum):
    ABSOLUTE_ZERO = "absolute_zero"
    CEILING = "ceiling"


@dataclass(frozen=True)
class ParseError:
    """Input text is not a number with an optional known unit."""

    message: str
    text: str
    token: str | None = None


@dataclass(frozen=True)
class OutOfRangeError:
    """A reading beyond absolute zero or the sanity ceiling of its unit."""

    value: float
    unit: TemperatureUnit
    bound: Bound
    limit: float

    @property
    def message(self) -> str:
        sym = symbol(self.unit)
        if self.bound is Bound.ABSOLUTE_ZERO:
            return f"{_num(self.value)}{sym} is beyond absolute zero ({_num(self.limit)}{sym})"
        return f"{_num(self.value)}{sym} exceeds the supported limit of {_num(self.limit)}{sym}"


class NonFiniteInputError(ValueError):
    """NaN or infinity reached the conversion engine."""

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Temperature magnitude must be finite, got {value!r}")


class InvalidTemperature(ValueError):
    def __init__(self, error: OutOfRangeError):
        self.error = error
        super().__init__(error.message)
