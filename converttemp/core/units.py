"""Temperature unit catalog. Celsius is the pivot scale for every conversion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable

ABSOLUTE_ZERO_CELSIUS = -273.15

# Absolute-zero bounds are rounded to hide binary noise (-459.66999999999996).
_BOUND_DIGITS = 9


class TemperatureUnit(Enum):
    CELSIUS = "C"
    FAHRENHEIT = "F"
    KELVIN = "K"
    RANKINE = "R"
    REAUMUR = "Re"
    DELISLE = "De"
    NEWTON = "N"
    ROMER = "Ro"

    @classmethod
    def parse_code(cls, code: str) -> TemperatureUnit:
        """Look up a unit by its short code, ignoring case ("re" -> REAUMUR)."""
        for unit in cls:
            if unit.value.upper() == code.strip().upper():
                return unit
        raise ValueError(f"Unknown unit '{code}'. Valid: {', '.join(u.value for u in cls)}")


@dataclass(frozen=True)
class UnitInfo:
    """Everything the engine knows about one scale.

    ``to_celsius``/``from_celsius`` are the only conversion formulas in the
    package. ``to_text`` and ``from_text`` are their display forms: ``{u}``
    stands for the unit's own symbol and ``{c}`` for a Celsius expression.
    ``to_compound`` marks a to-Celsius expression with a top-level + or -,
    ``from_tight`` marks a ``{c}`` slot that binds tighter than + or -.
    """

    name: str
    symbol: str
    aliases: frozenset[str]
    description: str
    to_celsius: Callable[[float], float]
    from_celsius: Callable[[float], float]
    to_text: str
    from_text: str
    to_compound: bool = False
    from_tight: bool = False


UNITS: MappingProxyType[TemperatureUnit, UnitInfo] = MappingProxyType({
    TemperatureUnit.CELSIUS: UnitInfo(
        name="Celsius",
        symbol="°C",
        aliases=frozenset({"C", "CELSIUS"}),
        description="Celsius - Water freezes at 0°C, boils at 100°C",
        to_celsius=lambda c: c,
        from_celsius=lambda c: c,
        to_text="{u}",
        from_text="{c}",
    ),
    TemperatureUnit.FAHRENHEIT: UnitInfo(
        name="Fahrenheit",
        symbol="°F",
        aliases=frozenset({"F", "FAHRENHEIT"}),
        description="Fahrenheit - Water freezes at 32°F, boils at 212°F",
        to_celsius=lambda f: (f - 32) * 5 / 9,
        from_celsius=lambda c: c * 9 / 5 + 32,
        to_text="({u} - 32) × 5/9",
        from_text="{c} × 9/5 + 32",
        from_tight=True,
    ),
    TemperatureUnit.KELVIN: UnitInfo(
        name="Kelvin",
        symbol="K",
        aliases=frozenset({"K", "KELVIN"}),
        description="Kelvin - Absolute temperature scale, 0K = absolute zero",
        to_celsius=lambda k: k - 273.15,
        from_celsius=lambda c: c + 273.15,
        to_text="{u} - 273.15",
        from_text="{c} + 273.15",
        to_compound=True,
    ),
    TemperatureUnit.RANKINE: UnitInfo(
        name="Rankine",
        symbol="°R",
        aliases=frozenset({"R", "RANKINE"}),
        description="Rankine - Absolute Fahrenheit scale, 0°R = absolute zero",
        to_celsius=lambda r: (r - 491.67) * 5 / 9,
        from_celsius=lambda c: (c + 273.15) * 9 / 5,
        to_text="({u} - 491.67) × 5/9",
        from_text="({c} + 273.15) × 9/5",
    ),
    TemperatureUnit.REAUMUR: UnitInfo(
        name="Réaumur",
        symbol="°Ré",
        aliases=frozenset({"RE", "RÉ", "REAUMUR", "RÉAUMUR"}),
        description="Réaumur - Water freezes at 0°Ré, boils at 80°Ré",
        to_celsius=lambda re: re * 5 / 4,
        from_celsius=lambda c: c * 4 / 5,
        to_text="{u} × 5/4",
        from_text="{c} × 4/5",
        from_tight=True,
    ),
    TemperatureUnit.DELISLE: UnitInfo(
        name="Delisle",
        symbol="°De",
        aliases=frozenset({"DE", "DELISLE"}),
        description="Delisle - Water freezes at 150°De, boils at 0°De (inverted)",
        to_celsius=lambda de: 100 - de * 2 / 3,
        from_celsius=lambda c: (100 - c) * 3 / 2,
        to_text="100 - {u} × 2/3",
        from_text="(100 - {c}) × 3/2",
        to_compound=True,
        from_tight=True,
    ),
    TemperatureUnit.NEWTON: UnitInfo(
        name="Newton",
        symbol="°N",
        aliases=frozenset({"N", "NEWTON"}),
        description="Newton - Water freezes at 0°N, boils at 33°N",
        to_celsius=lambda n: n * 100 / 33,
        from_celsius=lambda c: c * 33 / 100,
        to_text="{u} × 100/33",
        from_text="{c} × 33/100",
        from_tight=True,
    ),
    TemperatureUnit.ROMER: UnitInfo(
        name="Rømer",
        symbol="°Rø",
        aliases=frozenset({"RO", "RØ", "ROMER", "RØMER"}),
        description="Rømer - Water freezes at 7.5°Rø, boils at 60°Rø",
        to_celsius=lambda ro: (ro - 7.5) * 40 / 21,
        from_celsius=lambda c: c * 21 / 40 + 7.5,
        to_text="({u} - 7.5) × 40/21",
        from_text="{c} × 21/40 + 7.5",
        from_tight=True,
    ),
})

if set(UNITS) != set(TemperatureUnit):
    raise RuntimeError("Unit catalog does not cover every TemperatureUnit")

_ALIAS_INDEX: MappingProxyType[str, TemperatureUnit] = MappingProxyType({
    alias: unit for unit, info in UNITS.items() for alias in info.aliases
})

if len(_ALIAS_INDEX) != sum(len(info.aliases) for info in UNITS.values()):
    raise RuntimeError("Unit aliases must not be shared between units")

_ABSOLUTE_ZERO: MappingProxyType[TemperatureUnit, float] = MappingProxyType({
    unit: round(info.from_celsius(ABSOLUTE_ZERO_CELSIUS), _BOUND_DIGITS) + 0.0
    for unit, info in UNITS.items()
})


def symbol(unit: TemperatureUnit) -> str:
    return UNITS[unit].symbol


def aliases(unit: TemperatureUnit) -> frozenset[str]:
    """Upper-case tokens the smart-input parser accepts for this unit."""
    return UNITS[unit].aliases


def description(unit: TemperatureUnit) -> str:
    return UNITS[unit].description


def absolute_zero(unit: TemperatureUnit) -> float:
    """Absolute zero expressed in ``unit``, derived from -273.15 °C."""
    return _ABSOLUTE_ZERO[unit]


def is_inverted(unit: TemperatureUnit) -> bool:
    """True when larger readings on this scale mean colder (Delisle)."""
    info = UNITS[unit]
    return info.from_celsius(100.0) < info.from_celsius(0.0)


def unit_for_token(token: str) -> TemperatureUnit | None:
    """Resolve a unit token exactly, case-insensitively. Unknown tokens give None."""
    return _ALIAS_INDEX.get(token.strip().upper())
