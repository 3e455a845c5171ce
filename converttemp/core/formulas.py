"""Human-readable conversion formulas, composed from the Celsius pivot formulas."""

from __future__ import annotations

from converttemp.core.units import UNITS, TemperatureUnit


def to_celsius_text(unit: TemperatureUnit) -> str:
    """Celsius expressed in terms of ``unit``, e.g. "(°F - 32) × 5/9"."""
    info = UNITS[unit]
    return info.to_text.format(u=info.symbol)


def formula_for(source: TemperatureUnit, target: TemperatureUnit) -> str:
    """Formula text converting ``source`` readings to ``target``.

    Substitutes the source's to-Celsius expression into the target's
    from-Celsius template, so the text always agrees with the engine:

        >>> formula_for(TemperatureUnit.FAHRENHEIT, TemperatureUnit.KELVIN)
        'K = (°F - 32) × 5/9 + 273.15'
    """
    target_info = UNITS[target]
    if source is target:
        return f"{target_info.symbol} = {target_info.symbol}"

    celsius_expr = to_celsius_text(source)
    if UNITS[source].to_compound and target_info.from_tight:
        celsius_expr = f"({celsius_expr})"
    return f"{target_info.symbol} = {target_info.from_text.format(c=celsius_expr)}"
