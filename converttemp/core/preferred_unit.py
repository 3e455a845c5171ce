"""Pick a default display unit from a locale tag or Accept-Language header."""

from __future__ import annotations

import re

from converttemp.core.units import TemperatureUnit

# Regions whose everyday scale is Fahrenheit.
FAHRENHEIT_REGIONS = frozenset({"US", "BS", "BZ", "KY", "PW"})

_REGION_RE = re.compile(r"^[A-Za-z]{2,3}[-_](?:[A-Za-z]{4}[-_])?(?P<region>[A-Za-z]{2}|\d{3})\b")


def region_of(locale: str | None) -> str | None:
    """Region subtag of the first language tag, upper-cased ("en-us" -> "US")."""
    if not locale:
        return None
    first = locale.split(",")[0].split(";")[0].strip()
    m = _REGION_RE.match(first)
    return m.group("region").upper() if m else None


def detect_preferred_unit(locale: str | None) -> TemperatureUnit:
    if region_of(locale) in FAHRENHEIT_REGIONS:
        return TemperatureUnit.FAHRENHEIT
    return TemperatureUnit.CELSIUS
