"""Unit catalog and formula endpoints."""

from fastapi import APIRouter, HTTPException

from converttemp.core.formulas import formula_for
from converttemp.core.units import UNITS, TemperatureUnit, absolute_zero, is_inverted
from converttemp.models.schemas import FormulaResponse, UnitResponse

router = APIRouter(tags=["units"])


@router.get("/units", response_model=list[UnitResponse])
async def list_units():
    """Every supported scale with its symbol, aliases and absolute zero."""
    return [
        UnitResponse(
            code=unit.value,
            name=info.name,
            symbol=info.symbol,
            description=info.description,
            aliases=sorted(info.aliases),
            absolute_zero=absolute_zero(unit),
            inverted=is_inverted(unit),
        )
        for unit, info in UNITS.items()
    ]


@router.get("/formula", response_model=FormulaResponse)
async def get_formula(source: str, target: str):
    """Display formula for converting ``source`` readings to ``target``."""
    try:
        src = TemperatureUnit.parse_code(source)
        dst = TemperatureUnit.parse_code(target)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=[{"message": str(e), "code": "unknown_unit"}])
    return FormulaResponse(source=src.value, target=dst.value, formula=formula_for(src, dst))
